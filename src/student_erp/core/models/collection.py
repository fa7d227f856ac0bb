"""
Module: collection

Purpose:
    Ordered container that owns every loaded student record. Filled once
    during ingestion, then frozen; the index and sort views only read it.

Key Classes:
    - StudentCollection: Insertion-ordered, freeze-once record sequence

Dependencies:
    - collections.abc (std)
    - .students: StudentRecord

Used By:
    - loading.loader: Populated during ingestion
    - indexing.course_index, views.sorting: Read-only consumers
    - controller: Session assembly
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable, Iterator, List, Optional, overload

from .students import StudentRecord


class StudentCollection(Sequence):
    """
    Insertion-ordered sequence of student records.

    Appending is only allowed until freeze() is called. After that the
    collection is safe to share across threads for reading.

    Example:
        >>> students = StudentCollection()
        >>> students.append(IIITStudent("Ann", "MT25001", "CSE", 2025))
        >>> students.freeze()
        >>> len(students)
        1
    """

    def __init__(self, records: Iterable[StudentRecord] = ()) -> None:
        self._records: List[StudentRecord] = []
        self._frozen = False
        for record in records:
            self.append(record)

    def append(self, record: StudentRecord) -> None:
        """Add a record at the end. Raises RuntimeError once frozen."""
        if self._frozen:
            raise RuntimeError("StudentCollection is frozen; records cannot be added after load")
        if not isinstance(record, StudentRecord):
            raise TypeError(f"Expected StudentRecord, got {type(record).__name__}")
        self._records.append(record)

    def freeze(self) -> StudentCollection:
        """Mark the collection read-only. Returns self for chaining."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def get(self, index: int) -> Optional[StudentRecord]:
        """Return the record at ``index``, or None when out of bounds."""
        if 0 <= index < len(self._records):
            return self._records[index]
        return None

    @overload
    def __getitem__(self, index: int) -> StudentRecord: ...

    @overload
    def __getitem__(self, index: slice) -> List[StudentRecord]: ...

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "loading"
        return f"StudentCollection({len(self._records)} records, {state})"
