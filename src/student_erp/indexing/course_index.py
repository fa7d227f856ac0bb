"""
Module: indexing.course_index

Purpose:
    In-memory course index for threshold queries ("grade >= T in course C").
    Each course maps to 11 grade buckets, so a query walks only the buckets
    at or above the threshold instead of scanning every student.

Key Classes:
    - CourseIndexDB: Build-once, query-many course index

Dependencies:
    - threading (std): Guards the swap between build and queries
    - core.models: StudentRecord, grade range helpers
    - indexing.models: CourseIndexEntry

Used By:
    - query.engine: QueryEngine
    - controller: Session assembly
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, Iterable, List, Optional

from student_erp.core.models import StudentRecord, clamp_threshold, is_valid_grade

from .models import CourseIndexEntry

logger = logging.getLogger(__name__)


class CourseIndexDB:
    """
    Course → grade bucket → students.

    Two phases: build() once after the collection is fully loaded, then any
    number of read-only queries. Querying an index that was never built
    returns an empty result.

    Example:
        >>> index = CourseIndexDB()
        >>> index.build(students)
        >>> [s.name for s in index.query_at_least("OOPD", 9)]
        ['Ann', 'Bob']
    """

    def __init__(self) -> None:
        """Initialize empty, unbuilt index."""
        self._entries: Dict[str, CourseIndexEntry] = {}
        self._built = False
        self._lock = Lock()

    def build(self, students: Iterable[Optional[StudentRecord]]) -> None:
        """
        Populate the index from a fully loaded collection.

        Clears any previous state. Empty slots are ignored, and grades
        outside [0, 10] are skipped rather than trusted.

        Args:
            students: Records in collection order
        """
        entries: Dict[str, CourseIndexEntry] = {}
        skipped = 0

        for student in students:
            if student is None:
                continue
            for course, grade in student.iter_past_courses():
                if not is_valid_grade(grade):
                    skipped += 1
                    continue
                entry = entries.get(course)
                if entry is None:
                    entry = entries[course] = CourseIndexEntry(course=course)
                entry.add(grade, student)

        with self._lock:
            self._entries = entries
            self._built = True

        if skipped:
            logger.debug(f"Ignored {skipped} out-of-range grades while indexing")
        logger.info(f"Indexed {len(entries)} courses")

    def query_at_least(self, course: str, threshold: int) -> List[StudentRecord]:
        """
        Find students with grade >= threshold in a course.

        The threshold is clamped to [0, 10]. Results list bucket ``threshold``
        first, then each higher grade up to 10; inside a bucket students keep
        collection order.

        Args:
            course: Course code in text form ("OOPD", "615")
            threshold: Minimum grade

        Returns:
            Matching students; empty for an unknown course or unbuilt index
        """
        with self._lock:
            built = self._built
            entry = self._entries.get(course)

        if not built:
            logger.debug(f"Query for {course!r} before index was built")
            return []
        if entry is None:
            return []
        return entry.students_at_least(clamp_threshold(threshold))

    def entry(self, course: str) -> Optional[CourseIndexEntry]:
        """Get the bucket entry for a course, if indexed."""
        with self._lock:
            return self._entries.get(course)

    def bucket(self, course: str, grade: int) -> List[StudentRecord]:
        """Students graded exactly ``grade`` in ``course`` (empty if none)."""
        entry = self.entry(course)
        if entry is None or not is_valid_grade(grade):
            return []
        return list(entry.bucket(grade))

    def courses(self) -> List[str]:
        """All indexed course codes, sorted."""
        with self._lock:
            return sorted(self._entries)

    @property
    def is_built(self) -> bool:
        return self._built

    @property
    def course_count(self) -> int:
        """Get number of indexed courses."""
        return len(self._entries)
