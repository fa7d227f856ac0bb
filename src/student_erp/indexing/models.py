"""
Module: indexing.models

Purpose:
    Per-course grade buckets used by the course index.

Key Classes:
    - CourseIndexEntry: 11 buckets (grade 0..10) of student references

Dependencies:
    - dataclasses (std)
    - core.models: StudentRecord, grade range

Used By:
    - indexing.course_index: CourseIndexDB
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from student_erp.core.models import GRADE_BUCKETS, MIN_GRADE, StudentRecord


def _empty_buckets() -> Tuple[List[StudentRecord], ...]:
    return tuple([] for _ in range(GRADE_BUCKETS))


@dataclass
class CourseIndexEntry:
    """
    Grade-bucketed students for one course.

    buckets[g] holds every student graded exactly g, in the order they were
    added. Only CourseIndexDB.build() adds to an entry.

    Attributes:
        course: Course code in text form
        buckets: One list per grade 0..10
    """
    course: str
    buckets: Tuple[List[StudentRecord], ...] = field(default_factory=_empty_buckets)

    def add(self, grade: int, student: StudentRecord) -> None:
        """Append a student to the bucket for ``grade`` (caller checks range)."""
        self.buckets[grade - MIN_GRADE].append(student)

    def bucket(self, grade: int) -> Tuple[StudentRecord, ...]:
        """Students graded exactly ``grade``."""
        return tuple(self.buckets[grade - MIN_GRADE])

    def students_at_least(self, threshold: int) -> List[StudentRecord]:
        """
        Concatenate buckets threshold..10 in ascending grade order.

        ``threshold`` must already be clamped to the grade range.
        """
        result: List[StudentRecord] = []
        for bucket in self.buckets[threshold - MIN_GRADE:]:
            result.extend(bucket)
        return result

    @property
    def student_count(self) -> int:
        """Total graded occurrences across all buckets."""
        return sum(len(bucket) for bucket in self.buckets)
