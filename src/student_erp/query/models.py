"""
Module: query.models

Purpose:
    Result model for threshold queries.

Key Classes:
    - QueryResult: Matching students for one (course, threshold) query

Dependencies:
    - dataclasses (std)
    - core.models: StudentRecord

Used By:
    - query.engine: QueryEngine
    - cli.menu: Result printing
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from student_erp.core.models import StudentRecord


@dataclass(frozen=True)
class QueryResult:
    """
    Result of a "grade >= threshold in course" query.

    Attributes:
        course: Course code as queried (trimmed)
        threshold: Threshold the caller asked for
        effective_threshold: Threshold after clamping to [0, 10]
        students: Matches, lowest qualifying grade bucket first

    Example:
        >>> result = engine.at_least(" OOPD ", 12)
        >>> result.course, result.effective_threshold
        ('OOPD', 10)
    """
    course: str
    threshold: int
    effective_threshold: int
    students: Tuple[StudentRecord, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Check if no students matched."""
        return len(self.students) == 0

    @property
    def total_students(self) -> int:
        return len(self.students)
