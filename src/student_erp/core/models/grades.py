"""
Module: grades

Purpose:
    Grade range constants and the clamping rules shared by the record
    abstraction and the course index.

Key Functions:
    - is_valid_grade(): Check a grade lies in [MIN_GRADE, MAX_GRADE]
    - clamp_threshold(): Clamp a query threshold into [MIN_GRADE, MAX_GRADE]

Dependencies:
    - none

Used By:
    - core.models.students: has_grade_at_least()
    - loading.parser: grade validation at ingestion
    - indexing.course_index: bucket selection
"""

from __future__ import annotations

MIN_GRADE = 0
MAX_GRADE = 10
GRADE_BUCKETS = MAX_GRADE - MIN_GRADE + 1

DEFAULT_THRESHOLD = 9


def is_valid_grade(grade: int) -> bool:
    """Return True if grade lies in the inclusive range [0, 10]."""
    return MIN_GRADE <= grade <= MAX_GRADE


def clamp_threshold(threshold: int) -> int:
    """
    Clamp a query threshold into the grade range.

    Example:
        >>> clamp_threshold(-5)
        0
        >>> clamp_threshold(99)
        10
    """
    return max(MIN_GRADE, min(threshold, MAX_GRADE))
