"""
Module: query.engine

Purpose:
    Thin query front-end over the course index: trims user input and
    answers fixed- and custom-threshold queries.

Key Classes:
    - QueryEngine: Threshold queries against a built CourseIndexDB

Dependencies:
    - indexing.course_index: CourseIndexDB
    - query.models: QueryResult

Used By:
    - cli.menu: Menu options 5 and 6
    - controller: Session assembly
"""

from __future__ import annotations

import logging

from student_erp.core.models import DEFAULT_THRESHOLD, clamp_threshold
from student_erp.indexing import CourseIndexDB

from .models import QueryResult

logger = logging.getLogger(__name__)


class QueryEngine:
    """
    Answer "students with grade >= T in course C" queries.

    Holds no state beyond the index and the default threshold.

    Example:
        >>> engine = QueryEngine(index)
        >>> engine.top_performers("OOPD").students
        (IIITStudent(name='Ann', ...),)
    """

    def __init__(self, index: CourseIndexDB, *, default_threshold: int = DEFAULT_THRESHOLD) -> None:
        self._index = index
        self._default_threshold = default_threshold

    @property
    def default_threshold(self) -> int:
        return self._default_threshold

    def top_performers(self, course: str) -> QueryResult:
        """Students at or above the default threshold (9) in ``course``."""
        return self.at_least(course, self._default_threshold)

    def at_least(self, course: str, threshold: int) -> QueryResult:
        """
        Students with grade >= threshold in ``course``.

        Args:
            course: Course code; surrounding whitespace is ignored
            threshold: Minimum grade; clamped to [0, 10]

        Returns:
            QueryResult (empty for unknown courses)
        """
        course = course.strip()
        students = self._index.query_at_least(course, threshold)
        logger.debug(f"Query {course!r} >= {threshold}: {len(students)} matches")
        return QueryResult(
            course=course,
            threshold=threshold,
            effective_threshold=clamp_threshold(threshold),
            students=tuple(students),
        )
