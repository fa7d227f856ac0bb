"""
Module: controller

Purpose:
    Assemble a query session from a student file.
    Load → Sort views → Build course index → Query engine

Key Functions:
    - prepare_session(): Main entry point for building a session
    - session_from_collection(): Build derived structures for a loaded collection

Key Classes:
    - ErpSession: Everything the menu needs, built once
    - SessionError: Exception for load failures

Dependencies:
    - loading: Ingestion
    - views: Sort views
    - indexing: Course index
    - query: Query engine

Used By:
    - __main__: Command-line entry point
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .config import ErpConfig
from .core.models import StudentCollection
from .indexing import CourseIndexDB
from .loading import LoadResult, LoaderError, load_students
from .query import QueryEngine
from .timing import TimingLog, timed_phase
from .views import SortViews, build_sort_views

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """Error preparing a session."""
    pass


@dataclass(frozen=True)
class ErpSession:
    """
    A loaded collection with its derived views, index and query engine.

    Attributes:
        students: Frozen collection owning every record
        views: Sorted index views
        index: Built course index
        engine: Query front-end over ``index``
        load_result: Ingestion report (skipped rows)
        timings: Phase durations

    Example:
        >>> session = prepare_session(ErpConfig(csv_path=Path("students.csv")))
        >>> session.engine.top_performers("OOPD").total_students
        3
    """
    students: StudentCollection
    views: SortViews
    index: CourseIndexDB
    engine: QueryEngine
    load_result: Optional[LoadResult] = None
    timings: TimingLog = field(default_factory=TimingLog)

    @property
    def is_empty(self) -> bool:
        return len(self.students) == 0


def prepare_session(config: ErpConfig) -> ErpSession:
    """
    Load the configured file and build every derived structure.

    Args:
        config: Session configuration; csv_path is required

    Returns:
        ErpSession (possibly empty if no rows loaded)

    Raises:
        SessionError: If no path is configured or the file cannot be read
    """
    if config.csv_path is None:
        raise SessionError("No student file configured")

    timings = TimingLog()
    try:
        with timed_phase(timings, "load"):
            load_result = load_students(config.csv_path, config)
    except LoaderError as e:
        raise SessionError(f"Error loading student file: {e}") from e

    if load_result.is_empty:
        logger.info(f"No students loaded from {config.csv_path}")

    return session_from_collection(
        load_result.collection,
        config=config,
        load_result=load_result,
        timings=timings,
    )


def session_from_collection(
    students: StudentCollection,
    *,
    config: Optional[ErpConfig] = None,
    load_result: Optional[LoadResult] = None,
    timings: Optional[TimingLog] = None,
) -> ErpSession:
    """
    Build sort views, course index and query engine for a loaded collection.

    Freezes the collection first; derived structures assume it never
    changes afterwards.
    """
    config = config or ErpConfig()
    timings = timings or TimingLog()
    students.freeze()

    with timed_phase(timings, "sort_views"):
        views = build_sort_views(students)

    index = CourseIndexDB()
    with timed_phase(timings, "index_build"):
        index.build(students)

    engine = QueryEngine(index, default_threshold=config.default_threshold)
    return ErpSession(
        students=students,
        views=views,
        index=index,
        engine=engine,
        load_result=load_result,
        timings=timings,
    )
