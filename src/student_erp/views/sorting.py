"""
Module: views.sorting

Purpose:
    Build sorted views of a student collection as index permutations.
    The by-name and by-roll sorts run in parallel on two worker threads;
    the collection is read-only and each worker owns its output list, so
    no locking is needed.

Key Functions:
    - build_sort_views(): Sort by name and by roll concurrently
    - sort_indices(): Sort 0..n-1 by a text key with the empty-slot tie-break

Key Classes:
    - SortViews: The three resulting views

Dependencies:
    - concurrent.futures (std): Two-worker fork/join
    - functools (std): cmp_to_key
    - core.models: StudentRecord

Used By:
    - controller: Session assembly
    - cli.menu: Listing students by name / roll
"""

from __future__ import annotations

import logging
import time
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Callable, Deque, Dict, List, Optional, Sequence, Tuple

from student_erp.core.models import StudentRecord

logger = logging.getLogger(__name__)

SortKey = Callable[[StudentRecord], str]


@dataclass(frozen=True)
class SortViews:
    """
    Sorted index views over a student collection (immutable).

    None of the views copy records; each holds positions into the
    collection it was built from.

    Attributes:
        by_name: Indices ordered by display name
        by_roll: Indices ordered by roll number text
        by_name_list: Same order as by_name, held in a deque for
            forward-only traversal
        timings: Seconds spent in each sort, keyed by view name

    Example:
        >>> views = build_sort_views(students)
        >>> [students[i].name for i in views.by_name]
        ['Ann', 'Bob']
    """
    by_name: List[int] = field(default_factory=list)
    by_roll: List[int] = field(default_factory=list)
    by_name_list: Deque[int] = field(default_factory=deque)
    timings: Dict[str, float] = field(default_factory=dict)


def sort_indices(students: Sequence[Optional[StudentRecord]], key: SortKey) -> List[int]:
    """
    Return 0..n-1 ordered by ``key`` applied to each student.

    Keys compare as plain strings (case-sensitive, by code point). When
    either slot holds no record the two positions compare by index.

    Args:
        students: Collection to order (not modified)
        key: Text key for a student

    Returns:
        New list of positions
    """
    def compare(a: int, b: int) -> int:
        left, right = students[a], students[b]
        if left is None or right is None:
            return (a > b) - (a < b)
        ka, kb = key(left), key(right)
        return (ka > kb) - (ka < kb)

    return sorted(range(len(students)), key=cmp_to_key(compare))


def _timed_sort(
    students: Sequence[Optional[StudentRecord]],
    key: SortKey,
) -> Tuple[List[int], float]:
    start = time.perf_counter()
    order = sort_indices(students, key)
    return order, time.perf_counter() - start


def _name_key(student: StudentRecord) -> str:
    return student.name


def _roll_key(student: StudentRecord) -> str:
    return student.roll_text


def build_sort_views(students: Sequence[Optional[StudentRecord]]) -> SortViews:
    """
    Sort a collection by name and by roll on two parallel threads.

    Both workers only read ``students``; each returns its own list. The
    pool is scoped to this call and both results are collected before
    returning, so callers always see fully built views.

    Args:
        students: Loaded collection (must not change during the call)

    Returns:
        SortViews with by_name, by_roll and the deque copy of by_name
    """
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="sort-view") as pool:
        name_future = pool.submit(_timed_sort, students, _name_key)
        roll_future = pool.submit(_timed_sort, students, _roll_key)
        by_name, name_seconds = name_future.result()
        by_roll, roll_seconds = roll_future.result()

    logger.info(f"[TIMER] Sort by name took {name_seconds * 1000:.0f} ms")
    logger.info(f"[TIMER] Sort by roll took {roll_seconds * 1000:.0f} ms")

    return SortViews(
        by_name=by_name,
        by_roll=by_roll,
        by_name_list=deque(by_name),
        timings={"by_name": name_seconds, "by_roll": roll_seconds},
    )
