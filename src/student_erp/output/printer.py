"""
Module: output.printer

Purpose:
    Console rendering of student records: single records, the collection
    in insertion order, and any index view over the collection.

Key Functions:
    - format_student(): One-line text for a record
    - print_student(): Write one record
    - print_insertion_order(): Write the whole collection
    - print_by_index(): Write records in the order of an index view

Dependencies:
    - core.models: StudentRecord

Used By:
    - cli.menu: All listing and query options
"""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence, TextIO

from student_erp.core.models import StudentRecord

INSERTION_HEADER = "=== Students (insertion order) ==="
INDEXED_HEADER = "=== Students (indexed view) ==="


def format_student(student: StudentRecord) -> str:
    """
    Render the four uniform attributes of a record.

    Example:
        >>> format_student(IIITStudent("Ann", "MT25001", "CSE", 2025))
        'Name: Ann, Roll: MT25001, Branch: CSE, StartingYear: 2025'
    """
    return (
        f"Name: {student.name}, Roll: {student.roll_text}, "
        f"Branch: {student.branch}, StartingYear: {student.starting_year}"
    )


def print_student(student: StudentRecord, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    out.write(format_student(student) + "\n")


def print_insertion_order(
    students: Iterable[Optional[StudentRecord]],
    out: Optional[TextIO] = None,
) -> None:
    """Write every record in collection order, skipping empty slots."""
    out = out or sys.stdout
    out.write(INSERTION_HEADER + "\n")
    for student in students:
        if student is not None:
            print_student(student, out)
    out.write("=" * len(INSERTION_HEADER) + "\n")


def print_by_index(
    students: Sequence[Optional[StudentRecord]],
    indices: Iterable[int],
    out: Optional[TextIO] = None,
) -> None:
    """
    Write records in the order given by ``indices``.

    Works with any forward iterable (list, deque, generator). Indices out of
    range and slots holding no record are skipped.
    """
    out = out or sys.stdout
    out.write(INDEXED_HEADER + "\n")
    for index in indices:
        if 0 <= index < len(students) and students[index] is not None:
            print_student(students[index], out)
    out.write("=" * len(INDEXED_HEADER) + "\n")
