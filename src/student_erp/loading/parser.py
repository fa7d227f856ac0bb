"""
Module: loading.parser

Purpose:
    Turn one already-split row of the student file into a concrete
    StudentRecord. Row-level problems raise ParseError; problems inside a
    single course entry only drop that entry.

Key Functions:
    - parse_student_record(): Build a record from the 7 row fields
    - split_entries(): Split and trim a secondary-delimited field

Key Classes:
    - ParseError: Exception for rejected rows

Dependencies:
    - core.models: Record variants and grade range

Used By:
    - loading.loader: Row-by-row ingestion
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from student_erp.core.models import StudentRecord, TypedStudent, is_valid_grade, variant_for

logger = logging.getLogger(__name__)

FIELD_COUNT = 7

# Column positions
INSTITUTE, NAME, ROLL, BRANCH, STARTING_YEAR, CURRENT_COURSES, PAST_COURSES = range(FIELD_COUNT)


class ParseError(Exception):
    """Error parsing a student row."""
    pass


def split_entries(text: str, delimiter: str) -> List[str]:
    """
    Split a secondary-delimited field into trimmed, non-empty entries.

    Example:
        >>> split_entries(" OOPD ; DSA;;", ";")
        ['OOPD', 'DSA']
    """
    return [part.strip() for part in text.split(delimiter) if part.strip()]


def parse_student_record(
    fields: Sequence[str],
    *,
    list_delimiter: str = ";",
    pair_delimiter: str = ":",
) -> StudentRecord:
    """
    Parse one row into a student record.

    Expected fields:
        0: Institute        ("IIIT" / "IIT")
        1: Name
        2: Roll number
        3: Branch
        4: Starting year    (non-negative integer)
        5: Current courses  ("OOPD;DSA")
        6: Past courses     ("OOPD:9;DSA:7")

    Args:
        fields: Row fields, already split on the field delimiter
        list_delimiter: Separator between course entries
        pair_delimiter: Separator between course code and grade

    Returns:
        IIITStudent or IITStudent, depending on the institute tag

    Raises:
        ParseError: Wrong field count, bad year, unknown institute,
            or a roll number the variant cannot parse

    Example:
        >>> s = parse_student_record(["IIT", "Ann", "2025432", "CSE", "2025", "615", "601:9"])
        >>> s.roll_text, list(s.iter_past_courses())
        ('2025432', [('601', 9)])
    """
    cols = _normalize_fields(fields)

    institute = cols[INSTITUTE]
    variant = variant_for(institute)
    if variant is None:
        raise ParseError(f"Unknown institute: {institute!r}")

    starting_year = _parse_starting_year(cols[STARTING_YEAR])

    try:
        roll = variant.parse_roll(cols[ROLL])
    except ValueError as e:
        raise ParseError(f"Invalid {institute} roll number: {cols[ROLL]!r}") from e

    student = variant(cols[NAME], roll, cols[BRANCH], starting_year)
    _add_current_courses(student, cols[CURRENT_COURSES], list_delimiter)
    _add_past_courses(student, cols[PAST_COURSES], list_delimiter, pair_delimiter)
    return student


def _normalize_fields(fields: Sequence[str]) -> List[str]:
    """Trim fields and enforce the 7-column layout (trailing empty columns allowed)."""
    cols = [field.strip() for field in fields]
    while len(cols) > FIELD_COUNT and not cols[-1]:
        cols.pop()
    if len(cols) != FIELD_COUNT:
        raise ParseError(f"Expected {FIELD_COUNT} fields, got {len(cols)}")
    return cols


def _parse_starting_year(text: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ParseError(f"Invalid starting year: {text!r}")
    return int(text)


def _add_current_courses(student: TypedStudent, text: str, list_delimiter: str) -> None:
    for token in split_entries(text, list_delimiter):
        try:
            code = student.parse_course_code(token)
        except ValueError:
            logger.debug(f"Skipping malformed current course {token!r} for {student.name}")
            continue
        student.add_current_course(code)


def _add_past_courses(
    student: TypedStudent,
    text: str,
    list_delimiter: str,
    pair_delimiter: str,
) -> None:
    for entry in split_entries(text, list_delimiter):
        parts = entry.split(pair_delimiter)
        if len(parts) != 2:
            logger.debug(f"Skipping malformed past course {entry!r} for {student.name}")
            continue

        code_text, grade_text = parts[0].strip(), parts[1].strip()
        if not code_text:
            continue

        try:
            code = student.parse_course_code(code_text)
            grade = int(grade_text)
        except ValueError:
            logger.debug(f"Skipping malformed past course {entry!r} for {student.name}")
            continue

        if not is_valid_grade(grade):
            logger.debug(f"Skipping out-of-range grade {grade} in {code_text} for {student.name}")
            continue

        student.add_past_course(code, grade)
