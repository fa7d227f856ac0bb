"""
Module: loading

Purpose:
    Student record ingestion from delimited text sources.

Key Functions:
    - load_students(): Load all rows from a file
    - read_students(): Load rows from an open stream
    - parse_student_record(): Parse a single row

Dependencies:
    - pathlib (std): Source files
    - student_erp.core.models: Record variants and collection

Used By:
    - student_erp.controller: Session assembly
"""

from .loader import LoadResult, LoaderError, SkippedRow, load_students, read_students
from .parser import ParseError, parse_student_record, split_entries

__all__ = [
    "LoadResult",
    "LoaderError",
    "SkippedRow",
    "load_students",
    "read_students",
    "ParseError",
    "parse_student_record",
    "split_entries",
]
