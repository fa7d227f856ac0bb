"""
Module: loading.loader

Purpose:
    Load student records from a delimited text file into a frozen
    StudentCollection. Bad rows are skipped and reported; an unreadable
    source fails the whole load.

Key Functions:
    - load_students(): Load from a file path
    - read_students(): Load from an open text stream

Key Classes:
    - LoadResult: Loaded collection plus skipped-row report
    - SkippedRow: One rejected row and the reason
    - LoaderError: Exception for unreadable sources

Dependencies:
    - pathlib (std): Source files
    - core.models: StudentCollection
    - loading.parser: Row parsing

Used By:
    - controller: Session assembly
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO, Tuple

from student_erp.config import ErpConfig
from student_erp.core.models import StudentCollection

from .parser import ParseError, parse_student_record

logger = logging.getLogger(__name__)


class LoaderError(Exception):
    """Error reading the student source."""
    pass


@dataclass(frozen=True)
class SkippedRow:
    """
    A row rejected during ingestion.

    Attributes:
        line_number: 1-based line number in the source
        reason: Why the row was rejected
    """
    line_number: int
    reason: str


@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of a load (immutable).

    Attributes:
        collection: Frozen collection, in source row order
        skipped: Rows dropped as malformed
        source: Where the rows came from (path or stream label)

    Example:
        >>> result = load_students(Path("students_sample.csv"))
        >>> print(f"{result.loaded_count} loaded, {len(result.skipped)} skipped")
    """
    collection: StudentCollection
    skipped: Tuple[SkippedRow, ...] = ()
    source: str = "<stream>"

    @property
    def loaded_count(self) -> int:
        return len(self.collection)

    @property
    def is_empty(self) -> bool:
        return len(self.collection) == 0


def load_students(path: Path, config: Optional[ErpConfig] = None) -> LoadResult:
    """
    Load all student rows from a delimited file.

    Args:
        path: Path to the source file
        config: Delimiters/encoding; defaults to ErpConfig()

    Returns:
        LoadResult with a frozen collection

    Raises:
        LoaderError: If the file is missing or cannot be read
    """
    config = config or ErpConfig()
    path = Path(path)
    if not path.is_file():
        raise LoaderError(f"Could not open student file: {path}")

    try:
        with path.open("r", encoding=config.encoding) as handle:
            return read_students(handle, config=config, source=str(path))
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"Failed to read student file {path}: {e}") from e


def read_students(
    handle: TextIO,
    *,
    config: Optional[ErpConfig] = None,
    source: str = "<stream>",
) -> LoadResult:
    """
    Parse student rows from an open text stream.

    Each physical line is one row, split on the field delimiter. Quotes carry
    no meaning, so a malformed line is rejected on its own and never absorbs
    the lines after it. Skips the header row (if configured) and blank lines.
    A ParseError drops only that row.

    Args:
        handle: Text stream positioned at the start of the data
        config: Delimiters and header handling
        source: Label used in log messages and the result

    Returns:
        LoadResult with a frozen collection in row order
    """
    config = config or ErpConfig()

    collection = StudentCollection()
    skipped = []
    header_pending = config.has_header

    for line_number, line in enumerate(handle, start=1):
        if header_pending:
            header_pending = False
            continue
        line = line.rstrip("\r\n")
        if not line.strip():
            continue

        try:
            student = parse_student_record(
                line.split(config.field_delimiter),
                list_delimiter=config.list_delimiter,
                pair_delimiter=config.pair_delimiter,
            )
        except ParseError as e:
            logger.warning(f"{source}:{line_number}: skipping row: {e}")
            skipped.append(SkippedRow(line_number=line_number, reason=str(e)))
            continue

        collection.append(student)

    collection.freeze()
    logger.info(f"Loaded {len(collection)} students from {source} ({len(skipped)} rows skipped)")
    return LoadResult(collection=collection, skipped=tuple(skipped), source=source)
