"""
Module: config

Purpose:
    Configuration dataclass for loading and querying student records.
    Immutable configuration with validation on construction.

Key Classes:
    - ErpConfig: Source path, delimiters and query defaults

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - controller: Session assembly
    - loading.loader / loading.parser: Delimiters and encoding
    - __main__: Built from command-line arguments
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from student_erp.core.models.grades import DEFAULT_THRESHOLD, MAX_GRADE, MIN_GRADE


@dataclass(frozen=True)
class ErpConfig:
    """
    Configuration for a load-and-query session (immutable).

    Attributes:
        csv_path: Path to the delimited student file
        field_delimiter: Separator between the 7 row fields
        list_delimiter: Separator between course entries inside a field
        pair_delimiter: Separator between course and grade in a past course
        has_header: Whether the first row is a header to skip
        encoding: Text encoding of the source ("utf-8-sig" strips a BOM)
        default_threshold: Grade used by the fixed-threshold query

    Example:
        >>> config = ErpConfig(csv_path=Path("students_sample.csv"))
        >>> config.default_threshold
        9
    """

    csv_path: Optional[Path] = None

    # Source format
    field_delimiter: str = ","
    list_delimiter: str = ";"
    pair_delimiter: str = ":"
    has_header: bool = True
    encoding: str = "utf-8-sig"

    # Queries
    default_threshold: int = DEFAULT_THRESHOLD

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        delimiters = (self.field_delimiter, self.list_delimiter, self.pair_delimiter)
        for delimiter in delimiters:
            if len(delimiter) != 1:
                raise ValueError(f"Delimiters must be a single character: {delimiter!r}")
        if len(set(delimiters)) != len(delimiters):
            raise ValueError(f"Delimiters must be distinct: {delimiters!r}")
        if not MIN_GRADE <= self.default_threshold <= MAX_GRADE:
            raise ValueError(
                f"default_threshold must be in [{MIN_GRADE}, {MAX_GRADE}]: {self.default_threshold}"
            )
        if not self.encoding:
            raise ValueError("encoding must not be empty")
