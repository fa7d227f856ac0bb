"""
Command-line entry point: load a student file and open the query menu.

Usage:
    python -m student_erp students_sample.csv
    python -m student_erp --log-level INFO --timings students_sample.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from student_erp import __version__
from student_erp.cli import run_menu
from student_erp.cli.menu import InputFn
from student_erp.config import ErpConfig
from student_erp.controller import SessionError, prepare_session

logger = logging.getLogger("student_erp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="student-erp",
        description="Load student records and query grades by course",
    )
    parser.add_argument("csv", nargs="?", type=Path, help="Student file (prompted for if omitted)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument("--timings", action="store_true", help="Print load/sort/index timings")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[List[str]] = None,
    *,
    input_fn: Optional[InputFn] = None,
    out: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    read_line = input_fn or input
    out = out or sys.stdout

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(message)s")

    csv_path = args.csv
    if csv_path is None:
        try:
            answer = read_line("Enter CSV filename (e.g. students_sample.csv): ").strip()
        except EOFError:
            answer = ""
        if not answer:
            out.write("No filename given.\n")
            return 0
        csv_path = Path(answer)

    try:
        session = prepare_session(ErpConfig(csv_path=csv_path))
    except SessionError as e:
        logger.error(str(e))
        return 1

    if args.timings:
        out.write(session.timings.summary() + "\n")

    if session.is_empty:
        out.write("No students loaded.\n")
        return 0

    run_menu(session, input_fn=read_line, out=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
