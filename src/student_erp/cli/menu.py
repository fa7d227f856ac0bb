"""
Module: cli.menu

Purpose:
    Interactive text menu over a prepared session: list students in
    several orders and run grade-threshold queries.

Key Functions:
    - run_menu(): Loop until the user exits or input ends
    - handle_choice(): Execute a single menu option

Dependencies:
    - controller: ErpSession
    - output.printer: Record rendering

Used By:
    - __main__: Command-line entry point
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from student_erp.controller import ErpSession
from student_erp.output import print_by_index, print_insertion_order, print_student
from student_erp.query import QueryResult

InputFn = Callable[[str], str]

MENU = (
    "\n===== ERP MENU =====\n"
    "1. Show students (insertion order)\n"
    "2. Show students sorted by name\n"
    "3. Show students sorted by roll\n"
    "4. Show students sorted by name (list iterator view)\n"
    "5. Query: students with grade >= 9 in a course\n"
    "6. Query: students with grade >= custom threshold in a course\n"
    "0. Exit\n"
)
CHOICE_PROMPT = "Enter choice: "
COURSE_PROMPT = "Enter course code (as in CSV, e.g. 801, OOPD): "
GRADE_PROMPT = "Enter minimum grade (0-10): "

EXIT = 0


def run_menu(
    session: ErpSession,
    *,
    input_fn: Optional[InputFn] = None,
    out: Optional[TextIO] = None,
) -> None:
    """
    Run the menu loop.

    Non-numeric choices re-prompt. End of input (Ctrl-D / closed stdin)
    exits like choosing 0.

    Args:
        session: Prepared session to query
        input_fn: Reads one line given a prompt (defaults to input())
        out: Output stream (defaults to stdout)
    """
    read_line = input_fn or input
    out = out or sys.stdout

    while True:
        out.write(MENU)
        try:
            raw = read_line(CHOICE_PROMPT)
        except EOFError:
            out.write("\nExiting ERP.\n")
            return

        try:
            choice = int(raw.strip())
        except ValueError:
            out.write("Invalid input. Try again.\n")
            continue

        if choice == EXIT:
            out.write("Exiting ERP.\n")
            return

        try:
            handle_choice(session, choice, read_line, out)
        except EOFError:
            out.write("\nExiting ERP.\n")
            return


def handle_choice(session: ErpSession, choice: int, read_line: InputFn, out: TextIO) -> None:
    """Execute one menu option (1-6); anything else reports an unknown choice."""
    students = session.students
    views = session.views

    if choice == 1:
        print_insertion_order(students, out)
    elif choice == 2:
        print_by_index(students, views.by_name, out)
    elif choice == 3:
        print_by_index(students, views.by_roll, out)
    elif choice == 4:
        print_by_index(students, iter(views.by_name_list), out)
    elif choice == 5:
        course = read_line(COURSE_PROMPT)
        _print_result(session.engine.top_performers(course), out)
    elif choice == 6:
        course = read_line(COURSE_PROMPT)
        raw_grade = read_line(GRADE_PROMPT)
        try:
            threshold = int(raw_grade.strip())
        except ValueError:
            out.write("Invalid grade.\n")
            return
        _print_result(session.engine.at_least(course, threshold), out)
    else:
        out.write("Unknown choice. Try again.\n")


def _print_result(result: QueryResult, out: TextIO) -> None:
    out.write(f"Students with grade >= {result.threshold} in course '{result.course}':\n")
    if result.is_empty:
        out.write("(none)\n")
        return
    for student in result.students:
        print_student(student, out)
