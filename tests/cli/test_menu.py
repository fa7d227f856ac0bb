"""
Tests for the interactive menu, driven by scripted input.
"""

import io

import pytest

from student_erp.cli import run_menu
from student_erp.controller import session_from_collection


def _scripted(*answers):
    """Return an input function that replays answers, then signals EOF."""
    remaining = list(answers)

    def read_line(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_line


@pytest.fixture
def session(scenario_students):
    return session_from_collection(scenario_students)


def _run(session, *answers):
    out = io.StringIO()
    run_menu(session, input_fn=_scripted(*answers), out=out)
    return out.getvalue()


class TestRunMenu:
    """Tests for menu dispatch and input recovery."""

    def test_exit(self, session):
        output = _run(session, "0")
        assert "===== ERP MENU =====" in output
        assert output.endswith("Exiting ERP.\n")

    def test_end_of_input_exits(self, session):
        assert "Exiting ERP." in _run(session)

    def test_invalid_choice_reprompts(self, session):
        output = _run(session, "abc", "0")
        assert "Invalid input. Try again." in output
        assert output.count("===== ERP MENU =====") == 2

    def test_unknown_number(self, session):
        assert "Unknown choice. Try again." in _run(session, "42", "0")

    def test_insertion_order(self, session):
        output = _run(session, "1", "0")
        assert output.index("Name: Bob") < output.index("Name: Ann")

    @pytest.mark.parametrize("choice", ["2", "3", "4"])
    def test_sorted_listings(self, session, choice):
        output = _run(session, choice, "0")
        assert "=== Students (indexed view) ===" in output
        assert output.index("Name: Ann") < output.index("Name: Bob")

    def test_default_threshold_query(self, session):
        output = _run(session, "5", " X ", "0")
        assert "Students with grade >= 9 in course 'X':" in output
        assert "Name: Bob" in output
        assert "Name: Ann" not in output

    def test_custom_threshold_query_order(self, session):
        output = _run(session, "6", "X", "7", "0")
        assert "Students with grade >= 7 in course 'X':" in output
        assert output.index("Name: Ann") < output.index("Name: Bob")

    def test_custom_threshold_invalid_grade(self, session):
        output = _run(session, "6", "X", "high", "0")
        assert "Invalid grade." in output

    def test_unknown_course_prints_none(self, session):
        output = _run(session, "6", "NOPE", "5", "0")
        assert "(none)" in output

    def test_end_of_input_mid_query_exits(self, session):
        output = _run(session, "6", "X")
        assert output.endswith("Exiting ERP.\n")
