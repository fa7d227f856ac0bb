"""
Unit tests for StudentCollection and grade helpers.
"""

import pytest

from student_erp.core.models import (
    IIITStudent,
    StudentCollection,
    clamp_threshold,
    is_valid_grade,
)


class TestStudentCollection:
    """Tests for the owning, freeze-once collection."""

    def test_preserves_insertion_order(self):
        a = IIITStudent("A", "1", "b", 2024)
        b = IIITStudent("B", "2", "b", 2024)
        students = StudentCollection([a, b])
        assert list(students) == [a, b]
        assert students[1] is b
        assert len(students) == 2

    def test_append_after_freeze_raises(self):
        students = StudentCollection().freeze()
        with pytest.raises(RuntimeError, match="frozen"):
            students.append(IIITStudent("A", "1", "b", 2024))

    def test_append_rejects_non_records(self):
        with pytest.raises(TypeError):
            StudentCollection().append("not a student")

    def test_get_out_of_bounds_returns_none(self):
        students = StudentCollection([IIITStudent("A", "1", "b", 2024)])
        assert students.get(0) is not None
        assert students.get(1) is None
        assert students.get(-1) is None

    def test_is_frozen(self):
        students = StudentCollection()
        assert not students.is_frozen
        assert students.freeze().is_frozen


class TestGradeHelpers:
    """Tests for grade range helpers."""

    @pytest.mark.parametrize("grade, expected", [(-1, False), (0, True), (10, True), (11, False)])
    def test_is_valid_grade(self, grade, expected):
        assert is_valid_grade(grade) is expected

    @pytest.mark.parametrize("threshold, expected", [(-5, 0), (0, 0), (7, 7), (10, 10), (99, 10)])
    def test_clamp_threshold(self, threshold, expected):
        assert clamp_threshold(threshold) == expected
