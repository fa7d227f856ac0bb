"""
Unit tests for the concurrently built sort views.
"""

from collections import deque

from student_erp.core.models import IIITStudent, IITStudent, StudentCollection
from student_erp.views import SortViews, build_sort_views, sort_indices


class TestBuildSortViews:
    """Tests for build_sort_views()."""

    def test_scenario_orders(self, scenario_students):
        """Ann sorts before Bob by both name and roll."""
        views = build_sort_views(scenario_students)
        assert views.by_name == [1, 0]
        assert views.by_roll == [1, 0]

    def test_list_view_matches_name_view(self, mixed_students):
        """The deque holds the by-name order."""
        views = build_sort_views(mixed_students)
        assert isinstance(views.by_name_list, deque)
        assert list(views.by_name_list) == views.by_name

    def test_views_are_permutations(self, mixed_students):
        """Each view lists every position exactly once."""
        views = build_sort_views(mixed_students)
        expected = list(range(len(mixed_students)))
        assert sorted(views.by_name) == expected
        assert sorted(views.by_roll) == expected

    def test_names_ascending(self, mixed_students):
        views = build_sort_views(mixed_students)
        names = [mixed_students[i].name for i in views.by_name]
        assert names == sorted(names)

    def test_roll_sorted_as_text_across_variants(self):
        """Integer rolls compare by their text form ("10" < "9")."""
        students = StudentCollection([
            IITStudent("A", 9, "b", 2024),
            IIITStudent("B", "MT1", "b", 2024),
            IITStudent("C", 10, "b", 2024),
        ])
        views = build_sort_views(students)
        assert [students[i].roll_text for i in views.by_roll] == ["10", "9", "MT1"]

    def test_name_comparison_is_case_sensitive(self):
        """Uppercase sorts before lowercase."""
        students = StudentCollection([
            IIITStudent("bob", "1", "b", 2024),
            IIITStudent("Bob", "2", "b", 2024),
        ])
        assert build_sort_views(students).by_name == [1, 0]

    def test_empty_collection(self):
        views = build_sort_views(StudentCollection())
        assert views.by_name == []
        assert views.by_roll == []
        assert len(views.by_name_list) == 0

    def test_records_timings(self, scenario_students):
        """Both sorts report an elapsed time."""
        views = build_sort_views(scenario_students)
        assert set(views.timings) == {"by_name", "by_roll"}
        assert all(seconds >= 0 for seconds in views.timings.values())

    def test_collection_not_modified(self, mixed_students):
        """Sorting builds index lists and leaves the records in place."""
        before = list(mixed_students)
        build_sort_views(mixed_students)
        assert list(mixed_students) == before

    def test_default_views_empty(self):
        views = SortViews()
        assert views.by_name == [] and views.by_roll == []


class TestSortIndices:
    """Tests for sort_indices() and the empty-slot tie-break."""

    def test_sorts_by_key(self):
        students = [IIITStudent(n, "1", "b", 2024) for n in ["C", "A", "B"]]
        assert sort_indices(students, lambda s: s.name) == [1, 2, 0]

    def test_empty_slots_do_not_raise(self):
        """None slots are ordered by position instead of by key."""
        students = [IIITStudent("B", "1", "b", 2024), None, IIITStudent("A", "2", "b", 2024)]
        order = sort_indices(students, lambda s: s.name)
        assert sorted(order) == [0, 1, 2]

    def test_all_empty_slots_keep_index_order(self):
        assert sort_indices([None, None, None], lambda s: s.name) == [0, 1, 2]


class TestConcurrency:
    """The two sorts run on worker threads, not the caller's thread."""

    def test_sorts_run_on_worker_threads(self, monkeypatch, scenario_students):
        import threading

        from student_erp.views import sorting

        seen = []
        original = sorting._timed_sort

        def recording(students, key):
            seen.append(threading.current_thread().name)
            return original(students, key)

        monkeypatch.setattr(sorting, "_timed_sort", recording)
        views = build_sort_views(scenario_students)

        assert views.by_name == [1, 0]
        assert len(seen) == 2
        assert all(name.startswith("sort-view") for name in seen)
