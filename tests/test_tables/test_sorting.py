"""Tests for stable sorting."""


class TestCycleSort:
    """Tests for header-click sort cycling."""

    def test_cycle(self):
        from src.tables import SortDirection, SortState, cycle_sort

        state = cycle_sort(SortState(), "amount")
        assert state == SortState("amount", SortDirection.ASCENDING)

        state = cycle_sort(state, "amount")
        assert state.descending

        state = cycle_sort(state, "amount")
        assert not state.is_active

    def test_new_column_starts_ascending(self):
        from src.tables import SortDirection, SortState, cycle_sort

        state = cycle_sort(SortState("amount", SortDirection.DESCENDING), "client")
        assert state == SortState("client", SortDirection.ASCENDING)


class TestStableSort:
    """Tests for stable_sort."""

    def test_ties_keep_original_order(self):
        from src.tables import ColumnDef, stable_sort

        rows = [{"id": 1, "v": 2}, {"id": 2, "v": 1}, {"id": 3, "v": 2}, {"id": 4, "v": 1}]
        column = ColumnDef("v", "V")

        assert [r["id"] for r in stable_sort(rows, column)] == [2, 4, 1, 3]
        assert [r["id"] for r in stable_sort(rows, column, descending=True)] == [1, 3, 2, 4]

    def test_none_sorts_last_both_directions(self):
        from src.tables import ColumnDef, stable_sort

        rows = [{"v": None}, {"v": 3}, {"v": 1}]
        column = ColumnDef("v", "V")

        assert [r["v"] for r in stable_sort(rows, column)] == [1, 3, None]
        assert [r["v"] for r in stable_sort(rows, column, descending=True)] == [3, 1, None]

    def test_strings_case_insensitive(self):
        from src.tables import ColumnDef, stable_sort

        rows = [{"n": "beta"}, {"n": "Alpha"}, {"n": "gamma"}]
        assert [r["n"] for r in stable_sort(rows, ColumnDef("n", "N"))] == ["Alpha", "beta", "gamma"]

    def test_sort_is_idempotent(self):
        from src.tables import ColumnDef, SortState, apply_sort

        rows = [{"v": 2}, {"v": 1}, {"v": 2}]
        column = ColumnDef("v", "V")
        state = SortState("v")
        once = apply_sort(rows, state, column)
        assert apply_sort(once, state, column) == once

    def test_inactive_sort_keeps_order(self):
        from src.tables import ColumnDef, SortState, apply_sort

        rows = [{"v": 2}, {"v": 1}]
        assert apply_sort(rows, SortState(), ColumnDef("v", "V")) == tuple(rows)
