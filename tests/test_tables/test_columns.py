"""Tests for column definitions and visibility resolution."""

import pytest


@pytest.fixture
def columns():
    from src.tables import ColumnDef, ColumnSet

    return ColumnSet(
        [
            ColumnDef("id", "ID", essential=True),
            ColumnDef("client", "Client"),
            ColumnDef("notes", "Notes", default_visible=False),
        ],
        strict=True,
    )


class TestColumnSet:
    """Tests for ColumnSet."""

    def test_defaults(self, columns):
        assert columns.defaults() == {"id": True, "client": True, "notes": False}

    def test_persisted_overrides_default(self, columns):
        visibility = columns.resolve_visibility({"client": False, "notes": True})
        assert visibility == {"id": True, "client": False, "notes": True}

    def test_essential_columns_ignore_persisted_state(self, columns):
        assert columns.resolve_visibility({"id": False})["id"] is True

    def test_unknown_persisted_columns_ignored(self, columns):
        assert "gone" not in columns.resolve_visibility({"gone": True})

    def test_duplicate_column_id(self):
        from src.tables import ColumnConfigError, ColumnDef, ColumnSet

        with pytest.raises(ColumnConfigError):
            ColumnSet([ColumnDef("a", "A"), ColumnDef("a", "B")], strict=True)

    def test_accessor(self):
        from src.tables import ColumnDef

        column = ColumnDef("avg", "Average", accessor=lambda r: (r["lo"] + r["hi"]) / 2)
        assert column.value({"lo": 100, "hi": 200}) == 150
        assert ColumnDef("lo", "Low").value({"lo": 100}) == 100
