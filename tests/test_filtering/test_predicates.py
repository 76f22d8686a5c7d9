"""Tests for record predicates and result set derivation."""

from dataclasses import dataclass

import pytest


@dataclass
class Ticket:
    ticket_id: str
    subject: str
    status: str


class TestSearchPredicate:
    """Tests for free-text search."""

    def test_empty_query_matches_everything(self):
        from src.filtering import matches_search

        assert matches_search({"id": "X"}, "", ["id"])

    def test_case_insensitive_substring(self):
        from src.filtering import matches_search, normalize_query

        record = {"id": "ABC-100", "name": "Roof"}
        assert matches_search(record, normalize_query("abc"), ["id", "name"])
        assert matches_search(record, normalize_query("  c-10 "), ["id"])
        assert not matches_search(record, normalize_query("abd"), ["id", "name"])

    def test_only_designated_fields_are_searched(self):
        from src.filtering import matches_search

        record = {"id": "A-1", "notes": "secret"}
        assert not matches_search(record, "secret", ["id"])

    def test_missing_fields_are_skipped(self):
        from src.filtering import matches_search

        assert matches_search({"id": "A-1", "ref": None}, "a-1", ["ref", "id"])

    def test_attribute_records(self):
        from src.filtering import matches_search

        ticket = Ticket("TKT-1", "Printer jam", "open")
        assert matches_search(ticket, "printer", ["ticket_id", "subject"])


class TestFilterRecords:
    """Tests for the composite conjunctive filter."""

    def test_identity_law(self, status_records, status_filter_config):
        from src.filtering import filter_records

        result = filter_records(
            status_records, status_filter_config, "", ["id"], status_filter_config.default_values(), {}
        )
        assert list(result) == status_records

    def test_checkbox_selection_preserves_order(self, status_records, status_filter_config):
        from src.filtering import filter_records

        result = filter_records(
            status_records, status_filter_config, "", ["id"], {"status": ("open",)}, {}
        )
        assert [r["id"] for r in result] == ["ABC-100", "XYZ-200"]

    def test_selecting_every_option_is_unfiltered(self, status_records, status_filter_config):
        from src.filtering import filter_records

        result = filter_records(
            status_records, status_filter_config, "", ["id"], {"status": ("open", "closed")}, {}
        )
        assert list(result) == status_records

    def test_search_and_groups_combine_with_and(self, status_records, status_filter_config):
        from src.filtering import filter_records

        result = filter_records(
            status_records, status_filter_config, "xyz", ["id"], {"status": ("closed",)}, {}
        )
        assert [r["id"] for r in result] == ["XYZ-201"]

    def test_radio_selection_is_equality(self, status_filter_config):
        from src.filtering import filter_records

        records = [{"priority": "high"}, {"priority": "low"}, {"priority": None}]
        result = filter_records(records, status_filter_config, "", [], {"priority": "low"}, {})
        assert result == ({"priority": "low"},)

    def test_budget_range(self, budget_filter_config):
        from src.filtering import NumericRange, filter_records

        records = [{"average_budget": 50}, {"average_budget": 150}, {"average_budget": 250}]
        result = filter_records(
            records, budget_filter_config, "", [], {}, {"budget": NumericRange(100, 200)}
        )
        assert result == ({"average_budget": 150},)

    def test_recomputation_is_idempotent(self, status_records, status_filter_config):
        from src.filtering import filter_records

        args = (status_records, status_filter_config, "a", ["id", "name"], {"status": ("closed",)}, {})
        assert filter_records(*args) == filter_records(*args)

    def test_result_is_a_new_sequence(self, status_records, status_filter_config):
        from src.filtering import filter_records

        result = filter_records(status_records, status_filter_config, "", ["id"], {}, {})
        assert isinstance(result, tuple)
        assert result is not status_records


class TestResultSummary:
    """Tests for result counts and empty states."""

    @pytest.mark.parametrize(
        "result_count,total_count,expected",
        [
            (3, 5, "none"),
            (0, 0, "no_records"),
            (0, 5, "no_matches"),
        ],
    )
    def test_empty_state(self, result_count, total_count, expected):
        from src.filtering import EmptyState, ResultSummary

        summary = ResultSummary(result_count, total_count, filters_active=result_count != total_count)
        assert summary.empty_state == EmptyState(expected)

    def test_label(self):
        from src.filtering import ResultSummary

        assert ResultSummary(2, 5, True).label == "2 of 5 results"
        assert ResultSummary(1, 1, False).label == "1 of 1 result"

    def test_build_result_set_uses_store_state(self, status_records, status_filter_config):
        from src.filtering import FilterStateStore, build_result_set, summarize

        store = FilterStateStore(status_filter_config)
        store.set_filter_value("status", "open")

        result = build_result_set(status_records, status_filter_config, store, ["id"])
        summary = summarize(result, status_records, store)

        assert len(result) == 2
        assert summary.label == "2 of 5 results"
        assert summary.filters_active
