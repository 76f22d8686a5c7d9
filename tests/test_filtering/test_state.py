"""Tests for the filter state store."""

import pytest


@pytest.fixture
def store(status_filter_config):
    from src.filtering import FilterStateStore

    return FilterStateStore(status_filter_config)


@pytest.fixture
def project_store(today):
    from src.filtering import FilterStateStore
    from src.screens import projects_screen

    definition = projects_screen(today, ending_soon_days=7)
    return FilterStateStore(definition.build_filter_config(strict=True))


class TestMutations:
    """Tests for the named store operations."""

    def test_set_search_trims(self, store):
        store.set_search("  roof  ")
        assert store.search == "roof"

    def test_checkbox_toggles_membership(self, store):
        store.set_filter_value("status", "open")
        store.set_filter_value("status", "closed")
        assert store.get_value("status") == ("open", "closed")

        store.set_filter_value("status", "open")
        assert store.get_value("status") == ("closed",)

    def test_radio_replaces_value(self, store):
        store.set_filter_value("priority", "high")
        store.set_filter_value("priority", "low")
        assert store.get_value("priority") == "low"

    def test_radio_same_value_keeps_selection(self, store):
        store.set_filter_value("priority", "high")
        store.set_filter_value("priority", "high")
        assert store.get_value("priority") == "high"

    def test_radio_none_clears(self, store):
        store.set_filter_value("priority", "high")
        store.set_filter_value("priority", None)
        assert store.get_value("priority") is None

    def test_clear_all_resets_everything(self, store):
        store.set_search("abc")
        store.set_filter_value("status", "open")
        store.set_filter_value("priority", "low")

        store.clear_all()

        assert store.search == ""
        assert store.get_value("status") == ()
        assert store.get_value("priority") is None
        assert store.is_empty()

    def test_replace_filter_values(self, store):
        store.set_filter_value("priority", "high")
        store.replace_filter_values({"status": ["closed", "open", "closed"]})

        assert store.get_value("status") == ("closed", "open")
        assert store.get_value("priority") is None

    def test_filter_values_snapshot_is_read_only(self, store):
        values = store.filter_values()
        with pytest.raises(TypeError):
            values["status"] = ("open",)


class TestConfigurationErrors:
    """Tests for the strict/lenient configuration-error policy."""

    def test_unknown_group_strict(self, store):
        from src.filtering import FilterConfigError

        with pytest.raises(FilterConfigError):
            store.set_filter_value("missing", "x")

    def test_unknown_option_strict(self, store):
        from src.filtering import FilterConfigError

        with pytest.raises(FilterConfigError):
            store.set_filter_value("status", "archived")

    def test_unknown_group_lenient_is_noop(self, status_filter_config):
        from src.filtering import FilterStateStore

        store = FilterStateStore(status_filter_config, strict=False)
        store.set_filter_value("missing", "x")
        store.set_filter_value("status", "archived")
        store.remove_active_filter("missing", "x")

        assert store.is_empty()

    def test_range_mutation_on_option_group(self, store):
        from src.filtering import FilterConfigError

        with pytest.raises(FilterConfigError):
            store.set_range("status", 1, 2)


class TestRemoveActiveFilter:
    """Tests for chip removal."""

    def test_remove_is_idempotent(self, store):
        store.set_filter_value("status", "open")
        store.set_filter_value("status", "closed")

        store.remove_active_filter("status", "open")
        once = store.to_dict()
        store.remove_active_filter("status", "open")

        assert store.to_dict() == once
        assert store.get_value("status") == ("closed",)

    def test_remove_absent_value_is_noop(self, store):
        store.remove_active_filter("status", "open")
        store.remove_active_filter("priority", "high")
        assert store.is_empty()

    def test_remove_radio_value(self, store):
        store.set_filter_value("priority", "high")
        store.remove_active_filter("priority", "low")
        assert store.get_value("priority") == "high"

        store.remove_active_filter("priority", "high")
        assert store.get_value("priority") is None


class TestActiveFilters:
    """Tests for derived chips."""

    def test_chips_follow_group_then_selection_order(self, store):
        store.set_filter_value("priority", "low")
        store.set_filter_value("status", "closed")
        store.set_filter_value("status", "open")

        chips = [(c.group_id, c.value, c.label) for c in store.active_filters()]
        assert chips == [
            ("status", "closed", "Closed"),
            ("status", "open", "Open"),
            ("priority", "low", "Low"),
        ]
        assert store.active_filter_count() == 3

    def test_chips_are_derived_fresh(self, store):
        store.set_filter_value("status", "open")
        chips = store.active_filters()
        chips.clear()
        assert store.active_filter_count() == 1

    def test_summary(self, store):
        assert store.summary() == "All records (no filters)"

        store.set_search("roof")
        store.set_filter_value("status", "open")
        store.set_filter_value("status", "closed")
        assert store.summary() == 'Search: "roof" | Status: Open, Closed'


class TestRanges:
    """Tests for range groups."""

    def test_set_and_clear_range(self, project_store):
        from src.filtering import NumericRange

        project_store.set_range("budget", 100, 200)
        assert project_store.get_range("budget") == NumericRange(100, 200)

        project_store.clear_range("budget")
        assert not project_store.get_range("budget").is_active
        assert "budget" not in project_store.ranges()

    def test_range_chip(self, project_store):
        from src.filtering import RANGE_CHIP_VALUE

        project_store.set_range("budget", 100, 200)
        chips = project_store.active_filters()

        assert len(chips) == 1
        assert chips[0].value == RANGE_CHIP_VALUE
        assert chips[0].label == "$100 - $200"

        project_store.remove_active_filter("budget", RANGE_CHIP_VALUE)
        assert project_store.active_filter_count() == 0

    def test_toggle_preset(self, project_store):
        from src.filtering import NumericRange

        project_store.toggle_range_preset("ending_soon")
        assert project_store.get_range("ending_soon") == NumericRange(0, 7)

        project_store.toggle_range_preset("ending_soon")
        assert not project_store.get_range("ending_soon").is_active

    def test_clear_all_clears_ranges(self, project_store):
        project_store.set_range("budget", 1, None)
        project_store.clear_all()
        assert project_store.ranges() == {}


class TestSnapshotsAndListeners:
    """Tests for to_dict/from_dict and subscriptions."""

    def test_round_trip(self, project_store):
        from src.filtering import FilterStateStore

        project_store.set_search("roof")
        project_store.set_filter_value("status", "open")
        project_store.set_range("budget", 100, None)

        restored = FilterStateStore.from_dict(project_store.filter_config, project_store.to_dict())
        assert restored.to_dict() == project_store.to_dict()

    def test_listeners_run_only_on_effective_change(self, store):
        calls = []
        unsubscribe = store.subscribe(lambda s: calls.append(s.search))

        store.set_search("a")
        store.set_search(" a ")
        store.remove_active_filter("status", "open")
        assert calls == ["a"]

        unsubscribe()
        store.set_search("b")
        assert calls == ["a"]

    def test_load_dict_notifies_once(self, project_store):
        calls = []
        project_store.subscribe(
            lambda s: calls.append((s.search, s.get_value("status"), s.get_range("budget").min))
        )

        project_store.load_dict(
            {
                "search": "abc",
                "filters": {"status": ["open"]},
                "ranges": {"budget": {"min": 100, "max": None}},
            }
        )
        assert calls == [("abc", ("open",), 100)]

    def test_load_dict_without_change_is_silent(self, store):
        store.set_search("abc")
        calls = []
        store.subscribe(lambda s: calls.append(s.search))

        store.load_dict(store.to_dict())
        assert calls == []

    def test_load_dict_rejects_bounds_for_option_group(self, store):
        from src.filtering import FilterConfigError

        with pytest.raises(FilterConfigError):
            store.load_dict({"ranges": {"status": {"min": 1, "max": 2}}})
