"""Tests for filter configuration models."""

import math

import pytest


class TestNumericRange:
    """Tests for NumericRange bounds."""

    def test_unbounded_range_is_inactive(self):
        from src.filtering import NumericRange

        bounds = NumericRange()
        assert not bounds.is_active
        assert bounds.contains(None)

    def test_bounds_are_inclusive(self):
        from src.filtering import NumericRange

        bounds = NumericRange(100, 200)
        assert bounds.contains(100)
        assert bounds.contains(200)
        assert not bounds.contains(99.99)
        assert not bounds.contains(200.01)

    def test_open_ended_bounds(self):
        from src.filtering import NumericRange

        assert NumericRange(min=10).contains(10_000)
        assert NumericRange(max=10).contains(-5)

    def test_missing_value_fails_active_range(self):
        from src.filtering import NumericRange

        assert not NumericRange(0, 10).contains(None)
        assert not NumericRange(0, 10).contains(math.nan)

    def test_describe(self):
        from src.filtering import NumericRange

        assert NumericRange(100, 200).describe("$") == "$100 - $200"
        assert NumericRange(min=5).describe("days") == "≥ 5 days"
        assert NumericRange(max=2.5).describe() == "≤ 2.50"

    def test_dict_snapshot(self):
        from src.filtering import NumericRange

        bounds = NumericRange(1, None)
        assert NumericRange.from_dict(bounds.to_dict()) == bounds
        assert NumericRange.from_dict(None) == NumericRange()


class TestFilterGroup:
    """Tests for FilterGroup helpers."""

    def test_record_field_defaults_to_id(self):
        from src.filtering import FilterGroup, FilterOption

        group = FilterGroup(id="status", label="Status", options=(FilterOption("a", "A"),))
        assert group.record_field == "status"

        aliased = FilterGroup(id="state", label="State", field="status", options=group.options)
        assert aliased.record_field == "status"

    def test_value_function_ignored_by_equality(self):
        from src.filtering import FilterGroup, FilterKind

        first = FilterGroup(id="budget", label="Budget", kind=FilterKind.RANGE, value_fn=lambda r: 1.0)
        second = FilterGroup(id="budget", label="Budget", kind=FilterKind.RANGE, value_fn=lambda r: 2.0)
        assert first == second
        assert "value_fn" not in repr(first)
        assert FilterGroup(id="x", label="X").value_fn is None

    def test_matching_options_is_case_insensitive(self):
        from src.screens import options
        from src.filtering import FilterGroup

        group = FilterGroup(
            id="method", label="Method", options=options("check", "ach", "wire", "credit-card")
        )
        assert [o.value for o in group.matching_options("TRANS")] == ["wire"]
        assert [o.value for o in group.matching_options("c")] == ["check", "ach", "credit-card"]
        assert len(group.matching_options("")) == 4

    def test_empty_values_per_kind(self):
        from src.filtering import FilterGroup, FilterKind, FilterOption

        opts = (FilterOption("a", "A"),)
        assert FilterGroup(id="c", label="C", options=opts).empty_value() == ()
        assert FilterGroup(id="r", label="R", kind=FilterKind.RADIO, options=opts).empty_value() is None


class TestFilterConfig:
    """Tests for configuration validation."""

    def test_duplicate_group_id_strict(self):
        from src.filtering import FilterConfig, FilterConfigError, FilterGroup, FilterOption

        opts = (FilterOption("a", "A"),)
        with pytest.raises(FilterConfigError):
            FilterConfig(
                [FilterGroup(id="g", label="G", options=opts), FilterGroup(id="g", label="G2", options=opts)],
                strict=True,
            )

    def test_duplicate_group_id_lenient_keeps_first(self):
        from src.filtering import FilterConfig, FilterGroup, FilterOption

        opts = (FilterOption("a", "A"),)
        config = FilterConfig(
            [FilterGroup(id="g", label="First", options=opts), FilterGroup(id="g", label="Second", options=opts)],
            strict=False,
        )
        assert len(config) == 1
        assert config.get("g").label == "First"

    def test_duplicate_option_values(self):
        from src.filtering import FilterConfig, FilterConfigError, FilterGroup, FilterOption

        group = FilterGroup(
            id="g", label="G", options=(FilterOption("a", "A"), FilterOption("a", "Again"))
        )
        with pytest.raises(FilterConfigError):
            FilterConfig([group], strict=True)

        lenient = FilterConfig([group], strict=False)
        assert lenient.get("g").option_values() == ["a"]

    def test_option_less_checkbox_group_rejected(self):
        from src.filtering import FilterConfig, FilterConfigError, FilterGroup

        with pytest.raises(FilterConfigError):
            FilterConfig([FilterGroup(id="g", label="G")], strict=True)

    def test_range_group_requires_value_function(self):
        from src.filtering import FilterConfig, FilterConfigError, FilterGroup, FilterKind

        with pytest.raises(FilterConfigError):
            FilterConfig([FilterGroup(id="r", label="R", kind=FilterKind.RANGE)], strict=True)

    def test_config_error_is_an_assertion(self):
        from src.filtering import FilterConfigError

        assert issubclass(FilterConfigError, AssertionError)

    def test_group_partitions(self, status_filter_config, budget_filter_config):
        assert [g.id for g in status_filter_config.option_groups] == ["status", "priority"]
        assert status_filter_config.range_groups == []
        assert [g.id for g in budget_filter_config.range_groups] == ["budget"]
        assert status_filter_config.default_values() == {"status": (), "priority": None}
