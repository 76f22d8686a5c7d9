"""Filter-and-search engine for list screens."""

from .models import (
    ActiveFilter,
    FilterConfig,
    FilterConfigError,
    FilterGroup,
    FilterKind,
    FilterOption,
    NumericRange,
    RANGE_CHIP_VALUE,
    report_config_error,
)
from .predicates import (
    evaluate_record,
    filter_records,
    get_field_value,
    matches_group,
    matches_range,
    matches_search,
    normalize_query,
)
from .state import FilterStateStore
from .results import EmptyState, ResultSummary, build_result_set, summarize

__all__ = [
    # Models
    "ActiveFilter",
    "FilterConfig",
    "FilterConfigError",
    "FilterGroup",
    "FilterKind",
    "FilterOption",
    "NumericRange",
    "RANGE_CHIP_VALUE",
    "report_config_error",
    # Predicates
    "evaluate_record",
    "filter_records",
    "get_field_value",
    "matches_group",
    "matches_range",
    "matches_search",
    "normalize_query",
    # State
    "FilterStateStore",
    # Results
    "EmptyState",
    "ResultSummary",
    "build_result_set",
    "summarize",
]
