"""Result set derivation for list screens."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, Tuple

from .models import FilterConfig
from .predicates import filter_records
from .state import FilterStateStore


class EmptyState(str, Enum):
    """Why a result set is (or is not) empty."""

    NONE = "none"
    NO_RECORDS = "no_records"
    NO_MATCHES = "no_matches"


@dataclass(frozen=True)
class ResultSummary:
    """Counts for "n of m results" displays and empty-state selection."""

    result_count: int
    total_count: int
    filters_active: bool

    @property
    def empty_state(self) -> EmptyState:
        if self.total_count == 0:
            return EmptyState.NO_RECORDS
        if self.result_count == 0:
            return EmptyState.NO_MATCHES
        return EmptyState.NONE

    @property
    def is_filtered(self) -> bool:
        return self.result_count != self.total_count

    @property
    def label(self) -> str:
        noun = "result" if self.total_count == 1 else "results"
        return f"{self.result_count} of {self.total_count} {noun}"


def build_result_set(
    records: Sequence[Any],
    filter_config: FilterConfig,
    store: FilterStateStore,
    search_fields: Sequence[str],
) -> Tuple[Any, ...]:
    """
    Derive the ordered result set for the store's current state.

    Args:
        records: Unfiltered source collection, in display order.
        filter_config: The screen's filter groups.
        store: Current search, filter values and ranges.
        search_fields: Fields consulted by the search predicate.

    Returns:
        A new tuple holding the passing records in source order.
    """
    return filter_records(
        records,
        filter_config,
        store.search,
        search_fields,
        dict(store.filter_values()),
        dict(store.ranges()),
    )


def summarize(result_set: Sequence[Any], records: Sequence[Any], store: FilterStateStore) -> ResultSummary:
    """Summarize a derived result set against its source."""
    return ResultSummary(
        result_count=len(result_set),
        total_count=len(records),
        filters_active=not store.is_empty(),
    )
