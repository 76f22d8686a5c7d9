"""Record predicates for list-screen filtering.

Every predicate is pure: it reads the record and the current criteria
and returns a bool. Criteria combine conjunctively; a criterion with
no selection is vacuously true.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional, Sequence

from .models import FilterConfig, FilterGroup, FilterKind, NumericRange


def get_field_value(record: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-style record."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def normalize_query(query: Optional[str]) -> str:
    """Trim and lower-case a search query; None becomes ''."""
    return (query or "").strip().lower()


def matches_search(record: Any, query: str, search_fields: Sequence[str]) -> bool:
    """
    Case-insensitive substring match over a screen's searchable fields.

    Args:
        record: Record to test.
        query: Already-normalized query (see normalize_query).
        search_fields: Field names consulted, in order.

    Returns:
        True if the query is empty or found in at least one field.
    """
    if not query:
        return True
    for name in search_fields:
        value = get_field_value(record, name)
        if value is None:
            continue
        if query in str(value).lower():
            return True
    return False


def is_selection_empty(group: FilterGroup, selection: Any) -> bool:
    """True when the group's selection imposes no constraint."""
    if selection is None:
        return True
    if group.kind == FilterKind.CHECKBOX:
        return len(selection) == 0
    return selection == ""


def matches_group(record: Any, group: FilterGroup, selection: Any) -> bool:
    """Membership (checkbox) or equality (radio) against the record's field."""
    if is_selection_empty(group, selection):
        return True
    value = get_field_value(record, group.record_field)
    if group.kind == FilterKind.CHECKBOX:
        return value in selection
    return value == selection


def matches_range(record: Any, group: FilterGroup, bounds: Optional[NumericRange]) -> bool:
    """Inclusive bounds check against the group's derived value."""
    if bounds is None or not bounds.is_active:
        return True
    return bounds.contains(group.value_fn(record))


def evaluate_record(
    record: Any,
    filter_config: FilterConfig,
    query: str,
    search_fields: Sequence[str],
    values: Dict[str, Any],
    ranges: Dict[str, NumericRange],
) -> bool:
    """
    Decide whether a record belongs to the result set.

    Short-circuits on the first failing criterion: search, then each
    option group in declared order, then each range group.
    """
    if not matches_search(record, query, search_fields):
        return False
    for group in filter_config.option_groups:
        if not matches_group(record, group, values.get(group.id)):
            return False
    for group in filter_config.range_groups:
        if not matches_range(record, group, ranges.get(group.id)):
            return False
    return True


def filter_records(
    records: Iterable[Any],
    filter_config: FilterConfig,
    query: Optional[str],
    search_fields: Sequence[str],
    values: Dict[str, Any],
    ranges: Dict[str, NumericRange],
) -> tuple:
    """Single pass over records, preserving source order."""
    normalized = normalize_query(query)
    return tuple(
        record
        for record in records
        if evaluate_record(record, filter_config, normalized, search_fields, values, ranges)
    )
