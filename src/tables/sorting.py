"""Stable single-column sorting for table views."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Tuple

from .columns import ColumnDef


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction; no column means source order."""

    column_id: Optional[str] = None
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def is_active(self) -> bool:
        return self.column_id is not None

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESCENDING


def cycle_sort(state: SortState, column_id: str) -> SortState:
    """
    Advance the sort for a header click.

    A new column starts ascending; the same column goes ascending ->
    descending -> unsorted.
    """
    if state.column_id != column_id:
        return SortState(column_id, SortDirection.ASCENDING)
    if state.direction == SortDirection.ASCENDING:
        return SortState(column_id, SortDirection.DESCENDING)
    return SortState()


def _sort_key(value: Any) -> Any:
    # Strings compare case-insensitively
    if isinstance(value, str):
        return value.lower()
    return value


def stable_sort(rows: Sequence[Any], column: Optional[ColumnDef], descending: bool = False) -> Tuple[Any, ...]:
    """
    Sort rows by a column, keeping ties in their original order.

    Missing (None) values are placed last in both directions.
    """
    if column is None:
        return tuple(rows)

    present = []
    missing = []
    for row in rows:
        value = column.value(row)
        if value is None:
            missing.append(row)
        else:
            present.append((value, row))

    # sorted() is stable, including with reverse=True
    ordered = sorted(present, key=lambda pair: _sort_key(pair[0]), reverse=descending)
    return tuple(row for _, row in ordered) + tuple(missing)


def apply_sort(rows: Sequence[Any], state: SortState, column: Optional[ColumnDef]) -> Tuple[Any, ...]:
    """Apply a SortState; inactive state returns rows unchanged."""
    if not state.is_active or column is None:
        return tuple(rows)
    return stable_sort(rows, column, state.descending)
