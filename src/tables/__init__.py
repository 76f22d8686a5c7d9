"""Table presentation: pagination, sorting and column visibility."""

from .columns import ColumnConfigError, ColumnDef, ColumnSet, report_column_error
from .pagination import (
    Page,
    PaginationState,
    change_page_size,
    clamp,
    clamp_page_index,
    count_pages,
    go_to_page,
    next_page,
    paginate,
    previous_page,
    reset,
)
from .persistence import (
    DuckDBViewStateStore,
    InMemoryViewStateStore,
    ViewStateError,
    ViewStateStore,
    create_view_state_store,
)
from .sorting import SortDirection, SortState, apply_sort, cycle_sort, stable_sort
from .view import TableView

__all__ = [
    # Columns
    "ColumnConfigError",
    "ColumnDef",
    "ColumnSet",
    "report_column_error",
    # Pagination
    "Page",
    "PaginationState",
    "change_page_size",
    "clamp",
    "clamp_page_index",
    "count_pages",
    "go_to_page",
    "next_page",
    "paginate",
    "previous_page",
    "reset",
    # Persistence
    "DuckDBViewStateStore",
    "InMemoryViewStateStore",
    "ViewStateError",
    "ViewStateStore",
    "create_view_state_store",
    # Sorting
    "SortDirection",
    "SortState",
    "apply_sort",
    "cycle_sort",
    "stable_sort",
    # View
    "TableView",
]
