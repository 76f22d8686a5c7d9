"""Table view: sorting, pagination and column visibility over a result set."""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.config_loader import get_table_config
from config.logging_config import get_logger

from . import pagination
from .columns import ColumnDef, ColumnSet
from .pagination import Page, PaginationState
from .persistence import ViewStateError, ViewStateStore
from .sorting import SortDirection, SortState, apply_sort, cycle_sort

logger = get_logger("table_view")


class TableView:
    """
    Presentation state of one table.

    Rows are the screen's current result set. Sorting is applied before
    pagination slicing. Column visibility is initialized from column
    defaults, overridden by whatever the view state store holds for
    ``storage_key``, and written back on every toggle. Without a storage
    key nothing is persisted.
    """

    def __init__(
        self,
        columns: Union[ColumnSet, Iterable[ColumnDef]],
        storage_key: Optional[str] = None,
        store: Optional[ViewStateStore] = None,
        page_size: Optional[int] = None,
        strict: Optional[bool] = None,
    ):
        """
        Initialize a table view.

        Args:
            columns: Column definitions in display order.
            storage_key: Identifier scoping persisted column visibility.
            store: Backend for persisted visibility.
            page_size: Initial rows per page; defaults to the table config.
            strict: Configuration-error policy for unknown column ids.
        """
        self.columns = columns if isinstance(columns, ColumnSet) else ColumnSet(columns, strict)
        self.storage_key = storage_key
        self._store = store if storage_key else None
        self._rows: Tuple[Any, ...] = ()
        self._sort = SortState()
        self._pagination = PaginationState(
            page_index=0,
            page_size=page_size or get_table_config().default_page_size,
        )
        self._visibility = self.columns.resolve_visibility(self._load_persisted())

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def set_rows(self, rows: Sequence[Any], reset_page: bool = True) -> None:
        """
        Replace the rows shown by the table.

        Args:
            rows: New result set.
            reset_page: Return to the first page (a new result set);
                otherwise only clamp the current index.
        """
        self._rows = tuple(rows)
        if reset_page:
            self._pagination = pagination.reset(self._pagination)
        else:
            self._pagination = pagination.clamp(self._pagination, len(self._rows))

    @property
    def rows(self) -> Tuple[Any, ...]:
        return self._rows

    @property
    def total_items(self) -> int:
        return len(self._rows)

    def sorted_rows(self) -> Tuple[Any, ...]:
        """All rows in display order (sorted if a sort is active)."""
        column = self.columns.get(self._sort.column_id) if self._sort.is_active else None
        return apply_sort(self._rows, self._sort, column)

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    @property
    def pagination(self) -> PaginationState:
        return self._pagination

    @property
    def page_index(self) -> int:
        return self._pagination.page_index

    @property
    def page_size(self) -> int:
        return self._pagination.page_size

    @property
    def total_pages(self) -> int:
        return pagination.count_pages(self.total_items, self.page_size)

    def page(self) -> Page:
        """The visible slice of the sorted rows."""
        return pagination.paginate(self.sorted_rows(), self._pagination)

    def set_page(self, page_index: int) -> None:
        self._pagination = pagination.go_to_page(self._pagination, page_index, self.total_items)
        logger.debug(f"Page set to {self._pagination.page_index}")

    def next_page(self) -> None:
        self._pagination = pagination.next_page(self._pagination, self.total_items)

    def previous_page(self) -> None:
        self._pagination = pagination.previous_page(self._pagination, self.total_items)

    def set_page_size(self, page_size: int, keep_position: bool = False) -> None:
        self._pagination = pagination.change_page_size(
            self._pagination, page_size, self.total_items, keep_position=keep_position
        )
        logger.debug(f"Page size set to {self._pagination.page_size}")

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    @property
    def sort_state(self) -> SortState:
        return self._sort

    def sort_by(self, column_id: str) -> None:
        """Header click: ascending -> descending -> unsorted."""
        column = self.columns.require(column_id)
        if column is None or not column.sortable:
            return
        self._sort = cycle_sort(self._sort, column_id)
        self._pagination = pagination.reset(self._pagination)

    def set_sort(self, column_id: Optional[str], descending: bool = False) -> None:
        """Set the sort explicitly; None clears it."""
        if column_id is None:
            self._sort = SortState()
        else:
            column = self.columns.require(column_id)
            if column is None or not column.sortable:
                return
            direction = SortDirection.DESCENDING if descending else SortDirection.ASCENDING
            self._sort = SortState(column_id, direction)
        self._pagination = pagination.reset(self._pagination)

    # ------------------------------------------------------------------
    # Column visibility
    # ------------------------------------------------------------------

    def column_visibility(self) -> Dict[str, bool]:
        """Copy of the realized column -> visible mapping."""
        return dict(self._visibility)

    def is_visible(self, column_id: str) -> bool:
        return self._visibility.get(column_id, False)

    def visible_columns(self) -> List[ColumnDef]:
        return [column for column in self.columns if self._visibility.get(column.id)]

    def hideable_columns(self) -> List[ColumnDef]:
        return [column for column in self.columns if column.hideable]

    def set_column_visible(self, column_id: str, visible: bool) -> None:
        """Show or hide one column and persist it under the storage key."""
        column = self.columns.require(column_id)
        if column is None:
            return
        if column.essential:
            logger.debug(f"Column '{column_id}' is essential and stays visible")
            return
        if self._visibility.get(column_id) == visible:
            return
        self._visibility[column_id] = visible
        self._persist(column_id, visible)

    def toggle_column(self, column_id: str) -> None:
        if column_id not in self.columns:
            self.columns.require(column_id)
            return
        self.set_column_visible(column_id, not self._visibility.get(column_id, False))

    def reset_columns(self) -> None:
        """Back to column defaults; clears only this view's persisted state."""
        self._visibility = self.columns.resolve_visibility({})
        if self._store is not None:
            try:
                self._store.clear(self.storage_key)
            except ViewStateError as e:
                logger.error(f"Could not reset view state: {e}")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _load_persisted(self) -> Dict[str, bool]:
        if self._store is None:
            return {}
        try:
            return self._store.load(self.storage_key)
        except ViewStateError as e:
            logger.error(f"Falling back to default columns: {e}")
            return {}

    def _persist(self, column_id: str, visible: bool) -> None:
        if self._store is None:
            return
        try:
            self._store.save(self.storage_key, column_id, visible)
        except ViewStateError as e:
            logger.error(f"Column visibility kept for this session only: {e}")
