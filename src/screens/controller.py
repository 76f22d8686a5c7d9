"""Screen-level controller.

One controller per list screen owns the filter state store and the
table view. Presentation surfaces (sidebar, mobile drawer, slide-in
panel, active filter bar, table) read from it and report user input
through the ``on_*`` callbacks; none of them keeps state of its own.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.config_loader import get_empty_state_config
from config.logging_config import get_logger

from src.filtering.models import ActiveFilter
from src.filtering.results import EmptyState, ResultSummary, build_result_set, summarize
from src.filtering.state import FilterStateStore
from src.tables.columns import ColumnDef
from src.tables.pagination import Page
from src.tables.persistence import ViewStateStore
from src.tables.view import TableView

from .definitions import ScreenDefinition

logger = get_logger("screens")

BUDGET_RANGE_ID = "budget"


class ScreenController:
    """
    Owns all engine state for one screen.

    Every effective filter or search change recomputes the result set
    and returns the table to its first page. Page, page-size, sort and
    column changes only touch the table view.
    """

    def __init__(
        self,
        definition: ScreenDefinition,
        records: Sequence[Any] = (),
        view_state_store: Optional[ViewStateStore] = None,
        strict: Optional[bool] = None,
    ):
        """
        Initialize the controller.

        Args:
            definition: The screen's static definition.
            records: Unfiltered source collection.
            view_state_store: Backend for persisted column visibility.
            strict: Configuration-error policy override.
        """
        self.definition = definition
        self.filter_config = definition.build_filter_config(strict)
        self.store = FilterStateStore(self.filter_config, strict=strict)
        self.table = TableView(
            definition.build_columns(strict),
            storage_key=definition.storage_key,
            store=view_state_store,
            page_size=definition.page_size,
            strict=strict,
        )
        self._source: Tuple[Any, ...] = tuple(records)
        self._result_set: Tuple[Any, ...] = ()
        self._recompute()
        self._unsubscribe = self.store.subscribe(lambda _store: self._recompute())

    # ------------------------------------------------------------------
    # Outbound state
    # ------------------------------------------------------------------

    @property
    def key(self) -> str:
        return self.definition.key

    @property
    def source(self) -> Tuple[Any, ...]:
        return self._source

    @property
    def result_set(self) -> Tuple[Any, ...]:
        return self._result_set

    @property
    def result_count(self) -> int:
        return len(self._result_set)

    @property
    def total_count(self) -> int:
        return len(self._source)

    @property
    def summary(self) -> ResultSummary:
        return summarize(self._result_set, self._source, self.store)

    @property
    def empty_state(self) -> EmptyState:
        return self.summary.empty_state

    def empty_state_message(self) -> Optional[Dict[str, str]]:
        """Title and description for the current empty state, if any."""
        state = self.empty_state
        if state == EmptyState.NONE:
            return None
        return get_empty_state_config().get_message(state.value)

    @property
    def active_filters(self) -> List[ActiveFilter]:
        return self.store.active_filters()

    @property
    def active_filter_count(self) -> int:
        return self.store.active_filter_count()

    @property
    def search(self) -> str:
        return self.store.search

    def filter_values(self) -> Mapping[str, Any]:
        return self.store.filter_values()

    def filter_summary(self) -> str:
        return self.store.summary()

    def current_page(self) -> Page:
        return self.table.page()

    def visible_columns(self) -> List[ColumnDef]:
        return self.table.visible_columns()

    def export_rows(self) -> Tuple[Any, ...]:
        """The whole result set in display order, across all pages."""
        return self.table.sorted_rows()

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------

    def on_filter_change(self, values: Mapping[str, Any]) -> None:
        """A surface submitted a complete new FilterValueMap."""
        self.store.replace_filter_values(values)

    def on_filter_toggle(self, group_id: str, value: Optional[str]) -> None:
        """A single option was clicked."""
        self.store.set_filter_value(group_id, value)

    def on_search_change(self, query: Optional[str]) -> None:
        self.store.set_search(query)

    def on_budget_range_change(self, minimum: Optional[float], maximum: Optional[float]) -> None:
        self.store.set_range(BUDGET_RANGE_ID, minimum, maximum)

    def on_range_change(
        self,
        group_id: str,
        minimum: Optional[float],
        maximum: Optional[float],
    ) -> None:
        self.store.set_range(group_id, minimum, maximum)

    def on_range_preset_toggle(self, group_id: str) -> None:
        self.store.toggle_range_preset(group_id)

    def on_page_change(self, page_index: int) -> None:
        self.table.set_page(page_index)

    def on_next_page(self) -> None:
        self.table.next_page()

    def on_previous_page(self) -> None:
        self.table.previous_page()

    def on_items_per_page_change(self, page_size: int) -> None:
        self.table.set_page_size(page_size)

    def on_sort_change(self, column_id: str) -> None:
        self.table.sort_by(column_id)

    def on_column_toggle(self, column_id: str) -> None:
        self.table.toggle_column(column_id)

    def on_column_visibility_change(self, column_id: str, visible: bool) -> None:
        self.table.set_column_visible(column_id, visible)

    def on_reset_columns(self) -> None:
        self.table.reset_columns()

    def on_remove_filter(self, group_id: str, value: str) -> None:
        self.store.remove_active_filter(group_id, value)

    def on_clear_all(self) -> None:
        self.store.clear_all()

    # ------------------------------------------------------------------
    # Source data
    # ------------------------------------------------------------------

    def set_source(self, records: Sequence[Any]) -> None:
        """Replace the source collection and recompute."""
        self._source = tuple(records)
        logger.debug(f"Screen '{self.key}' source replaced ({len(self._source)} records)")
        self._recompute()

    def close(self) -> None:
        """Stop listening to the store."""
        self._unsubscribe()

    def _recompute(self) -> None:
        self._result_set = build_result_set(
            self._source,
            self.filter_config,
            self.store,
            self.definition.search_fields,
        )
        self.table.set_rows(self._result_set, reset_page=True)
        logger.debug(
            f"Screen '{self.key}': {len(self._result_set)} of {len(self._source)} records"
        )
