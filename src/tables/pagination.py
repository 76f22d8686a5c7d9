"""Client-side pagination for in-memory result sets.

Page indexes are 0-based. Every update function returns a new
PaginationState and clamps the index so it never points past the last
page.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.config_loader import get_table_config
from config.logging_config import get_logger

logger = get_logger("pagination")


@dataclass(frozen=True)
class PaginationState:
    """Current page index and page size."""

    page_index: int = 0
    page_size: int = 10

    def __post_init__(self):
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.page_index < 0:
            raise ValueError(f"page_index must be >= 0, got {self.page_index}")

    @classmethod
    def default(cls) -> "PaginationState":
        """State using the configured default page size."""
        return cls(page_index=0, page_size=get_table_config().default_page_size)


def count_pages(total_items: int, page_size: int) -> int:
    """ceil(total_items / page_size); zero items means zero pages."""
    if total_items <= 0:
        return 0
    return (total_items + page_size - 1) // page_size


def clamp_page_index(page_index: int, total_pages: int) -> int:
    """Clamp into [0, total_pages - 1], or 0 when there are no pages."""
    if total_pages <= 0:
        return 0
    return max(0, min(page_index, total_pages - 1))


def clamp(state: PaginationState, total_items: int) -> PaginationState:
    """Heal a stale page index after the result set shrank."""
    page_index = clamp_page_index(state.page_index, count_pages(total_items, state.page_size))
    if page_index == state.page_index:
        return state
    logger.debug(f"Clamped page index {state.page_index} -> {page_index}")
    return replace(state, page_index=page_index)


def reset(state: PaginationState) -> PaginationState:
    """Back to the first page, keeping the page size."""
    if state.page_index == 0:
        return state
    return replace(state, page_index=0)


def go_to_page(state: PaginationState, page_index: int, total_items: int) -> PaginationState:
    """Move to a page, clamped to the available range."""
    total_pages = count_pages(total_items, state.page_size)
    return replace(state, page_index=clamp_page_index(page_index, total_pages))


def next_page(state: PaginationState, total_items: int) -> PaginationState:
    return go_to_page(state, state.page_index + 1, total_items)


def previous_page(state: PaginationState, total_items: int) -> PaginationState:
    return go_to_page(state, state.page_index - 1, total_items)


def change_page_size(
    state: PaginationState,
    page_size: int,
    total_items: int,
    keep_position: bool = False,
    max_page_size: Optional[int] = None,
) -> PaginationState:
    """
    Change the page size.

    Args:
        state: Current state.
        page_size: Requested rows per page; must be positive.
        total_items: Length of the current result set.
        keep_position: Keep the current index (clamped) instead of
            returning to the first page.
        max_page_size: Upper bound; defaults to the table config.

    Returns:
        New PaginationState whose index is valid for the new page count.

    Raises:
        ValueError: If page_size is not positive.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    limit = max_page_size if max_page_size is not None else get_table_config().max_page_size
    page_size = min(page_size, limit)

    page_index = state.page_index if keep_position else 0
    total_pages = count_pages(total_items, page_size)
    return PaginationState(
        page_index=clamp_page_index(page_index, total_pages),
        page_size=page_size,
    )


@dataclass(frozen=True)
class Page:
    """One visible slice of a result set."""

    rows: Tuple[Any, ...]
    page_index: int
    page_size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return count_pages(self.total_items, self.page_size)

    @property
    def offset(self) -> int:
        return self.page_index * self.page_size

    @property
    def has_previous(self) -> bool:
        return self.page_index > 0

    @property
    def has_next(self) -> bool:
        return self.page_index < self.total_pages - 1

    @property
    def start_row(self) -> int:
        """1-based number of the first visible row, 0 when empty."""
        if not self.rows:
            return 0
        return self.offset + 1

    @property
    def end_row(self) -> int:
        """1-based number of the last visible row, 0 when empty."""
        if not self.rows:
            return 0
        return self.offset + len(self.rows)

    def display_range(self) -> str:
        """Get formatted display range string."""
        if self.total_items == 0:
            return "No results"
        return f"Showing {self.start_row:,} - {self.end_row:,} of {self.total_items:,}"


def paginate(items: Sequence[Any], state: PaginationState) -> Page:
    """
    Slice the visible page out of a result set.

    The slice is items[page_index * page_size : (page_index + 1) * page_size];
    a stale index is clamped first so the slice is never past the end.
    """
    state = clamp(state, len(items))
    start = state.page_index * state.page_size
    end = min(len(items), start + state.page_size)
    return Page(
        rows=tuple(items[start:end]),
        page_index=state.page_index,
        page_size=state.page_size,
        total_items=len(items),
    )
