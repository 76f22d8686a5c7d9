"""Shared layout of a filterable list screen."""

from typing import Optional

from app.components import render_active_filters, render_data_table, render_filters
from app.state import get_filter_layout
from src.screens import ScreenController


def render_list_screen(controller: ScreenController, layout: Optional[str] = None) -> None:
    """Filter surface, active filter bar and table for one controller."""
    render_filters(controller, layout or get_filter_layout())
    render_active_filters(controller)
    render_data_table(controller)
