"""Reusable UI components for the field operations dashboard."""

from .active_filters import render_active_filters
from .data_table import render_data_table, render_pagination_controls
from .display import badge_html, format_currency, format_date, to_display_dataframe
from .filter_panel import (
    render_filter_drawer,
    render_filter_panel,
    render_filter_sidebar,
    render_filter_slide_in,
    render_filters,
)
from .stat_cards import render_stat_cards

__all__ = [
    "render_active_filters",
    "render_data_table",
    "render_pagination_controls",
    "badge_html",
    "format_currency",
    "format_date",
    "to_display_dataframe",
    "render_filter_drawer",
    "render_filter_panel",
    "render_filter_sidebar",
    "render_filter_slide_in",
    "render_filters",
    "render_stat_cards",
]
