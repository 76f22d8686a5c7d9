"""Display formatting for table cells and badges.

Formatting is presentation only; the filtering engine never sees
these strings.
"""

from datetime import date, datetime
from typing import Any, List, Sequence

import pandas as pd

from config.config_loader import get_table_config
from config.constants import get_badge_color, resolve_priority_badge, resolve_status_badge
from src.tables import ColumnDef

CURRENCY_COLUMNS = {
    "estimated_cost",
    "total",
    "amount",
    "proposed_cost",
    "average_budget",
    "budget_min",
    "budget_max",
}


def format_currency(value: Any) -> str:
    if value is None:
        return get_table_config().null_display
    return f"${value:,.2f}"


def format_date(value: Any) -> str:
    if value is None:
        return get_table_config().null_display
    if isinstance(value, (date, datetime)):
        return value.strftime(get_table_config().date_format)
    return str(value)


def format_cell(screen_key: str, column: ColumnDef, value: Any) -> str:
    """Render one cell value for display."""
    if column.id == "status":
        return resolve_status_badge(screen_key, value).label
    if column.id == "priority":
        return resolve_priority_badge(value).label
    if column.id in CURRENCY_COLUMNS:
        return format_currency(value)
    if isinstance(value, (date, datetime)):
        return format_date(value)
    if value is None or value == "":
        return get_table_config().null_display
    return str(value)


def to_display_dataframe(
    screen_key: str,
    rows: Sequence[Any],
    columns: Sequence[ColumnDef],
) -> pd.DataFrame:
    """Build the formatted DataFrame shown for a page of rows."""
    data: List[List[str]] = [
        [format_cell(screen_key, column, column.value(row)) for column in columns]
        for row in rows
    ]
    return pd.DataFrame(data, columns=[column.header for column in columns])


def badge_html(screen_key: str, status: Any) -> str:
    """Coloured pill for a status value."""
    badge = resolve_status_badge(screen_key, status)
    color = get_badge_color(badge.kind)
    return (
        f"<span style='background-color: {color}; color: white; padding: 2px 8px; "
        f"border-radius: 10px; font-size: 0.8em;'>{badge.label}</span>"
    )
