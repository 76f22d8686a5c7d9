"""List screen definitions and controllers."""

from .controller import BUDGET_RANGE_ID, ScreenController
from .definitions import (
    SCREEN_FACTORIES,
    ScreenDefinition,
    bids_screen,
    days_until_deadline,
    get_screen,
    invoices_screen,
    list_screens,
    options,
    payments_screen,
    projects_screen,
    tickets_screen,
    urgent_work_orders_screen,
    work_orders_screen,
)

__all__ = [
    "BUDGET_RANGE_ID",
    "ScreenController",
    "SCREEN_FACTORIES",
    "ScreenDefinition",
    "bids_screen",
    "days_until_deadline",
    "get_screen",
    "invoices_screen",
    "list_screens",
    "options",
    "payments_screen",
    "projects_screen",
    "tickets_screen",
    "urgent_work_orders_screen",
    "work_orders_screen",
]
