"""Declarative definitions of the list screens.

Each screen names its search fields, its filter groups (option groups
and numeric ranges), its table columns and the storage key under which
column visibility is persisted. Nothing here evaluates records; the
filtering engine and the table view consume these definitions.
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.config_loader import get_filter_panel_config
from config.constants import humanize_code

from src.analysis.stats import average_budget
from src.filtering.models import FilterConfig, FilterGroup, FilterKind, FilterOption, NumericRange
from src.filtering.predicates import get_field_value
from src.tables.columns import ColumnDef, ColumnSet

# Labels that title-casing gets wrong
OPTION_LABELS = {
    "hvac": "HVAC",
    "ach": "ACH",
    "wire": "Wire Transfer",
}


def options(*values: str) -> Tuple[FilterOption, ...]:
    """Options whose labels are the humanized values."""
    return tuple(FilterOption(value, OPTION_LABELS.get(value, humanize_code(value))) for value in values)


SERVICE_CATEGORIES = options(
    "plumbing", "hvac", "electrical", "carpentry", "painting", "landscaping", "appliance", "general"
)
PRIORITIES_HIGH_FIRST = options("urgent", "high", "medium", "low")
PRIORITIES_LOW_FIRST = options("low", "medium", "high", "urgent")


@dataclass(frozen=True)
class ScreenDefinition:
    """
    Static description of one list screen.

    Attributes:
        key: Screen identifier; also the status-badge table key.
        title: Page heading.
        search_fields: Record fields consulted by the search box.
        filter_groups: Option and range groups in panel order.
        columns: Table columns in display order.
        storage_key: Persistence key for column visibility; None keeps
            visibility for the session only.
        search_placeholder: Hint shown in the search box.
        page_size: Initial rows per page; None uses the table config.
    """

    key: str
    title: str
    search_fields: Tuple[str, ...] = ()
    filter_groups: Tuple[FilterGroup, ...] = ()
    columns: Tuple[ColumnDef, ...] = ()
    storage_key: Optional[str] = None
    search_placeholder: str = "Search..."
    page_size: Optional[int] = None

    @property
    def has_search(self) -> bool:
        return bool(self.search_fields)

    def build_filter_config(self, strict: Optional[bool] = None) -> FilterConfig:
        return FilterConfig(self.filter_groups, strict=strict)

    def build_columns(self, strict: Optional[bool] = None) -> ColumnSet:
        return ColumnSet(self.columns, strict=strict)


def work_orders_screen() -> ScreenDefinition:
    return ScreenDefinition(
        key="work_orders",
        title="Work Orders",
        search_fields=("work_order_id", "property_address", "client_name", "service_description"),
        search_placeholder="Search by ID, address, client or description...",
        filter_groups=(
            FilterGroup(
                id="status",
                label="Status",
                options=options("pending", "assigned", "in-progress", "completed", "cancelled"),
            ),
            FilterGroup(id="priority", label="Priority", options=PRIORITIES_HIGH_FIRST),
            FilterGroup(
                id="service_category",
                label="Service Category",
                options=SERVICE_CATEGORIES,
                searchable=True,
            ),
        ),
        columns=(
            ColumnDef("work_order_id", "Work Order ID", essential=True),
            ColumnDef("property_address", "Property Address"),
            ColumnDef("client_name", "Client"),
            ColumnDef("service_category", "Category", default_visible=False),
            ColumnDef("status", "Status", essential=True),
            ColumnDef("priority", "Priority"),
            ColumnDef("due_date", "Due Date"),
            ColumnDef("estimated_cost", "Estimated Cost"),
            ColumnDef("assigned_vendor", "Vendor", default_visible=False),
        ),
        storage_key="work-orders-table",
    )


def invoices_screen() -> ScreenDefinition:
    return ScreenDefinition(
        key="invoices",
        title="Invoices",
        search_fields=("invoice_number", "client_name", "work_order_id"),
        search_placeholder="Search by invoice #, client or work order...",
        filter_groups=(
            FilterGroup(
                id="status",
                label="Status",
                options=options(
                    "draft", "sent", "viewed", "approved", "paid", "overdue", "disputed", "cancelled"
                ),
            ),
        ),
        columns=(
            ColumnDef("invoice_number", "Invoice #", essential=True),
            ColumnDef("work_order_id", "Work Order"),
            ColumnDef("client_name", "Client"),
            ColumnDef("issue_date", "Issue Date", default_visible=False),
            ColumnDef("due_date", "Due Date"),
            ColumnDef("total", "Amount", essential=True),
            ColumnDef("status", "Status", essential=True),
        ),
        storage_key="invoices-table",
    )


def tickets_screen() -> ScreenDefinition:
    return ScreenDefinition(
        key="tickets",
        title="Help Desk",
        search_fields=("ticket_id", "subject", "description"),
        search_placeholder="Search tickets...",
        filter_groups=(
            FilterGroup(
                id="status",
                label="Status",
                options=options("open", "in-progress", "waiting-response", "resolved", "closed"),
            ),
            FilterGroup(id="priority", label="Priority", options=PRIORITIES_LOW_FIRST),
            FilterGroup(
                id="category",
                label="Category",
                options=options("technical", "billing", "account", "feature-request", "bug", "other"),
                searchable=True,
            ),
        ),
        columns=(
            ColumnDef("ticket_id", "Ticket ID", essential=True),
            ColumnDef("subject", "Subject", essential=True),
            ColumnDef("category", "Category"),
            ColumnDef("priority", "Priority"),
            ColumnDef("status", "Status", essential=True),
            ColumnDef("created_date", "Created"),
            ColumnDef("assigned_agent", "Assigned To", default_visible=False),
        ),
        storage_key="tickets-table",
    )


def days_until_deadline(today: date) -> Callable[[object], Optional[int]]:
    """Value function: whole days from ``today`` to a project's deadline."""

    def value(project) -> Optional[int]:
        deadline = get_field_value(project, "deadline")
        if deadline is None:
            return None
        return (deadline - today).days

    return value


def projects_screen(today: Optional[date] = None, ending_soon_days: Optional[int] = None) -> ScreenDefinition:
    """
    Marketplace projects.

    Args:
        today: Reference day for the ending-soon range.
        ending_soon_days: Width of the ending-soon preset; defaults to
            the filter panel config.
    """
    today = today or date.today()
    if ending_soon_days is None:
        ending_soon_days = get_filter_panel_config().ending_soon_days

    return ScreenDefinition(
        key="projects",
        title="Marketplace Projects",
        search_fields=("project_id", "property_address", "service_category", "project_description"),
        search_placeholder="Search projects...",
        filter_groups=(
            FilterGroup(
                id="status",
                label="Status",
                options=options("open", "in-review", "awarded", "closed", "cancelled"),
            ),
            FilterGroup(
                id="service_category",
                label="Service Category",
                options=SERVICE_CATEGORIES,
                searchable=True,
            ),
            FilterGroup(
                id="budget",
                label="Budget",
                kind=FilterKind.RANGE,
                value_fn=average_budget,
                unit="$",
            ),
            FilterGroup(
                id="ending_soon",
                label="Ending Soon",
                kind=FilterKind.RANGE,
                value_fn=days_until_deadline(today),
                unit="days",
                preset=NumericRange(0, ending_soon_days),
            ),
        ),
        columns=(
            ColumnDef("project_id", "Project ID", essential=True),
            ColumnDef("property_address", "Property Address"),
            ColumnDef("service_category", "Category", default_visible=False),
            ColumnDef("average_budget", "Avg. Budget", accessor=average_budget),
            ColumnDef("budget_min", "Budget Min", default_visible=False),
            ColumnDef("budget_max", "Budget Max", default_visible=False),
            ColumnDef("deadline", "Deadline"),
            ColumnDef("number_of_bids", "Bids"),
            ColumnDef("status", "Status", essential=True),
        ),
        storage_key="projects-table",
    )


def bids_screen() -> ScreenDefinition:
    return ScreenDefinition(
        key="bids",
        title="My Bids",
        search_fields=("bid_id", "project_id"),
        search_placeholder="Search bids...",
        filter_groups=(
            FilterGroup(
                id="status",
                label="Status",
                options=options("pending", "under-review", "accepted", "rejected", "withdrawn"),
            ),
        ),
        columns=(
            ColumnDef("bid_id", "Bid ID", essential=True),
            ColumnDef("project_id", "Project ID"),
            ColumnDef("proposed_cost", "Proposed Cost"),
            ColumnDef("estimated_timeline", "Timeline", sortable=False),
            ColumnDef("submitted_date", "Submitted"),
            ColumnDef("status", "Status", essential=True),
        ),
        storage_key="bids-table",
    )


def payments_screen() -> ScreenDefinition:
    return ScreenDefinition(
        key="payments",
        title="Payments",
        search_fields=("payment_id", "invoice_number", "client_name", "reference_number"),
        search_placeholder="Search by payment ID, invoice #, client or reference...",
        filter_groups=(
            FilterGroup(
                id="status",
                label="Status",
                options=options("pending", "completed", "failed", "refunded", "cancelled"),
            ),
            FilterGroup(
                id="payment_method",
                label="Payment Method",
                options=options("check", "ach", "wire", "credit-card", "cash", "other"),
                searchable=True,
            ),
        ),
        columns=(
            ColumnDef("payment_id", "Payment ID", essential=True),
            ColumnDef("invoice_number", "Invoice #"),
            ColumnDef("client_name", "Client"),
            ColumnDef("payment_date", "Payment Date"),
            ColumnDef("amount", "Amount", essential=True),
            ColumnDef("payment_method", "Method"),
            ColumnDef("status", "Status", essential=True),
            ColumnDef("reference_number", "Reference", default_visible=False),
        ),
        storage_key="payments-table",
    )


def urgent_work_orders_screen() -> ScreenDefinition:
    """Overview table of urgent and high priority work orders."""
    return ScreenDefinition(
        key="work_orders",
        title="Urgent Work Orders",
        columns=(
            ColumnDef("work_order_id", "Work Order ID", essential=True),
            ColumnDef("property_address", "Property Address"),
            ColumnDef("priority", "Priority", essential=True),
            ColumnDef("status", "Status"),
            ColumnDef("due_date", "Due Date"),
        ),
        page_size=5,
    )


SCREEN_FACTORIES: Dict[str, Callable[..., ScreenDefinition]] = {
    "work_orders": work_orders_screen,
    "invoices": invoices_screen,
    "tickets": tickets_screen,
    "projects": projects_screen,
    "bids": bids_screen,
    "payments": payments_screen,
}


def get_screen(key: str, today: Optional[date] = None) -> ScreenDefinition:
    """
    Look up a screen definition by key.

    Raises:
        KeyError: If no screen is registered under key.
    """
    if key not in SCREEN_FACTORIES:
        raise KeyError(f"Unknown screen '{key}'")
    if key == "projects":
        return projects_screen(today)
    return SCREEN_FACTORIES[key]()


def list_screens() -> List[str]:
    return list(SCREEN_FACTORIES.keys())
