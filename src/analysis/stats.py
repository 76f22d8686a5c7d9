"""Summary counters for the list screens.

Every function here reads the unfiltered source collection. Stats
describe the whole data set, so they change when the source changes
and never when only search or filter state does.
"""

import math
from dataclasses import asdict, dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.logging_config import get_logger
from src.filtering.predicates import get_field_value

logger = get_logger("stats")

PENDING_WORK_ORDER_STATUSES = ("pending", "assigned")
PENDING_INVOICE_STATUSES = ("sent", "viewed", "approved")
RESOLVED_TICKET_STATUSES = ("resolved", "closed")
CLOSED_INVOICE_STATUSES = ("paid", "cancelled")
URGENT_PRIORITIES = ("urgent", "high")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def percentage(part: float, whole: float) -> int:
    """
    Integer percentage of part in whole.

    Args:
        part: Numerator.
        whole: Denominator.

    Returns:
        round(part / whole * 100), with 0 when whole is 0.
    """
    if not whole:
        return 0
    return round_half_up(part / whole * 100)


def win_rate(won: int, total: int) -> int:
    """Won bids as an integer percent of all bids; 0 of 0 is 0."""
    return percentage(won, total)


def _count(records: Iterable[Any], field: str, values: Sequence[str]) -> int:
    return sum(1 for record in records if get_field_value(record, field) in values)


def _total(records: Iterable[Any], field: str, amount_field: str, values: Sequence[str]) -> float:
    return sum(
        get_field_value(record, amount_field) or 0
        for record in records
        if get_field_value(record, field) in values
    )


@dataclass
class WorkOrderStats:
    """Work order status buckets."""

    pending: int
    in_progress: int
    completed: int
    overdue: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def work_order_stats(work_orders: Sequence[Any], today: Optional[date] = None) -> WorkOrderStats:
    """
    Count work orders per status bucket.

    Pending includes assigned orders. Overdue counts orders that are
    not completed and whose due date lies before ``today``.
    """
    today = today or date.today()
    overdue = 0
    for record in work_orders:
        if get_field_value(record, "status") == "completed":
            continue
        due = get_field_value(record, "due_date")
        if due is not None and due < today:
            overdue += 1

    return WorkOrderStats(
        pending=_count(work_orders, "status", PENDING_WORK_ORDER_STATUSES),
        in_progress=_count(work_orders, "status", ("in-progress",)),
        completed=_count(work_orders, "status", ("completed",)),
        overdue=overdue,
    )


@dataclass
class InvoiceStats:
    """Invoice counts and amounts per status bucket."""

    total: int
    paid: int
    pending: int
    overdue: int
    paid_amount: float
    pending_amount: float
    overdue_amount: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def invoice_stats(invoices: Sequence[Any]) -> InvoiceStats:
    """Counts and totals for paid, pending (sent/viewed/approved) and overdue invoices."""
    return InvoiceStats(
        total=len(invoices),
        paid=_count(invoices, "status", ("paid",)),
        pending=_count(invoices, "status", PENDING_INVOICE_STATUSES),
        overdue=_count(invoices, "status", ("overdue",)),
        paid_amount=_total(invoices, "status", "total", ("paid",)),
        pending_amount=_total(invoices, "status", "total", PENDING_INVOICE_STATUSES),
        overdue_amount=_total(invoices, "status", "total", ("overdue",)),
    )


@dataclass
class TicketStats:
    """Support ticket status buckets."""

    open: int
    in_progress: int
    resolved: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def ticket_stats(tickets: Sequence[Any]) -> TicketStats:
    return TicketStats(
        open=_count(tickets, "status", ("open",)),
        in_progress=_count(tickets, "status", ("in-progress",)),
        resolved=_count(tickets, "status", RESOLVED_TICKET_STATUSES),
    )


@dataclass
class PaymentSummary:
    """Money received, pending and still owed."""

    total_received: float
    pending_payments: float
    outstanding_invoices: float
    this_month: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _is_outstanding(invoice: Any) -> bool:
    return get_field_value(invoice, "status") not in CLOSED_INVOICE_STATUSES


def payment_summary(
    payments: Sequence[Any],
    invoices: Sequence[Any],
    today: Optional[date] = None,
) -> PaymentSummary:
    """
    Summarize payments against the invoice book.

    Args:
        payments: All payments.
        invoices: All invoices.
        today: Reference day for "this month".

    Returns:
        PaymentSummary with completed, pending, outstanding and
        month-to-date totals.
    """
    today = today or date.today()
    this_month = 0.0
    for payment in payments:
        if get_field_value(payment, "status") != "completed":
            continue
        paid_on = get_field_value(payment, "payment_date")
        if paid_on is not None and (paid_on.year, paid_on.month) == (today.year, today.month):
            this_month += get_field_value(payment, "amount") or 0

    return PaymentSummary(
        total_received=_total(payments, "status", "amount", ("completed",)),
        pending_payments=_total(payments, "status", "amount", ("pending",)),
        outstanding_invoices=sum(
            get_field_value(invoice, "total") or 0 for invoice in invoices if _is_outstanding(invoice)
        ),
        this_month=this_month,
    )


def outstanding_balances(invoices: Sequence[Any], limit: int = 5) -> List[Any]:
    """
    Unpaid, non-cancelled invoices to follow up on.

    Overdue invoices come first, then the latest due date first.
    """
    outstanding = [invoice for invoice in invoices if _is_outstanding(invoice)]
    # Two stable passes: due date descending, then overdue first
    outstanding.sort(key=lambda inv: get_field_value(inv, "due_date") or date.min, reverse=True)
    outstanding.sort(key=lambda inv: get_field_value(inv, "status") != "overdue")
    return outstanding[:limit]


@dataclass
class MarketplaceStats:
    """Bidding activity and open opportunity."""

    available_projects: int
    my_bids: int
    won_bids: int
    win_rate: int
    total_opportunity: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def average_budget(project: Any) -> Optional[float]:
    """Midpoint of a project's budget range."""
    budget_min = get_field_value(project, "budget_min")
    budget_max = get_field_value(project, "budget_max")
    if budget_min is None or budget_max is None:
        return None
    return (budget_min + budget_max) / 2


def marketplace_stats(projects: Sequence[Any], bids: Sequence[Any]) -> MarketplaceStats:
    """Open projects, bid counts, win rate and the open budget pool."""
    open_projects = [p for p in projects if get_field_value(p, "status") == "open"]
    won = _count(bids, "status", ("accepted",))
    stats = MarketplaceStats(
        available_projects=len(open_projects),
        my_bids=len(bids),
        won_bids=won,
        win_rate=win_rate(won, len(bids)),
        total_opportunity=sum(average_budget(p) or 0 for p in open_projects),
    )
    logger.debug(f"Marketplace stats: {stats}")
    return stats


def urgent_work_orders(work_orders: Sequence[Any]) -> List[Any]:
    """Work orders with urgent or high priority, in source order."""
    return [wo for wo in work_orders if get_field_value(wo, "priority") in URGENT_PRIORITIES]
