"""Summary statistics and export."""

from .export import DataExporter, records_to_dataframe
from .stats import (
    InvoiceStats,
    MarketplaceStats,
    PaymentSummary,
    TicketStats,
    WorkOrderStats,
    average_budget,
    invoice_stats,
    marketplace_stats,
    outstanding_balances,
    payment_summary,
    percentage,
    round_half_up,
    ticket_stats,
    urgent_work_orders,
    win_rate,
    work_order_stats,
)

__all__ = [
    "DataExporter",
    "records_to_dataframe",
    "InvoiceStats",
    "MarketplaceStats",
    "PaymentSummary",
    "TicketStats",
    "WorkOrderStats",
    "average_budget",
    "invoice_stats",
    "marketplace_stats",
    "outstanding_balances",
    "payment_summary",
    "percentage",
    "round_half_up",
    "ticket_stats",
    "urgent_work_orders",
    "win_rate",
    "work_order_stats",
]
