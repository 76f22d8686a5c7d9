"""Record types and bundled sample data."""

from .models import Bid, Invoice, MarketplaceProject, Payment, SupportTicket, WorkOrder
from .sample_data import (
    SampleDataSet,
    load_sample_data,
    sample_bids,
    sample_invoices,
    sample_payments,
    sample_projects,
    sample_tickets,
    sample_work_orders,
)

__all__ = [
    "Bid",
    "Invoice",
    "MarketplaceProject",
    "Payment",
    "SupportTicket",
    "WorkOrder",
    "SampleDataSet",
    "load_sample_data",
    "sample_bids",
    "sample_invoices",
    "sample_payments",
    "sample_projects",
    "sample_tickets",
    "sample_work_orders",
]
