"""Streamlit pages for the field operations dashboard."""

from .overview import render_overview
from .work_orders import render_work_orders
from .invoices import render_invoices
from .help_desk import render_help_desk
from .marketplace import render_marketplace
from .payments import render_payments

__all__ = [
    "render_overview",
    "render_work_orders",
    "render_invoices",
    "render_help_desk",
    "render_marketplace",
    "render_payments",
]
