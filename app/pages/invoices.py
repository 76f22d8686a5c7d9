"""Invoices page."""

import streamlit as st

from app.components import format_currency, render_stat_cards
from app.pages.list_screen import render_list_screen
from app.state import get_controller
from src.analysis import invoice_stats


def render_invoices():
    """Render the invoices page."""
    controller = get_controller("invoices")
    stats = invoice_stats(controller.source)

    render_stat_cards([
        ("Total Invoices", f"{stats.total}", None),
        ("Paid", format_currency(stats.paid_amount), f"{stats.paid} invoices"),
        ("Pending", format_currency(stats.pending_amount), f"{stats.pending} sent, viewed or approved"),
        ("Overdue", format_currency(stats.overdue_amount), f"{stats.overdue} invoices"),
    ])

    st.divider()
    render_list_screen(controller)
