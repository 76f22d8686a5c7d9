"""Payments page."""

import streamlit as st

from app.components import badge_html, format_currency, format_date, render_stat_cards
from app.pages.list_screen import render_list_screen
from app.state import get_controller, get_data
from src.analysis import outstanding_balances, payment_summary


def render_payments():
    """Render the payments page."""
    controller = get_controller("payments")
    data = get_data()
    summary = payment_summary(controller.source, data.invoices, data.today)

    render_stat_cards([
        ("Total Received", format_currency(summary.total_received), "Completed payments"),
        ("Pending", format_currency(summary.pending_payments), None),
        ("Outstanding Invoices", format_currency(summary.outstanding_invoices), "Not paid and not cancelled"),
        ("This Month", format_currency(summary.this_month), "Completed payments this month"),
    ])

    st.divider()

    main_col, side_col = st.columns([3, 1])
    with main_col:
        render_list_screen(controller)
    with side_col:
        render_outstanding_balances(data.invoices)


def render_outstanding_balances(invoices):
    """Unpaid invoices, overdue first."""
    st.subheader("Outstanding Balances")
    balances = outstanding_balances(invoices)
    if not balances:
        st.caption("No outstanding balances")
        return
    for invoice in balances:
        st.markdown(
            f"**{invoice.invoice_number}** · {invoice.client_name}<br>"
            f"{format_currency(invoice.total)} · Due {format_date(invoice.due_date)} "
            f"{badge_html('invoices', invoice.status)}",
            unsafe_allow_html=True,
        )
