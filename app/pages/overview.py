"""Overview page: headline numbers across every screen."""

from collections import Counter

import pandas as pd
import plotly.express as px
import streamlit as st

from app.components import format_currency, render_data_table, render_stat_cards
from app.state import get_data, get_urgent_controller
from config.constants import get_badge_color, resolve_status_badge
from src.analysis import invoice_stats, marketplace_stats, payment_summary, ticket_stats, work_order_stats


def render_overview():
    """Render the overview page."""
    data = get_data()
    wo_stats = work_order_stats(data.work_orders, data.today)
    inv_stats = invoice_stats(data.invoices)
    tk_stats = ticket_stats(data.tickets)
    mk_stats = marketplace_stats(data.projects, data.bids)
    pay_summary = payment_summary(data.payments, data.invoices, data.today)

    render_stat_cards([
        ("Active Work Orders", f"{wo_stats.pending + wo_stats.in_progress}", "Pending, assigned and in progress"),
        ("Overdue Work Orders", f"{wo_stats.overdue}", None),
        ("Outstanding", format_currency(pay_summary.outstanding_invoices), "Unpaid invoice total"),
        ("Open Tickets", f"{tk_stats.open}", None),
        ("Win Rate", f"{mk_stats.win_rate}%", "Accepted bids out of all bids"),
    ])

    st.divider()

    col1, col2 = st.columns(2)
    with col1:
        render_work_order_status_chart(data.work_orders)
    with col2:
        render_invoice_amount_chart(inv_stats)

    st.divider()

    st.subheader("Urgent Work Orders")
    render_data_table(get_urgent_controller(), show_toolbar=False)


def render_work_order_status_chart(work_orders):
    """Bar chart of work orders per status."""
    counts = Counter(wo.status for wo in work_orders)
    if not counts:
        st.info("No work orders")
        return

    badges = {status: resolve_status_badge("work_orders", status) for status in counts}
    df = pd.DataFrame(
        [{"Status": badges[s].label, "Count": n, "Kind": badges[s].kind} for s, n in counts.items()]
    )
    fig = px.bar(
        df,
        x="Status",
        y="Count",
        color="Kind",
        color_discrete_map={kind: get_badge_color(kind) for kind in df["Kind"].unique()},
        title="Work Orders by Status",
    )
    fig.update_layout(showlegend=False, height=350)
    st.plotly_chart(fig, use_container_width=True)


def render_invoice_amount_chart(stats):
    """Pie chart of invoice amounts per bucket."""
    df = pd.DataFrame([
        {"Bucket": "Paid", "Amount": stats.paid_amount},
        {"Bucket": "Pending", "Amount": stats.pending_amount},
        {"Bucket": "Overdue", "Amount": stats.overdue_amount},
    ])
    if df["Amount"].sum() == 0:
        st.info("No invoice amounts")
        return

    fig = px.pie(
        df,
        names="Bucket",
        values="Amount",
        color="Bucket",
        color_discrete_map={
            "Paid": get_badge_color("success"),
            "Pending": get_badge_color("info"),
            "Overdue": get_badge_color("error"),
        },
        title="Invoice Amounts",
    )
    fig.update_layout(height=350)
    st.plotly_chart(fig, use_container_width=True)
