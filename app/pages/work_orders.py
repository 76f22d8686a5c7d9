"""Work orders page."""

import streamlit as st

from app.components import render_stat_cards
from app.pages.list_screen import render_list_screen
from app.state import get_controller, get_data
from src.analysis import work_order_stats


def render_work_orders():
    """Render the work orders page."""
    controller = get_controller("work_orders")
    stats = work_order_stats(controller.source, get_data().today)

    render_stat_cards([
        ("Pending", f"{stats.pending}", "Pending and assigned work orders"),
        ("In Progress", f"{stats.in_progress}", None),
        ("Completed", f"{stats.completed}", None),
        ("Overdue", f"{stats.overdue}", "Not completed and past the due date"),
    ])

    st.divider()
    render_list_screen(controller)
