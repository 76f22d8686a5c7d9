"""Help desk page."""

import streamlit as st

from app.components import render_stat_cards
from app.pages.list_screen import render_list_screen
from app.state import get_controller
from src.analysis import ticket_stats


def render_help_desk():
    """Render the help desk page."""
    controller = get_controller("tickets")
    stats = ticket_stats(controller.source)

    render_stat_cards([
        ("Open Tickets", f"{stats.open}", None),
        ("In Progress", f"{stats.in_progress}", None),
        ("Resolved", f"{stats.resolved}", "Resolved and closed tickets"),
    ])

    st.divider()
    render_list_screen(controller)
