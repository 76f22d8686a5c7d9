"""Marketplace page: open projects and my bids."""

import streamlit as st

from app.components import format_currency, render_stat_cards
from app.pages.list_screen import render_list_screen
from app.state import get_controller
from src.analysis import marketplace_stats


def render_marketplace():
    """Render the marketplace page."""
    projects = get_controller("projects")
    bids = get_controller("bids")
    stats = marketplace_stats(projects.source, bids.source)

    render_stat_cards([
        ("Available Projects", f"{stats.available_projects}", "Projects open for bidding"),
        ("My Bids", f"{stats.my_bids}", None),
        ("Won Bids", f"{stats.won_bids}", None),
        ("Win Rate", f"{stats.win_rate}%", "Accepted bids out of all bids"),
        ("Total Opportunity", format_currency(stats.total_opportunity), "Average budgets of open projects"),
    ])

    st.divider()

    projects_tab, bids_tab = st.tabs(["Projects", "My Bids"])
    with projects_tab:
        render_list_screen(projects)
    with bids_tab:
        # Keep the sidebar for the projects panel
        render_list_screen(bids, layout="Drawer")
