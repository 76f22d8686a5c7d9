"""
Field Operations Dashboard - Main Streamlit Application

Run with: streamlit run app/main.py
"""

import streamlit as st
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import default_log_file, setup_logging

from app.state import FILTER_LAYOUTS, get_view_state_store
from app.pages.overview import render_overview
from app.pages.work_orders import render_work_orders
from app.pages.invoices import render_invoices
from app.pages.help_desk import render_help_desk
from app.pages.marketplace import render_marketplace
from app.pages.payments import render_payments

PAGES = {
    "Overview": render_overview,
    "Work Orders": render_work_orders,
    "Invoices": render_invoices,
    "Help Desk": render_help_desk,
    "Marketplace": render_marketplace,
    "Payments": render_payments,
}


def main():
    """Main application entry point."""
    setup_logging(
        config.app.log_level,
        log_file=default_log_file() if config.app.log_to_file else None,
    )

    # Page configuration
    st.set_page_config(
        page_title=config.app.name,
        page_icon="🛠️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Sidebar
    with st.sidebar:
        st.title(f"🛠️ {config.app.name}")
        st.caption(f"v{config.app.version}")

        st.divider()

        # Navigation
        st.subheader("Navigation")
        page = st.radio(
            "Go to",
            options=list(PAGES.keys()),
            label_visibility="collapsed",
        )

        st.subheader("Filter Panel")
        st.selectbox(
            "Filter panel",
            options=FILTER_LAYOUTS,
            key="filter_layout",
            label_visibility="collapsed",
            help="Where list screens show their filters",
        )

        st.divider()

        # View state status
        get_view_state_store()
        if config.view_state.is_persistent:
            st.caption(f"Column layout saved to {config.view_state.db_path.name}")
        else:
            st.caption("Column layout kept for this session")

        st.divider()

    # Main content area
    st.title(page)
    PAGES[page]()


if __name__ == "__main__":
    main()
