"""Streamlit session state for the dashboard.

Screen controllers live in session state so that every widget on every
rerun talks to the same owned state. The view state store is created
once per session; the memory backend keeps its data in session state
too.
"""

from datetime import date
from pathlib import Path
import sys

import streamlit as st

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger
from src.data import SampleDataSet, load_sample_data
from src.screens import ScreenController, get_screen, urgent_work_orders_screen
from src.analysis import urgent_work_orders
from src.tables import ViewStateError, ViewStateStore, create_view_state_store

logger = get_logger("app")

_DATA_KEY = "_sample_data"
_VIEW_STATE_KEY = "_view_state_store"
_VIEW_STATE_BACKING_KEY = "_view_state_backing"
_CONTROLLER_PREFIX = "_controller_"

FILTER_LAYOUTS = ["Sidebar", "Drawer", "Slide-in panel"]


def get_data() -> SampleDataSet:
    """Sample records for today, generated once per session."""
    if _DATA_KEY not in st.session_state:
        st.session_state[_DATA_KEY] = load_sample_data(date.today())
    return st.session_state[_DATA_KEY]


def get_view_state_store() -> ViewStateStore:
    """The configured column-visibility store for this session."""
    if _VIEW_STATE_KEY not in st.session_state:
        backing = st.session_state.setdefault(_VIEW_STATE_BACKING_KEY, {})
        try:
            store = create_view_state_store(config.view_state.backend, backing=backing)
        except ViewStateError as e:
            logger.error(f"Persistent view state unavailable, using memory: {e}")
            store = create_view_state_store("memory", backing=backing)
        st.session_state[_VIEW_STATE_KEY] = store
    return st.session_state[_VIEW_STATE_KEY]


def _records_for(screen_key: str, data: SampleDataSet):
    return {
        "work_orders": data.work_orders,
        "invoices": data.invoices,
        "tickets": data.tickets,
        "projects": data.projects,
        "bids": data.bids,
        "payments": data.payments,
    }[screen_key]


def get_controller(screen_key: str) -> ScreenController:
    """The session's controller for a list screen."""
    state_key = f"{_CONTROLLER_PREFIX}{screen_key}"
    if state_key not in st.session_state:
        data = get_data()
        st.session_state[state_key] = ScreenController(
            get_screen(screen_key, today=data.today),
            _records_for(screen_key, data),
            view_state_store=get_view_state_store(),
        )
    return st.session_state[state_key]


def get_urgent_controller() -> ScreenController:
    """Controller for the overview's urgent work order table."""
    state_key = f"{_CONTROLLER_PREFIX}urgent"
    if state_key not in st.session_state:
        data = get_data()
        st.session_state[state_key] = ScreenController(
            urgent_work_orders_screen(),
            urgent_work_orders(data.work_orders),
        )
    return st.session_state[state_key]


def get_filter_layout() -> str:
    return st.session_state.get("filter_layout", FILTER_LAYOUTS[0])
