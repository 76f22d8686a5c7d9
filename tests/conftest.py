"""Pytest configuration and fixtures for Field Operations Dashboard tests."""

import sys
from datetime import date
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

REFERENCE_DATE = date(2024, 6, 15)


@pytest.fixture
def today():
    """Fixed reference day for date-relative records and stats."""
    return REFERENCE_DATE


@pytest.fixture
def status_records():
    """Five records: two open, three closed, in a fixed order."""
    return [
        {"id": "ABC-100", "status": "open", "name": "Roof repair"},
        {"id": "ABC-101", "status": "closed", "name": "Gutter cleaning"},
        {"id": "XYZ-200", "status": "open", "name": "Window reseal"},
        {"id": "XYZ-201", "status": "closed", "name": "Fence paint"},
        {"id": "QRS-300", "status": "closed", "name": "Boiler service"},
    ]


@pytest.fixture
def status_filter_config():
    """A status checkbox group and a radio priority group."""
    from src.filtering import FilterConfig, FilterGroup, FilterKind, FilterOption

    return FilterConfig(
        [
            FilterGroup(
                id="status",
                label="Status",
                options=(FilterOption("open", "Open"), FilterOption("closed", "Closed")),
            ),
            FilterGroup(
                id="priority",
                label="Priority",
                kind=FilterKind.RADIO,
                options=(FilterOption("high", "High"), FilterOption("low", "Low")),
            ),
        ],
        strict=True,
    )


@pytest.fixture
def budget_filter_config():
    """A single range group over a record's average budget."""
    from src.filtering import FilterConfig, FilterGroup, FilterKind

    return FilterConfig(
        [
            FilterGroup(
                id="budget",
                label="Budget",
                kind=FilterKind.RANGE,
                value_fn=lambda r: r["average_budget"],
                unit="$",
            )
        ],
        strict=True,
    )


@pytest.fixture
def sample_data(today):
    """All bundled sample collections for the reference day."""
    from src.data import load_sample_data

    return load_sample_data(today)


@pytest.fixture
def view_state_db(tmp_path):
    """Path for a temporary view state database."""
    return tmp_path / "view_state.duckdb"


@pytest.fixture
def memory_view_state():
    """In-memory view state store over an inspectable dict."""
    from src.tables import InMemoryViewStateStore

    backing = {}
    return InMemoryViewStateStore(backing), backing
