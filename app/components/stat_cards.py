"""Row of summary metric cards."""

from typing import Optional, Sequence, Tuple

import streamlit as st

StatCard = Tuple[str, str, Optional[str]]


def render_stat_cards(cards: Sequence[StatCard]) -> None:
    """
    Render metrics side by side.

    Args:
        cards: (label, formatted value, help text) triples.
    """
    if not cards:
        return
    columns = st.columns(len(cards))
    for column, (label, value, help_text) in zip(columns, cards):
        with column:
            st.metric(label, value, help=help_text)
