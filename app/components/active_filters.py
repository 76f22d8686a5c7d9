"""Active filter bar: removable chips plus the result count."""

import streamlit as st

from src.screens import ScreenController


def render_active_filters(controller: ScreenController) -> None:
    """
    Render the result count and one removable chip per active filter.

    Chips are derived from the controller on every run; clicking one
    removes exactly that (group, value) pair.
    """
    summary = controller.summary
    chips = controller.active_filters

    if not chips and not controller.search:
        st.caption(summary.label)
        return

    st.caption(f"{summary.label} · {controller.filter_summary()}")

    columns = st.columns(min(len(chips), 4) + 1) if chips else [st.container()]
    for index, chip in enumerate(chips):
        with columns[index % (len(columns) - 1)]:
            st.button(
                f"{chip.display} ✕",
                key=f"{controller.key}_chip_{chip.group_id}_{chip.value}",
                on_click=controller.on_remove_filter,
                args=(chip.group_id, chip.value),
            )
    with columns[-1]:
        st.button(
            "Clear all",
            key=f"{controller.key}_chips_clear_all",
            on_click=controller.on_clear_all,
            type="secondary",
        )
