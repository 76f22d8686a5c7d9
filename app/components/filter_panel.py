"""Filter panel surfaces: sidebar, mobile drawer and slide-in panel.

All three render the same panel body against the screen's controller.
Widget values are written from the controller before each widget is
created and every change goes back through a controller callback, so
switching surfaces (or showing two at once) never forks the state.
"""

from typing import Optional

import streamlit as st

from config.config_loader import get_filter_panel_config
from src.filtering import FilterGroup, FilterKind
from src.screens import ScreenController


# =============================================================================
# Widget callbacks
# =============================================================================


def _on_search(controller: ScreenController, key: str) -> None:
    controller.on_search_change(st.session_state.get(key, ""))


def _on_checkbox(controller: ScreenController, group_id: str, value: str) -> None:
    controller.on_filter_toggle(group_id, value)


def _on_radio(controller: ScreenController, group_id: str, key: str) -> None:
    selected = st.session_state.get(key)
    values = dict(controller.filter_values())
    values[group_id] = selected
    controller.on_filter_change(values)


def _on_range(controller: ScreenController, group_id: str, min_key: str, max_key: str) -> None:
    minimum = st.session_state.get(min_key)
    maximum = st.session_state.get(max_key)
    controller.on_range_change(group_id, minimum, maximum)


def _on_preset(controller: ScreenController, group_id: str) -> None:
    controller.on_range_preset_toggle(group_id)


# =============================================================================
# Panel body
# =============================================================================


def render_search_box(controller: ScreenController, key_prefix: str) -> None:
    """Search input bound to the controller's search text."""
    if not controller.definition.has_search:
        return
    key = f"{key_prefix}_search"
    st.session_state[key] = controller.search
    st.text_input(
        "Search",
        key=key,
        placeholder=controller.definition.search_placeholder,
        on_change=_on_search,
        args=(controller, key),
        label_visibility="collapsed",
    )


def _render_option_group(controller: ScreenController, group: FilterGroup, key_prefix: str) -> None:
    panel_config = get_filter_panel_config()
    options = list(group.options)

    if group.searchable:
        search_key = f"{key_prefix}_{group.id}_option_search"
        text = st.text_input(
            f"Search {group.label.lower()}",
            key=search_key,
            placeholder=f"Search {group.label.lower()}...",
            label_visibility="collapsed",
        )
        options = group.matching_options(text)
        if not options:
            st.caption("No matching options")
            return

    if group.kind == FilterKind.RADIO:
        key = f"{key_prefix}_{group.id}_radio"
        values = [None] + [option.value for option in options]
        labels = {option.value: option.label for option in options}
        current = controller.store.get_value(group.id)
        st.session_state[key] = current if current in values else None
        st.radio(
            group.label,
            options=values,
            format_func=lambda v: "Any" if v is None else labels[v],
            key=key,
            on_change=_on_radio,
            args=(controller, group.id, key),
            label_visibility="collapsed",
        )
        return

    show_all_key = f"{key_prefix}_{group.id}_show_all"
    show_all = st.session_state.get(show_all_key, False)
    visible = options if show_all else options[: panel_config.max_visible_options]

    for option in visible:
        key = f"{key_prefix}_{group.id}_{option.value}"
        st.session_state[key] = controller.store.is_selected(group.id, option.value)
        st.checkbox(
            option.label,
            key=key,
            on_change=_on_checkbox,
            args=(controller, group.id, option.value),
        )

    hidden = len(options) - len(visible)
    if hidden > 0 or show_all:
        st.toggle(
            "Show all" if not show_all else "Show fewer",
            key=show_all_key,
        )


def _render_range_group(controller: ScreenController, group: FilterGroup, key_prefix: str) -> None:
    if group.preset is not None:
        key = f"{key_prefix}_{group.id}_preset"
        st.session_state[key] = controller.store.get_range(group.id) == group.preset
        st.toggle(
            f"{group.label} ({group.preset.describe(group.unit)})",
            key=key,
            on_change=_on_preset,
            args=(controller, group.id),
        )
        return

    bounds = controller.store.get_range(group.id)
    min_key = f"{key_prefix}_{group.id}_min"
    max_key = f"{key_prefix}_{group.id}_max"
    st.session_state[min_key] = bounds.min
    st.session_state[max_key] = bounds.max

    col1, col2 = st.columns(2)
    with col1:
        st.number_input(
            f"Min {group.unit}".strip(),
            key=min_key,
            min_value=0.0,
            step=100.0,
            on_change=_on_range,
            args=(controller, group.id, min_key, max_key),
        )
    with col2:
        st.number_input(
            f"Max {group.unit}".strip(),
            key=max_key,
            min_value=0.0,
            step=100.0,
            on_change=_on_range,
            args=(controller, group.id, min_key, max_key),
        )


def render_filter_panel(controller: ScreenController, key_prefix: str) -> None:
    """
    Render the shared filter panel body.

    Args:
        controller: The screen's controller.
        key_prefix: Widget key namespace, unique per surface.
    """
    render_search_box(controller, key_prefix)

    for group in controller.filter_config:
        st.markdown(f"**{group.label}**")
        if group.is_range:
            _render_range_group(controller, group, key_prefix)
        else:
            _render_option_group(controller, group, key_prefix)

    count = controller.active_filter_count
    st.button(
        f"Clear all ({count})" if count else "Clear all",
        key=f"{key_prefix}_clear_all",
        on_click=controller.on_clear_all,
        disabled=controller.store.is_empty(),
        use_container_width=True,
    )


# =============================================================================
# Surfaces
# =============================================================================


def render_filter_sidebar(controller: ScreenController) -> None:
    """Desktop surface: the panel in the Streamlit sidebar."""
    with st.sidebar:
        st.subheader("Filters")
        render_filter_panel(controller, f"{controller.key}_sidebar")


def render_filter_drawer(controller: ScreenController) -> None:
    """Mobile surface: the panel in a collapsible drawer above the table."""
    count = controller.active_filter_count
    title = f"Filters ({count})" if count else "Filters"
    with st.expander(title, expanded=False):
        render_filter_panel(controller, f"{controller.key}_drawer")


def render_filter_slide_in(controller: ScreenController) -> None:
    """Slide-in surface: the panel in a popover opened from the toolbar."""
    count = controller.active_filter_count
    label = f"Filters ({count})" if count else "Filters"
    with st.popover(label, use_container_width=False):
        render_filter_panel(controller, f"{controller.key}_slide_in")


def render_filters(controller: ScreenController, layout: Optional[str] = None) -> None:
    """Render the surface selected for this session."""
    if layout == "Drawer":
        render_filter_drawer(controller)
    elif layout == "Slide-in panel":
        render_filter_slide_in(controller)
    else:
        render_filter_sidebar(controller)
