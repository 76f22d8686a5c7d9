"""Paginated, sortable data table with column visibility and export."""

import streamlit as st

from config.config_loader import get_table_config
from src.analysis import DataExporter
from src.screens import ScreenController
from src.tables import Page, SortDirection

from .display import to_display_dataframe


def _on_page(controller: ScreenController, page_index: int) -> None:
    controller.on_page_change(page_index)


def _on_page_size(controller: ScreenController, key: str) -> None:
    controller.on_items_per_page_change(int(st.session_state[key]))


def _on_sort(controller: ScreenController, key: str) -> None:
    column_id = st.session_state[key]
    if column_id:
        controller.on_sort_change(column_id)


def _on_column(controller: ScreenController, column_id: str) -> None:
    controller.on_column_toggle(column_id)


def render_column_menu(controller: ScreenController) -> None:
    """Popover with one checkbox per hideable column."""
    with st.popover("Columns"):
        for column in controller.table.hideable_columns():
            key = f"{controller.key}_column_{column.id}"
            st.session_state[key] = controller.table.is_visible(column.id)
            st.checkbox(
                column.header,
                key=key,
                on_change=_on_column,
                args=(controller, column.id),
            )
        st.button(
            "Reset columns",
            key=f"{controller.key}_reset_columns",
            on_click=controller.on_reset_columns,
        )


def render_sort_control(controller: ScreenController) -> None:
    """Sort picker; picking the active column again cycles its direction."""
    sortable = [c for c in controller.table.columns if c.sortable]
    state = controller.table.sort_state
    headers = {c.id: c.header for c in sortable}

    if state.is_active:
        arrow = "↓" if state.direction == SortDirection.DESCENDING else "↑"
        st.caption(f"Sorted by {headers.get(state.column_id, state.column_id)} {arrow}")

    key = f"{controller.key}_sort"
    st.session_state[key] = None
    st.selectbox(
        "Sort by",
        options=[None] + [c.id for c in sortable],
        format_func=lambda v: "Sort by..." if v is None else headers[v],
        key=key,
        on_change=_on_sort,
        args=(controller, key),
        label_visibility="collapsed",
    )


def render_pagination_controls(controller: ScreenController, page: Page) -> None:
    """First/previous/next/last buttons, page indicator and page size."""
    info_col, nav_col, size_col = st.columns([2, 2, 1])
    key = controller.key

    with info_col:
        st.markdown(f"**{page.display_range()}**")

    with nav_col:
        btn_cols = st.columns([1, 1, 2, 1, 1])
        with btn_cols[0]:
            st.button("⏮", key=f"{key}_first", disabled=not page.has_previous,
                      on_click=_on_page, args=(controller, 0))
        with btn_cols[1]:
            st.button("◀", key=f"{key}_prev", disabled=not page.has_previous,
                      on_click=controller.on_previous_page)
        with btn_cols[2]:
            current = page.page_index + 1 if page.total_pages else 0
            st.markdown(
                f"<div style='text-align: center; padding-top: 8px;'>"
                f"Page {current} of {page.total_pages}</div>",
                unsafe_allow_html=True,
            )
        with btn_cols[3]:
            st.button("▶", key=f"{key}_next", disabled=not page.has_next,
                      on_click=controller.on_next_page)
        with btn_cols[4]:
            st.button("⏭", key=f"{key}_last", disabled=not page.has_next,
                      on_click=_on_page, args=(controller, page.total_pages - 1))

    with size_col:
        size_key = f"{key}_page_size"
        page_sizes = list(get_table_config().page_size_options)
        if page.page_size not in page_sizes:
            page_sizes = sorted(page_sizes + [page.page_size])
        st.session_state[size_key] = page.page_size
        st.selectbox(
            "Per page",
            options=page_sizes,
            key=size_key,
            on_change=_on_page_size,
            args=(controller, size_key),
            label_visibility="collapsed",
        )


def render_export_buttons(controller: ScreenController) -> None:
    """CSV and Excel downloads of the whole result set's visible columns."""
    exporter = DataExporter()
    rows = controller.export_rows()
    columns = controller.visible_columns()

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "📥 CSV",
            data=exporter.export_to_csv_buffer(rows, columns).getvalue(),
            file_name=exporter.generate_filename(controller.key, "csv"),
            mime="text/csv",
            key=f"{controller.key}_export_csv",
        )
    with col2:
        st.download_button(
            "📥 Excel",
            data=exporter.export_to_excel_buffer(
                rows, columns, controller.summary, controller.active_filters
            ),
            file_name=exporter.generate_filename(controller.key, "xlsx"),
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            key=f"{controller.key}_export_xlsx",
        )


def render_data_table(
    controller: ScreenController,
    show_toolbar: bool = True,
    show_export: bool = True,
) -> None:
    """
    Render the controller's current page.

    Args:
        controller: The screen's controller.
        show_toolbar: Show sort and column controls.
        show_export: Show download buttons.
    """
    if show_toolbar:
        tool_cols = st.columns([2, 1, 2])
        with tool_cols[0]:
            render_sort_control(controller)
        with tool_cols[1]:
            render_column_menu(controller)
        if show_export:
            with tool_cols[2]:
                render_export_buttons(controller)

    message = controller.empty_state_message()
    if message is not None:
        st.info(f"**{message['title']}**\n\n{message['description']}")
        if controller.summary.filters_active:
            st.button(
                "Clear filters",
                key=f"{controller.key}_empty_clear",
                on_click=controller.on_clear_all,
            )
        return

    page = controller.current_page()
    columns = controller.visible_columns()
    st.dataframe(
        to_display_dataframe(controller.key, page.rows, columns),
        use_container_width=True,
        hide_index=True,
    )
    render_pagination_controls(controller, page)
