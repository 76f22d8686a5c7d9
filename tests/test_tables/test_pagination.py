"""Tests for client-side pagination."""

import pytest


class TestPageCount:
    """Tests for page counting."""

    @pytest.mark.parametrize(
        "total,size,expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (42, 5, 9)],
    )
    def test_count_pages(self, total, size, expected):
        from src.tables import count_pages

        assert count_pages(total, size) == expected


class TestPaginate:
    """Tests for slicing pages out of a result set."""

    @pytest.mark.parametrize("total", [0, 1, 7, 10, 23])
    @pytest.mark.parametrize("size", [1, 3, 5, 10])
    def test_pages_partition_the_result_set(self, total, size):
        from src.tables import PaginationState, count_pages, paginate

        items = list(range(total))
        rows = []
        for index in range(count_pages(total, size)):
            rows.extend(paginate(items, PaginationState(index, size)).rows)

        assert rows == items

    def test_empty_result_set(self):
        from src.tables import PaginationState, paginate

        page = paginate([], PaginationState(3, 10))
        assert page.rows == ()
        assert page.total_pages == 0
        assert page.page_index == 0
        assert page.display_range() == "No results"

    def test_stale_index_is_clamped(self):
        from src.tables import PaginationState, paginate

        page = paginate(list(range(12)), PaginationState(5, 5))
        assert page.page_index == 2
        assert page.rows == (10, 11)

    def test_page_metadata(self):
        from src.tables import PaginationState, paginate

        page = paginate(list(range(42)), PaginationState(1, 10))
        assert page.start_row == 11
        assert page.end_row == 20
        assert page.has_previous
        assert page.has_next
        assert page.display_range() == "Showing 11 - 20 of 42"


class TestPageSizeChange:
    """Tests for page size changes."""

    @pytest.mark.parametrize("total", [0, 3, 25, 100])
    @pytest.mark.parametrize("start_index", [0, 1, 4, 9])
    @pytest.mark.parametrize("new_size", [5, 10, 50])
    @pytest.mark.parametrize("keep_position", [False, True])
    def test_index_never_past_end(self, total, start_index, new_size, keep_position):
        from src.tables import PaginationState, change_page_size, count_pages

        state = PaginationState(start_index, 5)
        updated = change_page_size(state, new_size, total, keep_position=keep_position, max_page_size=100)
        pages = count_pages(total, updated.page_size)

        assert updated.page_index < max(pages, 1)

    def test_page_size_change_returns_to_first_page(self):
        from src.tables import PaginationState, change_page_size

        updated = change_page_size(PaginationState(3, 5), 10, 100, max_page_size=100)
        assert updated.page_index == 0
        assert updated.page_size == 10

    def test_keep_position_clamps(self):
        from src.tables import PaginationState, change_page_size

        updated = change_page_size(PaginationState(3, 5), 10, 25, keep_position=True, max_page_size=100)
        assert updated.page_index == 2

    def test_page_size_capped(self):
        from src.tables import PaginationState, change_page_size

        updated = change_page_size(PaginationState(), 500, 10, max_page_size=100)
        assert updated.page_size == 100

    def test_invalid_page_size(self):
        from src.tables import PaginationState, change_page_size

        with pytest.raises(ValueError):
            change_page_size(PaginationState(), 0, 10)
        with pytest.raises(ValueError):
            PaginationState(page_size=0)


class TestNavigation:
    """Tests for next/previous/go-to."""

    def test_next_and_previous_clamp_at_ends(self):
        from src.tables import PaginationState, next_page, previous_page

        state = PaginationState(0, 10)
        assert previous_page(state, 25).page_index == 0

        state = next_page(next_page(next_page(state, 25), 25), 25)
        assert state.page_index == 2

    def test_go_to_page(self):
        from src.tables import PaginationState, go_to_page

        assert go_to_page(PaginationState(0, 10), 7, 25).page_index == 2
        assert go_to_page(PaginationState(2, 10), -1, 25).page_index == 0
