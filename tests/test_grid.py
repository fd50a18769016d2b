"""Tests for the multi-column candidate grid."""

from __future__ import annotations

import pytest

from pi.complete.candidates import Candidate, StyledText
from pi.complete.grid import (
    cell_index,
    cell_position,
    find_window,
    grid_shape,
    render_grid,
)
from pi.complete.utils import visible_width


def _cands(*labels: str) -> list[Candidate]:
    return [Candidate.plain(label) for label in labels]


FIVE = _cands("alpha", "beta", "gamma", "delta", "eps")


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------


class TestGridShape:
    """Column width, column count and row count."""

    def test_columns_and_rows(self) -> None:
        # (12 + 2) // (5 + 2) = 2 columns, ceil(5 / 2) = 3 rows
        shape = grid_shape(FIVE, 12)
        assert shape.column_width == 5
        assert shape.columns == 2
        assert shape.rows == 3

    def test_column_width_uses_display_width(self) -> None:
        shape = grid_shape(_cands("日本", "abc"), 80)
        assert shape.column_width == 4

    def test_at_least_one_column(self) -> None:
        shape = grid_shape(_cands("x" * 50, "y"), 10)
        assert shape.columns == 1
        assert shape.rows == 2

    def test_margin_is_configurable(self) -> None:
        # 20 // 5 = 4 columns without margin, 22 // 7 = 3 with the default
        assert grid_shape(FIVE, 20, margin=0).columns == 4
        assert grid_shape(FIVE, 20, margin=2).columns == 3

    @pytest.mark.parametrize("width", [1, 5, 10, 17, 40, 80])
    def test_rows_are_a_tight_ceiling(self, width: int) -> None:
        for n in range(1, 31):
            shape = grid_shape(_cands(*(f"c{i:02d}" for i in range(n))), width)
            assert shape.rows * shape.columns >= n
            assert (shape.rows - 1) * shape.columns < n


class TestCellMapping:
    """Column-major index to cell mapping."""

    def test_column_major_position(self) -> None:
        # Candidate 4 of 5 in a 3-row grid sits in the second column, second row.
        assert cell_position(4, 3) == (1, 1)
        assert cell_index(1, 1, 3) == 4

    @pytest.mark.parametrize("rows", [1, 2, 3, 7])
    def test_mapping_is_a_bijection(self, rows: int) -> None:
        n = 20
        positions = [cell_position(k, rows) for k in range(n)]
        assert len(set(positions)) == n
        for k, (column, row) in enumerate(positions):
            assert 0 <= row < rows
            assert cell_index(column, row, rows) == k


# ---------------------------------------------------------------------------
# Scroll window
# ---------------------------------------------------------------------------


class TestFindWindow:
    """Visible row window around the selection."""

    def test_everything_fits(self) -> None:
        assert find_window(2, 1, 5) == (0, 2)

    def test_pinned_to_top(self) -> None:
        assert find_window(10, 0, 3) == (0, 3)

    def test_centered_on_selection(self) -> None:
        assert find_window(10, 5, 3) == (4, 7)

    def test_pinned_to_bottom(self) -> None:
        assert find_window(10, 9, 3) == (7, 10)

    def test_zero_height_is_empty(self) -> None:
        assert find_window(10, 5, 0) == (0, 0)

    def test_window_invariants(self) -> None:
        for total in range(1, 13):
            for max_height in range(1, 6):
                for selected in range(total):
                    low, high = find_window(total, selected, max_height)
                    assert 0 <= low <= selected < high <= total
                    assert high - low == min(total, max_height)

    def test_same_selection_gives_same_window(self) -> None:
        first = find_window(30, 17, 6)
        assert all(find_window(30, 17, 6) == first for _ in range(5))


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRenderGrid:
    """Rendered rows of the candidate grid."""

    def test_renders_column_major_rows(self) -> None:
        block = render_grid(FIVE, 0, 12, 10)
        assert block.lines == [
            "\x1b[7malpha\x1b[0m  delta",
            "beta   eps  ",
            "gamma",
        ]

    def test_highlight_follows_selection(self) -> None:
        block = render_grid(FIVE, 4, 12, 10)
        assert block.lines[1] == "beta   \x1b[7meps  \x1b[0m"
        assert "\x1b[7m" not in block.lines[0]

    def test_highlight_layers_on_candidate_style(self) -> None:
        cands = [Candidate(StyledText("src/"), StyledText("src/", "1;34"))]
        block = render_grid(cands, 0, 20, 5)
        assert block.lines == ["\x1b[1;34;7msrc/\x1b[0m"]

    def test_unselected_candidate_keeps_its_style(self) -> None:
        cands = [
            Candidate.plain("a"),
            Candidate(StyledText("b/"), StyledText("b/", "1;34")),
        ]
        block = render_grid(cands, 0, 3, 5)
        assert block.lines[1] == "\x1b[1;34mb/\x1b[0m"

    def test_custom_selected_style(self) -> None:
        block = render_grid(_cands("a"), 0, 10, 5, selected_style="4")
        assert block.lines == ["\x1b[4ma\x1b[0m"]

    def test_cells_are_padded_by_display_width(self) -> None:
        block = render_grid(_cands("日本", "ab"), 1, 100, 5)
        assert len(block.lines) == 1
        assert block.lines[0] == "日本  \x1b[7mab  \x1b[0m"
        assert visible_width(block.lines[0]) == 10

    def test_zero_height_renders_nothing(self) -> None:
        block = render_grid(FIVE, 0, 12, 0)
        assert block.lines == []
        assert block.shape is not None
        assert block.shape.rows == 3

    def test_scrolls_to_selected_row(self) -> None:
        cands = _cands(*(f"item{i:02d}" for i in range(20)))
        block = render_grid(cands, 12, 6, 5)
        assert (block.first_row, block.last_row) == (10, 15)
        assert len(block) == 5
        assert block.lines[2] == "\x1b[7mitem12\x1b[0m"
        assert block.lines[0] == "item10"

    def test_out_of_range_selection_highlights_nothing(self) -> None:
        block = render_grid(FIVE, -1, 12, 10)
        assert not any("\x1b[" in line for line in block.lines)
        assert block.first_row == 0
