"""Multi-column candidate listing.

Candidates are laid out column-major: the first column is filled top to
bottom before moving on to the next one, so candidate ``k`` sits at column
``k // rows`` and row ``k % rows``. When there are more rows than fit, a
window of rows around the selected one is shown.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from pi.complete.candidates import Candidate
from pi.complete.utils import force_width, join_styles, stylize, visible_width

COLUMN_MARGIN = 2
STYLE_FOR_SELECTED = "7"


@dataclass(frozen=True)
class GridShape:
    column_width: int
    columns: int
    rows: int


@dataclass
class RenderedBlock:
    """Rendered rows of a listing plus the geometry they were cut from."""

    width: int
    lines: list[str] = field(default_factory=list)
    shape: GridShape | None = None
    first_row: int = 0
    last_row: int = 0

    def __len__(self) -> int:
        return len(self.lines)


def ceil_div(a: int, b: int) -> int:
    return (a + b - 1) // b


def grid_shape(
    candidates: Sequence[Candidate], width: int, margin: int = COLUMN_MARGIN
) -> GridShape:
    """Decide column width, number of columns and number of rows.

    There is always at least one column, even when a single menu entry is
    wider than *width*.
    """
    column_width = max((visible_width(c.menu.text) for c in candidates), default=0)
    columns = max((width + margin) // max(column_width + margin, 1), 1)
    rows = ceil_div(len(candidates), columns)
    return GridShape(column_width, columns, rows)


def cell_position(index: int, rows: int) -> tuple[int, int]:
    """Map a candidate index to its ``(column, row)``."""
    return divmod(index, rows)


def cell_index(column: int, row: int, rows: int) -> int:
    """Map ``(column, row)`` back to a candidate index."""
    return column * rows + row


def find_window(total: int, selected: int, max_height: int) -> tuple[int, int]:
    """Pick the rows ``[low, high)`` to show out of *total*.

    The selected row is kept near the middle of the window, except at either
    end where the window is pinned. The result depends only on the
    arguments, so redrawing with the same selection never moves it.
    """
    if max_height <= 0 or total <= 0:
        return 0, 0
    if total <= max_height:
        return 0, total
    low = max(0, min(selected - max_height // 2, total - max_height))
    return low, low + max_height


def render_grid(
    candidates: Sequence[Candidate],
    selected: int,
    width: int,
    max_height: int,
    *,
    margin: int = COLUMN_MARGIN,
    selected_style: str = STYLE_FOR_SELECTED,
) -> RenderedBlock:
    """Render the visible rows of *candidates*, highlighting *selected*.

    A *selected* outside the list highlights nothing and shows the top of
    the listing.
    """
    shape = grid_shape(candidates, width, margin)
    block = RenderedBlock(width=width, shape=shape)
    if shape.rows == 0:
        return block

    selected_row = selected % shape.rows if 0 <= selected < len(candidates) else 0
    low, high = find_window(shape.rows, selected_row, max_height)
    block.first_row, block.last_row = low, high

    gap = " " * margin
    for row in range(low, high):
        cells: list[str] = []
        for column in range(shape.columns):
            k = cell_index(column, row, shape.rows)
            if k >= len(candidates):
                break
            menu = candidates[k].menu
            style = menu.style
            if k == selected:
                style = join_styles(style, selected_style)
            cells.append(stylize(force_width(menu.text, shape.column_width), style))
        block.lines.append(gap.join(cells))
    return block
