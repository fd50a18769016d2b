"""Completion mode: picking a candidate for the token under the cursor.

Triggering completion resolves the token at the cursor and asks the
editor's completers for candidates. :func:`complete_prefix_or_start_completion`
first tries to insert the longest common prefix of the candidates and only
opens the picker when there is none; :func:`start_completion` always opens it.
While the picker is open, :class:`CompletionMode` is the editor's mode.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Sequence

from pi.complete.candidates import Candidate, longest_common_prefix
from pi.complete.grid import COLUMN_MARGIN, STYLE_FOR_SELECTED, RenderedBlock, render_grid
from pi.complete.mode import make_mode_line
from pi.complete.tokens import token_at_cursor

if TYPE_CHECKING:
    from pi.complete.context import EditorContext
    from pi.complete.keybindings import CompletionAction

logger = logging.getLogger(__name__)


class CompletionMode:
    """An open candidate picker.

    ``rows`` is written by :meth:`listing` and read by the column moves, so
    left/right navigation works off the layout of the last draw and does
    nothing before the first one.
    """

    def __init__(
        self,
        completer: str,
        candidates: Sequence[Candidate],
        *,
        column_margin: int = COLUMN_MARGIN,
        selected_style: str = STYLE_FOR_SELECTED,
        mode_line_style: str = "1;7",
    ) -> None:
        self.completer = completer
        self.candidates: list[Candidate] = list(candidates)
        self.selected = 0 if self.candidates else -1
        self.rows = 0
        self._column_margin = column_margin
        self._selected_style = selected_style
        self._mode_line_style = mode_line_style

    def __repr__(self) -> str:
        return (
            f"CompletionMode(completer={self.completer!r}, "
            f"candidates={len(self.candidates)}, selected={self.selected})"
        )

    @property
    def selected_candidate(self) -> Candidate | None:
        if 0 <= self.selected < len(self.candidates):
            return self.candidates[self.selected]
        return None

    # ---- Navigation ----

    def prev(self, cycle: bool) -> None:
        self.selected -= 1
        if self.selected == -1:
            if cycle:
                self.selected = len(self.candidates) - 1
            else:
                self.selected += 1

    def next(self, cycle: bool) -> None:
        self.selected += 1
        if self.selected == len(self.candidates):
            if cycle:
                self.selected = 0
            else:
                self.selected -= 1

    def move_column(self, direction: int) -> None:
        """Jump one column left (-1) or right (+1), staying put at the edges."""
        target = self.selected + direction * self.rows
        if 0 <= target < len(self.candidates):
            self.selected = target

    # ---- Mode interface ----

    def mode_line(self, width: int) -> str:
        return make_mode_line(f"COMPLETING {self.completer}", width, self._mode_line_style)

    def listing(self, width: int, max_height: int) -> RenderedBlock:
        block = render_grid(
            self.candidates,
            self.selected,
            width,
            max_height,
            margin=self._column_margin,
            selected_style=self._selected_style,
        )
        self.rows = block.shape.rows if block.shape is not None else 0
        return block

    def handle_input(self, ed: EditorContext, data: str) -> None:
        for action, command in COMPLETION_COMMANDS:
            if ed.keybindings.matches(data, action):
                command(ed)
                return
        default_completion(ed)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _completion(ed: EditorContext) -> CompletionMode | None:
    mode = ed.mode
    return mode if isinstance(mode, CompletionMode) else None


def start_completion(ed: EditorContext) -> None:
    """Open the picker for the token under the cursor."""
    _start_completion(ed, complete_prefix=False)


def complete_prefix_or_start_completion(ed: EditorContext) -> None:
    """Insert the candidates' common prefix, or open the picker if there is none."""
    _start_completion(ed, complete_prefix=True)


def _start_completion(ed: EditorContext, complete_prefix: bool) -> None:
    token = token_at_cursor(ed.tokens, ed.dot, len(ed.line))
    result = ed.completers.dispatch(token, ed)

    if result is None:
        ed.add_tip("unsupported completion :(")
        return

    name, candidates = result
    if not candidates:
        ed.add_tip("no candidate for %s", name)
        return

    if complete_prefix:
        # With exactly one candidate the prefix is the candidate itself,
        # so it is accepted right away.
        prefix = longest_common_prefix(candidates)
        if prefix:
            logger.debug("inserting common prefix %r from %s", prefix, name)
            ed.insert_at_dot(prefix)
            return

    settings = ed.settings
    ed.set_mode(
        CompletionMode(
            name,
            candidates,
            column_margin=settings.column_margin,
            selected_style=settings.selected_style,
            mode_line_style=settings.mode_line_style,
        )
    )


def select_cand_up(ed: EditorContext) -> None:
    c = _completion(ed)
    if c is not None:
        c.prev(False)


def select_cand_down(ed: EditorContext) -> None:
    c = _completion(ed)
    if c is not None:
        c.next(False)


def select_cand_left(ed: EditorContext) -> None:
    c = _completion(ed)
    if c is not None:
        c.move_column(-1)


def select_cand_right(ed: EditorContext) -> None:
    c = _completion(ed)
    if c is not None:
        c.move_column(1)


def cycle_cand_right(ed: EditorContext) -> None:
    c = _completion(ed)
    if c is not None:
        c.next(True)


def accept_completion(ed: EditorContext) -> None:
    """Insert the selected candidate, if any, and return to insert mode."""
    c = _completion(ed)
    if c is not None:
        accepted = c.selected_candidate
        if accepted is not None:
            ed.insert_at_dot(accepted.source.text)
    ed.set_mode(ed.insert_mode)


def cancel_completion(ed: EditorContext) -> None:
    """Close the picker without inserting anything."""
    ed.set_mode(ed.insert_mode)


def default_completion(ed: EditorContext) -> None:
    """Accept, then handle the same key again in insert mode."""
    accept_completion(ed)
    ed.reprocess_key()


COMPLETION_COMMANDS: list[tuple[CompletionAction, Callable[[EditorContext], None]]] = [
    ("completionUp", select_cand_up),
    ("completionDown", select_cand_down),
    ("completionLeft", select_cand_left),
    ("completionRight", select_cand_right),
    ("completionCycle", cycle_cand_right),
    ("completionAccept", accept_completion),
    ("completionCancel", cancel_completion),
]
