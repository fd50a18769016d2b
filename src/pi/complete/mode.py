"""Editing modes: the protocol the host editor drives, and the status line."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pi.complete.utils import force_width, stylize

if TYPE_CHECKING:
    from pi.complete.context import EditorContext
    from pi.complete.grid import RenderedBlock


@runtime_checkable
class Mode(Protocol):
    """A mode receives keys while installed and may draw below the line."""

    def mode_line(self, width: int) -> str | None:
        """Status line shown while the mode is active, or ``None``."""
        ...

    def listing(self, width: int, max_height: int) -> RenderedBlock | None:
        """Listing drawn under the status line, or ``None``."""
        ...

    def handle_input(self, ed: EditorContext, data: str) -> None:
        """Handle one key of raw terminal input."""
        ...


def make_mode_line(text: str, width: int, style: str = "1;7") -> str:
    """Render *text* as a status line exactly *width* columns wide."""
    return stylize(force_width(text, width), style)
