"""Editor capabilities the completion subsystem depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from pi.complete.completers import CompleterChain
    from pi.complete.keybindings import CompletionKeybindingsManager
    from pi.complete.mode import Mode
    from pi.complete.settings import CompletionSettings
    from pi.complete.tokens import Token


class EditorContext(Protocol):
    """Interface for the line editor hosting completion.

    Every completion command receives one of these explicitly; nothing in
    this package reaches for editor state on its own.
    """

    # Input line

    @property
    def line(self) -> str:
        """The current input line."""
        ...

    @property
    def dot(self) -> int:
        """Cursor offset into :attr:`line`."""
        ...

    @property
    def tokens(self) -> Sequence[Token]:
        """Tokens covering :attr:`line`, in order."""
        ...

    def insert_at_dot(self, text: str) -> None:
        """Insert *text* at the cursor and leave the cursor after it."""
        ...

    # Modes

    @property
    def mode(self) -> Mode:
        """The active mode."""
        ...

    @property
    def insert_mode(self) -> Mode:
        """The mode completion returns to after accepting or cancelling."""
        ...

    def set_mode(self, mode: Mode) -> None:
        """Install *mode* as the active mode."""
        ...

    def reprocess_key(self) -> None:
        """Ask for the key being handled to be dispatched again afterwards."""
        ...

    # Feedback

    def add_tip(self, fmt: str, *args: object) -> None:
        """Show a transient message, ``fmt % args`` when args are given."""
        ...

    # Completion setup

    @property
    def completers(self) -> CompleterChain:
        """Completers consulted, in priority order."""
        ...

    @property
    def settings(self) -> CompletionSettings:
        ...

    @property
    def keybindings(self) -> CompletionKeybindingsManager:
        ...
