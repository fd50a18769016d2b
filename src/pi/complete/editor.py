"""A single-line editor hosting completion.

``LineEditor`` keeps the text, the cursor, the tokens of the line and the
active mode, and implements :class:`pi.complete.context.EditorContext` for
the completion commands.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Sequence

from pi.complete.completers import CompleterChain
from pi.complete.completion import complete_prefix_or_start_completion, start_completion
from pi.complete.keybindings import CompletionKeybindingsManager
from pi.complete.keys import Key, is_printable, matches_key
from pi.complete.mode import Mode
from pi.complete.settings import CompletionSettings
from pi.complete.tokens import Token, tokenize

if TYPE_CHECKING:
    from pi.complete.context import EditorContext
    from pi.complete.grid import RenderedBlock

logger = logging.getLogger(__name__)

# A mode that keeps asking for the same key to be handled again would
# otherwise spin forever.
MAX_REPROCESS = 4


class InsertMode:
    """Plain text entry. Tab completes; other keys go to *on_key*."""

    def __init__(self, on_key: Callable[[str], None]) -> None:
        self._on_key = on_key

    def mode_line(self, width: int) -> str | None:
        return None

    def listing(self, width: int, max_height: int) -> RenderedBlock | None:
        return None

    def handle_input(self, ed: EditorContext, data: str) -> None:
        kb = ed.keybindings
        if kb.matches(data, "completeOrStart"):
            complete_prefix_or_start_completion(ed)
        elif kb.matches(data, "startCompletion"):
            start_completion(ed)
        else:
            self._on_key(data)

    def __repr__(self) -> str:
        return "InsertMode()"


class LineEditor:
    """Single-line editor with a pluggable completer chain."""

    def __init__(
        self,
        completers: CompleterChain | None = None,
        *,
        settings: CompletionSettings | None = None,
        tokenizer: Callable[[str], list[Token]] = tokenize,
    ) -> None:
        self._line = ""
        self._dot = 0
        self._tokenizer = tokenizer
        self._tokens: list[Token] = tokenizer("")
        self._completers = completers if completers is not None else CompleterChain()
        self._settings = settings if settings is not None else CompletionSettings()
        self._keybindings = CompletionKeybindingsManager(self._settings.keybindings)
        self._insert_mode: Mode = InsertMode(self.edit)
        self._mode: Mode = self._insert_mode
        self._reprocess = False
        self.tips: list[str] = []

    # ---- EditorContext ----

    @property
    def line(self) -> str:
        return self._line

    @property
    def dot(self) -> int:
        return self._dot

    @property
    def tokens(self) -> Sequence[Token]:
        return self._tokens

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def insert_mode(self) -> Mode:
        return self._insert_mode

    @property
    def completers(self) -> CompleterChain:
        return self._completers

    @property
    def settings(self) -> CompletionSettings:
        return self._settings

    @property
    def keybindings(self) -> CompletionKeybindingsManager:
        return self._keybindings

    def insert_at_dot(self, text: str) -> None:
        self._line = self._line[: self._dot] + text + self._line[self._dot :]
        self._dot += len(text)
        self._retokenize()

    def set_mode(self, mode: Mode) -> None:
        logger.debug("switching mode %r -> %r", self._mode, mode)
        self._mode = mode

    def reprocess_key(self) -> None:
        self._reprocess = True

    def add_tip(self, fmt: str, *args: object) -> None:
        tip = fmt % args if args else fmt
        logger.debug("tip: %s", tip)
        self.tips.append(tip)

    # ---- Text and cursor ----

    def set_text(self, text: str, dot: int | None = None) -> None:
        """Replace the line and put the cursor at *dot* (the end by default)."""
        self._line = text
        self._dot = len(text) if dot is None else max(0, min(dot, len(text)))
        self._retokenize()

    def get_text(self) -> str:
        return self._line

    def _retokenize(self) -> None:
        self._tokens = self._tokenizer(self._line)

    def edit(self, data: str) -> None:
        """Apply a non-completion key: insert text or move/delete."""
        if matches_key(data, Key.backspace):
            if self._dot > 0:
                self._line = self._line[: self._dot - 1] + self._line[self._dot :]
                self._dot -= 1
                self._retokenize()
        elif matches_key(data, Key.delete):
            if self._dot < len(self._line):
                self._line = self._line[: self._dot] + self._line[self._dot + 1 :]
                self._retokenize()
        elif matches_key(data, Key.left) or matches_key(data, Key.ctrl("b")):
            self._dot = max(0, self._dot - 1)
        elif matches_key(data, Key.right) or matches_key(data, Key.ctrl("f")):
            self._dot = min(len(self._line), self._dot + 1)
        elif matches_key(data, Key.home) or matches_key(data, Key.ctrl("a")):
            self._dot = 0
        elif matches_key(data, Key.end) or matches_key(data, Key.ctrl("e")):
            self._dot = len(self._line)
        elif is_printable(data):
            self.insert_at_dot(data)

    # ---- Input and rendering ----

    def handle_input(self, data: str) -> None:
        """Dispatch one key to the active mode.

        Tips from the previous key, and any reprocess request made outside
        key handling, are cleared first. When the mode asks for the key to be
        reprocessed it is dispatched again to whatever mode is active by then.
        """
        self.tips.clear()
        self._reprocess = False
        self._mode.handle_input(self, data)
        for _ in range(MAX_REPROCESS):
            if not self._reprocess:
                break
            self._reprocess = False
            self._mode.handle_input(self, data)
        else:
            if self._reprocess:
                logger.warning("giving up reprocessing %r after %d attempts", data, MAX_REPROCESS)
                self._reprocess = False

    def render(self, width: int, height: int | None = None) -> list[str]:
        """Render the line, tips, mode line and listing.

        The listing gets at most ``settings.max_height`` rows, and no more
        than what is left of *height* after everything above it.
        """
        lines = [self._line, *self.tips]
        mode_line = self._mode.mode_line(width)
        if mode_line is not None:
            lines.append(mode_line)

        max_height = self._settings.max_height
        if height is not None:
            max_height = max(0, min(max_height, height - len(lines)))
        listing = self._mode.listing(width, max_height)
        if listing is not None:
            lines.extend(listing.lines)
        return lines

