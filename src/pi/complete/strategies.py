"""Built-in completers for words produced by :func:`pi.complete.tokens.tokenize`.

Each strategy completes the part of the word before the cursor. Candidates
insert only the missing remainder of a name, and show the full name in the
menu. A file or command name that is already typed in full inserts the
trailing space instead; a fully typed variable name inserts nothing.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from pi.complete.candidates import Candidate, StyledText
from pi.complete.completers import Completer, CompleterChain, Strategy
from pi.complete.tokens import Word

if TYPE_CHECKING:
    from pi.complete.context import EditorContext

DIRECTORY_STYLE = "1;34"
VARIABLE_STYLE = "35"


def word_prefix(word: Word, dot: int) -> str:
    """Return the part of *word* before the cursor at *dot*."""
    return word.text[: max(0, min(dot, word.end) - word.start)]


def _remainders(names: Iterable[str], prefix: str) -> list[str]:
    return sorted({n for n in names if n.startswith(prefix)})


def _rest(name: str, typed: str, suffix: str) -> str:
    """Text completing *typed* to *name*; *suffix* once the name is fully typed."""
    return name[len(typed) :] or suffix


def complete_variable(env: Mapping[str, str] | None = None) -> Strategy:
    """Complete ``$NAME`` from *env* (``os.environ`` when not given)."""

    def strategy(node: Any, ed: EditorContext) -> list[Candidate] | None:
        if not isinstance(node, Word):
            return None
        prefix = word_prefix(node, ed.dot)
        dollar = prefix.rfind("$")
        if dollar == -1 or "/" in prefix[dollar:]:
            return None

        typed = prefix[dollar + 1 :]
        names = os.environ if env is None else env
        return [
            Candidate(
                source=StyledText(name[len(typed) :]),
                menu=StyledText(f"${name}", VARIABLE_STYLE),
            )
            for name in _remainders(names, typed)
        ]

    return strategy


def complete_command(names: Iterable[str]) -> Strategy:
    """Complete the first word of the line from a list of command names."""
    commands = list(names)

    def strategy(node: Any, ed: EditorContext) -> list[Candidate] | None:
        if not isinstance(node, Word) or node.index != 0:
            return None
        prefix = word_prefix(node, ed.dot)
        if "/" in prefix or prefix.startswith((".", "~")):
            return None
        return [
            Candidate(
                source=StyledText(_rest(name, prefix, " ")),
                menu=StyledText(name),
                source_suffix=" ",
            )
            for name in _remainders(commands, prefix)
        ]

    return strategy


def _expand_directory(directory: str, base_path: str) -> str:
    expanded = os.path.expandvars(os.path.expanduser(directory)) if directory else ""
    if os.path.isabs(expanded):
        return expanded
    return os.path.join(base_path, expanded)


def complete_filename(base_path: str | None = None) -> Strategy:
    """Complete file and directory names relative to *base_path*.

    ``~`` and ``$VAR`` in the directory part are expanded. Directories are
    listed first, with a trailing ``/``; dotfiles only show up when the typed
    name starts with a dot.
    """

    def strategy(node: Any, ed: EditorContext) -> list[Candidate] | None:
        if not isinstance(node, Word):
            return None
        prefix = word_prefix(node, ed.dot)
        slash = prefix.rfind("/")
        directory, typed = prefix[: slash + 1], prefix[slash + 1 :]
        search_dir = _expand_directory(directory, base_path or os.getcwd())

        try:
            entries = list(os.scandir(search_dir))
        except OSError:
            # Directory doesn't exist or not accessible
            return []

        found: list[tuple[bool, str]] = []
        for entry in entries:
            if not entry.name.startswith(typed):
                continue
            if entry.name.startswith(".") and not typed.startswith("."):
                continue
            try:
                is_directory = entry.is_dir()
            except OSError:
                is_directory = False
            found.append((is_directory, entry.name))

        # Directories first, then alphabetically
        found.sort(key=lambda item: (not item[0], item[1]))

        candidates: list[Candidate] = []
        for is_directory, name in found:
            if is_directory:
                source, menu, source_suffix = name[len(typed) :] + "/", name + "/", ""
            else:
                source, menu, source_suffix = _rest(name, typed, " "), name, " "
            candidates.append(
                Candidate(
                    source=StyledText(source),
                    menu=StyledText(menu, DIRECTORY_STYLE if is_directory else ""),
                    source_suffix=source_suffix,
                )
            )
        return candidates

    return strategy


def default_completers(
    commands: Iterable[str] = (),
    *,
    env: Mapping[str, str] | None = None,
    base_path: str | None = None,
) -> CompleterChain:
    """Variable, command and filename completers, tried in that order."""
    return CompleterChain(
        [
            Completer("variable", complete_variable(env)),
            Completer("command", complete_command(commands)),
            Completer("filename", complete_filename(base_path)),
        ]
    )
