"""Completion candidates and the longest-common-prefix reducer."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Sequence


@dataclass(frozen=True)
class StyledText:
    """Text paired with an SGR style tag (``""`` for unstyled)."""

    text: str
    style: str = ""


@dataclass(frozen=True)
class Candidate:
    """A single completion candidate.

    ``source`` is what gets inserted at the cursor when the candidate is
    accepted, ``menu`` is what the picker shows. ``source_suffix`` is only
    meaningful to completers producing compound replacements.
    """

    source: StyledText
    menu: StyledText
    source_suffix: str = ""

    @classmethod
    def plain(cls, text: str, display: str | None = None, style: str = "") -> Candidate:
        """Build a candidate inserting *text* and listed as *display*."""
        return cls(
            source=StyledText(text),
            menu=StyledText(text if display is None else display, style),
        )


def common_prefix(s: str, t: str) -> str:
    """Return the longest shared leading part of *s* and *t*.

    Strings are compared one code point at a time, so a multi-byte character
    is either shared whole or not at all.
    """
    length = 0
    for a, b in zip(s, t):
        if a != b:
            break
        length += 1
    return s[:length]


def longest_common_prefix(candidates: Sequence[Candidate]) -> str:
    """Fold :func:`common_prefix` over the insertion text of *candidates*."""
    if not candidates:
        return ""
    texts = [c.source.text for c in candidates]
    return reduce(common_prefix, texts[1:], texts[0])
