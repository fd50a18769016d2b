"""Display-width helpers for candidate cells and status lines.

Measures text in terminal columns (wide CJK, emoji and combining marks
handled via ``wcwidth`` and grapheme segmentation), cuts text to an exact
column count, and wraps text in SGR styles.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth


# CSI sequences: ESC[ <params> <final byte>
_STRIP_RE = re.compile(r"\x1b\[[0-9;]*[mGKHJ]")

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Control characters and lone combining marks are zero width, emoji
    sequences are two columns, everything else is decided by wcwidth on the
    first code point.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        # VS16, ZWJ, skin tone modifiers, regional indicators
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first_cp = ord(g[0])
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(g[0])
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    SGR escape sequences are ignored. Pure printable ASCII takes a fast
    path; other strings are measured per grapheme cluster and cached.
    """
    if not text:
        return 0

    stripped = _STRIP_RE.sub("", text)
    if not stripped:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


def _take_columns(text: str, max_cols: int) -> tuple[str, int]:
    """Return the longest grapheme-aligned prefix of *text* within *max_cols*.

    Also returns the width of that prefix, which can be one column short of
    *max_cols* when the next cluster is double width.
    """
    result: list[str] = []
    cols = 0
    for g in grapheme.graphemes(text):
        w = grapheme_width(g)
        if cols + w > max_cols:
            break
        result.append(g)
        cols += w
    return "".join(result), cols


def force_width(text: str, width: int) -> str:
    """Truncate or right-pad *text* so it occupies exactly *width* columns."""
    if width <= 0:
        return ""

    text_width = visible_width(text)
    if text_width <= width:
        return text + " " * (width - text_width)

    cut, cut_width = _take_columns(text, width)
    return cut + " " * (width - cut_width)


def join_styles(*styles: str) -> str:
    """Layer SGR parameter strings, later ones taking precedence."""
    return ";".join(s for s in styles if s)


def stylize(text: str, style: str) -> str:
    """Wrap *text* in the SGR sequence for *style*, or return it unchanged."""
    if not style or not text:
        return text
    return f"\x1b[{style}m{text}\x1b[0m"
