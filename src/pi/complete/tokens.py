"""Tokens over the input line and resolution of the token under the cursor."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Sequence

_WORD_RE = re.compile(r"\S+")


@dataclass(frozen=True)
class Token:
    """A syntax node together with the half-open span ``[start, end)`` it covers.

    The node is opaque here; completers know how to inspect it. A token
    without a node is :data:`INVALID_TOKEN`.
    """

    node: Any
    start: int = 0
    end: int = 0

    @property
    def is_valid(self) -> bool:
        return self.node is not None


INVALID_TOKEN = Token(node=None)


@dataclass(frozen=True)
class Word:
    """Node produced by :func:`tokenize`: one whitespace-separated word."""

    text: str
    start: int
    end: int
    index: int


def tokenize(line: str) -> list[Token]:
    """Split *line* into whitespace-separated word tokens.

    When the line ends in whitespace an empty word is appended at the end so
    a completion triggered there has a token to work on.
    """
    tokens: list[Token] = []
    for index, m in enumerate(_WORD_RE.finditer(line)):
        word = Word(m.group(), m.start(), m.end(), index)
        tokens.append(Token(word, word.start, word.end))

    if not line or line[-1].isspace():
        end = len(line)
        tokens.append(Token(Word("", end, end, len(tokens)), end, end))
    return tokens


def token_at_cursor(tokens: Sequence[Token], cursor: int, line_length: int) -> Token:
    """Find the token the cursor is inside or at the end of.

    At the end of the line the last token always wins. Elsewhere it is the
    first token ending after the cursor.
    """
    if not tokens or cursor > line_length:
        return INVALID_TOKEN
    if cursor == line_length:
        return tokens[-1]
    for token in tokens:
        if cursor < token.end:
            return token
    return INVALID_TOKEN
