"""Tests for pi.complete.keys -- matching raw input against key ids."""

from __future__ import annotations

import pytest

from pi.complete.keys import Key, is_printable, matches_key, parse_key_id, raw_ctrl_char


class TestParseKeyId:
    """Splitting key ids into modifiers and key."""

    def test_plain_key(self) -> None:
        assert parse_key_id("tab") == (0, "tab")

    def test_modifiers_are_combined(self) -> None:
        assert parse_key_id("ctrl+shift+a") == (5, "a")

    def test_aliases(self) -> None:
        assert parse_key_id("esc") == (0, "escape")
        assert parse_key_id("return") == (0, "enter")

    def test_empty(self) -> None:
        assert parse_key_id("") is None


class TestMatchesKey:
    """Raw terminal input against key ids."""

    @pytest.mark.parametrize(
        ("data", "key_id"),
        [
            ("\t", "tab"),
            ("\x1b[Z", "shift+tab"),
            ("\x1b", "escape"),
            ("\r", "enter"),
            ("\n", "enter"),
            ("\x7f", "backspace"),
            ("\x1b[A", "up"),
            ("\x1bOA", "up"),
            ("\x1b[B", "down"),
            ("\x1b[C", "right"),
            ("\x1b[D", "left"),
            ("\x1b[1;5D", "ctrl+left"),
            ("\x1b[3~", "delete"),
            ("\x1b[H", "home"),
            ("\x07", "ctrl+g"),
            ("\x1ba", "alt+a"),
            ("A", "shift+a"),
            ("a", "a"),
        ],
    )
    def test_matches(self, data: str, key_id: str) -> None:
        assert matches_key(data, key_id)

    @pytest.mark.parametrize(
        ("data", "key_id"),
        [
            ("\t", "shift+tab"),
            ("\x1b[Z", "tab"),
            ("b", "a"),
            ("\x1b[A", "down"),
            ("\x1b[D", "ctrl+left"),
            ("\x07", "ctrl+h"),
            ("a", ""),
        ],
    )
    def test_does_not_match(self, data: str, key_id: str) -> None:
        assert not matches_key(data, key_id)

    def test_key_helpers_build_ids(self) -> None:
        assert matches_key("\x1b[Z", Key.shift(Key.tab))
        assert matches_key("\x07", Key.ctrl("g"))


class TestHelpers:
    """Control characters and printable input."""

    def test_raw_ctrl_char(self) -> None:
        assert raw_ctrl_char("a") == "\x01"
        assert raw_ctrl_char("G") == "\x07"
        assert raw_ctrl_char("tab") is None

    def test_is_printable(self) -> None:
        assert is_printable("a")
        assert is_printable("世")
        assert not is_printable("\x1b[A")
        assert not is_printable("\t")
        assert not is_printable("")


class TestKeyConstants:
    """Key constants build ids that matches_key understands."""

    def test_combinators(self) -> None:
        assert Key.shift(Key.tab) == "shift+tab"
        assert Key.ctrl("g") == "ctrl+g"
        assert Key.alt(Key.left) == "alt+left"

    @pytest.mark.parametrize(
        "key_id,data",
        [
            (Key.shift(Key.tab), "\x1b[Z"),
            (Key.ctrl("g"), "\x07"),
            (Key.backspace, "\x7f"),
            (Key.enter, "\r"),
            (Key.escape, "\x1b"),
        ],
    )
    def test_constants_match_input(self, key_id: str, data: str) -> None:
        assert matches_key(data, key_id)
