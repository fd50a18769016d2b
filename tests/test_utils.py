"""Tests for pi.complete.utils -- display width and styling helpers."""

from __future__ import annotations

from pi.complete.utils import force_width, join_styles, stylize, visible_width


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------


class TestVisibleWidth:
    """Measure the visible terminal width of text."""

    def test_plain_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty_string(self) -> None:
        assert visible_width("") == 0

    def test_ansi_codes_do_not_count(self) -> None:
        assert visible_width("\x1b[1mhi\x1b[0m") == 2

    def test_wide_cjk_characters_count_as_two(self) -> None:
        assert visible_width("世") == 2

    def test_mixed_ascii_and_wide(self) -> None:
        # "A" (1) + U+4E16 (2) + "B" (1) = 4
        assert visible_width("A世B") == 4

    def test_combining_mark_adds_no_width(self) -> None:
        # "e" followed by COMBINING ACUTE ACCENT
        assert visible_width("e\u0301") == 1


# ---------------------------------------------------------------------------
# force_width
# ---------------------------------------------------------------------------


class TestForceWidth:
    """Cut or pad text to an exact number of columns."""

    def test_pads_short_text(self) -> None:
        assert force_width("abc", 5) == "abc  "

    def test_exact_width_unchanged(self) -> None:
        assert force_width("hello", 5) == "hello"

    def test_truncates_long_text_without_ellipsis(self) -> None:
        assert force_width("abcdef", 3) == "abc"

    def test_wide_char_at_boundary_is_replaced_by_padding(self) -> None:
        # Two wide chars are 4 columns; only one fits in 3, plus one space.
        result = force_width("世世", 3)
        assert result == "世 "
        assert visible_width(result) == 3

    def test_pads_wide_text_by_columns(self) -> None:
        result = force_width("日本", 6)
        assert result == "日本  "

    def test_keeps_combining_marks_with_their_base(self) -> None:
        assert force_width("e\u0301x", 1) == "e\u0301"

    def test_zero_width_gives_empty_string(self) -> None:
        assert force_width("anything", 0) == ""


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------


class TestStyles:
    """SGR style helpers."""

    def test_join_styles_layers_in_order(self) -> None:
        assert join_styles("1;34", "7") == "1;34;7"

    def test_join_styles_skips_empty(self) -> None:
        assert join_styles("", "7") == "7"
        assert join_styles("", "") == ""

    def test_stylize_wraps_in_sgr(self) -> None:
        assert stylize("ab", "7") == "\x1b[7mab\x1b[0m"

    def test_stylize_without_style_is_identity(self) -> None:
        assert stylize("ab", "") == "ab"
