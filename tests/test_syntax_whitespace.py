"""Tests for whitespace and digit character classes."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from jsonsyntax.syntax.whitespace import (
    ASCII_DIGITS,
    BLANK,
    HEX_DIGITS,
    LINE_BREAK,
    NONZERO_DIGITS,
    WHITESPACE,
    is_blank,
    is_line_break,
    is_whitespace,
)

_LINE_BREAK_CODES = (0x0A, 0x0B, 0x0C, 0x0D, 0x2028, 0x2029)
_BLANK_CODES = (
    0x09, 0x20, 0x1680,
    0x2000, 0x2001, 0x2002, 0x2003, 0x2004, 0x2005, 0x2006,
    0x2008, 0x2009, 0x200A,
    0x205F, 0x3000,
)  # fmt: skip


class TestWhitespaceClasses:
    """Membership of the whitespace classes."""

    def test_line_breaks(self) -> None:
        """Line breaks are LF, VT, FF, CR, LINE and PARAGRAPH SEPARATOR."""
        assert {chr(c) for c in _LINE_BREAK_CODES} == LINE_BREAK

    def test_blanks(self) -> None:
        """Blanks are tab, space and the Unicode space separators."""
        assert {chr(c) for c in _BLANK_CODES} == BLANK

    def test_whitespace_is_blank_plus_line_break(self) -> None:
        """The two classes partition whitespace."""
        assert BLANK | LINE_BREAK == WHITESPACE
        assert not BLANK & LINE_BREAK

    @pytest.mark.parametrize("code", [0x00A0, 0x2007, 0x202F, 0xFEFF, 0x200B, 0x85])
    def test_non_breaking_and_zero_width_spaces_excluded(self, code: int) -> None:
        """No-break, figure and zero-width spaces are not whitespace."""
        assert not is_whitespace(chr(code))

    def test_predicates_are_false_at_eof(self) -> None:
        """None (end of input) is in no class."""
        assert not is_whitespace(None)
        assert not is_blank(None)
        assert not is_line_break(None)

    @given(st.characters())
    def test_line_break_iff_whitespace_and_not_blank(self, ch: str) -> None:
        """line_break = whitespace - blank for every code point."""
        assert is_line_break(ch) == (is_whitespace(ch) and not is_blank(ch))


class TestDigitClasses:
    """Digits are ASCII only."""

    def test_digit_sets(self) -> None:
        """Decimal, nonzero and hex digit sets."""
        assert "".join(sorted(ASCII_DIGITS)) == "0123456789"
        assert "0" not in NONZERO_DIGITS
        assert ASCII_DIGITS <= HEX_DIGITS
        assert set("abcdefABCDEF") <= HEX_DIGITS

    @pytest.mark.parametrize("code", [0x0660, 0xFF11, 0x00B2])
    def test_non_ascii_digits_excluded(self, code: int) -> None:
        """Arabic-Indic, fullwidth and superscript digits are not digits."""
        assert chr(code) not in ASCII_DIGITS
        assert chr(code) not in HEX_DIGITS
