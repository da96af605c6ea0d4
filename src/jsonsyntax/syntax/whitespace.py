"""Character classification for the JSON scanner and grammar.

Whitespace follows the classic C library ``iswspace``/``iswblank`` classes
for Unicode locales, not ``str.isspace()``: the no-break spaces (U+00A0,
U+2007, U+202F) and the ASCII separators U+001C..U+001F are NOT whitespace.

Row bookkeeping depends on the split between the two classes:

    whitespace  = blank | line_break
    line_break  = whitespace - blank   (LF, VT, FF, CR, U+2028, U+2029)

Every line-break character starts a new row, so CRLF counts as two.
"""

__all__ = [
    "ASCII_DIGITS",
    "BLANK",
    "HEX_DIGITS",
    "LINE_BREAK",
    "NONZERO_DIGITS",
    "WHITESPACE",
    "is_blank",
    "is_line_break",
    "is_whitespace",
]

# Horizontal whitespace: tab, space, Ogham space mark, en quad .. six-per-em
# space, punctuation space .. hair space, medium mathematical space,
# ideographic space.
BLANK: frozenset[str] = frozenset(
    "\t \u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2008\u2009\u200a"
    "\u205f\u3000"
)

LINE_BREAK: frozenset[str] = frozenset("\n\v\f\r\u2028\u2029")

WHITESPACE: frozenset[str] = BLANK | LINE_BREAK

# ASCII only; str.isdigit() would accept Unicode digits like "²" or "٣".
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")
NONZERO_DIGITS: frozenset[str] = frozenset("123456789")
HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")


def is_whitespace(ch: str | None) -> bool:
    """Check if ``ch`` is whitespace (False at end of input)."""
    return ch is not None and ch in WHITESPACE


def is_blank(ch: str | None) -> bool:
    """Check if ``ch`` is horizontal whitespace (False at end of input)."""
    return ch is not None and ch in BLANK


def is_line_break(ch: str | None) -> bool:
    """Check if ``ch`` starts a new row (whitespace that is not blank)."""
    return ch is not None and ch in LINE_BREAK
