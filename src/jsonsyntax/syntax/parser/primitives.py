"""Scalar grammar rules: strings, escapes, numbers, digits and keywords.

Every rule has the signature ``(scanner, context) -> bool``:
    - True: the construct was recognized and consumed
    - False: the lookahead cannot start the construct; nothing consumed
    - JSONSyntaxError: the construct was committed to and then violated

Complete scalars are followed by insignificant whitespace skipping, so the
caller always sees the next meaningful code point.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsonsyntax.diagnostics import ErrorTemplate, JSONSyntaxError
from jsonsyntax.syntax.parser.context import skip_insignificant, syntax_error
from jsonsyntax.syntax.trace import traced
from jsonsyntax.syntax.whitespace import ASCII_DIGITS, HEX_DIGITS, NONZERO_DIGITS

if TYPE_CHECKING:
    from jsonsyntax.syntax.parser.context import ParseContext
    from jsonsyntax.syntax.scanner import Scanner

__all__ = [
    "parse_digit",
    "parse_escape",
    "parse_false",
    "parse_nonzero",
    "parse_null",
    "parse_number",
    "parse_string",
    "parse_true",
    "parse_unescaped",
]

# Characters that end or interrupt an unescaped string run
_STRING_SPECIAL: frozenset[str] = frozenset('"\\')

# Escapes that stand for themselves after a backslash
_SINGLE_ESCAPES: frozenset[str] = frozenset('"\\/bfnrt')

_UNICODE_ESCAPE_DIGITS: int = 4

_EXPONENT_MARKERS: frozenset[str] = frozenset("eE")
_EXPONENT_SIGNS: frozenset[str] = frozenset("+-")


# =============================================================================
# Digits
# =============================================================================


@traced("digit")
def parse_digit(scanner: Scanner, context: ParseContext) -> bool:  # noqa: ARG001
    """Match one ASCII digit 0-9."""
    return scanner.match_any(ASCII_DIGITS)


@traced("nonzero")
def parse_nonzero(scanner: Scanner, context: ParseContext) -> bool:  # noqa: ARG001
    """Match one ASCII digit 1-9."""
    return scanner.match_any(NONZERO_DIGITS)


def _digits(scanner: Scanner, context: ParseContext) -> None:
    while parse_digit(scanner, context):
        pass


# =============================================================================
# Strings
# =============================================================================


@traced("unescaped")
def parse_unescaped(scanner: Scanner, context: ParseContext) -> bool:  # noqa: ARG001
    """Match any single code point other than ``"`` or ``\\``.

    Control characters are accepted as-is.
    """
    return scanner.match_none_of(_STRING_SPECIAL)


@traced("escape")
def parse_escape(scanner: Scanner, context: ParseContext) -> bool:  # noqa: ARG001
    """Parse an escape sequence: ``\\"`` ``\\\\`` ``\\/`` ``\\b`` ``\\f``
    ``\\n`` ``\\r`` ``\\t`` or ``\\uXXXX``.

    An unknown escape character is a no-match after the backslash has been
    consumed; the enclosing string then reports the character as unterminated.

    Raises:
        JSONSyntaxError: If ``\\u`` is not followed by exactly four hex digits
    """
    if not scanner.match("\\"):
        return False
    if scanner.match_any(_SINGLE_ESCAPES):
        return True
    if not scanner.match("u"):
        return False
    for _ in range(_UNICODE_ESCAPE_DIGITS):
        if not scanner.match_any(HEX_DIGITS):
            raise syntax_error(ErrorTemplate.invalid_unicode_escape, scanner)
    return True


@traced("string")
def parse_string(scanner: Scanner, context: ParseContext) -> bool:
    """Parse a double-quoted string.

    Examples:
        "hello"
        "tab\\tseparated"
        "caf\\u00e9"

    Raises:
        JSONSyntaxError: If the closing quote is missing
    """
    if not scanner.match('"'):
        return False
    while parse_unescaped(scanner, context) or parse_escape(scanner, context):
        pass
    if not scanner.match('"'):
        raise syntax_error(ErrorTemplate.unterminated_string, scanner)
    skip_insignificant(scanner, context)
    return True


# =============================================================================
# Numbers
# =============================================================================


@traced("number")
def parse_number(scanner: Scanner, context: ParseContext) -> bool:
    """Parse a number: ``-? (0 | [1-9][0-9]*) (. [0-9]+)? ([eE] [+-]? [0-9]+)?``

    Leading zeros are not part of the integer: ``01`` matches ``0`` and leaves
    ``1`` for the caller to reject.

    Raises:
        JSONSyntaxError: If a sign, decimal point or exponent marker is not
            followed by the digits it requires
    """
    signed = scanner.match("-")
    if scanner.match("0"):
        pass
    elif parse_nonzero(scanner, context):
        _digits(scanner, context)
    elif signed:
        # A consumed "-" cannot be given back; no-match here would accept "[-]".
        raise syntax_error(ErrorTemplate.expected_integer_digit, scanner)
    else:
        return False

    if scanner.match("."):
        if not parse_digit(scanner, context):
            raise syntax_error(ErrorTemplate.expected_fraction_digit, scanner)
        _digits(scanner, context)

    if scanner.match_any(_EXPONENT_MARKERS):
        scanner.match_any(_EXPONENT_SIGNS)
        if not parse_digit(scanner, context):
            raise syntax_error(ErrorTemplate.expected_exponent_digit, scanner)
        _digits(scanner, context)

    skip_insignificant(scanner, context)
    return True


# =============================================================================
# Keywords
# =============================================================================


def _parse_keyword(keyword: str, scanner: Scanner, context: ParseContext) -> bool:
    # Commits on the first letter; no other value starts with t, f or n.
    if not scanner.match(keyword[0]):
        return False
    for expected in keyword[1:]:
        if not scanner.match(expected):
            diagnostic = ErrorTemplate.unexpected_token(
                keyword, scanner.location(), scanner.lookahead_text()
            )
            raise JSONSyntaxError(diagnostic)
    skip_insignificant(scanner, context)
    return True


@traced("true")
def parse_true(scanner: Scanner, context: ParseContext) -> bool:
    """Parse the literal ``true``."""
    return _parse_keyword("true", scanner, context)


@traced("false")
def parse_false(scanner: Scanner, context: ParseContext) -> bool:
    """Parse the literal ``false``."""
    return _parse_keyword("false", scanner, context)


@traced("null")
def parse_null(scanner: Scanner, context: ParseContext) -> bool:
    """Parse the literal ``null``."""
    return _parse_keyword("null", scanner, context)
