"""Structural grammar rules for JSON documents.

This module provides the recursive rules of the grammar:
- document: one object or array, optionally surrounded by whitespace
- object / pair: ``{`` pairs separated by ``,`` ``}``
- array: ``[`` values separated by ``,`` ``]``
- value: ordered choice over every value form

All recursive rules are co-located in a single module so that ``value``,
``object`` and ``array`` can call each other directly.

Lookahead Patterns:
    A single code point decides every choice:
    - ``"`` starts a string (and every object member name)
    - ``-`` or a digit starts a number
    - ``{`` starts an object, ``[`` an array
    - ``t``, ``f``, ``n`` start the keywords

Security:
    Includes configurable nesting depth limit so that deeply nested input
    (``[[[[...]]]]``) fails with a diagnostic instead of RecursionError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsonsyntax.diagnostics import ErrorTemplate
from jsonsyntax.syntax.parser.context import (
    enter_nested,
    match_token,
    skip_insignificant,
    syntax_error,
)
from jsonsyntax.syntax.parser.primitives import (
    parse_false,
    parse_null,
    parse_number,
    parse_string,
    parse_true,
)
from jsonsyntax.syntax.trace import traced

if TYPE_CHECKING:
    from jsonsyntax.syntax.parser.context import ParseContext
    from jsonsyntax.syntax.scanner import Scanner

__all__ = [
    "parse_array",
    "parse_document",
    "parse_object",
    "parse_pair",
    "parse_value",
]


# =============================================================================
# Document
# =============================================================================


@traced("document")
def parse_document(scanner: Scanner, context: ParseContext) -> bool:
    """Parse a complete document: an object or array followed by end of input.

    Returns:
        Always True; every failure is fatal at document level

    Raises:
        JSONSyntaxError: On the first syntax violation
    """
    skip_insignificant(scanner, context)
    # Scalar, empty and truncated roots all fail here rather than at EOF.
    if not (parse_object(scanner, context) or parse_array(scanner, context)):
        raise syntax_error(ErrorTemplate.expected_root, scanner)
    if not scanner.match_eof():
        raise syntax_error(ErrorTemplate.expected_eof, scanner)
    return True


# =============================================================================
# Containers
# =============================================================================


@traced("object")
def parse_object(scanner: Scanner, context: ParseContext) -> bool:
    """Parse an object: ``{ (pair (, pair)*)? }``

    Member names are not checked for uniqueness.

    Raises:
        JSONSyntaxError: On a trailing comma or a missing ``}``
        DepthLimitExceededError: If the object is nested too deeply
    """
    if not match_token(scanner, context, "{"):
        return False
    nested = enter_nested(scanner, context, "object")
    if parse_pair(scanner, nested):
        while match_token(scanner, nested, ","):
            if not parse_pair(scanner, nested):
                raise syntax_error(ErrorTemplate.expected_pair_after_comma, scanner)
    if not match_token(scanner, context, "}"):
        raise syntax_error(ErrorTemplate.expected_pair_or_close_brace, scanner)
    return True


@traced("pair")
def parse_pair(scanner: Scanner, context: ParseContext) -> bool:
    """Parse an object member: ``string : value``

    Raises:
        JSONSyntaxError: If the name is not followed by ``:`` and a value
    """
    if not parse_string(scanner, context):
        return False
    if not match_token(scanner, context, ":"):
        raise syntax_error(ErrorTemplate.expected_colon, scanner)
    if not parse_value(scanner, context):
        raise syntax_error(ErrorTemplate.expected_value_after_colon, scanner)
    return True


@traced("array")
def parse_array(scanner: Scanner, context: ParseContext) -> bool:
    """Parse an array: ``[ (value (, value)*)? ]``

    Raises:
        JSONSyntaxError: On a trailing comma or a missing ``]``
        DepthLimitExceededError: If the array is nested too deeply
    """
    if not match_token(scanner, context, "["):
        return False
    nested = enter_nested(scanner, context, "array")
    if parse_value(scanner, nested):
        while match_token(scanner, nested, ","):
            if not parse_value(scanner, nested):
                raise syntax_error(ErrorTemplate.expected_value_after_comma, scanner)
    if not match_token(scanner, context, "]"):
        raise syntax_error(ErrorTemplate.expected_close_bracket, scanner)
    return True


# =============================================================================
# Values
# =============================================================================


@traced("value")
def parse_value(scanner: Scanner, context: ParseContext) -> bool:
    """Parse any value; False if the lookahead cannot start one."""
    return (
        parse_string(scanner, context)
        or parse_number(scanner, context)
        or parse_object(scanner, context)
        or parse_array(scanner, context)
        or parse_true(scanner, context)
        or parse_false(scanner, context)
        or parse_null(scanner, context)
    )
