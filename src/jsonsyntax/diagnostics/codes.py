"""Diagnostic codes and data structures.

Defines error codes, source locations, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceLocation",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by the construct that detected the violation:
        3000-3009: Document-level errors (root value, end of input)
        3010-3019: Object and pair errors
        3020-3029: Array errors
        3030-3039: String and escape errors
        3040-3049: Number errors
        3050-3059: Keyword errors
        3090-3099: Resource limits
    """

    # Document (3000-3009)
    EXPECTED_ROOT = 3001
    EXPECTED_EOF = 3002

    # Object / pair (3010-3019)
    EXPECTED_PAIR_AFTER_COMMA = 3011
    EXPECTED_PAIR_OR_CLOSE_BRACE = 3012
    EXPECTED_COLON = 3013
    EXPECTED_VALUE_AFTER_COLON = 3014

    # Array (3020-3029)
    EXPECTED_VALUE_AFTER_COMMA = 3021
    EXPECTED_CLOSE_BRACKET = 3022

    # String (3030-3039)
    UNTERMINATED_STRING = 3031
    INVALID_UNICODE_ESCAPE = 3032

    # Number (3040-3049)
    EXPECTED_INTEGER_DIGIT = 3040
    EXPECTED_FRACTION_DIGIT = 3041
    EXPECTED_EXPONENT_DIGIT = 3042

    # Keywords (3050-3059)
    UNEXPECTED_TOKEN = 3051

    # Limits (3090-3099)
    NESTING_DEPTH_EXCEEDED = 3091


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Lookahead position for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. ``offset`` is the index of the lookahead code point.

    Attributes:
        row: Row number (1-indexed)
        column: Column number; 0 on a line-break character, 1 for the first
            character after it
        offset: Index of the lookahead code point in the source (0-indexed)
    """

    row: int
    column: int
    offset: int = 0

    def __post_init__(self) -> None:
        """Validate SourceLocation invariants.

        Raises:
            ValueError: If row is less than 1 (rows are 1-indexed), or column
                or offset is negative.
        """
        if self.row < 1:
            msg = f"SourceLocation.row must be >= 1 (1-indexed), got {self.row}"
            raise ValueError(msg)
        if self.column < 0:
            msg = f"SourceLocation.column must be >= 0, got {self.column}"
            raise ValueError(msg)
        if self.offset < 0:
            msg = f"SourceLocation.offset must be >= 0, got {self.offset}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (editors, CI annotations).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        location: Lookahead position when the error was detected
        found: Rendering of the lookahead (literal character or ``EOF``)
        rule: Grammar rule that detected the error
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    location: SourceLocation | None = None
    found: str | None = None
    rule: str | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as the one-line validator report.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            ERROR(1:6): expected a value after ':' (next: '}')

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
