"""Single-lookahead scanner for the JSON grammar engine.

Implements the one-code-point lookahead discipline shared by every grammar
rule. Python 3.13+. Zero external dependencies.

Design Philosophy:
    - One Scanner per validation run, threaded explicitly through every rule
      (no module-level lookahead)
    - EOF is a state (``is_eof``), and ``lookahead`` is None only then
    - Failed matches never consume input
    - Location is maintained incrementally while scanning, so diagnostics
      never rescan the source

Location Rules:
    - Row starts at 1, column at 0 before the first code point is read
    - Reading a code point increments the column
    - Reading a line-break code point (LF, VT, FF, CR, U+2028, U+2029)
      increments the row and resets the column to 0, so the first code point
      after it is column 1 and CRLF counts as two rows
    - Reading past the last code point still increments the column
"""

from __future__ import annotations

from collections.abc import Container, Iterable, Iterator

from jsonsyntax.constants import EOF_TOKEN
from jsonsyntax.diagnostics import SourceLocation
from jsonsyntax.syntax.whitespace import LINE_BREAK, WHITESPACE

__all__ = ["Scanner"]


class Scanner:
    """Mutable lookahead cell plus row/column tracking.

    The scanner is primed on construction: the first code point is already
    in the lookahead cell when the first rule runs.

    Example:
        >>> scanner = Scanner(iter('{"a"}'))
        >>> scanner.lookahead
        '{'
        >>> scanner.match("{")
        True
        >>> scanner.match("x")  # No match, nothing consumed
        False
        >>> scanner.lookahead
        '"'
        >>> scanner.row, scanner.column
        (1, 2)
    """

    __slots__ = ("_column", "_lookahead", "_offset", "_row", "_source")

    def __init__(self, source: Iterable[str]) -> None:
        """Create a scanner over ``source`` and read the first code point.

        Args:
            source: Iterable yielding one code point per step (see
                :func:`jsonsyntax.syntax.source.code_points`)
        """
        self._source: Iterator[str] = iter(source)
        self._lookahead: str | None = ""
        self._row = 1
        self._column = 0
        self._offset = -1
        self.advance()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def lookahead(self) -> str | None:
        """Next unconsumed code point, or None at end of input."""
        return self._lookahead

    @property
    def is_eof(self) -> bool:
        """Check if the source is exhausted."""
        return self._lookahead is None

    @property
    def row(self) -> int:
        """Row of the lookahead (1-indexed)."""
        return self._row

    @property
    def column(self) -> int:
        """Column of the lookahead."""
        return self._column

    @property
    def offset(self) -> int:
        """Index of the lookahead code point in the source."""
        return self._offset

    def location(self) -> SourceLocation:
        """Snapshot of the lookahead position for diagnostics."""
        return SourceLocation(row=self._row, column=self._column, offset=self._offset)

    def lookahead_text(self) -> str:
        """Render the lookahead for diagnostics: the character itself or ``EOF``."""
        if self._lookahead is None:
            return EOF_TOKEN
        return self._lookahead

    # ------------------------------------------------------------------
    # Advancing
    # ------------------------------------------------------------------

    def advance(self) -> None:
        """Consume the lookahead and read the next code point.

        No-op once end of input has been reached.
        """
        if self._lookahead is None:
            return
        ch = next(self._source, None)
        self._lookahead = ch
        self._offset += 1
        self._column += 1
        if ch is not None and ch in LINE_BREAK:
            self._column = 0
            self._row += 1

    def skip_whitespace(self) -> None:
        """Advance while the lookahead is whitespace."""
        while self._lookahead is not None and self._lookahead in WHITESPACE:
            self.advance()

    def advance_skipping_whitespace(self) -> None:
        """Consume the lookahead, then skip any whitespace that follows."""
        if self._lookahead is None:
            return
        self.advance()
        self.skip_whitespace()

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def match(self, expected: str) -> bool:
        """Consume the lookahead if it equals ``expected``.

        Returns:
            True if consumed, False (nothing consumed) otherwise
        """
        if self._lookahead is not None and self._lookahead == expected:
            self.advance()
            return True
        return False

    def match_any(self, accepted: Container[str]) -> bool:
        """Consume the lookahead if it is a member of ``accepted``.

        Used for character classes (digits, hex digits, exponent markers).
        """
        if self._lookahead is not None and self._lookahead in accepted:
            self.advance()
            return True
        return False

    def match_none_of(self, excluded: Container[str]) -> bool:
        """Consume one code point unless at EOF or a member of ``excluded``.

        Example:
            >>> scanner = Scanner(iter('a"'))
            >>> scanner.match_none_of('"\\\\')
            True
            >>> scanner.match_none_of('"\\\\')
            False
        """
        if self._lookahead is not None and self._lookahead not in excluded:
            self.advance()
            return True
        return False

    def match_eof(self) -> bool:
        """Check for end of input (nothing to consume)."""
        return self._lookahead is None

    def __repr__(self) -> str:
        """Debug representation with lookahead and location."""
        return (
            f"Scanner(lookahead={self.lookahead_text()!r}, "
            f"row={self._row}, column={self._column}, offset={self._offset})"
        )
