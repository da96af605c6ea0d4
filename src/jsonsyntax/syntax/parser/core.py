"""JSON syntax validator entry point.

This module provides the JSONValidator class that runs the grammar rules of
:mod:`jsonsyntax.syntax.parser.rules` over one source and turns the outcome
into a :class:`~jsonsyntax.diagnostics.ValidationResult`.

Architecture:
    One :class:`~jsonsyntax.syntax.scanner.Scanner` and one root
    :class:`~jsonsyntax.syntax.parser.context.ParseContext` are created per
    run. Rules return True/False for match/no-match and raise
    :class:`~jsonsyntax.diagnostics.JSONSyntaxError` for fatal violations, so
    the first error ends the run with the scanner parked on the offending
    code point.

See Also:
    - :mod:`jsonsyntax.syntax.scanner` - Lookahead and row/column tracking
    - :mod:`jsonsyntax.syntax.parser.rules` - Grammar rules
    - :mod:`jsonsyntax.syntax.trace` - Optional rule tracing
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jsonsyntax.config import ValidatorConfig
from jsonsyntax.core.recursion import depth_clamp
from jsonsyntax.diagnostics import JSONSyntaxError, ValidationResult
from jsonsyntax.syntax.parser.context import ParseContext
from jsonsyntax.syntax.parser.rules import parse_document
from jsonsyntax.syntax.scanner import Scanner
from jsonsyntax.syntax.source import code_points

if TYPE_CHECKING:
    from jsonsyntax.syntax.source import TextSource
    from jsonsyntax.syntax.trace import Tracer

__all__ = ["JSONValidator", "check", "is_valid", "validate"]

logger = logging.getLogger(__name__)


class JSONValidator:
    """Recursive-descent JSON syntax validator.

    Design:
    - Validates syntax only; no values are built
    - Stops at the first error and reports its row, column and lookahead
    - Instances are immutable and reusable; all run state is per call

    Security:
    - Configurable max_nesting_depth prevents RecursionError on deeply
      nested input; it is clamped to what the interpreter stack allows

    Example:
        >>> validator = JSONValidator()
        >>> validator.validate('{"a": [1, 2.5e3, true, null]}').is_valid
        True
        >>> result = validator.validate('{"a":1,}')
        >>> result.diagnostic.format_error()
        "ERROR(1:8): expected another pair after ',' (next: '}')"
    """

    __slots__ = ("_config", "_max_nesting_depth")

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        """Initialize validator.

        Args:
            config: Validation options (default: ``ValidatorConfig()``)
        """
        self._config = config if config is not None else ValidatorConfig()
        self._max_nesting_depth = depth_clamp(self._config.max_nesting_depth)

    @property
    def config(self) -> ValidatorConfig:
        """Configuration this validator was built with."""
        return self._config

    @property
    def max_nesting_depth(self) -> int:
        """Effective nesting limit after clamping to the recursion limit."""
        return self._max_nesting_depth

    def _context(self, tracer: Tracer | None) -> ParseContext:
        return ParseContext.from_config(
            self._config, tracer=tracer, max_nesting_depth=self._max_nesting_depth
        )

    def _run(self, scanner: Scanner, tracer: Tracer | None) -> None:
        logger.debug(
            "Validating document (insignificant_whitespace=%s, max_nesting_depth=%d)",
            self._config.insignificant_whitespace,
            self._max_nesting_depth,
        )
        parse_document(scanner, self._context(tracer))
        logger.debug("Document accepted after %d code points", scanner.offset)

    def validate(self, source: TextSource, *, tracer: Tracer | None = None) -> ValidationResult:
        """Validate one document.

        Args:
            source: ``str``, text stream, or iterable of strings
            tracer: Optional receiver of rule enter/leave events

        Returns:
            ValidationResult carrying the first diagnostic, if any

        Raises:
            SourceReadError: If the input stream cannot be read
        """
        scanner = Scanner(code_points(source))
        try:
            self._run(scanner, tracer)
        except JSONSyntaxError as e:
            if e.diagnostic is None:
                raise
            location = e.diagnostic.location
            logger.info(
                "Document rejected at %s: %s",
                f"{location.row}:{location.column}" if location is not None else "?",
                e.diagnostic.message,
            )
            return ValidationResult.invalid(e.diagnostic, consumed=scanner.offset)
        return ValidationResult.valid(consumed=scanner.offset)

    def check(self, source: TextSource, *, tracer: Tracer | None = None) -> None:
        """Validate one document, raising on the first error.

        Raises:
            JSONSyntaxError: If the document is not valid JSON
            SourceReadError: If the input stream cannot be read
        """
        self._run(Scanner(code_points(source)), tracer)


def validate(
    source: TextSource,
    *,
    config: ValidatorConfig | None = None,
    tracer: Tracer | None = None,
) -> ValidationResult:
    """Validate ``source`` with a one-off JSONValidator.

    Example:
        >>> validate("[1, 2, 3]").is_valid
        True
        >>> validate("true").diagnostic.format_error()
        "ERROR(1:1): expected an object or array (next: 't')"
    """
    return JSONValidator(config).validate(source, tracer=tracer)


def check(
    source: TextSource,
    *,
    config: ValidatorConfig | None = None,
    tracer: Tracer | None = None,
) -> None:
    """Validate ``source``, raising JSONSyntaxError on the first error."""
    JSONValidator(config).check(source, tracer=tracer)


def is_valid(source: TextSource, *, config: ValidatorConfig | None = None) -> bool:
    """Check whether ``source`` is a syntactically valid JSON document."""
    return JSONValidator(config).validate(source).is_valid
