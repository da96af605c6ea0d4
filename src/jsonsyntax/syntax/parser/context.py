"""Per-run parse context and shared rule helpers.

ParseContext is created once per validation run and passed to every rule
next to the Scanner. Nested objects and arrays receive a copy with the depth
incremented, so no rule ever mutates shared state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from jsonsyntax.config import ValidatorConfig
from jsonsyntax.constants import MAX_DEPTH
from jsonsyntax.diagnostics import (
    DepthLimitExceededError,
    Diagnostic,
    ErrorTemplate,
    JSONSyntaxError,
    SourceLocation,
)

if TYPE_CHECKING:
    from jsonsyntax.syntax.scanner import Scanner
    from jsonsyntax.syntax.trace import Tracer

__all__ = [
    "ParseContext",
    "enter_nested",
    "match_token",
    "skip_insignificant",
    "syntax_error",
]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for grammar rules.

    Attributes:
        max_nesting_depth: Maximum number of nested objects/arrays
        insignificant_whitespace: Skip whitespace between tokens
        tracer: Receives rule enter/leave events (None disables tracing)
        current_depth: Current nesting depth (0 = outside the root value)
    """

    max_nesting_depth: int = MAX_DEPTH
    insignificant_whitespace: bool = True
    tracer: Tracer | None = None
    current_depth: int = 0

    @classmethod
    def from_config(
        cls,
        config: ValidatorConfig,
        *,
        tracer: Tracer | None = None,
        max_nesting_depth: int | None = None,
    ) -> ParseContext:
        """Build the root context for one run.

        Args:
            config: Validation options
            tracer: Optional receiver of rule events
            max_nesting_depth: Effective limit overriding
                ``config.max_nesting_depth`` (e.g. after clamping)
        """
        return cls(
            max_nesting_depth=(
                config.max_nesting_depth if max_nesting_depth is None else max_nesting_depth
            ),
            insignificant_whitespace=config.insignificant_whitespace,
            tracer=tracer,
        )

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_nested(self) -> ParseContext:
        """Create new context with incremented depth for an object or array."""
        return replace(self, current_depth=self.current_depth + 1)


def syntax_error(
    template: Callable[[SourceLocation, str], Diagnostic], scanner: Scanner
) -> JSONSyntaxError:
    """Build the fatal error for ``template`` at the scanner's lookahead.

    Rules raise the returned exception directly:
    ``raise syntax_error(ErrorTemplate.expected_colon, scanner)``.
    """
    return JSONSyntaxError(template(scanner.location(), scanner.lookahead_text()))


def skip_insignificant(scanner: Scanner, context: ParseContext) -> None:
    """Skip whitespace if the context treats it as insignificant."""
    if context.insignificant_whitespace:
        scanner.skip_whitespace()


def match_token(scanner: Scanner, context: ParseContext, expected: str) -> bool:
    """Match a structural token and any insignificant whitespace after it.

    Returns:
        True if ``expected`` was consumed, False (nothing consumed) otherwise
    """
    if scanner.lookahead != expected:
        return False
    if context.insignificant_whitespace:
        scanner.advance_skipping_whitespace()
    else:
        scanner.advance()
    return True


def enter_nested(scanner: Scanner, context: ParseContext, rule: str) -> ParseContext:
    """Descend one nesting level for ``rule``.

    Raises:
        DepthLimitExceededError: If the context is already at its limit
    """
    if context.is_depth_exceeded():
        diagnostic = ErrorTemplate.nesting_depth_exceeded(
            context.max_nesting_depth, rule, scanner.location(), scanner.lookahead_text()
        )
        raise DepthLimitExceededError(diagnostic)
    return context.enter_nested()
