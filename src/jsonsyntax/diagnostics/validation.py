"""Validation result for one JSON syntax check.

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one document.

    Immutable result object; at most one diagnostic is ever attached because
    validation stops at the first syntax error.

    Attributes:
        diagnostic: First syntax error, or None if the document is valid
        consumed: Code points consumed before the run ended

    Example:
        >>> result = ValidationResult.valid(7)
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    diagnostic: Diagnostic | None = None
    consumed: int = 0

    @property
    def is_valid(self) -> bool:
        """Check if the document passed validation."""
        return self.diagnostic is None

    @property
    def error_count(self) -> int:
        """Number of errors (0 or 1)."""
        return 0 if self.diagnostic is None else 1

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code of the failure, if any."""
        return None if self.diagnostic is None else self.diagnostic.code

    def __bool__(self) -> bool:
        """Truthiness mirrors is_valid."""
        return self.is_valid

    @staticmethod
    def valid(consumed: int = 0) -> "ValidationResult":
        """Create a passing result."""
        return ValidationResult(diagnostic=None, consumed=consumed)

    @staticmethod
    def invalid(diagnostic: Diagnostic, consumed: int = 0) -> "ValidationResult":
        """Create a failing result."""
        return ValidationResult(diagnostic=diagnostic, consumed=consumed)
