"""jsonsyntax exception hierarchy with structured diagnostics.

All grammar violations surface as JSONSyntaxError carrying a Diagnostic.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class JSONSyntaxValidationError(Exception):
    """Base exception for all jsonsyntax errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize JSONSyntaxValidationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class JSONSyntaxError(JSONSyntaxValidationError):
    """Fatal grammar violation.

    Raised at the point of detection and never recovered locally; the first
    one ends the validation run.
    """


class DepthLimitExceededError(JSONSyntaxError):
    """Objects or arrays nested deeper than the configured limit."""


class SourceReadError(JSONSyntaxValidationError):
    """Input could not be read or decoded into code points."""
