"""Diagnostic system for JSON syntax errors.

Provides structured error diagnostics with codes, locations, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceLocation
from .errors import (
    DepthLimitExceededError,
    JSONSyntaxError,
    JSONSyntaxValidationError,
    SourceReadError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "JSONSyntaxError",
    "JSONSyntaxValidationError",
    "OutputFormat",
    "SourceLocation",
    "SourceReadError",
    "ValidationResult",
]
