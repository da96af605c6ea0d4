"""jsonsyntax - recursive-descent JSON syntax validator.

Checks that a text is a syntactically valid JSON document (an object or an
array at the root) without building any values, and reports the first error
with its row, column and the offending code point.

Public API:
    validate - Validate a document, returning a ValidationResult
    check - Validate a document, raising JSONSyntaxError on the first error
    is_valid - Boolean shortcut
    JSONValidator - Reusable validator bound to a ValidatorConfig
    ValidatorConfig - Whitespace and nesting options
    TreeTracer - Rule-by-rule trace of a validation run

Exceptions:
    JSONSyntaxValidationError - Base exception class
    JSONSyntaxError - Syntax errors (carries a Diagnostic)
    DepthLimitExceededError - Nesting limit exceeded
    SourceReadError - Input could not be read

Submodules:
    jsonsyntax.syntax - Scanner, input adapters, tracing and grammar rules
    jsonsyntax.diagnostics - Codes, templates, formatter and results
    jsonsyntax.cli - Command-line interface
"""

# Essential Public API - Minimal exports for clean namespace
from .config import ValidatorConfig
from .diagnostics import (
    DepthLimitExceededError,
    Diagnostic,
    DiagnosticCode,
    JSONSyntaxError,
    JSONSyntaxValidationError,
    SourceReadError,
    ValidationResult,
)
from .syntax import JSONValidator, TreeTracer, check, is_valid, validate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("jsonsyntax")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "JSONSyntaxError",
    "JSONSyntaxValidationError",
    "JSONValidator",
    "SourceReadError",
    "TreeTracer",
    "ValidationResult",
    "ValidatorConfig",
    "__version__",
    "check",
    "is_valid",
    "validate",
]
