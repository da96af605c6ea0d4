"""JSON syntax checking package.

Provides the lookahead scanner, input adapters, whitespace classes, rule
tracing and the recursive-descent grammar engine.

Python 3.13+.
"""

from .scanner import Scanner
from .source import SupportsRead, TextSource, code_points
from .trace import LoggingTracer, RecordingTracer, TraceEvent, Tracer, TreeTracer, traced
from .whitespace import is_blank, is_line_break, is_whitespace

# Parser last: its rules import the modules above
from .parser import JSONValidator, ParseContext, check, is_valid, validate  # noqa: I001

__all__ = [
    "JSONValidator",
    "LoggingTracer",
    "ParseContext",
    "RecordingTracer",
    "Scanner",
    "SupportsRead",
    "TextSource",
    "TraceEvent",
    "Tracer",
    "TreeTracer",
    "check",
    "code_points",
    "is_blank",
    "is_line_break",
    "is_valid",
    "is_whitespace",
    "traced",
    "validate",
]
