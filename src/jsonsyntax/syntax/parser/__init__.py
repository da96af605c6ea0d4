"""JSON grammar engine.

This module provides the JSONValidator class and the grammar rules it runs,
organized into focused submodules.

Module Organization:
- core.py: JSONValidator class and validate()/check()/is_valid() entry points
- context.py: ParseContext plus token and error helpers shared by all rules
- primitives.py: Scalar rules (strings, escapes, numbers, digits, keywords)
- rules.py: Recursive rules (document, object, pair, array, value)

Public API:
    JSONValidator: Main validator class
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from jsonsyntax.syntax.parser.context import ParseContext
from jsonsyntax.syntax.parser.core import JSONValidator, check, is_valid, validate

__all__ = ["JSONValidator", "ParseContext", "check", "is_valid", "validate"]
