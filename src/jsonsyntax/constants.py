"""Shared constants for jsonsyntax.

This module provides centralized configuration constants used across
the syntax, diagnostics, and command-line packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for nested objects and arrays
- Input adapters: Chunk size used when pulling code points from streams
- Output strings: Fixed texts printed by the validator

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "FRAMES_PER_NESTING_LEVEL",
    # Input adapters
    "READ_CHUNK_SIZE",
    # Output strings
    "EOF_TOKEN",
    "SUCCESS_MESSAGE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# The grammar engine is recursive descent: every nested object or array costs
# a handful of Python stack frames (value -> array -> value -> ...). Without a
# limit, adversarial input such as "[[[[[[..." raises RecursionError instead
# of a diagnostic. The limit turns that into an ordinary syntax error.
#
# 128 levels exceeds any realistic document while staying well below the
# default interpreter recursion limit (1000) once frames per level are
# accounted for.
#
# ============================================================================

# Maximum nesting depth of objects and arrays.
MAX_DEPTH: int = 128

# Worst-case stack frames consumed per nesting level: value, object and pair,
# each doubled by the tracing wrapper around the rule.
FRAMES_PER_NESTING_LEVEL: int = 6

# ============================================================================
# INPUT ADAPTERS
# ============================================================================

# Characters requested per read() when a text stream is used as a source.
READ_CHUNK_SIZE: int = 8192

# ============================================================================
# OUTPUT STRINGS
# ============================================================================

# Rendering of the lookahead once the source is exhausted.
EOF_TOKEN: str = "EOF"

# Printed by the command-line tool after a successful validation.
SUCCESS_MESSAGE: str = "Successful parse!"
