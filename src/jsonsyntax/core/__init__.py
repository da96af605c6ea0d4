"""Core utilities shared across the syntax and command-line layers.

Exports:
    depth_clamp: Clamp nesting limits against the interpreter recursion limit

Python 3.13+.
"""

from .recursion import depth_clamp

__all__ = ["depth_clamp"]
