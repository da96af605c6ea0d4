"""Validator configuration.

Provides a single frozen dataclass that encapsulates every knob the grammar
engine exposes, so that ``JSONValidator`` and the command-line tool share one
typed object instead of repeating keyword parameters.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from jsonsyntax.constants import MAX_DEPTH

__all__ = ["ValidatorConfig"]


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Immutable configuration for JSON syntax validation.

    All fields have sensible defaults; constructing ``ValidatorConfig()`` with
    no arguments produces the standard JSON validator.

    Attributes:
        insignificant_whitespace: Skip whitespace before the document, after
            every structural token and after every scalar value (default:
            True). When False, whitespace is only accepted inside strings.
        max_nesting_depth: Maximum nesting depth of objects and arrays
            (default: 128). Clamped against the interpreter recursion limit
            when the validator is built.

    Example:
        >>> from jsonsyntax import JSONValidator, ValidatorConfig
        >>> strict = JSONValidator(ValidatorConfig(insignificant_whitespace=False))
        >>> strict.validate('{"a":1}').is_valid
        True
        >>> strict.validate('{"a": 1}').is_valid
        False
    """

    insignificant_whitespace: bool = True
    max_nesting_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_nesting_depth is not positive.
        """
        if self.max_nesting_depth <= 0:
            msg = "max_nesting_depth must be positive"
            raise ValueError(msg)
