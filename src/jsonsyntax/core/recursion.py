"""Recursion limit helpers.

Clamps nesting limits so that the recursive-descent grammar engine fails with
a diagnostic rather than a RecursionError.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

from jsonsyntax.constants import FRAMES_PER_NESTING_LEVEL

__all__ = ["depth_clamp"]

logger = logging.getLogger(__name__)


def depth_clamp(
    requested_depth: int,
    *,
    frames_per_level: int = FRAMES_PER_NESTING_LEVEL,
    reserve_frames: int = 100,
) -> int:
    """Clamp requested nesting depth against Python recursion limit.

    Every nesting level of the grammar costs ``frames_per_level`` stack
    frames. The safe depth is what fits into ``sys.getrecursionlimit()``
    after reserving ``reserve_frames`` for the caller. Logs a warning if
    clamping occurs.

    Args:
        requested_depth: Desired maximum nesting depth
        frames_per_level: Stack frames consumed per nesting level
        reserve_frames: Stack frames to reserve for call overhead (default: 100)

    Returns:
        Safe depth value, clamped if necessary (never below 1)

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(128)  # OK, within limit
        128
        >>> depth_clamp(500)  # Exceeds limit, clamped to 150
        150
    """
    limit = sys.getrecursionlimit()
    max_safe_depth = max(1, (limit - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested nesting depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            limit,
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
