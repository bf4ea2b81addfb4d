"""Small numeric helpers used by the game's physics and drawing code."""

from __future__ import annotations

from typing import TypeVar

_Number = TypeVar("_Number", int, float)


def sign(num: float) -> int:
    """Return -1 for a negative number, 1 for a positive one and 0 for zero."""
    if num < 0:
        return -1
    if num > 0:
        return 1
    return 0


def clamp(num: _Number, low: _Number, high: _Number) -> _Number:
    """Keep ``num`` within ``low`` and ``high``.

    The lower bound is checked first, as in the game's own clamp.
    """
    if num < low:
        return low
    if num > high:
        return high
    return num