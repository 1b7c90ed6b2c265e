"""
Summary: Render a time difference as an English "N units ago" phrase.
Why: Give the preview a compact sense of how recently a repository moved.
"""

from __future__ import annotations

import math
from typing import Final

JUST_NOW: Final[str] = "just now"

# (unit, length in seconds, smallest count that selects the unit)
# Weeks start at two so ten days still reads as days.
_UNITS: Final[tuple[tuple[str, float, int], ...]] = (
    ("year", 365.25 * 86400, 1),
    ("month", 30.44 * 86400, 1),
    ("week", 7 * 86400, 2),
    ("day", 86400, 1),
    ("hour", 3600, 1),
    ("minute", 60, 1),
    ("second", 1, 1),
)


def format_relative_time(delta_seconds: float) -> str:
    """Format ``now - then`` in seconds.

    The largest unit whose floored count reaches its minimum is used:
    ``30`` gives ``"30 seconds ago"``, ``1`` gives ``"1 second ago"``.
    Zero is ``"just now"``; negative deltas (future timestamps, clock skew)
    read ``"5 minutes from now"``.
    """
    magnitude = abs(delta_seconds)
    suffix = "ago" if delta_seconds >= 0 else "from now"

    for unit, length, minimum in _UNITS:
        count = math.floor(magnitude / length)
        if count >= minimum:
            plural = "" if count == 1 else "s"
            return f"{count} {unit}{plural} {suffix}"
    return JUST_NOW


def relative_time_between(then: float, now: float) -> str:
    """Format the distance from ``then`` to ``now`` (both POSIX timestamps)."""

    return format_relative_time(now - then)


__all__ = ["JUST_NOW", "format_relative_time", "relative_time_between"]
