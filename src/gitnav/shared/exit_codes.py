"""Process exit codes shared by the CLI commands.

Values follow ``sysexits.h`` where one applies; 130 is the conventional
128 + SIGINT status for an interrupted or cancelled selection.
"""

from __future__ import annotations

from typing import Final

EXIT_SUCCESS: Final[int] = 0
EXIT_GENERAL_ERROR: Final[int] = 1
EXIT_USAGE_ERROR: Final[int] = 2
EXIT_UNAVAILABLE: Final[int] = 69
EXIT_INTERRUPTED: Final[int] = 130

__all__ = [
    "EXIT_GENERAL_ERROR",
    "EXIT_INTERRUPTED",
    "EXIT_SUCCESS",
    "EXIT_UNAVAILABLE",
    "EXIT_USAGE_ERROR",
]
