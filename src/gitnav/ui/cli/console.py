"""src/gitnav/ui/cli/console.py
What: Decide whether output is styled and build Rich consoles accordingly.
Why: Honour --no-color, NO_COLOR and TERM=dumb in one place for every command.
"""

from __future__ import annotations

import io
import os
from collections.abc import Mapping
from typing import IO

from rich.console import Console

PATH_ENCODING_ERRORS = "surrogateescape"


def color_disabled(no_color_flag: bool = False, env: Mapping[str, str] | None = None) -> bool:
    """Return True when styling must be suppressed.

    Args:
        no_color_flag: Value of the ``--no-color`` option.
        env: Environment mapping; defaults to ``os.environ``.
    """
    environ = os.environ if env is None else env
    if no_color_flag:
        return True
    # https://no-color.org: presence of the variable is what counts.
    if "NO_COLOR" in environ:
        return True
    return environ.get("TERM", "") == "dumb"


def build_console(*, no_color: bool = False, stderr: bool = False) -> Console:
    """Create a console for data (stdout) or diagnostics (stderr)."""

    return Console(
        stderr=stderr,
        no_color=no_color,
        color_system=None if no_color else "auto",
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def allow_raw_path_bytes(stream: IO[str]) -> None:
    """Let ``stream`` write surrogate-escaped path characters back as their original bytes.

    Streams that are not text wrappers (``StringIO`` buffers) hold ``str`` and need nothing.
    """
    if isinstance(stream, io.TextIOWrapper) and stream.errors != PATH_ENCODING_ERRORS:
        _ = stream.reconfigure(errors=PATH_ENCODING_ERRORS)


__all__ = ["PATH_ENCODING_ERRORS", "allow_raw_path_bytes", "build_console", "color_disabled"]
