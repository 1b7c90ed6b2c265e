"""Machine-readable repository listings for ``--list`` and the selected path."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import final

from rich.console import Console

from gitnav.features.discovery import RepositoryDescriptor
from gitnav.ui.cli.console import allow_raw_path_bytes


def render_json(descriptors: Sequence[RepositoryDescriptor]) -> str:
    """Serialize descriptors as a pretty-printed JSON array of ``{name, path}``."""

    return json.dumps([descriptor.to_dict() for descriptor in descriptors], indent=2)


@final
class ListingDisplay:
    """Write descriptor lists to stdout for pipes and scripts.

    Lines go through ``Console.out`` so directory names such as ``:rocket:``
    or ``[bold]`` reach the pipe exactly as they are on disk.
    """

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(emoji=False, highlight=False)

    def show_paths(self, descriptors: Sequence[RepositoryDescriptor]) -> None:
        """Print one path per line."""

        for descriptor in descriptors:
            self.show_path(descriptor.path)

    def show_path(self, path: Path) -> None:
        self._write(str(path))

    def show_json(self, descriptors: Sequence[RepositoryDescriptor]) -> None:
        self._write(render_json(descriptors))

    def _write(self, line: str) -> None:
        allow_raw_path_bytes(self.console.file)
        self.console.out(line, highlight=False)


__all__ = ["ListingDisplay", "render_json"]
