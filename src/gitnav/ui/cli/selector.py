"""src/gitnav/ui/cli/selector.py
Where: CLI adapter around the external fzf process.
What: Feed ``name<TAB>path`` rows to fzf and read back the chosen repository.
Why: Keep the interactive selection a single blocking call returning a path or None.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Final, final

from gitnav.config.config import UiConfig
from gitnav.features.discovery import RepositoryDescriptor
from gitnav.platform.logging import logger

FZF_EXECUTABLE: Final[str] = "fzf"


def preview_command(*, config_path: Path | None = None, no_color: bool = False) -> str:
    """Build the shell command fzf runs for each highlighted row.

    ``{2}`` is substituted by fzf with the quoted path column.
    """
    argv = [sys.executable, "-m", "gitnav"]
    if config_path is not None:
        argv.extend(["--config", str(config_path)])
    if no_color:
        argv.append("--no-color")
    return f"{shlex.join(argv)} --preview {{2}}"


@final
class FzfSelector:
    """Run fzf over a descriptor list."""

    def __init__(
        self,
        ui: UiConfig,
        *,
        preview: str,
        executable: str = FZF_EXECUTABLE,
        runner: Callable[..., subprocess.CompletedProcess[Any]] = subprocess.run,
        which: Callable[[str], str | None] = shutil.which,
    ) -> None:
        self._ui: UiConfig = ui
        self._preview: str = preview
        self._executable: str = executable
        self._runner: Callable[..., subprocess.CompletedProcess[Any]] = runner
        self._which: Callable[[str], str | None] = which

    def is_available(self) -> bool:
        """Return True when the fzf executable is on ``PATH``."""

        return self._which(self._executable) is not None

    def build_command(self) -> list[str]:
        """Translate the UI settings into fzf arguments."""

        ui = self._ui
        command = [
            self._executable,
            "--prompt",
            ui.prompt,
            "--header",
            ui.header,
            "--delimiter",
            "\t",
            # Show only the name column
            "--with-nth",
            "1",
            "--preview-window",
            f"right:{ui.preview_width_percent}%:wrap",
            "--layout",
            ui.layout,
            "--height",
            f"{ui.height_percent}%",
        ]
        if ui.show_border:
            command.append("--border")
        # Keep the scanner's name order
        command.append("--no-sort")
        command.extend(["--preview", self._preview])
        return command

    def select(self, descriptors: Sequence[RepositoryDescriptor]) -> Path | None:
        """Let the user pick one repository.

        Returns:
            Path | None: The selected repository path, or None when the user
            cancelled (Esc, Ctrl-C) or nothing matched.

        Raises:
            OSError: If fzf cannot be started.
        """
        if not descriptors:
            return None

        rows = {descriptor.selector_row(): descriptor for descriptor in descriptors}
        completed = self._runner(
            self.build_command(),
            input="\n".join(rows),
            stdout=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            check=False,
        )
        if completed.returncode != 0:
            logger.debug("fzf exited with status %d", completed.returncode)
            return None

        selected = str(completed.stdout).rstrip("\n")
        if not selected:
            return None
        descriptor = rows.get(selected)
        if descriptor is not None:
            return descriptor.path
        _, _, path = selected.partition("\t")
        return Path(path) if path else None


__all__ = ["FZF_EXECUTABLE", "FzfSelector", "preview_command"]
