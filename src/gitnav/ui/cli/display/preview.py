"""src/gitnav/ui/cli/display/preview.py
Where: CLI adapter layer for preview rendering.
What: Print a repository preview with one Rich style per line role.
Why: Give the fzf preview pane readable colour while the text layout stays in the core.
"""

from __future__ import annotations

from typing import Final, final

from rich.console import Console
from rich.text import Text

from gitnav.features.preview import PreviewLine, PreviewRole, RepositoryPreview, build_preview_lines

_LABEL_STYLES: Final[dict[PreviewRole, str]] = {
    PreviewRole.TITLE: "bold cyan",
    PreviewRole.BRANCH: "bold",
    PreviewRole.ACTIVITY: "bold",
    PreviewRole.STATUS_HEADING: "bold",
    PreviewRole.COMMITS_HEADING: "bold",
    PreviewRole.COMMIT: "yellow",
}

_VALUE_STYLES: Final[dict[PreviewRole, str]] = {
    PreviewRole.BRANCH: "magenta",
    PreviewRole.ACTIVITY: "green",
    PreviewRole.STAGED: "green",
    PreviewRole.UNSTAGED: "yellow",
    PreviewRole.UNTRACKED: "red",
    PreviewRole.NOTICE: "dim",
}


@final
class PreviewDisplay:
    """Handles preview display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_preview(self, preview: RepositoryPreview) -> None:
        """Print every line of ``preview``."""

        for line in build_preview_lines(preview):
            self.console.print(self.style_line(line))

    @staticmethod
    def style_line(line: PreviewLine) -> Text:
        """Return ``line`` as Rich text; the plain content matches ``line.plain()``."""

        text = Text("  " * line.indent)
        if line.label:
            _ = text.append(line.label, style=_LABEL_STYLES.get(line.role, ""))
        if line.label and line.value:
            _ = text.append(" ")
        if line.value:
            _ = text.append(line.value, style=_VALUE_STYLES.get(line.role, ""))
        return text


__all__ = ["PreviewDisplay"]
