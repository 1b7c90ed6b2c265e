"""src/gitnav/ui/cli/commands/preview.py
What: Print one repository preview for fzf's preview pane.
Why: Serve the per-row ``--preview PATH`` sub-invocation.
"""

from __future__ import annotations

from typing import override

from rich.console import Console

from gitnav.features.preview import PreviewGenerator
from gitnav.shared.exit_codes import EXIT_SUCCESS
from gitnav.ui.cli.args.options import PreviewArgs
from gitnav.ui.cli.commands.executor import CommandExecutor
from gitnav.ui.cli.display.preview import PreviewDisplay


class PreviewCommand(CommandExecutor):
    """Command for rendering a single repository preview."""

    def __init__(
        self,
        args: PreviewArgs,
        *,
        generator: PreviewGenerator | None = None,
        console: Console | None = None,
    ) -> None:
        super().__init__(console=console, no_color=args.no_color)
        self.args = args
        self.generator = generator or PreviewGenerator(args.app_config.to_preview_configuration())
        self.preview_display = PreviewDisplay(self.console)

    @override
    def execute(self) -> int:
        preview = self.generator.generate(self.args.repo_path)
        self.preview_display.show_preview(preview)
        return EXIT_SUCCESS
