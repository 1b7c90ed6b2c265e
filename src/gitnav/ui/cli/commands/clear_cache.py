"""src/gitnav/ui/cli/commands/clear_cache.py
What: Remove cached repository lists, or report what would be removed.
Why: Give users a way to reset stale lists without finding the cache directory.
"""

from __future__ import annotations

from typing import override

from rich.console import Console

from gitnav.application.services.navigation_service import NavigationService
from gitnav.shared.exit_codes import EXIT_SUCCESS
from gitnav.ui.cli.args.options import ClearCacheArgs
from gitnav.ui.cli.commands.executor import CommandExecutor
from gitnav.ui.cli.display.cache_report import render_clear_report


class ClearCacheCommand(CommandExecutor):
    """Command for the ``clear-cache`` subcommand."""

    def __init__(
        self,
        args: ClearCacheArgs,
        *,
        service: NavigationService | None = None,
        console: Console | None = None,
    ) -> None:
        super().__init__(console=console, no_color=args.no_color)
        self.args = args
        self.service = service or NavigationService()

    @override
    def execute(self) -> int:
        scan_config = self.args.app_config.to_scan_configuration()
        report = self.service.clear_cache(scan_config, dry_run=self.args.dry_run)
        render_clear_report(self.console, report)
        return EXIT_SUCCESS
