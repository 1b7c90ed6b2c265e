"""src/gitnav/ui/cli/commands/navigate.py
What: Resolve the repository list and hand it to fzf or a listing.
Why: Bridge parsed arguments with the navigation service for the default mode.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import override

from rich.console import Console

from gitnav.application.services.navigation_service import DiscoveryRequest, NavigationService
from gitnav.config.config import UiConfig
from gitnav.platform.logging import logger
from gitnav.shared.exit_codes import EXIT_INTERRUPTED, EXIT_SUCCESS, EXIT_UNAVAILABLE
from gitnav.ui.cli.args.options import NavigateArgs
from gitnav.ui.cli.commands.executor import CommandExecutor
from gitnav.ui.cli.display.listing import ListingDisplay
from gitnav.ui.cli.selector import FZF_EXECUTABLE, FzfSelector, preview_command

SelectorFactory = Callable[[UiConfig, str], FzfSelector]


def _default_selector_factory(ui: UiConfig, preview: str) -> FzfSelector:
    return FzfSelector(ui, preview=preview)


class NavigateCommand(CommandExecutor):
    """Command for interactive selection or ``--list`` output."""

    def __init__(
        self,
        args: NavigateArgs,
        *,
        service: NavigationService | None = None,
        selector_factory: SelectorFactory | None = None,
        console: Console | None = None,
    ) -> None:
        super().__init__(console=console, no_color=args.no_color)
        self.args = args
        self.service = service or NavigationService()
        self._selector_factory: SelectorFactory = selector_factory or _default_selector_factory
        self.listing_display = ListingDisplay(self.console)

    @override
    def execute(self) -> int:
        """Run discovery, then list or select.

        Returns:
            0 after printing, 69 when fzf is missing, 130 on cancellation.
        """
        args = self.args
        scan_config = args.app_config.to_scan_configuration(
            base_path=args.base_path,
            max_depth=args.max_depth,
        )
        if args.debug:
            logger.debug("Search path: %s", scan_config.base_path)
            logger.debug("Max depth: %d", scan_config.max_depth)
            logger.debug("Cache enabled: %s (%s)", scan_config.cache_enabled, scan_config.cache_dir)
            logger.debug("Force refresh: %s", args.force)

        result = self.service.discover(DiscoveryRequest(config=scan_config, force=args.force))
        logger.debug(
            "Found %d repositories (%s)",
            len(result.descriptors),
            result.source.value,
        )

        if args.list_only:
            if args.json_output:
                self.listing_display.show_json(result.descriptors)
            else:
                self.listing_display.show_paths(result.descriptors)
            return EXIT_SUCCESS

        selector = self._selector_factory(
            args.app_config.ui,
            preview_command(config_path=args.config_path, no_color=args.no_color),
        )
        if not selector.is_available():
            logger.error(
                "%s not found: it is required for interactive mode. "
                "Install it (brew install fzf, apt install fzf, scoop install fzf) "
                "or use 'gitnav --list'.",
                FZF_EXECUTABLE,
            )
            return EXIT_UNAVAILABLE

        selected = selector.select(result.descriptors)
        if selected is None:
            return EXIT_INTERRUPTED

        # Stdout carries only the path; the shell wrapper cds into it.
        self.listing_display.show_path(selected)
        return EXIT_SUCCESS
