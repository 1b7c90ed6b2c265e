"""Command execution package for CLI."""

from gitnav.ui.cli.commands.clear_cache import ClearCacheCommand
from gitnav.ui.cli.commands.executor import CommandExecutor
from gitnav.ui.cli.commands.info import ConfigCommand, InitCommand, VersionCommand
from gitnav.ui.cli.commands.navigate import NavigateCommand
from gitnav.ui.cli.commands.preview import PreviewCommand

__all__ = [
    "ClearCacheCommand",
    "CommandExecutor",
    "ConfigCommand",
    "InitCommand",
    "NavigateCommand",
    "PreviewCommand",
    "VersionCommand",
]
