"""src/gitnav/ui/cli/commands/info.py
What: Static-output subcommands: ``init``, ``config`` and ``version``.
Why: Print shell integration, an example configuration and build details.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata
from typing import Final, override

import pygit2
from rich.console import Console

from gitnav import __version__
from gitnav.config.config import AppConfig
from gitnav.shared.exit_codes import EXIT_SUCCESS
from gitnav.ui.cli.args.options import ConfigArgs, InitArgs, VersionArgs
from gitnav.ui.cli.commands.executor import CommandExecutor
from gitnav.ui.cli.shell import init_script

_RUNTIME_DEPENDENCIES: Final[tuple[str, ...]] = ("rich", "pygit2", "pathspec", "platformdirs")


class InitCommand(CommandExecutor):
    """Print the shell integration script."""

    def __init__(self, args: InitArgs, *, console: Console | None = None) -> None:
        super().__init__(console=console, no_color=True)
        self.args = args

    @override
    def execute(self) -> int:
        self.console.out(init_script(self.args.shell), end="", highlight=False)
        return EXIT_SUCCESS


class ConfigCommand(CommandExecutor):
    """Print the example configuration as TOML."""

    def __init__(self, args: ConfigArgs, *, console: Console | None = None) -> None:
        super().__init__(console=console, no_color=True)
        self.args = args

    @override
    def execute(self) -> int:
        self.console.out(AppConfig.example_toml(), highlight=False)
        return EXIT_SUCCESS


class VersionCommand(CommandExecutor):
    """Print the version, optionally with runtime details."""

    def __init__(self, args: VersionArgs, *, console: Console | None = None) -> None:
        super().__init__(console=console, no_color=args.no_color)
        self.args = args

    @override
    def execute(self) -> int:
        self.console.print(f"gitnav {__version__}", markup=False)
        if not self.args.verbose:
            return EXIT_SUCCESS

        self.console.print("\n[bold]Build Information:[/bold]")
        self.console.print(f"  Version: {__version__}")
        self.console.print(f"  Python: {platform.python_version()} ({sys.implementation.name})")
        self.console.print(f"  libgit2: {pygit2.LIBGIT2_VERSION}")

        self.console.print("\n[bold]System Information:[/bold]")
        self.console.print(f"  OS: {platform.system()}")
        self.console.print(f"  Architecture: {platform.machine()}")

        self.console.print("\n[bold]Features:[/bold]")
        colors = "disabled" if self.args.no_color else "enabled"
        self.console.print(f"  Colors: {colors}")
        self.console.print("  Interactive Mode: enabled")

        self.console.print("\n[bold]Dependencies:[/bold]")
        for name in _RUNTIME_DEPENDENCIES:
            self.console.print(f"  {name}: {_installed_version(name)}")
        return EXIT_SUCCESS


def _installed_version(distribution: str) -> str:
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return "not installed"
