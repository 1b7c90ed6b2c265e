"""src/gitnav/ui/cli/commands/executor.py
What: Provide the shared contract for CLI command executors.
Why: Let the processor dispatch every subcommand the same way and read back an exit code.
"""

from abc import ABC, abstractmethod

from rich.console import Console

from gitnav.ui.cli.console import build_console


class CommandExecutor(ABC):
    """Base class for command execution."""

    console: Console

    def __init__(self, *, console: Console | None = None, no_color: bool = False) -> None:
        """Initialize command executor.

        Args:
            console: Console for data written to stdout; built from ``no_color``
                when omitted.
            no_color: Disable styling on the default console.
        """
        self.console = console or build_console(no_color=no_color)

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass
