"""Command line interface for gitnav."""

from typing import final

from gitnav.platform.logging import logger
from gitnav.shared.errors import GitnavError
from gitnav.shared.exit_codes import EXIT_GENERAL_ERROR, EXIT_INTERRUPTED
from gitnav.ui.cli.args import ArgumentParser
from gitnav.ui.cli.args.options import (
    CLIArgs,
    ClearCacheArgs,
    ConfigArgs,
    InitArgs,
    NavigateArgs,
    PreviewArgs,
    VersionArgs,
)
from gitnav.ui.cli.commands import (
    ClearCacheCommand,
    CommandExecutor,
    ConfigCommand,
    InitCommand,
    NavigateCommand,
    PreviewCommand,
    VersionCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code. Usage errors raise ``SystemExit`` from
            argument parsing instead.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            return CommandProcessor.build_command(args).execute()

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return EXIT_INTERRUPTED
        except GitnavError as e:
            logger.error("%s", e)
            return EXIT_GENERAL_ERROR
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            logger.debug("Traceback of the unexpected error", exc_info=True)
            return EXIT_GENERAL_ERROR

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Return the executor matching ``args``."""

        if isinstance(args, NavigateArgs):
            return NavigateCommand(args)
        if isinstance(args, PreviewArgs):
            return PreviewCommand(args)
        if isinstance(args, ClearCacheArgs):
            return ClearCacheCommand(args)
        if isinstance(args, InitArgs):
            return InitCommand(args)
        if isinstance(args, ConfigArgs):
            return ConfigCommand(args)
        assert isinstance(args, VersionArgs)
        return VersionCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command()
