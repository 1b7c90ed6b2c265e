"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import cast, final

from gitnav.config.config import AppConfig
from gitnav.config.paths import default_log_file
from gitnav.platform.logging import logger, setup_logger
from gitnav.shared.errors import ConfigurationError
from gitnav.shared.exit_codes import EXIT_GENERAL_ERROR, EXIT_USAGE_ERROR
from gitnav.ui.cli.args.options import (
    CLIArgs,
    ClearCacheArgs,
    ConfigArgs,
    InitArgs,
    NavigateArgs,
    PreviewArgs,
    ShellName,
    VersionArgs,
)
from gitnav.ui.cli.console import color_disabled

SUPPORTED_SHELLS: dict[str, ShellName] = {
    "zsh": "zsh",
    "bash": "bash",
    "fish": "fish",
    "nu": "nu",
    "nushell": "nu",
}

_EPILOG = """\
examples:
  gn                        interactive repository selection
  gn -f                     force a rescan, bypassing the cache
  gn --path ~/work          search a specific directory
  gn --list                 list repositories without the selector
  gn --list --json          machine-readable output
  gitnav init zsh           print shell integration
  gitnav config             print an example configuration
  gitnav clear-cache        remove cached repository lists
"""


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="gitnav",
            description="gitnav - fast git repository navigator with fuzzy finding.",
            epilog=_EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Force a rescan (bypass the cache)",
        )
        _ = parser.add_argument(
            "-p",
            "--path",
            type=str,
            metavar="PATH",
            help="Override the base search path",
        )
        _ = parser.add_argument(
            "-d",
            "--max-depth",
            type=int,
            metavar="N",
            help="Override the maximum search depth",
        )
        _ = parser.add_argument(
            "-c",
            "--config",
            type=str,
            metavar="FILE",
            help="Path to a custom config file",
        )
        _ = parser.add_argument(
            "-l",
            "--list",
            action="store_true",
            help="List repositories without launching fzf (enables piping)",
        )
        _ = parser.add_argument(
            "--json",
            action="store_true",
            help="Output the listing as JSON (for scripting)",
        )
        _ = parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress non-error output",
        )
        _ = parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show verbose output",
        )
        _ = parser.add_argument(
            "--no-color",
            action="store_true",
            help="Disable colored output",
        )
        _ = parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug output",
        )
        _ = parser.add_argument(
            "--preview",
            type=str,
            metavar="REPO",
            help=argparse.SUPPRESS,
        )

        subparsers = parser.add_subparsers(dest="command", required=False)

        init_parser = subparsers.add_parser(
            "init",
            help="Generate shell integration script",
        )
        _ = init_parser.add_argument(
            "shell",
            type=str,
            metavar="SHELL",
            help="Shell type (zsh, bash, fish, nu/nushell)",
        )

        _ = subparsers.add_parser(
            "config",
            help="Print example config to stdout",
        )

        clear_parser = subparsers.add_parser(
            "clear-cache",
            help="Clear all cache files",
        )
        _ = clear_parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be deleted without deleting",
        )

        version_parser = subparsers.add_parser(
            "version",
            help="Show version information",
        )
        _ = version_parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            dest="version_verbose",
            help="Show detailed version information",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors or an unreadable configuration file.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        no_color = color_disabled(bool(parsed_args.no_color))

        # Set log level based on verbosity flags
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose or parsed_args.debug:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        command: str | None = parsed_args.command

        if command == "init":
            _ = setup_logger(console_level=log_level, no_color=no_color)
            return ArgumentParser._process_init(parsed_args)

        if command == "config":
            _ = setup_logger(console_level=log_level, no_color=no_color)
            return ConfigArgs(command="config")

        if command == "version":
            _ = setup_logger(console_level=log_level, no_color=no_color)
            return VersionArgs(
                command="version",
                verbose=bool(parsed_args.version_verbose),
                no_color=no_color,
            )

        config_path = Path(parsed_args.config).expanduser() if parsed_args.config else None
        app_config = ArgumentParser._load_configuration(config_path, log_level, no_color)
        ArgumentParser._configure_logging(app_config, log_level, no_color)

        if command == "clear-cache":
            return ClearCacheArgs(
                command="clear-cache",
                app_config=app_config,
                dry_run=bool(parsed_args.dry_run),
                no_color=no_color,
            )

        if command is not None:
            logger.error("Unsupported command: %s", command)
            sys.exit(EXIT_USAGE_ERROR)

        if parsed_args.preview:
            return PreviewArgs(
                command="preview",
                app_config=app_config,
                repo_path=Path(parsed_args.preview).expanduser(),
                no_color=no_color,
            )

        if parsed_args.json and not parsed_args.list:
            logger.warning("--json has no effect without --list")

        return NavigateArgs(
            command="navigate",
            app_config=app_config,
            base_path=Path(parsed_args.path).expanduser() if parsed_args.path else None,
            max_depth=parsed_args.max_depth,
            force=bool(parsed_args.force),
            list_only=bool(parsed_args.list),
            json_output=bool(parsed_args.json),
            quiet=bool(parsed_args.quiet),
            verbose=bool(parsed_args.verbose),
            no_color=no_color,
            debug=bool(parsed_args.debug),
            config_path=config_path,
        )

    @staticmethod
    def _load_configuration(config_path: Path | None, log_level: int, no_color: bool) -> AppConfig:
        # Console-only until the configured log file is known.
        _ = setup_logger(console_level=log_level, no_color=no_color)
        try:
            app_config = AppConfig.load(config_path)
            app_config.validate()
        except ConfigurationError as e:
            logger.error("%s", e)
            sys.exit(EXIT_GENERAL_ERROR)
        return app_config

    @staticmethod
    def _configure_logging(app_config: AppConfig, log_level: int, no_color: bool) -> None:
        log_file = app_config.resolved_log_file() or default_log_file()
        try:
            _ = setup_logger(log_file=log_file, console_level=log_level, no_color=no_color)
        except OSError as e:
            _ = setup_logger(console_level=log_level, no_color=no_color)
            logger.warning("File logging disabled, cannot open %s: %s", log_file, e)

    @staticmethod
    def _process_init(parsed_args: argparse.Namespace) -> InitArgs:
        requested = cast(str, parsed_args.shell)
        shell = SUPPORTED_SHELLS.get(requested.lower())
        if shell is None:
            logger.error(
                "Unsupported shell '%s'. Supported shells: %s",
                requested,
                ", ".join(SUPPORTED_SHELLS),
            )
            sys.exit(EXIT_USAGE_ERROR)
        return InitArgs(command="init", shell=shell)


__all__ = ["SUPPORTED_SHELLS", "ArgumentParser"]
