"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from gitnav.config.config import AppConfig

ShellName = Literal["zsh", "bash", "fish", "nu"]


@final
@dataclass(slots=True)
class NavigateArgs:
    """Arguments for the default mode: pick a repository or list them."""

    command: Literal["navigate"]
    app_config: AppConfig
    base_path: Path | None
    max_depth: int | None
    force: bool
    list_only: bool
    json_output: bool
    quiet: bool
    verbose: bool
    no_color: bool
    debug: bool
    config_path: Path | None


@final
@dataclass(slots=True)
class PreviewArgs:
    """Arguments for the hidden ``--preview PATH`` sub-invocation."""

    command: Literal["preview"]
    app_config: AppConfig
    repo_path: Path
    no_color: bool


@final
@dataclass(slots=True)
class ClearCacheArgs:
    """Arguments for the ``clear-cache`` subcommand."""

    command: Literal["clear-cache"]
    app_config: AppConfig
    dry_run: bool
    no_color: bool


@final
@dataclass(slots=True)
class InitArgs:
    """Arguments for the ``init`` subcommand."""

    command: Literal["init"]
    shell: ShellName


@final
@dataclass(slots=True)
class ConfigArgs:
    """Arguments for the ``config`` subcommand."""

    command: Literal["config"]


@final
@dataclass(slots=True)
class VersionArgs:
    """Arguments for the ``version`` subcommand."""

    command: Literal["version"]
    verbose: bool
    no_color: bool


CLIArgs = NavigateArgs | PreviewArgs | ClearCacheArgs | InitArgs | ConfigArgs | VersionArgs

__all__ = [
    "CLIArgs",
    "ClearCacheArgs",
    "ConfigArgs",
    "InitArgs",
    "NavigateArgs",
    "PreviewArgs",
    "ShellName",
    "VersionArgs",
]
