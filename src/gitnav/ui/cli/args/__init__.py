"""Command line argument handling package."""

from gitnav.ui.cli.args.parser import ArgumentParser
from gitnav.ui.cli.args.options import (
    CLIArgs,
    ClearCacheArgs,
    ConfigArgs,
    InitArgs,
    NavigateArgs,
    PreviewArgs,
    VersionArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "ClearCacheArgs",
    "ConfigArgs",
    "InitArgs",
    "NavigateArgs",
    "PreviewArgs",
    "VersionArgs",
]
