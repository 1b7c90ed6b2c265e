"""Command line interface package."""

from gitnav.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
