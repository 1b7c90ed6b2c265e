"""Display management for CLI interface."""

from gitnav.ui.cli.display.cache_report import render_clear_report
from gitnav.ui.cli.display.listing import ListingDisplay, render_json
from gitnav.ui.cli.display.preview import PreviewDisplay

__all__ = ["ListingDisplay", "PreviewDisplay", "render_clear_report", "render_json"]
