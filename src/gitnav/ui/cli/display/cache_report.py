"""Utilities for rendering the outcome of ``clear-cache``."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from gitnav.features.cache import CacheClearReport


def render_clear_report(console: Console, report: CacheClearReport) -> None:
    """Print what ``clear-cache`` removed, or would remove on a dry run.

    Args:
        console: Rich console instance used to render output.
        report: Result of ``CacheStore.clear``.
    """
    if report.dry_run:
        console.print(f"[bold]Cache directory:[/bold] {escape(str(report.cache_dir))}")
        console.print(f"Cache files: {report.count}")
        console.print(f"Total size: {report.total_bytes} bytes\n")
        if not report.files:
            console.print("[dim]No cache files to delete[/dim]")
            return
        console.print("[bold]Files to be deleted:[/bold]")
        for info in report.files:
            console.print(f"  {escape(str(info.path))} ({info.size_bytes} bytes)", highlight=False)
        return

    console.print("[green]Cache cleared successfully[/green]")
    if report.files:
        console.print(f"Deleted {report.count} cache files ({report.total_bytes} bytes)")


__all__ = ["render_clear_report"]
