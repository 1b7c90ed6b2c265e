"""Rich console handler for gitnav's structured pipeline events.

Where: platform/logging/handlers.py
What: Render ``scan_event`` log records with icons, colours and compact paths.
Why: Keep pipeline modules logging plain records while the console stays readable.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PipelineRichHandler(RichHandler):
    """Custom Rich handler that styles scan and cache events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "scan.start": ("🔎", "cyan"),
        "scan.complete": ("✅", "green"),
        "scan.skip": ("↪️", "yellow"),
        "cache.hit": ("♻️", "green"),
        "cache.miss": ("ℹ️", "blue"),
        "cache.save": ("💾", "magenta"),
        "cache.unavailable": ("⚠️", "yellow"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "scan.start": "Scanning",
        "scan.complete": "Scan complete",
        "scan.skip": "Skipped unreadable directory",
        "cache.hit": "Cache hit",
        "cache.miss": "Cache miss",
        "cache.save": "Cache saved",
        "cache.unavailable": "Cache unavailable",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and leading-segment truncation."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor and not truncated:
            display_string = anchor.rstrip("\\/") + separator if anchor.strip("\\/") else separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)
        if not display_string:
            display_string = "."

        text = Text()
        for char in display_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_pipeline_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured pipeline events with dedicated styling."""

        event = getattr(record, "scan_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, event))

        details: list[str] = []
        repositories = getattr(record, "repositories", None)
        if isinstance(repositories, int):
            details.append(f"repositories={repositories}")
        max_depth = getattr(record, "max_depth", None)
        if isinstance(max_depth, int):
            details.append(f"depth={max_depth}")
        skipped = getattr(record, "skipped", None)
        if isinstance(skipped, int) and skipped:
            details.append(f"skipped={skipped}")
        duration = getattr(record, "duration_seconds", None)
        if isinstance(duration, (int, float)):
            details.append(f"duration={duration:.2f}s")
        age = getattr(record, "age_seconds", None)
        if isinstance(age, (int, float)):
            details.append(f"age={age:.0f}s")
        reason = getattr(record, "reason", None)
        if isinstance(reason, str) and reason:
            details.append(reason)
        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        target = getattr(record, "target_path", None)
        if target:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(target)))

        error_message = getattr(record, "error_message", None)
        if error_message:
            _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for pipeline events."""

        pipeline_text = self._render_pipeline_message(record)
        if pipeline_text is not None:
            return pipeline_text

        return super().render_message(record, message)


__all__ = ["PipelineRichHandler"]
