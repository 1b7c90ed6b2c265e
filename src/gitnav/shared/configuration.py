"""Resolved configuration value objects consumed by the core pipeline.

The config layer builds these from the TOML file and CLI overrides; the
scanner, cache store and preview generator never read files themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ScanConfiguration:
    """Parameters of a single repository discovery run."""

    base_path: Path
    max_depth: int = 5
    cache_enabled: bool = True
    cache_ttl_seconds: int = 300
    cache_dir: Path | None = None
    skip_hidden: bool = False
    # Symlinks are never followed; kept as a field so callers can log it.
    follow_symlinks: bool = field(default=False, init=False)

    def cache_parameters(self) -> dict[str, object]:
        """Return the scan parameters that change results, for cache keying."""

        return {"max_depth": self.max_depth, "skip_hidden": self.skip_hidden}


@dataclass(frozen=True, slots=True)
class PreviewConfiguration:
    """Toggles and formats for the repository preview."""

    show_branch: bool = True
    show_last_activity: bool = True
    show_status: bool = True
    recent_commits: int = 5
    date_format: str = "%Y-%m-%d %H:%M"


__all__ = ["PreviewConfiguration", "ScanConfiguration"]
