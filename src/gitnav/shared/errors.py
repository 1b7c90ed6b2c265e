"""Where: src/gitnav/shared/errors.py
What: Exception hierarchy raised by the discovery, cache and preview pipeline.
Why: Let callers tell fatal path/config problems apart from degradable ones.
"""

from __future__ import annotations

from pathlib import Path


class GitnavError(Exception):
    """Base class for every error raised by gitnav."""


class PathNotFound(GitnavError):
    """The search root does not exist or is not a readable directory."""

    def __init__(self, path: Path | str) -> None:
        self.path: Path = Path(path)
        super().__init__(f"Base path does not exist or is not a directory: {path}")


class ConfigurationError(GitnavError):
    """A configuration value is outside its accepted range or unparseable."""


class InvalidDepth(ConfigurationError):
    """The configured scan depth cannot bound a traversal."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth: int = max_depth
        super().__init__(f"max_depth must be at least 1 (configured: {max_depth})")


class CacheUnavailable(GitnavError):
    """The cache directory could not be created or accessed."""

    def __init__(self, cache_dir: Path, reason: str) -> None:
        self.cache_dir: Path = cache_dir
        super().__init__(f"Cache directory unavailable: {cache_dir} ({reason})")


class CacheCorrupt(GitnavError):
    """A cache file could not be parsed back into descriptors."""


class RepositoryUnavailable(GitnavError):
    """The preview target is missing or is not a git repository."""

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        self.path: Path = Path(path)
        message = f"Repository unavailable: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class NoRepositoriesFound(GitnavError):
    """A scan completed without finding a single repository."""

    def __init__(self, base_path: Path | str) -> None:
        self.base_path: Path = Path(base_path)
        super().__init__(f"No git repositories found in: {base_path}")


__all__ = [
    "CacheCorrupt",
    "CacheUnavailable",
    "ConfigurationError",
    "GitnavError",
    "InvalidDepth",
    "NoRepositoriesFound",
    "PathNotFound",
    "RepositoryUnavailable",
]
