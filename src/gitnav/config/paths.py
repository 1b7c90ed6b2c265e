"""Shared path utilities for configuration, cache and log locations.

This module centralizes how the application discovers locations for
config, cache and log files.

Policy (per-user platform directories):
- Config: ``<user_config_dir>/gitnav/config.toml`` unless overridden by
  ``GITNAV_CONFIG``.
- Cache: ``<user_cache_dir>/gitnav`` unless overridden by ``GITNAV_CACHE_DIR``.
- Logs: ``<user_log_dir>/gitnav/gitnav.log``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

import platformdirs

APP_NAME: Final[str] = "gitnav"

_ENV_CONFIG_FILE: Final[str] = "GITNAV_CONFIG"
_ENV_CACHE_DIR: Final[str] = "GITNAV_CACHE_DIR"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: platformdirs.user_config_path(APP_NAME) / "config.toml",
    )


def default_cache_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory holding repository list caches."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CACHE_DIR,
        default_factory=lambda: platformdirs.user_cache_path(APP_NAME),
    )


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return platformdirs.user_log_path(APP_NAME).resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "gitnav.log").resolve()


__all__ = [
    "APP_NAME",
    "default_cache_dir",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
