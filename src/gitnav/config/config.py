"""Configuration management for gitnav."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from gitnav.config.paths import default_cache_dir, default_config_path
from gitnav.platform.logging import logger
from gitnav.shared.configuration import PreviewConfiguration, ScanConfiguration
from gitnav.shared.errors import ConfigurationError


@dataclass
class SearchConfig:
    """Where and how deep to look for repositories."""

    base_path: str = "~"
    max_depth: int = 5
    skip_hidden: bool = False


@dataclass
class CacheConfig:
    """Repository list cache settings."""

    enabled: bool = True
    ttl_seconds: int = 300
    # Empty means the platform cache directory.
    directory: str = ""


@dataclass
class UiConfig:
    """Options forwarded to the fuzzy selector."""

    prompt: str = "Select repo > "
    header: str = "Repository (↑/↓, ⏎, Esc)"
    preview_width_percent: int = 60
    layout: str = "reverse"
    height_percent: int = 90
    show_border: bool = True


@dataclass
class PreviewConfig:
    """Sections shown in the repository preview pane."""

    show_branch: bool = True
    show_last_activity: bool = True
    show_status: bool = True
    recent_commits: int = 5
    date_format: str = "%Y-%m-%d %H:%M"


@dataclass
class AppConfig:
    """Application configuration."""

    search: SearchConfig = field(default_factory=SearchConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    ui: UiConfig = field(default_factory=UiConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)

    # Log file path; empty means the platform log directory.
    log_file: str = ""

    @classmethod
    def load(cls, path: Path | None = None) -> "AppConfig":
        """Load configuration from ``path`` or the default location.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            AppConfig: Loaded configuration, or built-in defaults when the
            file does not exist.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        config_file = path.expanduser() if path is not None else default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                raw = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Failed to parse config file {config_file}: {e}") from e

        logger.debug("Configuration loaded from %s", config_file)
        return cls.from_mapping(raw, source=config_file)

    @classmethod
    def from_mapping(cls, raw: dict[str, Any], *, source: Path | None = None) -> "AppConfig":
        """Build a configuration from a parsed TOML mapping.

        Missing keys keep their defaults; unknown keys are logged and ignored.
        """
        sections: dict[str, type[Any]] = {
            "search": SearchConfig,
            "cache": CacheConfig,
            "ui": UiConfig,
            "preview": PreviewConfig,
        }
        kwargs: dict[str, Any] = {}
        for name, value in raw.items():
            section_type = sections.get(name)
            if section_type is not None:
                if not isinstance(value, dict):
                    raise ConfigurationError(f"[{name}] must be a table in {source or 'config'}")
                kwargs[name] = _build_section(section_type, name, value, source)
            elif name == "log_file":
                kwargs[name] = str(value)
            else:
                logger.warning("Ignoring unknown configuration key '%s' in %s", name, source)
        return cls(**kwargs)

    def validate(self) -> None:
        """Range-check values the core relies on.

        Raises:
            ConfigurationError: Naming the offending key and its literal value.
        """
        if self.search.max_depth < 1:
            raise ConfigurationError(
                f"search.max_depth must be at least 1 (configured: {self.search.max_depth})"
            )
        if self.cache.ttl_seconds < 0:
            raise ConfigurationError(
                f"cache.ttl_seconds must not be negative (configured: {self.cache.ttl_seconds})"
            )
        if self.preview.recent_commits < 0:
            raise ConfigurationError(
                "preview.recent_commits must not be negative "
                f"(configured: {self.preview.recent_commits})"
            )
        for key in ("preview_width_percent", "height_percent"):
            value = getattr(self.ui, key)
            if not 1 <= value <= 100:
                raise ConfigurationError(f"ui.{key} must be between 1 and 100 (configured: {value})")

    def to_scan_configuration(
        self,
        *,
        base_path: Path | None = None,
        max_depth: int | None = None,
    ) -> ScanConfiguration:
        """Resolve the scan parameters, applying CLI overrides."""

        resolved_base = base_path if base_path is not None else Path(self.search.base_path)
        cache_dir = (
            Path(self.cache.directory).expanduser().resolve()
            if self.cache.directory.strip()
            else default_cache_dir()
        )
        return ScanConfiguration(
            base_path=resolved_base.expanduser(),
            max_depth=max_depth if max_depth is not None else self.search.max_depth,
            cache_enabled=self.cache.enabled,
            cache_ttl_seconds=self.cache.ttl_seconds,
            cache_dir=cache_dir,
            skip_hidden=self.search.skip_hidden,
        )

    def to_preview_configuration(self) -> PreviewConfiguration:
        """Return the preview toggles as an immutable value object."""

        return PreviewConfiguration(
            show_branch=self.preview.show_branch,
            show_last_activity=self.preview.show_last_activity,
            show_status=self.preview.show_status,
            recent_commits=self.preview.recent_commits,
            date_format=self.preview.date_format,
        )

    def resolved_log_file(self) -> Path | None:
        """Return the configured log file, or ``None`` to use the default."""

        if not self.log_file.strip():
            return None
        return Path(self.log_file).expanduser().resolve()

    @classmethod
    def example_toml(cls) -> str:
        """Render the default configuration as commented TOML."""

        return cls()._render_toml()

    def _render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# gitnav configuration file")
        lines.append(f"# Location: {default_config_path()}")
        lines.append("")

        lines.append("# Log file path (optional, defaults to the platform log directory)")
        lines.append(f"log_file = {self._format_toml_value(self.log_file)}")
        lines.append("")

        lines.append("[search]")
        lines.append("# Root directory to search for repositories")
        lines.append(f"base_path = {self._format_toml_value(self.search.base_path)}")
        lines.append("# How many directory levels below base_path to descend (>= 1)")
        lines.append(f"max_depth = {self._format_toml_value(self.search.max_depth)}")
        lines.append("# Skip directories whose name starts with a dot")
        lines.append(f"skip_hidden = {self._format_toml_value(self.search.skip_hidden)}")
        lines.append("")

        lines.append("[cache]")
        lines.append(f"enabled = {self._format_toml_value(self.cache.enabled)}")
        lines.append("# Seconds a cached repository list stays valid")
        lines.append(f"ttl_seconds = {self._format_toml_value(self.cache.ttl_seconds)}")
        lines.append("# Cache directory (optional, defaults to the platform cache directory)")
        lines.append(f"directory = {self._format_toml_value(self.cache.directory)}")
        lines.append("")

        lines.append("[ui]")
        for f in fields(self.ui):
            lines.append(f"{f.name} = {self._format_toml_value(getattr(self.ui, f.name))}")
        lines.append("")

        lines.append("[preview]")
        for f in fields(self.preview):
            lines.append(f"{f.name} = {self._format_toml_value(getattr(self.preview, f.name))}")
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)


def _build_section(
    section_type: type[Any],
    name: str,
    values: dict[str, Any],
    source: Path | None,
) -> Any:
    known = {f.name: f for f in fields(section_type)}
    accepted: dict[str, Any] = {}
    for key, value in values.items():
        if key not in known:
            logger.warning("Ignoring unknown configuration key '%s.%s' in %s", name, key, source)
            continue
        default = getattr(section_type(), key)
        # bool is an int subclass; compare exact types for those two.
        if type(default) is not type(value):
            raise ConfigurationError(
                f"{name}.{key} must be of type {type(default).__name__} "
                f"(configured: {value!r}) in {source or 'config'}"
            )
        accepted[key] = value
    return section_type(**accepted)


__all__ = [
    "AppConfig",
    "CacheConfig",
    "PreviewConfig",
    "SearchConfig",
    "UiConfig",
]
