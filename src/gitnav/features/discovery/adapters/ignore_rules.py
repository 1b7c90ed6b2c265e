"""Where: src/gitnav/features/discovery/adapters/ignore_rules.py
What: Gitignore-style directory exclusion for the repository scanner.
Why: Skip build output and vendored trees the way git-aware walkers do.
"""

from __future__ import annotations

import os
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Final

import pathspec
import pygit2

from gitnav.platform.logging import logger

IGNORE_FILE_NAMES: Final[tuple[str, ...]] = (".gitignore", ".ignore")


@dataclass(frozen=True, slots=True)
class _IgnoreFile:
    """Patterns from one ignore file, matched relative to ``anchor``."""

    anchor: Path
    spec: pathspec.GitIgnoreSpec


@dataclass(frozen=True, slots=True)
class IgnoreRules:
    """Immutable chain of ignore files applying to one directory."""

    chain: tuple[_IgnoreFile, ...] = ()

    @classmethod
    def for_root(cls, base_path: Path, *, global_excludes: bool = True) -> "IgnoreRules":
        """Start a chain at the search root, seeded with the global excludes file."""

        if not global_excludes:
            return cls()
        excludes_file = global_excludes_file()
        if excludes_file is None:
            return cls()
        return cls().extended_with(base_path, [excludes_file])

    def extended_for(self, directory: Path, entry_names: Collection[str]) -> "IgnoreRules":
        """Return the chain for ``directory`` given the names it contains."""

        files = [directory / name for name in IGNORE_FILE_NAMES if name in entry_names]
        if not files:
            return self
        return self.extended_with(directory, files)

    def extended_with(self, anchor: Path, files: Iterable[Path]) -> "IgnoreRules":
        """Append the patterns of ``files`` anchored at ``anchor``."""

        additions: list[_IgnoreFile] = []
        for ignore_file in files:
            try:
                lines = ignore_file.read_text(encoding="utf-8", errors="replace").splitlines()
            except OSError as exc:
                logger.debug("Unreadable ignore file %s: %s", ignore_file, exc)
                continue
            spec = pathspec.GitIgnoreSpec.from_lines(lines)
            if len(spec) == 0:
                continue
            additions.append(_IgnoreFile(anchor=anchor, spec=spec))
        if not additions:
            return self
        return IgnoreRules(chain=self.chain + tuple(additions))

    def is_ignored(self, directory: Path) -> bool:
        """Return True when any ignore file in the chain excludes ``directory``."""

        for ignore_file in self.chain:
            try:
                relative = directory.relative_to(ignore_file.anchor)
            except ValueError:
                continue
            # Trailing slash lets directory-only patterns such as ``build/`` match.
            if ignore_file.spec.match_file(relative.as_posix() + "/"):
                return True
        return False


def global_excludes_file() -> Path | None:
    """Locate git's global excludes file, if one exists."""

    candidate: Path | None = None
    try:
        global_config = pygit2.Config.get_global_config()
        candidate = Path(os.path.expanduser(global_config["core.excludesFile"]))
    except (OSError, KeyError, pygit2.GitError):
        candidate = None

    if candidate is None:
        xdg_home = os.environ.get("XDG_CONFIG_HOME", "").strip()
        config_home = Path(xdg_home) if xdg_home else Path.home() / ".config"
        candidate = config_home / "git" / "ignore"

    return candidate if candidate.is_file() else None


__all__ = ["IGNORE_FILE_NAMES", "IgnoreRules", "global_excludes_file"]
