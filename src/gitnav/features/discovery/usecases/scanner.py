"""Where: src/gitnav/features/discovery/usecases/scanner.py
What: Bounded, symlink-free filesystem walk that reports git repositories.
Why: Produce the descriptor list the selector and cache operate on.
"""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Final, Protocol

from gitnav.platform.logging import logger
from gitnav.shared.errors import InvalidDepth, PathNotFound

from ..adapters.ignore_rules import IgnoreRules
from ..domain.models import RepositoryDescriptor

GIT_DIR_NAME: Final[str] = ".git"


class ScannerPort(Protocol):
    """Anything that can turn a search root into repository descriptors."""

    def scan(
        self,
        base_path: Path,
        max_depth: int,
        *,
        skip_hidden: bool = False,
    ) -> tuple[RepositoryDescriptor, ...]:
        """Walk ``base_path`` and return the repositories found."""

        ...


class RepositoryScanner:
    """Walk a directory tree and report every directory holding a ``.git`` entry.

    A reported repository is never descended into, so nested repositories and
    submodules below it are not reported separately. The search root itself
    is the scope of the walk and is not reported.
    """

    def __init__(self, *, global_excludes: bool = True) -> None:
        self._global_excludes: bool = global_excludes

    def scan(
        self,
        base_path: Path,
        max_depth: int,
        *,
        skip_hidden: bool = False,
    ) -> tuple[RepositoryDescriptor, ...]:
        """Scan ``base_path`` up to ``max_depth`` directory levels.

        Args:
            base_path: Root directory of the search.
            max_depth: Deepest level examined; the root's children are level 1.
            skip_hidden: Also prune directories whose name starts with a dot.

        Returns:
            Descriptors sorted by name, then path.

        Raises:
            InvalidDepth: If ``max_depth`` is below 1.
            PathNotFound: If ``base_path`` is missing, not a directory, or unreadable.
        """
        if max_depth < 1:
            raise InvalidDepth(max_depth)

        root = Path(os.path.abspath(os.path.expanduser(base_path)))
        if not root.is_dir() or not os.access(root, os.R_OK | os.X_OK):
            raise PathNotFound(base_path)

        started = time.monotonic()
        logger.debug(
            "Scanning %s",
            root,
            extra={"scan_event": "scan.start", "target_path": str(root), "max_depth": max_depth},
        )

        rules_by_dir: dict[Path, IgnoreRules] = {
            root: IgnoreRules.for_root(root, global_excludes=self._global_excludes)
        }
        repositories: list[RepositoryDescriptor] = []
        skipped: list[Path] = []

        def on_error(error: OSError) -> None:
            failed = Path(error.filename) if error.filename else root
            skipped.append(failed)
            logger.debug(
                "Skipping unreadable directory %s: %s",
                failed,
                error.strerror or error,
                extra={
                    "scan_event": "scan.skip",
                    "target_path": str(failed),
                    "error_message": error.strerror or str(error),
                },
            )

        for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=on_error, followlinks=False):
            current = Path(dirpath)
            depth = len(current.relative_to(root).parts)
            rules = rules_by_dir.pop(current, IgnoreRules())

            if depth > 0 and (GIT_DIR_NAME in dirnames or GIT_DIR_NAME in filenames):
                repositories.append(RepositoryDescriptor.from_path(current))
                dirnames.clear()
                continue

            if depth >= max_depth:
                dirnames.clear()
                continue

            rules = rules.extended_for(current, filenames)
            kept: list[str] = []
            for name in dirnames:
                if name == GIT_DIR_NAME:
                    continue
                if skip_hidden and name.startswith("."):
                    continue
                child = current / name
                if rules.is_ignored(child):
                    logger.debug("Ignoring %s (matched ignore rules)", child)
                    continue
                kept.append(name)
                rules_by_dir[child] = rules
            dirnames[:] = kept

        repositories.sort(key=lambda descriptor: (descriptor.name, str(descriptor.path)))

        logger.debug(
            "Scan of %s found %d repositories",
            root,
            len(repositories),
            extra={
                "scan_event": "scan.complete",
                "target_path": str(root),
                "repositories": len(repositories),
                "skipped": len(skipped),
                "duration_seconds": time.monotonic() - started,
            },
        )
        return tuple(repositories)


def scan_repositories(
    base_path: Path,
    max_depth: int,
    *,
    skip_hidden: bool = False,
) -> tuple[RepositoryDescriptor, ...]:
    """Scan with the default scanner; convenience wrapper for callers and tests."""

    return RepositoryScanner().scan(base_path, max_depth, skip_hidden=skip_hidden)


__all__ = ["GIT_DIR_NAME", "RepositoryScanner", "ScannerPort", "scan_repositories"]
