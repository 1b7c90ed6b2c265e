"""Where: src/gitnav/features/cache/store.py
What: TTL-bounded on-disk cache of scan results, one file per search root.
Why: Make repeated navigation under the same root skip the filesystem walk.
"""

from __future__ import annotations

import hashlib
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, final

from gitnav.features.discovery import RepositoryDescriptor
from gitnav.platform.filesystem import atomic_write_text, ensure_directory
from gitnav.platform.logging import logger
from gitnav.shared.errors import CacheCorrupt, CacheUnavailable

from .codec import ENCODING, ENCODING_ERRORS, decode_descriptors, encode_descriptors, is_encodable

CACHE_FILE_PREFIX: Final[str] = "repos_"
CACHE_FILE_SUFFIX: Final[str] = ".cache"
# Short file names; a prefix collision only reuses another root's list until TTL expiry.
KEY_LENGTH: Final[int] = 16


@dataclass(frozen=True, slots=True)
class CacheFileInfo:
    """A cache file and its size on disk."""

    path: Path
    size_bytes: int


@dataclass(frozen=True, slots=True)
class CacheClearReport:
    """Outcome of a cache clear, identical in shape for dry runs."""

    cache_dir: Path
    files: tuple[CacheFileInfo, ...]
    dry_run: bool

    @property
    def count(self) -> int:
        return len(self.files)

    @property
    def total_bytes(self) -> int:
        return sum(info.size_bytes for info in self.files)


def canonical_path(base_path: Path | str) -> str:
    """Return the canonical string form of a search root."""

    return str(Path(base_path).expanduser().resolve())


def key_for(
    base_path: Path | str,
    scan_parameters: Mapping[str, object] | None = None,
) -> str:
    """Fingerprint a search root and the scan parameters that shape its results.

    Args:
        base_path: Search root; canonicalized so ``~/src`` and ``~/src/`` agree.
        scan_parameters: Optional values such as depth; sorted before hashing.

    Returns:
        The first ``KEY_LENGTH`` hex digits of a SHA-256 digest.
    """
    material = canonical_path(base_path)
    if scan_parameters:
        material += "\0" + "\0".join(
            f"{name}={scan_parameters[name]}" for name in sorted(scan_parameters)
        )
    digest = hashlib.sha256(material.encode(ENCODING, ENCODING_ERRORS)).hexdigest()
    return digest[:KEY_LENGTH]


@final
class CacheStore:
    """Persist and retrieve repository lists keyed by search root."""

    def __init__(
        self,
        cache_dir: Path,
        ttl_seconds: int,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Create a store rooted at ``cache_dir``, creating the directory.

        Raises:
            CacheUnavailable: If the directory cannot be created.
        """
        try:
            self._cache_dir: Path = ensure_directory(Path(cache_dir).expanduser())
        except OSError as exc:
            raise CacheUnavailable(Path(cache_dir), exc.strerror or str(exc)) from exc
        self._ttl_seconds: int = ttl_seconds
        self._clock: Callable[[], float] = clock

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def cache_file_path(
        self,
        base_path: Path | str,
        scan_parameters: Mapping[str, object] | None = None,
    ) -> Path:
        """Return the file holding the cached list for ``base_path``."""

        key = key_for(base_path, scan_parameters)
        return self._cache_dir / f"{CACHE_FILE_PREFIX}{key}{CACHE_FILE_SUFFIX}"

    def load(
        self,
        base_path: Path | str,
        scan_parameters: Mapping[str, object] | None = None,
    ) -> tuple[RepositoryDescriptor, ...] | None:
        """Return the cached descriptors, or ``None`` on any kind of miss.

        Absent, expired and unparseable files are all misses; corruption is
        never raised to the caller.
        """
        cache_file = self.cache_file_path(base_path, scan_parameters)
        try:
            modified = cache_file.stat().st_mtime
        except FileNotFoundError:
            self._log_miss(base_path, "absent")
            return None
        except OSError as exc:
            self._log_miss(base_path, f"unreadable: {exc}")
            return None

        age = self._clock() - modified
        if age > self._ttl_seconds:
            self._log_miss(base_path, "expired")
            return None

        try:
            content = cache_file.read_text(encoding=ENCODING, errors=ENCODING_ERRORS)
            descriptors = decode_descriptors(content)
        except (OSError, CacheCorrupt) as exc:
            self._log_miss(base_path, f"corrupt: {exc}")
            return None

        logger.debug(
            "Loaded %d repositories from cache",
            len(descriptors),
            extra={
                "scan_event": "cache.hit",
                "target_path": str(base_path),
                "repositories": len(descriptors),
                "age_seconds": max(age, 0.0),
            },
        )
        return descriptors

    def save(
        self,
        base_path: Path | str,
        descriptors: Sequence[RepositoryDescriptor],
        scan_parameters: Mapping[str, object] | None = None,
    ) -> Path:
        """Replace the cached list for ``base_path`` in a single rename.

        Descriptors whose path contains a newline cannot be stored in the
        line format and are left out of the file.

        Returns:
            The cache file written.

        Raises:
            OSError: If the file cannot be written.
        """
        cache_file = self.cache_file_path(base_path, scan_parameters)
        storable = [descriptor for descriptor in descriptors if is_encodable(descriptor)]
        if len(storable) != len(descriptors):
            logger.debug(
                "Leaving %d repositories with unrepresentable paths out of the cache",
                len(descriptors) - len(storable),
            )

        atomic_write_text(
            cache_file,
            encode_descriptors(storable),
            encoding=ENCODING,
            errors=ENCODING_ERRORS,
        )
        logger.debug(
            "Saved %d repositories to %s",
            len(storable),
            cache_file,
            extra={
                "scan_event": "cache.save",
                "target_path": str(cache_file),
                "repositories": len(storable),
            },
        )
        return cache_file

    def entries(self) -> list[CacheFileInfo]:
        """List cache files, including temp files left by interrupted writes."""

        infos: list[CacheFileInfo] = []
        if not self._cache_dir.exists():
            return infos

        for candidate in sorted(self._cache_dir.iterdir()):
            if not self._is_cache_artifact(candidate):
                continue
            try:
                size = candidate.stat().st_size
            except FileNotFoundError:
                continue
            infos.append(CacheFileInfo(path=candidate, size_bytes=size))
        return infos

    def clear(self, dry_run: bool = False) -> CacheClearReport:
        """Delete every cache file unless ``dry_run``; report what was (or would be) removed."""

        files = tuple(self.entries())
        if not dry_run:
            for info in files:
                info.path.unlink(missing_ok=True)
            logger.debug("Removed %d cache files from %s", len(files), self._cache_dir)
        return CacheClearReport(cache_dir=self._cache_dir, files=files, dry_run=dry_run)

    @staticmethod
    def _is_cache_artifact(candidate: Path) -> bool:
        if not candidate.is_file():
            return False
        name = candidate.name
        if name.startswith(CACHE_FILE_PREFIX) and name.endswith(CACHE_FILE_SUFFIX):
            return True
        return name.startswith(f".{CACHE_FILE_PREFIX}") and name.endswith(".tmp")

    @staticmethod
    def _log_miss(base_path: Path | str, reason: str) -> None:
        logger.debug(
            "Cache miss for %s (%s)",
            base_path,
            reason,
            extra={"scan_event": "cache.miss", "target_path": str(base_path), "reason": reason},
        )


__all__ = [
    "CACHE_FILE_PREFIX",
    "CACHE_FILE_SUFFIX",
    "KEY_LENGTH",
    "CacheClearReport",
    "CacheFileInfo",
    "CacheStore",
    "canonical_path",
    "key_for",
]
