"""Application service that decides between the cache and a fresh scan.

This layer centralizes orchestration and construction of the scanner and
cache store so the CLI commands only deal with resolved results.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import final

from gitnav.config.paths import default_cache_dir
from gitnav.features.cache import CacheClearReport, CacheStore
from gitnav.features.discovery import RepositoryDescriptor, RepositoryScanner, ScannerPort
from gitnav.platform.logging import logger
from gitnav.shared.configuration import ScanConfiguration
from gitnav.shared.errors import CacheUnavailable, NoRepositoriesFound


class PipelineState(str, Enum):
    """Per-invocation state of the discovery pipeline."""

    NEED_SCAN = "need_scan"
    READY = "ready"


class DiscoverySource(str, Enum):
    """Where a descriptor list came from."""

    CACHE = "cache"
    SCAN = "scan"


@dataclass(frozen=True)
class DiscoveryRequest:
    """Input parameters for a discovery run.

    Attributes:
        config: Resolved scan parameters.
        force: Skip the cache lookup; the fresh result is still saved.
    """

    config: ScanConfiguration
    force: bool = False


@dataclass(frozen=True)
class DiscoveryResult:
    """Descriptors ready for the selector or a listing."""

    descriptors: tuple[RepositoryDescriptor, ...]
    source: DiscoverySource
    persisted: bool
    state: PipelineState = PipelineState.READY


CacheFactory = Callable[[Path, int], CacheStore]


@final
class NavigationService:
    """Resolve the repository list for a search root, via cache or scan."""

    def __init__(
        self,
        *,
        scanner_factory: Callable[[], ScannerPort] | None = None,
        cache_factory: CacheFactory | None = None,
    ) -> None:
        """Create a service with overridable infrastructure factories.

        Tests can inject light-weight doubles while production code relies on
        the default scanner and cache store.
        """

        self._scanner_factory: Callable[[], ScannerPort] = scanner_factory or RepositoryScanner
        self._cache_factory: CacheFactory = cache_factory or CacheStore
        self._cache_warning_emitted: bool = False

    def discover(self, request: DiscoveryRequest) -> DiscoveryResult:
        """Return descriptors for ``request``, trusting the cache when valid.

        Raises:
            PathNotFound: If the search root is invalid (from the scanner).
            InvalidDepth: If the configured depth is below 1 (from the scanner).
            NoRepositoriesFound: If the resolved list is empty.
        """
        config = request.config
        parameters = config.cache_parameters()
        state = PipelineState.NEED_SCAN

        cache = self.open_cache(config) if config.cache_enabled else None

        if cache is not None and not request.force:
            cached = cache.load(config.base_path, parameters)
            if cached is not None:
                state = PipelineState.READY
                return self._finish(
                    config.base_path,
                    DiscoveryResult(
                        descriptors=cached,
                        source=DiscoverySource.CACHE,
                        persisted=True,
                        state=state,
                    ),
                )

        logger.debug(
            "Scanning %s (cache %s, force=%s)",
            config.base_path,
            "enabled" if cache is not None else "off",
            request.force,
        )
        scanner = self._scanner_factory()
        descriptors = scanner.scan(
            config.base_path,
            config.max_depth,
            skip_hidden=config.skip_hidden,
        )

        persisted = False
        if cache is not None:
            try:
                _ = cache.save(config.base_path, descriptors, parameters)
                persisted = True
            except OSError as exc:
                logger.warning(
                    "Could not persist repository list to %s: %s",
                    cache.cache_dir,
                    exc,
                )

        state = PipelineState.READY
        return self._finish(
            config.base_path,
            DiscoveryResult(
                descriptors=descriptors,
                source=DiscoverySource.SCAN,
                persisted=persisted,
                state=state,
            ),
        )

    def open_cache(self, config: ScanConfiguration) -> CacheStore | None:
        """Build the cache store, degrading to ``None`` when it is unavailable.

        The warning is reported once per service instance.
        """
        cache_dir = config.cache_dir or default_cache_dir()
        try:
            return self._cache_factory(cache_dir, config.cache_ttl_seconds)
        except CacheUnavailable as exc:
            if not self._cache_warning_emitted:
                logger.warning(
                    "%s; continuing without cache",
                    exc,
                    extra={
                        "scan_event": "cache.unavailable",
                        "target_path": str(cache_dir),
                        "error_message": str(exc),
                    },
                )
                self._cache_warning_emitted = True
            return None

    def clear_cache(self, config: ScanConfiguration, *, dry_run: bool) -> CacheClearReport:
        """Clear every cached list in the configured cache directory.

        Raises:
            CacheUnavailable: If the cache directory cannot be created.
        """
        cache_dir = config.cache_dir or default_cache_dir()
        cache = self._cache_factory(cache_dir, config.cache_ttl_seconds)
        return cache.clear(dry_run=dry_run)

    @staticmethod
    def _finish(base_path: Path, result: DiscoveryResult) -> DiscoveryResult:
        if not result.descriptors:
            raise NoRepositoriesFound(base_path)
        logger.debug(
            "Resolved %d repositories from %s",
            len(result.descriptors),
            result.source.value,
        )
        return result


__all__ = [
    "DiscoveryRequest",
    "DiscoveryResult",
    "DiscoverySource",
    "NavigationService",
    "PipelineState",
]
