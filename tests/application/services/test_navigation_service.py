"""Tests for the cache-or-scan orchestration in ``NavigationService``."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from gitnav.application.services.navigation_service import (
    DiscoveryRequest,
    DiscoverySource,
    NavigationService,
    PipelineState,
)
from gitnav.features.cache import CacheStore
from gitnav.features.discovery import RepositoryDescriptor
from gitnav.shared.configuration import ScanConfiguration
from gitnav.shared.errors import CacheUnavailable, NoRepositoriesFound


class CountingScanner:
    """Scanner double returning a fixed list and counting invocations."""

    def __init__(self, descriptors: tuple[RepositoryDescriptor, ...]) -> None:
        self.descriptors = descriptors
        self.calls: list[tuple[Path, int, bool]] = []

    def scan(
        self,
        base_path: Path,
        max_depth: int,
        *,
        skip_hidden: bool = False,
    ) -> tuple[RepositoryDescriptor, ...]:
        self.calls.append((base_path, max_depth, skip_hidden))
        return self.descriptors


@pytest.fixture
def root(tmp_path: Path) -> Path:
    path = tmp_path / "projects"
    path.mkdir()
    return path


@pytest.fixture
def scanner(root: Path) -> CountingScanner:
    return CountingScanner(
        (
            RepositoryDescriptor.from_path(root / "alpha"),
            RepositoryDescriptor.from_path(root / "beta"),
        )
    )


def _config(root: Path, tmp_path: Path, **overrides: object) -> ScanConfiguration:
    values: dict[str, object] = {
        "base_path": root,
        "max_depth": 3,
        "cache_dir": tmp_path / "cache",
        "cache_ttl_seconds": 300,
    }
    values.update(overrides)
    return ScanConfiguration(**values)  # pyright: ignore[reportArgumentType]


def test_second_lookup_is_served_from_cache(
    root: Path, tmp_path: Path, scanner: CountingScanner
) -> None:
    service = NavigationService(scanner_factory=lambda: scanner)
    request = DiscoveryRequest(config=_config(root, tmp_path))

    first = service.discover(request)
    second = service.discover(request)

    assert len(scanner.calls) == 1
    assert first.source is DiscoverySource.SCAN
    assert first.persisted
    assert second.source is DiscoverySource.CACHE
    assert second.state is PipelineState.READY
    assert second.descriptors == first.descriptors == scanner.descriptors


def test_force_rescans_and_refreshes_cache(
    root: Path, tmp_path: Path, scanner: CountingScanner
) -> None:
    service = NavigationService(scanner_factory=lambda: scanner)
    config = _config(root, tmp_path)
    _ = service.discover(DiscoveryRequest(config=config))

    scanner.descriptors = scanner.descriptors[:1]
    forced = service.discover(DiscoveryRequest(config=config, force=True))
    cached = service.discover(DiscoveryRequest(config=config))

    assert len(scanner.calls) == 2
    assert forced.source is DiscoverySource.SCAN
    assert cached.source is DiscoverySource.CACHE
    assert cached.descriptors == scanner.descriptors


def test_disabled_cache_always_scans_and_never_saves(
    root: Path, tmp_path: Path, scanner: CountingScanner
) -> None:
    service = NavigationService(scanner_factory=lambda: scanner)
    config = _config(root, tmp_path, cache_enabled=False)

    results = [service.discover(DiscoveryRequest(config=config)) for _ in range(2)]

    assert len(scanner.calls) == 2
    assert all(not result.persisted for result in results)
    assert not (tmp_path / "cache").exists()


def test_scan_parameters_are_forwarded(
    root: Path, tmp_path: Path, scanner: CountingScanner
) -> None:
    service = NavigationService(scanner_factory=lambda: scanner)

    _ = service.discover(DiscoveryRequest(config=_config(root, tmp_path, max_depth=7, skip_hidden=True)))

    assert scanner.calls == [(root, 7, True)]


def test_different_depth_does_not_reuse_cache(
    root: Path, tmp_path: Path, scanner: CountingScanner
) -> None:
    service = NavigationService(scanner_factory=lambda: scanner)

    _ = service.discover(DiscoveryRequest(config=_config(root, tmp_path, max_depth=2)))
    _ = service.discover(DiscoveryRequest(config=_config(root, tmp_path, max_depth=4)))

    assert len(scanner.calls) == 2


def test_unavailable_cache_degrades_to_scanning_with_one_warning(
    root: Path,
    tmp_path: Path,
    scanner: CountingScanner,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def broken_cache(cache_dir: Path, ttl_seconds: int) -> CacheStore:
        raise CacheUnavailable(cache_dir, "read-only file system")

    service = NavigationService(scanner_factory=lambda: scanner, cache_factory=broken_cache)
    request = DiscoveryRequest(config=_config(root, tmp_path))

    with caplog.at_level(logging.WARNING, logger="gitnav"):
        first = service.discover(request)
        second = service.discover(request)

    assert len(scanner.calls) == 2
    assert first.source is second.source is DiscoverySource.SCAN
    assert not first.persisted
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert getattr(warnings[0], "scan_event", None) == "cache.unavailable"


def test_failing_save_is_tolerated(
    root: Path,
    tmp_path: Path,
    scanner: CountingScanner,
    mocker: MockerFixture,
) -> None:
    service = NavigationService(scanner_factory=lambda: scanner)
    patched = mocker.patch.object(CacheStore, "save", side_effect=OSError("disk full"))

    result = service.discover(DiscoveryRequest(config=_config(root, tmp_path)))

    patched.assert_called_once()
    assert result.descriptors == scanner.descriptors
    assert not result.persisted


def test_empty_scan_raises_no_repositories_found(root: Path, tmp_path: Path) -> None:
    service = NavigationService(scanner_factory=lambda: CountingScanner(()))

    with pytest.raises(NoRepositoriesFound) as excinfo:
        _ = service.discover(DiscoveryRequest(config=_config(root, tmp_path)))

    assert excinfo.value.base_path == root


def test_real_scanner_end_to_end(tmp_path: Path) -> None:
    root = tmp_path / "workspace"
    (root / "team" / "service" / ".git").mkdir(parents=True)
    (root / "a" / "b" / "c" / "d" / "e" / "too-deep" / ".git").mkdir(parents=True)

    result = NavigationService().discover(
        DiscoveryRequest(config=_config(root, tmp_path, max_depth=5))
    )

    assert [d.path for d in result.descriptors] == [root / "team" / "service"]


def test_clear_cache_reports_files(root: Path, tmp_path: Path, scanner: CountingScanner) -> None:
    service = NavigationService(scanner_factory=lambda: scanner)
    config = _config(root, tmp_path)
    _ = service.discover(DiscoveryRequest(config=config))

    dry = service.clear_cache(config, dry_run=True)
    real = service.clear_cache(config, dry_run=False)

    assert dry.count == real.count == 1
    assert list((tmp_path / "cache").iterdir()) == []
