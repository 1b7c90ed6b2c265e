"""Tests for filesystem helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from gitnav.platform import filesystem
from gitnav.platform.filesystem import atomic_write_text, ensure_directory


def test_ensure_directory_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"

    assert ensure_directory(target) == target
    assert target.is_dir()


def test_ensure_directory_rejects_files(tmp_path: Path) -> None:
    file_path = tmp_path / "file"
    _ = file_path.write_text("x")

    with pytest.raises(NotADirectoryError):
        _ = ensure_directory(file_path)


def test_atomic_write_replaces_content(tmp_path: Path) -> None:
    target = tmp_path / "data.txt"
    _ = target.write_text("old", encoding="utf-8")

    atomic_write_text(target, "new\n")

    assert target.read_text(encoding="utf-8") == "new\n"
    assert [p.name for p in tmp_path.iterdir()] == ["data.txt"]


def test_atomic_write_cleans_up_on_failure(tmp_path: Path, mocker: MockerFixture) -> None:
    target = tmp_path / "data.txt"
    _ = target.write_text("old", encoding="utf-8")
    _ = mocker.patch.object(filesystem.os, "replace", side_effect=OSError("boom"))

    with pytest.raises(OSError, match="boom"):
        atomic_write_text(target, "new")

    assert target.read_text(encoding="utf-8") == "old"
    assert [p.name for p in tmp_path.iterdir()] == ["data.txt"]
