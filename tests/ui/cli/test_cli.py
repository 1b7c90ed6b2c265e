"""Tests for CLI functionality."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from gitnav.shared.exit_codes import (
    EXIT_GENERAL_ERROR,
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
    EXIT_UNAVAILABLE,
)
from gitnav.ui.cli import CommandProcessor, main


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    (root / "alpha" / ".git").mkdir(parents=True)
    (root / "group" / "beta" / ".git").mkdir(parents=True)
    return root


def test_list_mode_prints_paths(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = CommandProcessor.process_command(["--list", "--path", str(workspace), "--no-color"])

    captured = capsys.readouterr()
    assert code == EXIT_SUCCESS
    assert captured.out.splitlines() == [
        str(workspace / "alpha"),
        str(workspace / "group" / "beta"),
    ]


def test_list_json_mode(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = CommandProcessor.process_command(["-l", "--json", "-p", str(workspace)])

    assert code == EXIT_SUCCESS
    names = [entry["name"] for entry in json.loads(capsys.readouterr().out)]
    assert names == ["alpha", "beta"]


def test_second_run_uses_cache(
    workspace: Path, isolated_environment: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _ = CommandProcessor.process_command(["-l", "-p", str(workspace)])
    (workspace / "gamma" / ".git").mkdir(parents=True)

    cached = CommandProcessor.process_command(["-l", "-p", str(workspace)])
    cached_out = capsys.readouterr().out
    forced = CommandProcessor.process_command(["-l", "-f", "-p", str(workspace)])
    forced_out = capsys.readouterr().out

    assert cached == forced == EXIT_SUCCESS
    assert str(workspace / "gamma") not in cached_out
    assert str(workspace / "gamma") in forced_out
    assert any((isolated_environment / "cache").iterdir())


def test_missing_path_is_a_general_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "missing"

    code = CommandProcessor.process_command(["-l", "-p", str(missing)])

    assert code == EXIT_GENERAL_ERROR
    assert str(missing) in capsys.readouterr().err


def test_no_repositories_is_a_general_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()

    code = CommandProcessor.process_command(["-l", "-p", str(empty)])

    captured = capsys.readouterr()
    assert code == EXIT_GENERAL_ERROR
    assert captured.out == ""
    assert "No git repositories found" in captured.err


def test_invalid_depth_is_reported(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = CommandProcessor.process_command(["-l", "-p", str(workspace), "-d", "0"])

    assert code == EXIT_GENERAL_ERROR
    assert "configured: 0" in capsys.readouterr().err


def test_interactive_mode_without_fzf(
    workspace: Path, mocker: MockerFixture, capsys: pytest.CaptureFixture[str]
) -> None:
    _ = mocker.patch("gitnav.ui.cli.selector.FzfSelector.is_available", return_value=False)

    code = CommandProcessor.process_command(["-p", str(workspace)])

    assert code == EXIT_UNAVAILABLE
    assert "fzf not found" in capsys.readouterr().err


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "gitnav.ui.cli.cli.ArgumentParser.process_args",
        side_effect=KeyboardInterrupt,
    )

    assert CommandProcessor.process_command([]) == EXIT_INTERRUPTED


def test_unexpected_errors_exit_1(mocker: MockerFixture, capsys: pytest.CaptureFixture[str]) -> None:
    _ = mocker.patch(
        "gitnav.ui.cli.cli.CommandProcessor.build_command",
        side_effect=RuntimeError("kaboom"),
    )

    assert CommandProcessor.process_command(["config"]) == EXIT_GENERAL_ERROR
    assert "kaboom" in capsys.readouterr().err


def test_preview_of_missing_repository(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = CommandProcessor.process_command(["--preview", str(tmp_path / "gone")])

    assert code == EXIT_GENERAL_ERROR
    assert "Repository unavailable" in capsys.readouterr().err


def test_main_returns_exit_code(mocker: MockerFixture) -> None:
    _ = mocker.patch("gitnav.ui.cli.cli.CommandProcessor.process_command", return_value=69)

    assert main() == 69
