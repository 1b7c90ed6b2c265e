"""Tests for the default navigation command."""

from __future__ import annotations

import json
from io import StringIO
from pathlib import Path

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from gitnav.application.services.navigation_service import (
    DiscoveryResult,
    DiscoverySource,
    NavigationService,
)
from gitnav.config.config import AppConfig
from gitnav.features.discovery import RepositoryDescriptor
from gitnav.shared.exit_codes import EXIT_INTERRUPTED, EXIT_SUCCESS, EXIT_UNAVAILABLE
from gitnav.ui.cli.args.options import NavigateArgs
from gitnav.ui.cli.commands import NavigateCommand

DESCRIPTORS = (
    RepositoryDescriptor.from_path(Path("/src/alpha")),
    RepositoryDescriptor.from_path(Path("/src/beta")),
)


def _args(**overrides: object) -> NavigateArgs:
    values: dict[str, object] = {
        "command": "navigate",
        "app_config": AppConfig(),
        "base_path": Path("/src"),
        "max_depth": None,
        "force": False,
        "list_only": False,
        "json_output": False,
        "quiet": False,
        "verbose": False,
        "no_color": True,
        "debug": False,
        "config_path": None,
    }
    values.update(overrides)
    return NavigateArgs(**values)  # pyright: ignore[reportArgumentType]


@pytest.fixture
def service(mocker: MockerFixture) -> NavigationService:
    mock = mocker.create_autospec(NavigationService, instance=True)
    mock.discover.return_value = DiscoveryResult(
        descriptors=DESCRIPTORS,
        source=DiscoverySource.SCAN,
        persisted=True,
    )
    return mock


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, no_color=True, width=200, soft_wrap=True), buffer


def test_list_prints_one_path_per_line(service: NavigationService) -> None:
    console, buffer = _console()

    code = NavigateCommand(_args(list_only=True), service=service, console=console).execute()

    assert code == EXIT_SUCCESS
    assert buffer.getvalue().splitlines() == ["/src/alpha", "/src/beta"]


def test_list_json(service: NavigationService) -> None:
    console, buffer = _console()

    code = NavigateCommand(
        _args(list_only=True, json_output=True), service=service, console=console
    ).execute()

    assert code == EXIT_SUCCESS
    assert json.loads(buffer.getvalue()) == [
        {"name": "alpha", "path": "/src/alpha"},
        {"name": "beta", "path": "/src/beta"},
    ]


def test_request_carries_overrides(service: NavigationService) -> None:
    console, _ = _console()

    _ = NavigateCommand(
        _args(list_only=True, max_depth=2, force=True), service=service, console=console
    ).execute()

    request = service.discover.call_args.args[0]  # pyright: ignore[reportFunctionMemberAccess]
    assert request.force
    assert request.config.max_depth == 2
    assert request.config.base_path == Path("/src")


def test_missing_fzf_exits_unavailable(service: NavigationService, mocker: MockerFixture) -> None:
    selector = mocker.Mock()
    selector.is_available.return_value = False
    console, buffer = _console()

    code = NavigateCommand(
        _args(), service=service, selector_factory=lambda _ui, _preview: selector, console=console
    ).execute()

    assert code == EXIT_UNAVAILABLE
    selector.select.assert_not_called()
    assert buffer.getvalue() == ""


def test_selection_is_printed(service: NavigationService, mocker: MockerFixture) -> None:
    selector = mocker.Mock()
    selector.is_available.return_value = True
    selector.select.return_value = Path("/src/beta")
    factory = mocker.Mock(return_value=selector)
    console, buffer = _console()

    code = NavigateCommand(_args(), service=service, selector_factory=factory, console=console).execute()

    assert code == EXIT_SUCCESS
    assert buffer.getvalue() == "/src/beta\n"
    selector.select.assert_called_once_with(DESCRIPTORS)
    ui, preview = factory.call_args.args
    assert ui == AppConfig().ui
    assert preview.endswith("--no-color --preview {2}")


def test_cancelled_selection_exits_interrupted(service: NavigationService, mocker: MockerFixture) -> None:
    selector = mocker.Mock()
    selector.is_available.return_value = True
    selector.select.return_value = None
    console, buffer = _console()

    code = NavigateCommand(
        _args(), service=service, selector_factory=lambda _ui, _preview: selector, console=console
    ).execute()

    assert code == EXIT_INTERRUPTED
    assert buffer.getvalue() == ""


def test_selected_path_with_emoji_code_is_printed_verbatim(
    service: NavigationService, mocker: MockerFixture
) -> None:
    selector = mocker.Mock()
    selector.is_available.return_value = True
    selector.select.return_value = Path("/src/:rocket:")
    console, buffer = _console()

    code = NavigateCommand(
        _args(), service=service, selector_factory=lambda _ui, _preview: selector, console=console
    ).execute()

    assert code == EXIT_SUCCESS
    assert buffer.getvalue() == "/src/:rocket:\n"
