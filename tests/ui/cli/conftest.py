"""Fixtures keeping CLI tests away from the user's log directory."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from gitnav.platform.logging import setup_logger


@pytest.fixture(autouse=True)
def temporary_log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Redirect the default log file and restore console-only logging afterwards."""

    log_file = tmp_path / "logs" / "gitnav.log"
    monkeypatch.setattr("gitnav.ui.cli.args.parser.default_log_file", lambda: log_file)
    # Wide consoles keep long temporary paths on one line.
    monkeypatch.setenv("COLUMNS", "500")
    yield log_file
    _ = setup_logger()
