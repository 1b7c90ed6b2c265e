"""Tests for the exception hierarchy and exit codes."""

from __future__ import annotations

from pathlib import Path

import pytest

from gitnav.shared import errors
from gitnav.shared import exit_codes


@pytest.mark.parametrize(
    "error",
    [
        errors.PathNotFound("/nope"),
        errors.ConfigurationError("bad"),
        errors.InvalidDepth(0),
        errors.CacheUnavailable(Path("/cache"), "denied"),
        errors.CacheCorrupt("line 1"),
        errors.RepositoryUnavailable("/gone"),
        errors.NoRepositoriesFound("/empty"),
    ],
)
def test_every_error_is_a_gitnav_error(error: Exception) -> None:
    assert isinstance(error, errors.GitnavError)


def test_invalid_depth_is_a_configuration_error() -> None:
    assert isinstance(errors.InvalidDepth(-1), errors.ConfigurationError)


def test_messages_carry_literal_context() -> None:
    assert "/srv/code" in str(errors.PathNotFound("/srv/code"))
    assert "(configured: 0)" in str(errors.InvalidDepth(0))
    assert str(errors.RepositoryUnavailable("/gone", "deleted")) == "Repository unavailable: /gone (deleted)"


def test_exit_codes_are_distinct() -> None:
    codes = [
        exit_codes.EXIT_SUCCESS,
        exit_codes.EXIT_GENERAL_ERROR,
        exit_codes.EXIT_USAGE_ERROR,
        exit_codes.EXIT_UNAVAILABLE,
        exit_codes.EXIT_INTERRUPTED,
    ]

    assert len(set(codes)) == len(codes)
    assert exit_codes.EXIT_INTERRUPTED == 130
