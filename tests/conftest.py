"""Shared pytest fixtures: temporary git repositories and an isolated environment."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pygit2
import pytest

COMMIT_TIME: int = 1_700_000_000

RepoFactory = Callable[..., pygit2.Repository]


def commit_file(
    repo: pygit2.Repository,
    name: str,
    content: str,
    message: str,
    *,
    when: int = COMMIT_TIME,
) -> pygit2.Oid:
    """Write ``name`` into the work tree, stage it and commit on HEAD."""

    workdir = Path(repo.workdir)
    target = workdir / name
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text(content, encoding="utf-8")
    repo.index.add(name)
    repo.index.write()
    tree = repo.index.write_tree()
    signature = pygit2.Signature("Test User", "test@example.com", when, 0)
    parents = [] if repo.head_is_unborn else [repo.head.target]
    return repo.create_commit("HEAD", signature, signature, message, tree, parents)


@pytest.fixture
def make_repo() -> RepoFactory:
    """Return a factory that initialises a git repository at a path."""

    def _make(path: Path, *, commits: int = 0, when: int = COMMIT_TIME) -> pygit2.Repository:
        path.mkdir(parents=True, exist_ok=True)
        repo = pygit2.init_repository(str(path), initial_head="main")
        for index in range(commits):
            _ = commit_file(
                repo,
                f"file{index}.txt",
                f"content {index}\n",
                f"Commit number {index}",
                when=when + index * 60,
            )
        return repo

    return _make


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point config, cache and colour variables away from the real user profile."""

    env_root = tmp_path_factory.mktemp("_env")
    monkeypatch.setenv("GITNAV_CONFIG", str(env_root / "missing-config.toml"))
    monkeypatch.setenv("GITNAV_CACHE_DIR", str(env_root / "cache"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(env_root / "xdg"))
    monkeypatch.delenv("NO_COLOR", raising=False)
    return env_root


@pytest.fixture
def commit() -> Callable[..., pygit2.Oid]:
    """Expose ``commit_file`` to tests."""

    return commit_file


@pytest.fixture
def commit_time() -> int:
    """Author time used for fixture commits."""

    return COMMIT_TIME
