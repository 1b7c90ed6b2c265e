"""Where: src/gitnav/features/preview/usecases/generator.py
What: Query git metadata of one repository and assemble its preview.
Why: Back the selector's preview pane, invoked once per highlighted row.
"""

from __future__ import annotations

import itertools
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Final, final

import pygit2
from pygit2.enums import FileStatus, RepositoryOpenFlag, SortMode

from gitnav.platform.logging import logger
from gitnav.shared.configuration import PreviewConfiguration
from gitnav.shared.errors import RepositoryUnavailable

from ..domain.layout import render_preview_text
from ..domain.models import (
    DETACHED_HEAD,
    CommitSummary,
    LastActivity,
    RepositoryPreview,
    StatusCounts,
)
from ..domain.relative_time import relative_time_between

SHORT_ID_LENGTH: Final[int] = 7

_STAGED_FLAGS: Final[FileStatus] = (
    FileStatus.INDEX_NEW
    | FileStatus.INDEX_MODIFIED
    | FileStatus.INDEX_DELETED
    | FileStatus.INDEX_RENAMED
    | FileStatus.INDEX_TYPECHANGE
)
_UNSTAGED_FLAGS: Final[FileStatus] = (
    FileStatus.WT_MODIFIED
    | FileStatus.WT_DELETED
    | FileStatus.WT_RENAMED
    | FileStatus.WT_TYPECHANGE
)
_GIT_QUERY_ERRORS: Final[tuple[type[Exception], ...]] = (pygit2.GitError, KeyError, ValueError)


@final
class PreviewGenerator:
    """Build ``RepositoryPreview`` objects; stateless between calls."""

    def __init__(
        self,
        config: PreviewConfiguration,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config: PreviewConfiguration = config
        self._clock: Callable[[], float] = clock

    def generate(self, repo_path: Path) -> RepositoryPreview:
        """Open ``repo_path`` and collect every enabled section.

        Raises:
            RepositoryUnavailable: If the path is gone or holds no readable
                git metadata.
        """
        repo = self._open(repo_path)
        config = self._config

        branch = self._branch(repo) if config.show_branch else None
        head_commit = self._head_commit(repo)
        last_activity = (
            self._last_activity(head_commit)
            if config.show_last_activity and head_commit is not None
            else None
        )
        status = self._status(repo) if config.show_status else None
        commits = (
            self._recent_commits(repo, head_commit, config.recent_commits)
            if config.recent_commits > 0 and head_commit is not None
            else ()
        )

        return RepositoryPreview(
            name=repo_path.name or str(repo_path),
            path=repo_path,
            config=config,
            branch=branch,
            last_activity=last_activity,
            status=status,
            commits=commits,
        )

    def render(self, repo_path: Path) -> str:
        """Generate and render the preview as plain text."""

        return render_preview_text(self.generate(repo_path))

    @staticmethod
    def _open(repo_path: Path) -> pygit2.Repository:
        if not repo_path.exists():
            raise RepositoryUnavailable(repo_path, "path does not exist")
        try:
            # NO_SEARCH: a deleted repo must not resolve to an enclosing one.
            return pygit2.Repository(str(repo_path), RepositoryOpenFlag.NO_SEARCH)
        except (pygit2.GitError, OSError) as exc:
            raise RepositoryUnavailable(repo_path, str(exc)) from exc

    @staticmethod
    def _branch(repo: pygit2.Repository) -> str:
        try:
            if repo.head_is_detached:
                return DETACHED_HEAD
            if repo.head_is_unborn:
                target = repo.lookup_reference("HEAD").target
                return str(target).removeprefix("refs/heads/")
            return repo.head.shorthand
        except _GIT_QUERY_ERRORS as exc:
            logger.debug("Could not resolve HEAD of %s: %s", repo.workdir or repo.path, exc)
            return "unknown"

    @staticmethod
    def _head_commit(repo: pygit2.Repository) -> pygit2.Commit | None:
        try:
            if repo.head_is_unborn:
                return None
            return repo.head.peel(pygit2.Commit)
        except _GIT_QUERY_ERRORS as exc:
            logger.debug("No HEAD commit in %s: %s", repo.workdir or repo.path, exc)
            return None

    def _last_activity(self, commit: pygit2.Commit) -> LastActivity:
        committed_at = commit.commit_time
        timestamp = datetime.fromtimestamp(committed_at).astimezone()
        return LastActivity(
            timestamp=timestamp,
            relative=relative_time_between(committed_at, self._clock()),
            absolute=timestamp.strftime(self._config.date_format),
        )

    @staticmethod
    def _status(repo: pygit2.Repository) -> StatusCounts | None:
        try:
            entries = repo.status()
        except _GIT_QUERY_ERRORS as exc:
            logger.debug("Status unavailable for %s: %s", repo.workdir or repo.path, exc)
            return None

        staged = unstaged = untracked = 0
        for flags in entries.values():
            if flags & _STAGED_FLAGS:
                staged += 1
            if flags & _UNSTAGED_FLAGS:
                unstaged += 1
            if flags & FileStatus.WT_NEW:
                untracked += 1
        return StatusCounts(staged=staged, unstaged=unstaged, untracked=untracked)

    @staticmethod
    def _recent_commits(
        repo: pygit2.Repository,
        head_commit: pygit2.Commit,
        limit: int,
    ) -> tuple[CommitSummary, ...]:
        try:
            walker = repo.walk(head_commit.id, SortMode.TIME)
            return tuple(
                CommitSummary(
                    short_id=str(commit.id)[:SHORT_ID_LENGTH],
                    summary=_first_line(commit.message),
                )
                for commit in itertools.islice(walker, limit)
            )
        except _GIT_QUERY_ERRORS as exc:
            logger.debug("History unavailable for %s: %s", repo.workdir or repo.path, exc)
            return ()


def _first_line(message: str | None) -> str:
    lines = (message or "").splitlines()
    return lines[0] if lines else ""


def generate_preview(repo_path: Path, config: PreviewConfiguration) -> str:
    """Render the plain-text preview of ``repo_path``."""

    return PreviewGenerator(config).render(repo_path)


__all__ = ["SHORT_ID_LENGTH", "PreviewGenerator", "generate_preview"]
