"""Data structures describing a repository preview."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from gitnav.shared.configuration import PreviewConfiguration

DETACHED_HEAD: str = "(detached HEAD)"


@dataclass(frozen=True, slots=True)
class LastActivity:
    """Timestamp of the HEAD commit in both renderings."""

    timestamp: datetime
    relative: str
    absolute: str


@dataclass(frozen=True, slots=True)
class StatusCounts:
    """Working-tree file counts; a file may count as both staged and unstaged."""

    staged: int = 0
    unstaged: int = 0
    untracked: int = 0

    @property
    def is_clean(self) -> bool:
        return self.staged == 0 and self.unstaged == 0 and self.untracked == 0


@dataclass(frozen=True, slots=True)
class CommitSummary:
    """Short hash and subject line of one commit."""

    short_id: str
    summary: str


@dataclass(frozen=True, slots=True)
class RepositoryPreview:
    """Everything the preview pane shows for one repository.

    Section fields are ``None`` when the section is disabled or its git query
    had nothing to report; ``config`` tells the two apart.
    """

    name: str
    path: Path
    config: PreviewConfiguration
    branch: str | None = None
    last_activity: LastActivity | None = None
    status: StatusCounts | None = None
    commits: tuple[CommitSummary, ...] = ()


__all__ = [
    "DETACHED_HEAD",
    "CommitSummary",
    "LastActivity",
    "RepositoryPreview",
    "StatusCounts",
]
