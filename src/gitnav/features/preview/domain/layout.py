"""
Summary: Lay out a repository preview as typed, unstyled text lines.
Why: Keep preview content testable while presentation layers add colour per role.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .models import RepositoryPreview

NO_COMMITS: str = "No commits yet"
CLEAN_TREE: str = "Clean working tree"
STATUS_UNAVAILABLE: str = "Status unavailable"


class PreviewRole(str, Enum):
    """What a preview line represents, used to pick its style."""

    TITLE = "title"
    BRANCH = "branch"
    ACTIVITY = "activity"
    STATUS_HEADING = "status_heading"
    COMMITS_HEADING = "commits_heading"
    STAGED = "staged"
    UNSTAGED = "unstaged"
    UNTRACKED = "untracked"
    COMMIT = "commit"
    NOTICE = "notice"
    BLANK = "blank"


@dataclass(frozen=True, slots=True)
class PreviewLine:
    """One line of preview output: an optional label followed by a value."""

    role: PreviewRole
    label: str = ""
    value: str = ""
    indent: int = 0

    def plain(self) -> str:
        body = " ".join(part for part in (self.label, self.value) if part)
        return "  " * self.indent + body


_BLANK = PreviewLine(PreviewRole.BLANK)


def build_preview_lines(preview: RepositoryPreview) -> list[PreviewLine]:
    """Turn a preview into lines, honouring the section toggles in its config."""

    config = preview.config
    lines: list[PreviewLine] = [
        PreviewLine(PreviewRole.TITLE, "Repository:", preview.name),
        PreviewLine(PreviewRole.TITLE, "Location:", str(preview.path)),
        _BLANK,
    ]

    if config.show_branch and preview.branch is not None:
        lines.append(PreviewLine(PreviewRole.BRANCH, "Branch:", preview.branch))

    if config.show_last_activity:
        activity = preview.last_activity
        if activity is None:
            lines.append(PreviewLine(PreviewRole.ACTIVITY, "Last Activity:", NO_COMMITS))
        else:
            lines.append(
                PreviewLine(
                    PreviewRole.ACTIVITY,
                    "Last Activity:",
                    f"{activity.relative} ({activity.absolute})",
                )
            )
        lines.append(_BLANK)
    elif config.show_branch and preview.branch is not None:
        lines.append(_BLANK)

    if config.show_status:
        lines.append(PreviewLine(PreviewRole.STATUS_HEADING, "Status:"))
        status = preview.status
        if status is None:
            lines.append(PreviewLine(PreviewRole.NOTICE, value=STATUS_UNAVAILABLE, indent=1))
        elif status.is_clean:
            lines.append(PreviewLine(PreviewRole.NOTICE, value=CLEAN_TREE, indent=1))
        else:
            if status.staged:
                lines.append(PreviewLine(PreviewRole.STAGED, value=f"+{status.staged} staged", indent=1))
            if status.unstaged:
                lines.append(
                    PreviewLine(PreviewRole.UNSTAGED, value=f"~{status.unstaged} unstaged", indent=1)
                )
            if status.untracked:
                lines.append(
                    PreviewLine(PreviewRole.UNTRACKED, value=f"?{status.untracked} untracked", indent=1)
                )
        lines.append(_BLANK)

    if config.recent_commits > 0:
        lines.append(PreviewLine(PreviewRole.COMMITS_HEADING, "Recent commits:"))
        if not preview.commits:
            lines.append(PreviewLine(PreviewRole.NOTICE, value=NO_COMMITS, indent=1))
        for commit in preview.commits:
            lines.append(PreviewLine(PreviewRole.COMMIT, commit.short_id, commit.summary, indent=1))

    while lines and lines[-1].role is PreviewRole.BLANK:
        _ = lines.pop()
    return lines


def render_preview_text(preview: RepositoryPreview) -> str:
    """Render the preview as plain text, one line per ``PreviewLine``."""

    return "\n".join(line.plain() for line in build_preview_lines(preview))


__all__ = [
    "CLEAN_TREE",
    "NO_COMMITS",
    "STATUS_UNAVAILABLE",
    "PreviewLine",
    "PreviewRole",
    "build_preview_lines",
    "render_preview_text",
]
