"""Public surface for repository previews."""

from .domain.layout import PreviewLine, PreviewRole, build_preview_lines, render_preview_text
from .domain.models import (
    DETACHED_HEAD,
    CommitSummary,
    LastActivity,
    RepositoryPreview,
    StatusCounts,
)
from .domain.relative_time import format_relative_time
from .usecases.generator import PreviewGenerator, generate_preview

__all__ = [
    "DETACHED_HEAD",
    "CommitSummary",
    "LastActivity",
    "PreviewGenerator",
    "PreviewLine",
    "PreviewRole",
    "RepositoryPreview",
    "StatusCounts",
    "build_preview_lines",
    "format_relative_time",
    "generate_preview",
    "render_preview_text",
]
