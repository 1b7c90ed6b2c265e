# Where: gitnav.shared.__init__
# What: Provide a concise import surface for shared errors and value objects.
# Why: Keep feature packages importing one canonical location.

"""Shared cross-cutting types exposed at the package level."""

from .configuration import PreviewConfiguration, ScanConfiguration
from .errors import (
    CacheCorrupt,
    CacheUnavailable,
    ConfigurationError,
    GitnavError,
    InvalidDepth,
    NoRepositoriesFound,
    PathNotFound,
    RepositoryUnavailable,
)

__all__ = [
    "CacheCorrupt",
    "CacheUnavailable",
    "ConfigurationError",
    "GitnavError",
    "InvalidDepth",
    "NoRepositoriesFound",
    "PathNotFound",
    "PreviewConfiguration",
    "RepositoryUnavailable",
    "ScanConfiguration",
]
