"""Public surface for the repository list cache."""

from .store import CacheClearReport, CacheFileInfo, CacheStore, canonical_path, key_for

__all__ = [
    "CacheClearReport",
    "CacheFileInfo",
    "CacheStore",
    "canonical_path",
    "key_for",
]
