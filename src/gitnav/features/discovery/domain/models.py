"""Data structures describing discovered repositories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RepositoryDescriptor:
    """Identity of a directory that held git metadata at scan time."""

    path: Path
    name: str

    @classmethod
    def from_path(cls, path: Path) -> "RepositoryDescriptor":
        """Create a descriptor named after the final path component."""

        return cls(path=path, name=path.name or str(path))

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-friendly ``{name, path}`` mapping."""

        return {"name": self.name, "path": str(self.path)}

    def selector_row(self) -> str:
        """Return the ``name<TAB>path`` row fed to the fuzzy selector."""

        return f"{self.name}\t{self.path}"


__all__ = ["RepositoryDescriptor"]
