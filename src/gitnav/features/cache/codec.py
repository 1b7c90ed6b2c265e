"""Line-oriented serialization of repository descriptors for cache files.

One descriptor per line, ``name`` and ``path`` separated by NUL, which no
valid path can contain. Text is UTF-8 with ``surrogateescape`` so paths with
undecodable bytes survive a round trip.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Final

from gitnav.features.discovery import RepositoryDescriptor
from gitnav.shared.errors import CacheCorrupt

FIELD_SEPARATOR: Final[str] = "\0"
RECORD_SEPARATOR: Final[str] = "\n"
ENCODING: Final[str] = "utf-8"
ENCODING_ERRORS: Final[str] = "surrogateescape"


def is_encodable(descriptor: RepositoryDescriptor) -> bool:
    """Return True when the descriptor fits on a single cache line."""

    text = descriptor.name + str(descriptor.path)
    return RECORD_SEPARATOR not in text and FIELD_SEPARATOR not in text


def encode_descriptors(descriptors: Iterable[RepositoryDescriptor]) -> str:
    """Serialize descriptors; every record, including the last, ends in a newline."""

    return "".join(
        f"{descriptor.name}{FIELD_SEPARATOR}{descriptor.path}{RECORD_SEPARATOR}"
        for descriptor in descriptors
    )


def decode_descriptors(content: str) -> tuple[RepositoryDescriptor, ...]:
    """Parse cache content back into descriptors.

    Raises:
        CacheCorrupt: If a record is truncated, has the wrong field count,
            or carries a relative path.
    """
    if not content:
        return ()
    if not content.endswith(RECORD_SEPARATOR):
        raise CacheCorrupt("cache content does not end with a complete record")

    descriptors: list[RepositoryDescriptor] = []
    for line_number, line in enumerate(content[:-1].split(RECORD_SEPARATOR), start=1):
        fields = line.split(FIELD_SEPARATOR)
        if len(fields) != 2:
            raise CacheCorrupt(f"line {line_number}: expected 2 fields, found {len(fields)}")
        name, raw_path = fields
        if not name or not raw_path:
            raise CacheCorrupt(f"line {line_number}: empty name or path")
        path = Path(raw_path)
        if not path.is_absolute():
            raise CacheCorrupt(f"line {line_number}: path is not absolute: {raw_path}")
        descriptors.append(RepositoryDescriptor(path=path, name=name))
    return tuple(descriptors)


__all__ = [
    "ENCODING",
    "ENCODING_ERRORS",
    "decode_descriptors",
    "encode_descriptors",
    "is_encodable",
]
