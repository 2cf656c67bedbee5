"""Domain datatypes for entries discovered while listing a directory."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class EntryKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class WalkedEntry:
    """One visible child seen by the walker, before metadata is read.

    ``path`` is what the listing displays; ``location`` is where the object
    actually lives so stat calls work regardless of the display form.
    """

    name: str
    path: Path
    location: Path
    depth: int = 0


@dataclass(frozen=True)
class Entry:
    """Listing entry with the metadata sorting and rendering rely on."""

    path: Path
    name: str
    kind: EntryKind
    size_bytes: int = 0
    modified_ns: int = 0
    created_ns: int | None = None
    permissions: int | None = None
    depth: int = 0


__all__ = [
    "EntryKind",
    "WalkedEntry",
    "Entry",
]
