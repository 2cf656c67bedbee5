"""Stat-backed metadata extraction for walked entries.

``stat`` follows symlinks so kind and size describe the link target. A
failed stat keeps the entry with best-effort fields and logs a warning.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable

from ..errors import MetadataUnreadableError
from .types import Entry, EntryKind, WalkedEntry

log = logging.getLogger(__name__)


def entry_kind_for_mode(mode: int) -> EntryKind:
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def birth_time_ns(result: os.stat_result) -> int | None:
    """Return creation time in nanoseconds when the platform reports one."""
    birth_ns = getattr(result, "st_birthtime_ns", None)
    if birth_ns is not None:
        return int(birth_ns)
    birth = getattr(result, "st_birthtime", None)
    if birth is None:
        return None
    return int(birth * 1_000_000_000)


def safe_lstat_mode(walked: WalkedEntry) -> int | None:
    """Return ``st_mode`` of the entry itself, or ``None`` on failure."""
    try:
        return int(walked.location.lstat().st_mode)
    except OSError:
        return None


def extract_metadata(walked: WalkedEntry, extended_attributes: bool) -> Entry:
    """Build an ``Entry`` from ``walked`` using one ``stat`` call.

    Permission bits are only read when ``extended_attributes`` is set. When
    ``stat`` fails (for example a dangling symlink) the entry is reported as
    ``OTHER`` with zero size and an epoch timestamp.
    """
    try:
        result = walked.location.stat()
    except OSError as exc:
        log.warning("%s", MetadataUnreadableError(walked.path, exc))
        return Entry(
            path=walked.path,
            name=walked.name,
            kind=EntryKind.OTHER,
            size_bytes=0,
            modified_ns=0,
            created_ns=None,
            permissions=safe_lstat_mode(walked) if extended_attributes else None,
            depth=walked.depth,
        )

    return Entry(
        path=walked.path,
        name=walked.name,
        kind=entry_kind_for_mode(result.st_mode),
        size_bytes=int(result.st_size),
        modified_ns=int(result.st_mtime_ns),
        created_ns=birth_time_ns(result),
        permissions=int(result.st_mode) if extended_attributes else None,
        depth=walked.depth,
    )


def extract_all(walked_entries: Iterable[WalkedEntry], extended_attributes: bool) -> list[Entry]:
    """Extract metadata for every walked entry, preserving traversal order."""
    return [extract_metadata(walked, extended_attributes) for walked in walked_entries]


__all__ = [
    "entry_kind_for_mode",
    "birth_time_ns",
    "safe_lstat_mode",
    "extract_metadata",
    "extract_all",
]
