"""Directory traversal producing walker entries in enumeration order."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ..errors import RootUnreadableError, SubtreeUnreadableError
from .types import WalkedEntry

log = logging.getLogger(__name__)


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def _is_real_directory(child: os.DirEntry) -> bool:
    """Return whether ``child`` is a directory that is not reached via a symlink."""
    try:
        return child.is_dir(follow_symlinks=False)
    except OSError:
        return False


def list_directory_children(
    directory: Path,
    display_directory: Path | None,
    depth: int,
    show_hidden: bool,
) -> tuple[list[tuple[WalkedEntry, bool]], OSError | None]:
    """Scan one directory level.

    Returns ``(children, scan_error)`` where each child is paired with whether
    the walker may descend into it. ``display_directory`` of ``None`` means
    children are displayed by bare name. ``scan_error`` is set when the
    directory cannot be opened or enumerated.
    """
    children: list[tuple[WalkedEntry, bool]] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and is_hidden_name(name):
                    continue
                display = Path(name) if display_directory is None else display_directory / name
                walked = WalkedEntry(
                    name=name,
                    path=display,
                    location=Path(child.path),
                    depth=depth,
                )
                children.append((walked, _is_real_directory(child)))
    except OSError as exc:
        return [], exc
    return children, None


def walk_directory(root: Path, show_hidden: bool, recursive: bool) -> list[WalkedEntry]:
    """Collect entries under ``root`` in traversal order.

    Flat mode displays bare names at depth 0. Recursive mode walks depth
    first with an explicit stack of child iterators, so a directory's
    children follow it directly and precede its later siblings; displayed
    paths are joined onto ``root``. Symlinked directories are listed but
    never entered.

    Raises ``RootUnreadableError`` if ``root`` itself cannot be scanned. An
    unreadable subdirectory is logged as a warning and skipped.
    """
    root_display = root if recursive else None
    root_children, root_error = list_directory_children(root, root_display, 0, show_hidden)
    if root_error is not None:
        raise RootUnreadableError(root, root_error) from root_error

    walked: list[WalkedEntry] = []
    stack: list[Iterator[tuple[WalkedEntry, bool]]] = [iter(root_children)]
    while stack:
        item = next(stack[-1], None)
        if item is None:
            stack.pop()
            continue
        entry, can_descend = item
        walked.append(entry)
        if not (recursive and can_descend):
            continue

        children, scan_error = list_directory_children(
            entry.location,
            entry.path,
            entry.depth + 1,
            show_hidden,
        )
        if scan_error is not None:
            log.warning("%s", SubtreeUnreadableError(entry.path, scan_error))
            continue
        stack.append(iter(children))
    return walked


__all__ = [
    "is_hidden_name",
    "list_directory_children",
    "walk_directory",
]
