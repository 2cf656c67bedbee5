"""Text formatting for compact and extended listing rows.

Compact rows are ``<icon> <path>``. Extended rows add a header, a ``=``
separator, and permission, size, and timestamp columns after the padded
name column. Nothing here touches the filesystem.
"""

from __future__ import annotations

import stat
from collections.abc import Sequence
from datetime import datetime, timezone

from ..ansi import clip_display, display_width, pad_display, style_directory_name
from ..config import Preferences
from ..listing_model import Entry, EntryKind

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_WIDTH = len("1970-01-01 00:00:00.000")
MISSING_DATE = "-"
MISSING_PERMISSIONS = "?" * 10
COLUMN_GAP = "  "
MIN_NAME_COLS = 16
SEPARATOR_CHAR = "="

HEADER_NAME = "Name"
HEADER_PERMISSIONS = "Permissions"
HEADER_SIZE = "Size"
HEADER_CREATED = "Date Created"
HEADER_MODIFIED = "Date Modified"


def icon_for_kind(kind: EntryKind, preferences: Preferences) -> str:
    if kind is EntryKind.DIRECTORY:
        return preferences.directory_icon
    if kind is EntryKind.FILE:
        return preferences.file_icon
    return preferences.other_icon


def format_timestamp(timestamp_ns: int | None) -> str:
    """Format nanoseconds since epoch as UTC with millisecond precision.

    Timestamps outside the range ``datetime`` can represent render as raw
    epoch seconds.
    """
    if timestamp_ns is None:
        return MISSING_DATE
    seconds, remainder_ns = divmod(timestamp_ns, 1_000_000_000)
    try:
        moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return str(seconds)
    return f"{moment.strftime(DATE_FORMAT)}.{remainder_ns // 1_000_000:03d}"


def format_permissions(mode: int | None) -> str:
    if mode is None:
        return MISSING_PERMISSIONS
    return stat.filemode(mode)


def _name_cell(entry: Entry, width: int | None, color: bool) -> str:
    """Return the display path clipped/padded to ``width`` (``None``: as-is)."""
    text = str(entry.path)
    if width is not None:
        text = clip_display(text, width)
    padding = "" if width is None else " " * max(0, width - display_width(text))
    if color and entry.kind is EntryKind.DIRECTORY:
        text = style_directory_name(text)
    return text + padding


def format_compact_line(entry: Entry, preferences: Preferences, color: bool = False) -> str:
    return f"{icon_for_kind(entry.kind, preferences)} {_name_cell(entry, None, color)}"


def format_extended_lines(
    entries: Sequence[Entry],
    preferences: Preferences,
    color: bool = False,
    max_cols: int | None = None,
) -> list[str]:
    """Return header, separator, and one aligned row per entry.

    The name column is as wide as the longest display path. With
    ``max_cols`` set (interactive terminals) the name column shrinks so rows
    fit, but never below ``MIN_NAME_COLS``.
    """
    if not entries:
        return []
    icons = [icon_for_kind(entry.kind, preferences) for entry in entries]
    icon_width = max(display_width(icon) for icon in icons)
    sizes = [str(entry.size_bytes) for entry in entries]
    size_width = max(len(HEADER_SIZE), *(len(size) for size in sizes))
    permissions_width = max(len(HEADER_PERMISSIONS), len(MISSING_PERMISSIONS))
    date_width = max(DATE_WIDTH, len(HEADER_MODIFIED))

    name_width = max(len(HEADER_NAME), *(display_width(str(entry.path)) for entry in entries))
    # every column except the name column, including the icon and gaps
    reserved = icon_width + 1 + len(COLUMN_GAP) * 4 + permissions_width + size_width + date_width * 2
    if max_cols is not None:
        name_width = min(name_width, max(MIN_NAME_COLS, max_cols - reserved))

    header = COLUMN_GAP.join(
        [
            pad_display(HEADER_NAME, icon_width + 1 + name_width),
            HEADER_PERMISSIONS.ljust(permissions_width),
            HEADER_SIZE.rjust(size_width),
            HEADER_CREATED.ljust(date_width),
            HEADER_MODIFIED,
        ]
    )

    rows: list[str] = []
    for entry, icon, size in zip(entries, icons, sizes):
        rows.append(
            COLUMN_GAP.join(
                [
                    f"{pad_display(icon, icon_width)} {_name_cell(entry, name_width, color)}",
                    format_permissions(entry.permissions).ljust(permissions_width),
                    size.rjust(size_width),
                    format_timestamp(entry.created_ns).ljust(date_width),
                    format_timestamp(entry.modified_ns),
                ]
            )
        )
    return [header, SEPARATOR_CHAR * (reserved + name_width), *rows]


def render_listing(
    entries: Sequence[Entry],
    extended_attributes: bool,
    preferences: Preferences | None = None,
    color: bool = False,
    max_cols: int | None = None,
) -> str:
    """Render the whole listing as text; empty input renders as ``""``."""
    if not entries:
        return ""
    if preferences is None:
        preferences = Preferences()
    if extended_attributes:
        lines = format_extended_lines(entries, preferences, color=color, max_cols=max_cols)
    else:
        lines = [format_compact_line(entry, preferences, color=color) for entry in entries]
    return "".join(f"{line}\n" for line in lines)


__all__ = [
    "DATE_FORMAT",
    "icon_for_kind",
    "format_timestamp",
    "format_permissions",
    "format_compact_line",
    "format_extended_lines",
    "render_listing",
]
