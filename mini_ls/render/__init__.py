"""Rendering stage: entry formatting and output sinks.

Text is composed in full before any sink is opened, so a failure in an
earlier stage never leaves partial output behind.
"""

from __future__ import annotations

from .lines import (
    DATE_FORMAT,
    format_compact_line,
    format_extended_lines,
    format_permissions,
    format_timestamp,
    icon_for_kind,
    render_listing,
)
from .sink import write_listing

__all__ = [
    "DATE_FORMAT",
    "format_compact_line",
    "format_extended_lines",
    "format_permissions",
    "format_timestamp",
    "icon_for_kind",
    "render_listing",
    "write_listing",
]
