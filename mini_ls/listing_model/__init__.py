"""Domain model for listing entries plus the traversal and stat stages.

This package contains the non-presentation half of the pipeline:
- entry datatypes shared by every stage
- directory walking (flat or recursive, hidden-file filtering)
- metadata extraction with best-effort fallbacks
"""

from __future__ import annotations

from .types import Entry, EntryKind, WalkedEntry
from .fs import is_hidden_name, list_directory_children, walk_directory
from .metadata import birth_time_ns, entry_kind_for_mode, extract_all, extract_metadata

__all__ = [
    "Entry",
    "EntryKind",
    "WalkedEntry",
    "is_hidden_name",
    "list_directory_children",
    "walk_directory",
    "birth_time_ns",
    "entry_kind_for_mode",
    "extract_metadata",
    "extract_all",
]
