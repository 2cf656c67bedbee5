"""Global ordering of collected entries.

Every key ends with the name/path tie-break, so the order is total before
``reverse`` flips the whole sequence.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .arguments import SortKey
from .listing_model import Entry


def _name_key(entry: Entry) -> tuple[str, str]:
    return (entry.name, str(entry.path))


def _size_key(entry: Entry) -> tuple[int, str, str]:
    return (entry.size_bytes, *_name_key(entry))


def _modified_key(entry: Entry) -> tuple[int, str, str]:
    return (entry.modified_ns, *_name_key(entry))


SORT_KEYS: dict[SortKey, Callable[[Entry], tuple]] = {
    SortKey.NAME: _name_key,
    SortKey.SIZE: _size_key,
    SortKey.MODIFIED_TIME: _modified_key,
}


def sort_entries(entries: Iterable[Entry], sort_key: SortKey, reverse: bool = False) -> list[Entry]:
    """Return ``entries`` ordered ascending by ``sort_key``.

    Names compare by code point (case-sensitive). ``reverse`` reverses the
    fully tie-broken result rather than flipping only the primary key.
    """
    ordered = sorted(entries, key=SORT_KEYS[sort_key])
    if reverse:
        ordered.reverse()
    return ordered


__all__ = ["SORT_KEYS", "sort_entries"]
