"""Tests for global entry ordering and whole-sequence reversal."""

from __future__ import annotations

import unittest
from pathlib import Path

from mini_ls.arguments import SortKey
from mini_ls.listing_model import Entry, EntryKind
from mini_ls.sorting import sort_entries


def _entry(name: str, size: int = 0, modified_ns: int = 0, parent: str | None = None) -> Entry:
    path = Path(name) if parent is None else Path(parent) / name
    return Entry(path=path, name=name, kind=EntryKind.FILE, size_bytes=size, modified_ns=modified_ns)


class SortEntriesTests(unittest.TestCase):
    def test_name_order_is_case_sensitive_code_point_order(self) -> None:
        entries = [_entry("beta"), _entry("Alpha"), _entry("alpha")]
        ordered = sort_entries(entries, SortKey.NAME)
        self.assertEqual([entry.name for entry in ordered], ["Alpha", "alpha", "beta"])

    def test_name_ties_across_directories_break_by_path(self) -> None:
        entries = [_entry("x.txt", parent="/r/b"), _entry("x.txt", parent="/r/a")]
        ordered = sort_entries(entries, SortKey.NAME)
        self.assertEqual([str(entry.path) for entry in ordered], ["/r/a/x.txt", "/r/b/x.txt"])

    def test_size_order_ascending_and_reversed(self) -> None:
        entries = [_entry("ten", size=10), _entry("five", size=5), _entry("twenty", size=20)]

        ascending = sort_entries(entries, SortKey.SIZE)
        descending = sort_entries(entries, SortKey.SIZE, reverse=True)

        self.assertEqual([entry.size_bytes for entry in ascending], [5, 10, 20])
        self.assertEqual([entry.size_bytes for entry in descending], [20, 10, 5])

    def test_size_ties_break_by_name_and_reverse_flips_tie_break(self) -> None:
        entries = [_entry("b", size=1), _entry("a", size=1), _entry("c", size=0)]

        ascending = sort_entries(entries, SortKey.SIZE)
        descending = sort_entries(entries, SortKey.SIZE, reverse=True)

        self.assertEqual([entry.name for entry in ascending], ["c", "a", "b"])
        self.assertEqual([entry.name for entry in descending], ["b", "a", "c"])
        self.assertEqual(list(reversed(descending)), ascending)

    def test_modified_time_order_with_name_tie_break(self) -> None:
        entries = [
            _entry("new", modified_ns=300),
            _entry("old-b", modified_ns=100),
            _entry("old-a", modified_ns=100),
        ]

        ordered = sort_entries(entries, SortKey.MODIFIED_TIME)
        newest_first = sort_entries(entries, SortKey.MODIFIED_TIME, reverse=True)

        self.assertEqual([entry.name for entry in ordered], ["old-a", "old-b", "new"])
        self.assertEqual([entry.name for entry in newest_first], ["new", "old-b", "old-a"])

    def test_sorting_is_global_across_depths(self) -> None:
        entries = [
            _entry("top", size=50, parent="/r"),
            _entry("deep", size=1, parent="/r/sub/deeper"),
            _entry("mid", size=25, parent="/r/sub"),
        ]
        ordered = sort_entries(entries, SortKey.SIZE)
        self.assertEqual([entry.name for entry in ordered], ["deep", "mid", "top"])

    def test_input_sequence_is_not_mutated(self) -> None:
        entries = [_entry("b"), _entry("a")]
        sort_entries(entries, SortKey.NAME, reverse=True)
        self.assertEqual([entry.name for entry in entries], ["b", "a"])


if __name__ == "__main__":
    unittest.main()
