"""Tests for stat-backed metadata extraction and its fallbacks."""

from __future__ import annotations

import os
import stat
import tempfile
import unittest
from pathlib import Path

from mini_ls.listing_model import EntryKind, WalkedEntry, extract_all, extract_metadata


def _walked(root: Path, name: str, depth: int = 0) -> WalkedEntry:
    return WalkedEntry(name=name, path=Path(name), location=root / name, depth=depth)


class ExtractMetadataTests(unittest.TestCase):
    def test_regular_file_reports_size_kind_and_mtime(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "a.txt"
            target.write_bytes(b"x" * 10)
            os.utime(target, ns=(1_000_000_000, 1_700_000_000_123_000_000))

            entry = extract_metadata(_walked(root, "a.txt", depth=2), extended_attributes=False)

            self.assertEqual(entry.kind, EntryKind.FILE)
            self.assertEqual(entry.size_bytes, 10)
            self.assertEqual(entry.modified_ns, 1_700_000_000_123_000_000)
            self.assertEqual(entry.depth, 2)
            self.assertEqual(entry.path, Path("a.txt"))
            self.assertIsNone(entry.permissions)

    def test_directory_reports_filesystem_directory_size(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            (root / "sub" / "big.bin").write_bytes(b"x" * 100_000)

            entry = extract_metadata(_walked(root, "sub"), extended_attributes=False)

            self.assertEqual(entry.kind, EntryKind.DIRECTORY)
            self.assertEqual(entry.size_bytes, (root / "sub").stat().st_size)

    def test_permissions_are_read_only_for_extended_view(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "run.sh"
            target.write_text("#!/bin/sh\n", encoding="utf-8")
            target.chmod(0o754)

            entry = extract_metadata(_walked(root, "run.sh"), extended_attributes=True)

            self.assertIsNotNone(entry.permissions)
            self.assertEqual(stat.S_IMODE(entry.permissions), 0o754)

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unsupported")
    def test_symlink_reports_target_kind_and_size(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "real.txt").write_bytes(b"x" * 42)
            os.symlink(root / "real.txt", root / "link.txt")

            entry = extract_metadata(_walked(root, "link.txt"), extended_attributes=False)

            self.assertEqual(entry.kind, EntryKind.FILE)
            self.assertEqual(entry.size_bytes, 42)

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unsupported")
    def test_broken_symlink_is_kept_with_best_effort_fields(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            os.symlink(root / "missing", root / "dangling")

            with self.assertLogs("mini_ls", level="WARNING") as logs:
                entry = extract_metadata(_walked(root, "dangling"), extended_attributes=True)

            self.assertEqual(entry.kind, EntryKind.OTHER)
            self.assertEqual(entry.size_bytes, 0)
            self.assertEqual(entry.modified_ns, 0)
            self.assertIsNone(entry.created_ns)
            self.assertTrue(stat.S_ISLNK(entry.permissions))
            self.assertIn("cannot read metadata for dangling", logs.output[0])

    def test_extract_all_preserves_traversal_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            for name in ("b", "a", "c"):
                (root / name).write_text(name, encoding="utf-8")

            entries = extract_all([_walked(root, name) for name in ("b", "a", "c")], extended_attributes=False)

            self.assertEqual([entry.name for entry in entries], ["b", "a", "c"])


if __name__ == "__main__":
    unittest.main()
