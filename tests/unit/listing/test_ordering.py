"""Tests for hidden/files-only filters and directories-first ordering."""

from __future__ import annotations

import unittest

from lazyls.listing import DirEntryView, EntryKind, filter_entries, sort_entries


def file_entry(name: str, size: int = 0) -> DirEntryView:
    return DirEntryView(name=name, kind=EntryKind.FILE, effective_is_dir=False, size_bytes=size, hidden=name.startswith("."))


def dir_entry(name: str) -> DirEntryView:
    return DirEntryView(name=name, kind=EntryKind.DIRECTORY, effective_is_dir=True, hidden=name.startswith("."))


class FilterEntriesTests(unittest.TestCase):
    def test_hidden_entries_dropped_unless_show_all(self) -> None:
        entries = [file_entry("a"), file_entry(".b"), dir_entry(".git")]

        self.assertEqual([e.name for e in filter_entries(entries, show_all=False, files_only=False)], ["a"])
        self.assertEqual(len(filter_entries(entries, show_all=True, files_only=False)), 3)

    def test_files_only_uses_effective_directory_flag(self) -> None:
        link_to_dir = DirEntryView(name="alias", kind=EntryKind.SYMLINK, effective_is_dir=True)
        dead_link = DirEntryView(name="dead", kind=EntryKind.SYMLINK, effective_is_dir=False)
        entries = [dir_entry("src"), link_to_dir, dead_link, file_entry("a.txt")]

        kept = filter_entries(entries, show_all=False, files_only=True)

        self.assertEqual([e.name for e in kept], ["dead", "a.txt"])


class SortEntriesTests(unittest.TestCase):
    def test_directories_sort_before_files_then_case_insensitive_names(self) -> None:
        entries = [
            file_entry("b.txt"),
            dir_entry("zeta"),
            file_entry("A.txt"),
            dir_entry("Alpha"),
            file_entry("c"),
        ]

        ordered = sort_entries(entries)

        self.assertEqual([e.name for e in ordered], ["Alpha", "zeta", "A.txt", "b.txt", "c"])

    def test_symlinked_directory_groups_with_directories(self) -> None:
        link_to_dir = DirEntryView(name="zz-link", kind=EntryKind.SYMLINK, effective_is_dir=True)
        ordered = sort_entries([file_entry("aaa"), link_to_dir])

        self.assertEqual([e.name for e in ordered], ["zz-link", "aaa"])

    def test_case_only_collisions_have_a_deterministic_order(self) -> None:
        forward = sort_entries([file_entry("readme"), file_entry("README")])
        backward = sort_entries([file_entry("README"), file_entry("readme")])

        self.assertEqual([e.name for e in forward], [e.name for e in backward])


if __name__ == "__main__":
    unittest.main()
