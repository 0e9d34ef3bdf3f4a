"""Visibility filters and directories-first ordering."""

from __future__ import annotations

from collections.abc import Iterable

from .types import DirEntryView


def filter_entries(entries: Iterable[DirEntryView], show_all: bool, files_only: bool) -> list[DirEntryView]:
    """Drop hidden entries unless ``show_all``, then directories if ``files_only``."""
    kept: list[DirEntryView] = []
    for entry in entries:
        if entry.hidden and not show_all:
            continue
        if files_only and entry.effective_is_dir:
            continue
        kept.append(entry)
    return kept


def sort_key(entry: DirEntryView) -> tuple[bool, str, str]:
    """Directories first, then case-folded name, then exact name."""
    return (not entry.effective_is_dir, entry.name.casefold(), entry.name)


def sort_entries(entries: Iterable[DirEntryView]) -> list[DirEntryView]:
    return sorted(entries, key=sort_key)


__all__ = [
    "filter_entries",
    "sort_key",
    "sort_entries",
]
