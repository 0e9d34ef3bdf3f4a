"""Directory listing pipeline: collect, classify, filter, and sort.

This package contains non-UI listing primitives:
- the classified child datatype
- filesystem scanning and symlink resolution
- hidden/files-only filters and directories-first ordering
"""

from __future__ import annotations

from pathlib import Path

from .errors import (
    AccessDeniedError,
    AccessError,
    ListingError,
    MetadataError,
    NotDirectoryError,
    NotFoundError,
    SymlinkResolutionError,
)
from .fs import classify_child, collect_children, extension_for, resolve_symlink_target
from .ordering import filter_entries, sort_entries, sort_key
from .types import DirEntryView, EntryKind


def list_directory(directory: Path, show_all: bool = False, files_only: bool = False) -> list[DirEntryView]:
    """Run the full pipeline for ``directory`` and return ordered entries.

    Raises an ``AccessError`` subclass when the directory cannot be listed.
    """
    entries = collect_children(directory, show_hidden=show_all)
    return sort_entries(filter_entries(entries, show_all=show_all, files_only=files_only))


__all__ = [
    "EntryKind",
    "DirEntryView",
    "ListingError",
    "AccessError",
    "NotFoundError",
    "AccessDeniedError",
    "NotDirectoryError",
    "MetadataError",
    "SymlinkResolutionError",
    "extension_for",
    "resolve_symlink_target",
    "classify_child",
    "collect_children",
    "filter_entries",
    "sort_key",
    "sort_entries",
    "list_directory",
]
