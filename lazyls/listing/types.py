"""Domain datatypes for one listed directory child."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    """Filesystem kind observed without following symlinks."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


@dataclass(frozen=True)
class DirEntryView:
    """Classified directory child used for filtering, sorting, and rendering.

    ``effective_is_dir`` is authoritative for grouping: for symlinks it is the
    directory-ness of the resolved target, ``False`` when the link is broken.
    """

    name: str
    kind: EntryKind
    effective_is_dir: bool
    size_bytes: int = 0
    hidden: bool = False
    extension: str = ""

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK


__all__ = [
    "EntryKind",
    "DirEntryView",
]
