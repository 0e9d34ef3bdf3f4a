"""Filesystem scanning and per-child classification."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .errors import MetadataError, SymlinkResolutionError, access_error_from_os_error
from .types import DirEntryView, EntryKind

logger = logging.getLogger(__name__)


def extension_for(name: str, is_dir: bool) -> str:
    """Return the text after the final ``.`` of a file name.

    Leading dots mark hidden entries and never start an extension, so
    ``.gitignore`` has none while ``.env.local`` has ``local``.
    """
    if is_dir:
        return ""
    stem = name.lstrip(".")
    _head, dot, ext = stem.rpartition(".")
    return ext if dot else ""


def resolve_symlink_target(path: Path) -> tuple[Path | None, bool, SymlinkResolutionError | None]:
    """Resolve ``path`` to its final target and stat it.

    Returns ``(target, target_is_dir, error)``. ``error`` is set, and the
    target reported as a non-directory, when the link is broken, cyclic, or
    the target cannot be stat'ed.
    """
    try:
        target = path.resolve(strict=True)
        info = target.stat()
    except (OSError, RuntimeError) as exc:
        return None, False, SymlinkResolutionError(path, exc)
    return target, stat.S_ISDIR(info.st_mode), None


def classify_child(name: str, path: Path) -> DirEntryView:
    """Build a ``DirEntryView`` from the child's own (``lstat``) metadata.

    Raises ``MetadataError`` when the child cannot be stat'ed.
    """
    try:
        info = path.lstat()
    except OSError as exc:
        raise MetadataError(path, exc) from exc

    if stat.S_ISLNK(info.st_mode):
        kind = EntryKind.SYMLINK
        _target, is_dir, error = resolve_symlink_target(path)
        if error is not None:
            logger.debug("treating unresolved link as file: %s", error)
    elif stat.S_ISDIR(info.st_mode):
        kind = EntryKind.DIRECTORY
        is_dir = True
    else:
        kind = EntryKind.FILE
        is_dir = False

    return DirEntryView(
        name=name,
        kind=kind,
        effective_is_dir=is_dir,
        size_bytes=int(info.st_size),
        hidden=name.startswith("."),
        extension=extension_for(name, is_dir),
    )


def collect_children(directory: Path, show_hidden: bool) -> list[DirEntryView]:
    """List and classify the immediate children of ``directory``.

    Hidden children are dropped before any stat when ``show_hidden`` is false.
    Children whose metadata cannot be read are skipped. Raises an
    ``AccessError`` subclass when ``directory`` itself cannot be listed.
    """
    entries: list[DirEntryView] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    entries.append(classify_child(name, Path(child.path)))
                except MetadataError as exc:
                    logger.debug("skipping child: %s", exc)
    except OSError as exc:
        raise access_error_from_os_error(directory, exc) from exc

    logger.debug("collected %d entries from %s", len(entries), directory)
    return entries


__all__ = [
    "extension_for",
    "resolve_symlink_target",
    "classify_child",
    "collect_children",
]
