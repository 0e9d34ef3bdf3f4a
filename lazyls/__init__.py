"""Public package surface for lazyls.

Exports ``main`` for programmatic CLI invocation and ``list_directory`` for
callers that want classified entries without rendering.
"""

from __future__ import annotations

from .listing import DirEntryView, EntryKind, list_directory


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "list_directory", "DirEntryView", "EntryKind"]
