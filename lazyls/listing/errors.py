"""Error taxonomy for directory listing.

``AccessError`` subclasses are fatal and surface to the CLI. ``MetadataError``
and ``SymlinkResolutionError`` are recovered from inside the pipeline.
"""

from __future__ import annotations

import errno
from pathlib import Path


class ListingError(Exception):
    """Base class for listing failures."""


class AccessError(ListingError):
    """Target directory cannot be listed."""

    reason = "cannot access"

    def __init__(self, path: Path, detail: str | None = None) -> None:
        self.path = path
        self.detail = detail
        message = f"{self.reason}: {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class NotFoundError(AccessError):
    reason = "no such directory"


class AccessDeniedError(AccessError):
    reason = "permission denied"


class NotDirectoryError(AccessError):
    reason = "not a directory"


class MetadataError(ListingError):
    """Metadata for a single child could not be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot stat {path}: {cause.strerror or cause}")


class SymlinkResolutionError(ListingError):
    """Symlink is broken, cyclic, or its target cannot be stat'ed."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot resolve symlink {path}: {cause}")


def access_error_from_os_error(path: Path, exc: OSError) -> AccessError:
    """Map an ``OSError`` raised while opening ``path`` to an ``AccessError``."""
    if isinstance(exc, FileNotFoundError):
        return NotFoundError(path)
    if isinstance(exc, PermissionError):
        return AccessDeniedError(path)
    if isinstance(exc, NotADirectoryError):
        return NotDirectoryError(path)
    if exc.errno == errno.ELOOP:
        return NotFoundError(path, "symlink loop")
    return AccessError(path, exc.strerror or str(exc))


__all__ = [
    "ListingError",
    "AccessError",
    "NotFoundError",
    "AccessDeniedError",
    "NotDirectoryError",
    "MetadataError",
    "SymlinkResolutionError",
    "access_error_from_os_error",
]
