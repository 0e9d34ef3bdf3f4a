"""Human-readable byte sizes with binary (1024) units."""

from __future__ import annotations

SIZE_UNITS: tuple[str, ...] = ("B", "K", "M", "G", "T")
UNIT_BASE = 1024


def unit_index_for(size_bytes: int) -> int:
    """Return floor(log1024(size_bytes)) clamped to the largest known unit.

    Uses integer comparisons; exact powers of 1024 select the larger unit.
    """
    index = 0
    while index < len(SIZE_UNITS) - 1 and size_bytes >= UNIT_BASE ** (index + 1):
        index += 1
    return index


def human_size_parts(size_bytes: int) -> tuple[str, str]:
    """Split ``size_bytes`` into a ``(number, unit)`` pair for column display.

    Bytes print as integers; scaled values print with one decimal below 10
    and as truncated integers from 10 upwards.
    """
    if size_bytes <= 0:
        return "0", SIZE_UNITS[0]
    index = unit_index_for(size_bytes)
    if index == 0:
        return str(size_bytes), SIZE_UNITS[0]
    value = size_bytes / UNIT_BASE**index
    if value >= 10:
        return str(int(value)), SIZE_UNITS[index]
    return f"{value:.1f}", SIZE_UNITS[index]


def format_size(size_bytes: int) -> str:
    """Return ``"<number> <unit>"``, e.g. ``"2.0 K"`` for 2048 bytes."""
    number, unit = human_size_parts(size_bytes)
    return f"{number} {unit}"


__all__ = [
    "SIZE_UNITS",
    "UNIT_BASE",
    "unit_index_for",
    "human_size_parts",
    "format_size",
]
