"""Display-width measurement and column shaping for report cells.

Widths are terminal columns, not code points: combining marks take none and
East Asian wide characters take two. ANSI escapes never count toward width.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_UNPRINTABLE_RE = re.compile(r"[\x00-\x1f\x7f-\x9f\ud800-\udfff]")
ELLIPSIS = "…"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies once printed."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def _escape_unprintable(match: re.Match[str]) -> str:
    code = ord(match.group(0))
    # os.fsdecode maps each undecodable byte to U+DC80..U+DCFF.
    if 0xDC80 <= code <= 0xDCFF:
        return f"\\x{code - 0xDC00:02x}"
    if 0xD800 <= code <= 0xDFFF:
        return f"\\u{code:04x}"
    return f"\\x{code:02x}"


def sanitize_name(name: str) -> str:
    """Escape control characters and undecodable bytes in a file name.

    The result stays on one report row and always encodes as strict UTF-8,
    e.g. a raw ``0xff`` byte in the name is shown as ``\\xff``.
    """
    if _UNPRINTABLE_RE.search(name) is None:
        return name
    return _UNPRINTABLE_RE.sub(_escape_unprintable, name)


def truncate_display(text: str, max_width: int) -> str:
    """Fit plain ``text`` into ``max_width`` columns.

    Overlong text keeps at most ``max_width - 1`` columns followed by a single
    ellipsis, so the result never exceeds ``max_width``.
    """
    if max_width <= 0:
        return ""
    if display_width(text) <= max_width:
        return text

    budget = max_width - 1
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > budget:
            break
        out.append(ch)
        col += w
    return "".join(out) + ELLIPSIS


def pad_right(text: str, width: int) -> str:
    gap = width - display_width(text)
    if gap <= 0:
        return text
    return text + " " * gap


def pad_left(text: str, width: int) -> str:
    gap = width - display_width(text)
    if gap <= 0:
        return text
    return " " * gap + text


__all__ = [
    "ANSI_ESCAPE_RE",
    "ELLIPSIS",
    "char_display_width",
    "strip_ansi",
    "display_width",
    "sanitize_name",
    "truncate_display",
    "pad_right",
    "pad_left",
]
