"""Report rendering: size formatting, column shaping, and the listing table."""

from __future__ import annotations

from .report import EMPTY_MESSAGE, MAX_NAME_WIDTH, footer_text, render_empty, render_report
from .sizes import format_size, human_size_parts
from .text import display_width, truncate_display

__all__ = [
    "EMPTY_MESSAGE",
    "MAX_NAME_WIDTH",
    "footer_text",
    "render_empty",
    "render_report",
    "format_size",
    "human_size_parts",
    "display_width",
    "truncate_display",
]
