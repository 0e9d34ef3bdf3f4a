"""Columnar listing report: header, entry rows, and count footer.

Rendering is presentation-only and side-effect free. Cells are padded on
plain text first and styled afterwards so escape codes never shift columns.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..listing.types import DirEntryView
from ..ui_theme import DEFAULT_THEME, StyleRole, UITheme, stylize
from .filetypes import is_source_file
from .sizes import human_size_parts
from .text import display_width, pad_left, pad_right, sanitize_name, truncate_display

MAX_NAME_WIDTH = 50
MAX_EXT_WIDTH = 12
TYPE_WIDTH = 4
SIZE_NUMBER_WIDTH = 5
SIZE_UNIT_WIDTH = 2
SIZE_WIDTH = SIZE_NUMBER_WIDTH + SIZE_UNIT_WIDTH
INDENT = "  "
COLUMN_GAP = "  "
RULE_CHAR = "─"
PLACEHOLDER = "—"
EMPTY_MESSAGE = "empty"


def type_tag_for(entry: DirEntryView) -> tuple[str, StyleRole]:
    """Return TYPE column text and role; symlinks always show ``LINK``."""
    if entry.is_symlink:
        return "LINK", StyleRole.TAG_LINK
    if entry.effective_is_dir:
        return "DIR", StyleRole.TAG_DIR
    return "FILE", StyleRole.TAG_FILE


def name_role_for(entry: DirEntryView) -> StyleRole:
    if entry.is_symlink:
        return StyleRole.NAME_LINK
    if entry.hidden:
        return StyleRole.NAME_HIDDEN
    if entry.effective_is_dir:
        return StyleRole.NAME_DIR
    if is_source_file(entry.name):
        return StyleRole.NAME_SOURCE
    return StyleRole.NAME_FILE


def display_name(entry: DirEntryView, max_width: int = MAX_NAME_WIDTH) -> str:
    return truncate_display(sanitize_name(entry.name), max_width)


def display_extension(entry: DirEntryView, max_width: int = MAX_EXT_WIDTH) -> str:
    return truncate_display(sanitize_name(entry.extension), max_width)


def pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def footer_text(entries: Sequence[DirEntryView]) -> str:
    """Summarize counts as ``"N dir(s), N file(s)"`` omitting zero terms."""
    dir_count = sum(1 for entry in entries if entry.effective_is_dir)
    file_count = len(entries) - dir_count
    parts: list[str] = []
    if dir_count:
        parts.append(pluralize(dir_count, "dir"))
    if file_count:
        parts.append(pluralize(file_count, "file"))
    return ", ".join(parts)


def format_size_cell(entry: DirEntryView, theme: UITheme) -> str:
    """Render the right-aligned SIZE cell; directories get a placeholder."""
    if entry.effective_is_dir:
        return stylize(pad_left(PLACEHOLDER, SIZE_WIDTH), StyleRole.SIZE_PLACEHOLDER, theme)
    number, unit = human_size_parts(entry.size_bytes)
    return stylize(pad_left(number, SIZE_NUMBER_WIDTH), StyleRole.SIZE_NUMBER, theme) + stylize(
        pad_left(unit, SIZE_UNIT_WIDTH), StyleRole.SIZE_UNIT, theme
    )


def render_empty(theme: UITheme | None = None) -> list[str]:
    active_theme = theme or DEFAULT_THEME
    return [INDENT + stylize(EMPTY_MESSAGE, StyleRole.COUNT, active_theme)]


def render_report(
    entries: Sequence[DirEntryView],
    theme: UITheme | None = None,
    max_name_width: int = MAX_NAME_WIDTH,
) -> list[str]:
    """Render ordered ``entries`` as report lines (no trailing newlines).

    An empty sequence renders only the ``empty`` message.
    """
    active_theme = theme or DEFAULT_THEME
    if not entries:
        return render_empty(active_theme)

    names = [display_name(entry, max_name_width) for entry in entries]
    extensions = [display_extension(entry) for entry in entries]
    name_width = max([len("NAME"), *(display_width(name) for name in names)])
    ext_width = max([len("EXT"), *(display_width(ext) for ext in extensions)])

    def header_cell(text: str, width: int, align_right: bool = False) -> str:
        padded = pad_left(text, width) if align_right else pad_right(text, width)
        return stylize(padded, StyleRole.HEADER, active_theme)

    def rule(width: int) -> str:
        return stylize(RULE_CHAR * width, StyleRole.SEPARATOR, active_theme)

    lines: list[str] = [""]
    lines.append(
        INDENT
        + COLUMN_GAP.join(
            (
                header_cell("TYPE", TYPE_WIDTH),
                header_cell("NAME", name_width),
                header_cell("EXT", ext_width),
                header_cell("SIZE", SIZE_WIDTH, align_right=True),
            )
        )
    )
    lines.append(INDENT + COLUMN_GAP.join((rule(TYPE_WIDTH), rule(name_width), rule(ext_width), rule(SIZE_WIDTH))))

    for entry, name, ext in zip(entries, names, extensions):
        tag, tag_role = type_tag_for(entry)
        if ext:
            ext_cell = stylize(pad_right(ext, ext_width), StyleRole.EXT, active_theme)
        else:
            ext_cell = stylize(pad_right(PLACEHOLDER, ext_width), StyleRole.EXT_EMPTY, active_theme)
        cells = (
            stylize(pad_right(tag, TYPE_WIDTH), tag_role, active_theme),
            stylize(pad_right(name, name_width), name_role_for(entry), active_theme),
            ext_cell,
            format_size_cell(entry, active_theme),
        )
        lines.append(INDENT + COLUMN_GAP.join(cells))

    lines.append("")
    lines.append(INDENT + stylize(footer_text(entries), StyleRole.COUNT, active_theme))
    lines.append("")
    return lines


__all__ = [
    "MAX_NAME_WIDTH",
    "MAX_EXT_WIDTH",
    "PLACEHOLDER",
    "EMPTY_MESSAGE",
    "type_tag_for",
    "name_role_for",
    "display_name",
    "display_extension",
    "pluralize",
    "footer_text",
    "format_size_cell",
    "render_empty",
    "render_report",
]
