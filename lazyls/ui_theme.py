"""UI theme definitions and role-based styling.

Themes are immutable ANSI palettes keyed by semantic role. Renderers never
embed escape codes directly; they ask ``style_for``/``stylize`` for a role.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StyleRole(Enum):
    """Semantic roles a report fragment can be styled as."""

    HEADER = "header"
    SEPARATOR = "separator"
    TAG_DIR = "tag_dir"
    TAG_FILE = "tag_file"
    TAG_LINK = "tag_link"
    NAME_DIR = "name_dir"
    NAME_FILE = "name_file"
    NAME_SOURCE = "name_source"
    NAME_HIDDEN = "name_hidden"
    NAME_LINK = "name_link"
    EXT = "ext"
    EXT_EMPTY = "ext_empty"
    SIZE_NUMBER = "size_number"
    SIZE_UNIT = "size_unit"
    SIZE_PLACEHOLDER = "size_placeholder"
    COUNT = "count"
    ERROR = "error"


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the report renderer."""

    name: str
    reset: str
    header: str
    separator: str
    tag_dir: str
    tag_file: str
    tag_link: str
    name_dir: str
    name_file: str
    name_source: str
    name_hidden: str
    name_link: str
    ext: str
    ext_empty: str
    size_number: str
    size_unit: str
    size_placeholder: str
    count: str
    error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[38;2;0;92;46m",
    separator="\033[38;2;0;61;26m",
    tag_dir="\033[1;38;2;0;255;102m",
    tag_file="\033[38;2;0;102;51m",
    tag_link="\033[38;2;0;255;170m",
    name_dir="\033[1;38;2;0;255;102m",
    name_file="\033[38;2;0;204;85m",
    name_source="\033[38;2;51;255;136m",
    name_hidden="\033[38;2;0;102;51m",
    name_link="\033[38;2;0;255;170m",
    ext="\033[38;2;0;92;46m",
    ext_empty="\033[38;2;0;102;51m",
    size_number="\033[38;2;0;231;86m",
    size_unit="\033[38;2;0;92;46m",
    size_placeholder="\033[38;2;0;61;26m",
    count="\033[38;2;0;92;46m",
    error="\033[38;2;255;51;52m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    separator="\033[2;38;5;31m",
    tag_dir="\033[1;38;5;45m",
    tag_file="\033[38;5;110m",
    tag_link="\033[38;5;84m",
    name_dir="\033[1;38;5;45m",
    name_file="\033[38;5;252m",
    name_source="\033[38;5;117m",
    name_hidden="\033[2;38;5;110m",
    name_link="\033[38;5;84m",
    ext="\033[38;5;73m",
    ext_empty="\033[2;38;5;110m",
    size_number="\033[38;5;153m",
    size_unit="\033[38;5;73m",
    size_placeholder="\033[2;38;5;24m",
    count="\033[38;5;73m",
    error="\033[38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header="",
    separator="",
    tag_dir="",
    tag_file="",
    tag_link="",
    name_dir="",
    name_file="",
    name_source="",
    name_hidden="",
    name_link="",
    ext="",
    ext_empty="",
    size_number="",
    size_unit="",
    size_placeholder="",
    count="",
    error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return the theme for a case-insensitive name; unknown names get the default."""
    if no_color:
        return PLAIN_THEME
    return _THEMES.get((name or "").strip().lower(), DEFAULT_THEME)


def style_for(role: StyleRole, theme: UITheme | None = None) -> str:
    """Return the ANSI prefix for ``role`` in ``theme`` (empty when plain)."""
    active_theme = theme or DEFAULT_THEME
    return getattr(active_theme, role.value)


def stylize(text: str, role: StyleRole, theme: UITheme | None = None) -> str:
    """Wrap ``text`` in the role's style and a reset, or return it unchanged."""
    active_theme = theme or DEFAULT_THEME
    prefix = style_for(role, active_theme)
    if not prefix or not text:
        return text
    return f"{prefix}{text}{active_theme.reset}"


__all__ = [
    "StyleRole",
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
    "style_for",
    "stylize",
]
