"""Source-file detection backed by the Pygments lexer registry."""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers import find_lexer_class_for_filename
from pygments.lexers.special import TextLexer


@lru_cache(maxsize=1024)
def source_language_for(name: str) -> str | None:
    """Return the Pygments language name for ``name``, or ``None``.

    Plain-text matches (``*.txt``) are not considered source code.
    """
    lexer_class = find_lexer_class_for_filename(name)
    if lexer_class is None or issubclass(lexer_class, TextLexer):
        return None
    return lexer_class.name


def is_source_file(name: str) -> bool:
    return source_language_for(name) is not None


__all__ = [
    "source_language_for",
    "is_source_file",
]
