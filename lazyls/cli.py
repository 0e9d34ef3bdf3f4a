"""Command-line front door for lazyls.

Parses CLI options, runs the listing pipeline for one directory, and writes
the rendered report to stdout. Access failures go to stderr with exit code 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .listing import AccessError, list_directory
from .render import render_report
from .render.text import sanitize_name
from .ui_theme import StyleRole, available_theme_names, resolve_theme, stylize

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ACCESS_ERROR = 1
ERROR_PREFIX = "  error: "
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LOG_HANDLER_NAME = "lazyls.cli"


@dataclass(frozen=True)
class ListingOptions:
    """Resolved CLI options for a single invocation."""

    target: Path
    show_all: bool = False
    files_only: bool = False
    no_color: bool = False
    theme: str | None = None
    verbose: bool = False
    ignored_args: tuple[str, ...] = ()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyls",
        allow_abbrev=False,
        description="List a directory as a styled, column-aligned table.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="path",
        help="Directory to list. Defaults to the current directory; the last one given wins.",
    )
    parser.add_argument("-a", "--all", dest="show_all", action="store_true", help="Show hidden files.")
    parser.add_argument("-f", "--files", dest="files_only", action="store_true", help="Files only.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def _split_short_flag_clusters(argv: Sequence[str]) -> list[str]:
    """Expand ``-af`` into ``-a -f`` so unknown letters are ignored one by one.

    Every short option is a flag, so no cluster carries an attached value.
    Tokens after a bare ``--`` are left alone.
    """
    out: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            out.append(token)
            out.extend(tokens)
            break
        if len(token) > 2 and token.startswith("-") and not token.startswith("--"):
            out.extend(f"-{letter}" for letter in token[1:])
            continue
        out.append(token)
    return out


def parse_options(argv: Sequence[str] | None = None, default_path: Path | None = None) -> ListingOptions:
    """Parse ``argv`` into ``ListingOptions``.

    Unknown dash-prefixed arguments, including unknown letters inside a
    short-flag cluster, are ignored and abbreviated long options are not
    expanded. ``-h``/``--help`` prints usage and raises ``SystemExit(0)``
    through argparse; ``--theme`` without a value is a usage error (exit 2).
    """
    parser = _build_parser()
    raw_args = sys.argv[1:] if argv is None else argv
    args, unknown = parser.parse_known_intermixed_args(_split_short_flag_clusters(raw_args))
    target = Path(args.paths[-1]) if args.paths else (default_path or Path("."))
    return ListingOptions(
        target=target,
        show_all=args.show_all,
        files_only=args.files_only,
        no_color=args.no_color,
        theme=args.theme,
        verbose=args.verbose,
        ignored_args=tuple(unknown),
    )


def configure_logging(verbose: bool, stream: TextIO | None = None) -> None:
    """Route package log records to stderr at WARNING, or DEBUG when verbose."""
    package_logger = logging.getLogger("lazyls")
    for existing in list(package_logger.handlers):
        if existing.get_name() == LOG_HANDLER_NAME:
            package_logger.removeHandler(existing)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _stream_supports_color(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        return False


def run_listing(options: ListingOptions, stdout: TextIO, stderr: TextIO) -> int:
    """List ``options.target`` and write the report; return the exit code."""
    logger.debug("listing %s (all=%s, files=%s)", options.target, options.show_all, options.files_only)
    try:
        entries = list_directory(options.target, show_all=options.show_all, files_only=options.files_only)
    except AccessError as exc:
        error_theme = resolve_theme(options.theme, no_color=options.no_color or not _stream_supports_color(stderr))
        stderr.write(stylize(f"{ERROR_PREFIX}{sanitize_name(str(exc))}", StyleRole.ERROR, error_theme) + "\n")
        return EXIT_ACCESS_ERROR

    theme = resolve_theme(options.theme, no_color=options.no_color or not _stream_supports_color(stdout))
    stdout.write("\n".join(render_report(entries, theme)) + "\n")
    return EXIT_OK


def main(argv: Sequence[str] | None = None, default_path: Path | None = None) -> int:
    """Parse CLI arguments and list one directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is listed. Returns the process exit code.
    """
    options = parse_options(argv, default_path=default_path)
    configure_logging(options.verbose)
    if options.ignored_args:
        logger.debug("ignoring unrecognized arguments: %s", " ".join(options.ignored_args))
    return run_listing(options, sys.stdout, sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
