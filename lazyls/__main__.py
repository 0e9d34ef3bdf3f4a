"""Module entrypoint for ``python -m lazyls``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and listing happen in ``lazyls.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
