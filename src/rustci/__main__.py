"""Module entrypoint for ``python -m rustci``."""

from __future__ import annotations

from rustci.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
