"""Module entrypoint for running polydiv as ``python -m polydiv``."""

from __future__ import annotations

from polydiv.cli import main


if __name__ == "__main__":
    main()
