"""Module entrypoint for running corpusclean as ``python -m corpusclean``."""

from __future__ import annotations

from corpusclean.cli import main


if __name__ == "__main__":
    main()
