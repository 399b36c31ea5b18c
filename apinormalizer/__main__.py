"""Module entrypoint for running apinormalizer as ``python -m apinormalizer``."""

from __future__ import annotations

from apinormalizer.cli import main


if __name__ == "__main__":
    main()
