"""CLI entrypoint for the terminal crossword solver."""

from __future__ import annotations

import sys

from crossplay.cli import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
