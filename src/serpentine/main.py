"""Executable entrypoint for Serpentine."""

from __future__ import annotations

import logging
import os

from .game import SnakeGame


def main() -> None:
    """Launch the game."""
    logging.basicConfig(
        level=os.environ.get("SERPENTINE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    SnakeGame().run()


if __name__ == "__main__":
    main()
