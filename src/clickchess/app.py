"""Application entry point."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "CLICKCHESS_LOG_LEVEL"


def configure_logging() -> None:
    """Configure the root logger from ``CLICKCHESS_LOG_LEVEL`` (default WARNING)."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Launch the chess application."""
    from clickchess.ui.bootstrap import run_application

    configure_logging()
    sys.exit(run_application())


if __name__ == "__main__":
    main()
