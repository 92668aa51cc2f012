"""Logging setup for applications embedding the lasso tool."""

import logging
import sys

from tile_lasso.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure root logging.

    Uses ``settings.log_level`` unless ``level`` is given. Unknown level
    names fall back to INFO.
    """
    name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
