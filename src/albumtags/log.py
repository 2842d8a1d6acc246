"""Console logging setup using loguru."""

import os
import sys

from loguru import logger

LOG_ENV = "ALBUMTAGS_LOG"


def setup_logging(verbose: bool = False, level: str | None = None) -> str:
    """Send log records to stderr as bare messages.

    The level comes from *level*, then the ``ALBUMTAGS_LOG`` environment
    variable, then *verbose*.  Returns the level in use.
    """
    level = (level or os.environ.get(LOG_ENV) or ("DEBUG" if verbose else "INFO")).upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format="{message}")
    return level
