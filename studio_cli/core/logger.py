"""Logger configuration."""

from __future__ import annotations

import sys

from loguru import logger


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route loguru records to stderr at a level matching the CLI flags."""
    logger.remove()

    level = "DEBUG" if verbose else "ERROR" if quiet else "WARNING"
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )
