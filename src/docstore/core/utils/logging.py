"""Loguru sink setup"""

import sys

from loguru import logger


def configure_logging(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a single stderr sink at level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format="{time:HH:mm:ss} | {level: <7} | {name} - {message}")
