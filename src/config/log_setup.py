"""
Dice 10000 - Logging Configuration

One-call setup for the standard library logging used across the package.
"""

import logging

from src.config.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from the given level or Settings.log_level."""
    if level is None:
        level = get_settings().log_level
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
