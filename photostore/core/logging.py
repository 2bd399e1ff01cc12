"""Logging helpers."""

import logging

from .config import Settings


def setup_logging(config: Settings) -> logging.Logger:
    """Configure the root logger from settings and return the service logger."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )
    return logging.getLogger("photostore")
