"""Loguru sink configuration for the command-line entry point."""

from __future__ import annotations

import sys

from loguru import logger

from redditview.config.schema import LoggingConfig


def configure_logging(config: LoggingConfig) -> None:
    """Replace loguru's default sink with the configured ones."""
    logger.remove()
    logger.add(sys.stderr, level=config.level)
    if config.file:
        logger.add(config.file, level=config.level, rotation="10 MB", retention=5)
