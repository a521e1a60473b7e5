"""Logging configuration for instagram_client."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "instagram_client"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return the package logger.

    Only a console handler is attached; the library writes nothing to disk.

    Args:
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the package namespace (default: the package logger)."""

    if name is None:
        name = LOGGER_NAME
    return logging.getLogger(name)
