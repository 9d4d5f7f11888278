"""Logging setup for the service."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "eventmerge"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a stdout handler to the package logger and set its level.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    return logger
