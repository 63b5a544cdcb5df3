"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers namespaced under ``fairy``.
    - Allow optional verbose/debug mode for the command line interface.

Notes/Edge cases:
    - Library code never configures handlers; the package logger only carries
      a ``NullHandler``.
    - :func:`configure_logging` is idempotent.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "fairy"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` placed under the package namespace."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this more than once only adjusts the level.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in logger.handlers:
        if getattr(handler, "_fairy_cli", False):
            handler.setLevel(logger.level)
            return logger
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(logger.level)
    handler._fairy_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
