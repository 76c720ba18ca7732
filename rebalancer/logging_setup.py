"""
rebalancer/logging_setup.py
---------------------------
Logging for the ``rebalancer`` package.

The package logger carries a ``NullHandler`` so library use stays silent.
``main.py`` calls :func:`configure_logging` once to send records to stderr.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

from rebalancer.config import LOG_LEVEL_ENV_VAR

PACKAGE_LOGGER = "rebalancer"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _parse_level(level: int | str | None) -> int:
    """Resolve *level*, then ``REBALANCER_LOG_LEVEL``; unknown names → WARNING."""
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR, "")
    if isinstance(level, int):
        return level
    numeric = getattr(logging, str(level).strip().upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING


def configure_logging(level: int | str | None = None, stream: IO[str] = sys.stderr) -> None:
    """Attach a stream handler to the package logger; later calls are no-ops."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if any(type(h) is logging.StreamHandler for h in logger.handlers):
        return

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_parse_level(level))
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
