"""Centralized logging configuration for the earnings tools.

- ``configure_logging(...)`` attaches a single ``StreamHandler`` to the
  ``daily_earnings`` logger. The Streamlit launcher calls it once per process.
- ``get_logger(name)`` returns a child logger and makes sure the package
  logger has a ``NullHandler`` until configuration runs, so the engine stays
  quiet when imported from tests or other hosts.

Engine modules never attach handlers themselves.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

PKG_LOGGER_NAME = "daily_earnings"
_CONFIGURED = False


def parse_level(level: int | str | None, default: int = logging.INFO) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return default


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package logger exactly once.

    Streamlit re-executes the launcher script on every interaction, so repeat
    calls are no-ops rather than stacking handlers.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    numeric = parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))

    logger.setLevel(numeric)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
