"""Logging helpers for the entity-export CLI."""

from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "entity_export"
_FORMAT = "[entity-export] %(levelname)s %(message)s"
_VERBOSE_FORMAT = "[entity-export] %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below ``entity_export``, e.g. ``entity_export.exporter``."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Send package logs to stderr; DEBUG (with logger names) when verbose."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # main() may run several times in one process (tests, host tools).
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_VERBOSE_FORMAT if verbose else _FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
