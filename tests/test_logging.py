"""Tests for entity_export.logging."""

from __future__ import annotations

import logging

from entity_export.logging import configure_logging, get_logger


def test_get_logger_nests_under_package() -> None:
    assert get_logger().name == "entity_export"
    assert get_logger("exporter").name == "entity_export.exporter"


def test_configure_logging_replaces_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_warnings_reach_stderr(capsys) -> None:
    configure_logging()
    get_logger("cli").warning("No enums found.")

    assert "[entity-export] WARNING No enums found." in capsys.readouterr().err
