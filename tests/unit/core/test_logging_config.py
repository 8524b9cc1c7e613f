"""Unit tests for structured logging configuration."""

from __future__ import annotations

import pytest

from core.logging_config import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore_default_level():
    yield
    configure_logging()


def test_configure_logging_applies_to_existing_loggers(capsys) -> None:
    """Reconfiguring the level affects loggers that already emitted events."""
    logger = get_logger("refdataset.test")
    configure_logging("info")
    logger.info("info_event")
    logger.debug("hidden_event")
    configure_logging("debug")

    logger.debug("debug_event")
    output = capsys.readouterr().out

    assert "hidden_event" not in output and '"level": "debug"' in output
