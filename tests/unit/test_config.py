"""Unit tests for configuration and logging setup."""

import logging

import pytest
from textual.logging import TextualHandler

from envlens.config import BrowserConfig
from envlens.logging_config import setup_logging


@pytest.mark.unit
def test_default_config_values() -> None:
    """Defaults match the documented status behavior."""
    cfg = BrowserConfig()

    assert cfg.status_duration_s == 2.0
    assert cfg.copied_text == "Copied to clipboard"
    assert cfg.copy_failed_text == "Error copying to clipboard"
    assert cfg.log_level == "WARNING"


@pytest.mark.unit
def test_negative_status_duration_rejected() -> None:
    with pytest.raises(ValueError):
        BrowserConfig(status_duration_s=-1.0)


@pytest.mark.unit
def test_setup_logging_installs_single_textual_handler() -> None:
    """Repeated setup keeps one handler and applies the new level."""
    logger = setup_logging("info")
    setup_logging("debug")

    handlers = [h for h in logger.handlers if isinstance(h, TextualHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


@pytest.mark.unit
def test_setup_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("chatty")
