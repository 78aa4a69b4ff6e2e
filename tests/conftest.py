"""Pytest configuration for envlens tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _isolate_envlens_logger():
    """Restore the envlens logger after tests that call setup_logging."""
    logger = logging.getLogger("envlens")
    handlers = list(logger.handlers)
    level, propagate = logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def pytest_collection_modifyitems(config, items):
    """Set per-marker timeouts: unit=1s, integration=5s."""
    for item in items:
        if "unit" in item.keywords:
            item.add_marker(pytest.mark.timeout(1))
        elif "integration" in item.keywords:
            item.add_marker(pytest.mark.timeout(5))
