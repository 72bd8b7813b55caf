"""Pytest configuration for symrc4 tests."""

import io

import pytest

from symrc4.logging import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def quiet_logger():
    """Route the global logger to a buffer for every test."""
    logger = configure_logging(level=LogLevel.QUIET, color=False, stream=io.StringIO())
    yield logger
    logger.close()


@pytest.fixture
def verbose_logger():
    """Global logger at TRACE level plus the buffer it writes to."""
    stream = io.StringIO()
    logger = configure_logging(level=LogLevel.TRACE, color=False, stream=stream)
    yield logger, stream
    logger.close()
