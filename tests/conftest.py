"""Shared test configuration."""

import pytest

from symbolic_algebra.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging(LogLevel.MINIMAL)
    yield
    configure_logging(LogLevel.MINIMAL)
