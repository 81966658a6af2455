"""Pytest configuration and shared fixtures for agent console tests."""

import logging
import tempfile
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from agent_console.config.agent import Configuration, ConnectionPoolConfiguration, LogLevel
from agent_console.config.app import ConsoleSettings


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def default_settings() -> ConsoleSettings:
    """Create default ConsoleSettings for testing."""
    return ConsoleSettings()


@pytest.fixture
def pool_configuration() -> ConnectionPoolConfiguration:
    return ConnectionPoolConfiguration(check_interval=30, fill_interval=10, max_pool_size=100)


@pytest.fixture
def full_configuration(pool_configuration: ConnectionPoolConfiguration) -> Configuration:
    """Configuration with every optional field set."""
    return Configuration(
        agent_server_port=8080,
        worker_thread_number=4,
        max_log_level=LogLevel.DEBUG,
        connection_pool_configuration=pool_configuration,
    )


@pytest.fixture
def clean_root_logger() -> Iterator[logging.Logger]:
    """Restore root logger handlers and level after a test that configures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            if isinstance(handler, RotatingFileHandler):
                handler.close()
    root.setLevel(level)
