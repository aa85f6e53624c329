"""
Shared test fixtures
"""

import logging

import pytest

from maze_escape.core.logger import GameLogger, init_logger


@pytest.fixture(autouse=True, scope="session")
def test_logger(tmp_path_factory):
    """Route log files into a temporary directory for the whole run."""
    GameLogger.shutdown()
    logger = init_logger(str(tmp_path_factory.mktemp("logs")), logging.DEBUG)
    yield logger
    GameLogger.shutdown()
