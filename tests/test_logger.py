"""
Tests for logging system
"""

import pytest
from maze_escape.core.logger import GameLogger, get_logger, init_logger

def test_logger_singleton():
    """Test that logger is a singleton."""
    logger1 = get_logger()
    logger2 = get_logger()
    assert logger1 is logger2

def test_init_logger_returns_existing_instance():
    """Test that init_logger does not replace a live logger."""
    assert init_logger("elsewhere") is get_logger()

def test_direct_construction_rejected():
    """Test that a second GameLogger cannot be built directly."""
    with pytest.raises(RuntimeError):
        GameLogger()

def test_logger_writes_to_file():
    """Test that messages reach the log file."""
    logger = get_logger()
    logger.info("Info message for file check")

    for handler in logger.logger.handlers:
        handler.flush()

    assert logger.log_dir.is_dir()
    log_files = list(logger.log_dir.glob("maze_escape_*.log"))
    assert len(log_files) > 0
    assert "Info message for file check" in logger.log_file.read_text(encoding="utf-8")
