"""Tests for logging configuration"""

import logging

import pytest

from regionpedia.logging_config import enable_debug, get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    """Leave the regionpedia logger without handlers after each test"""
    yield
    logger = logging.getLogger("regionpedia")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True


class TestSetupLogging:
    """Tests for setup_logging()"""

    def test_returns_app_logger(self):
        """Test that the regionpedia logger is configured"""
        logger = setup_logging()
        assert logger.name == "regionpedia"
        assert logger.level == logging.INFO
        assert logger.propagate is False

    def test_console_handler_only_by_default(self):
        """Test that a single stderr handler is installed"""
        logger = setup_logging()
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.handlers[0].level == logging.WARNING

    def test_debug_level(self):
        """Test that DEBUG lowers both logger and console handler"""
        logger = setup_logging(level="debug")
        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_repeated_setup_does_not_duplicate_handlers(self):
        """Test that handlers are replaced, not stacked"""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        """Test that a file handler writes debug records"""
        log_file = tmp_path / "regionpedia.log"
        logger = setup_logging(level="DEBUG", log_file=str(log_file))
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)

        logger.debug("expanded ue1")
        for handler in logger.handlers:
            handler.flush()
        assert "expanded ue1" in log_file.read_text()


class TestHelpers:
    """Tests for get_logger() and enable_debug()"""

    def test_get_logger_default_name(self):
        """Test that get_logger returns the app logger"""
        assert get_logger() is logging.getLogger("regionpedia")

    def test_enable_debug(self):
        """Test that enable_debug lowers the console handler"""
        logger = setup_logging()
        enable_debug()
        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG
