"""Logging configuration for Regionpedia"""

import logging
import sys


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None
) -> logging.Logger:
    """
    Set up logging configuration

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file

    Returns:
        Configured logger instance
    """
    # Get root logger for the application
    logger = logging.getLogger("regionpedia")
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    logger.handlers.clear()

    # Console handler (stderr) so stdout stays clean for piping
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if level.upper() == "DEBUG" else logging.WARNING)
    console_formatter = logging.Formatter(
        fmt="%(levelname)s: %(message)s"
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    # Don't propagate to root logger
    logger.propagate = False

    return logger


def get_logger(name: str = "regionpedia") -> logging.Logger:
    """
    Get a logger instance

    Args:
        name: Logger name (defaults to main app logger)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def enable_debug() -> None:
    """Enable DEBUG level logging"""
    logger = get_logger()
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.DEBUG)
