"""Base utilities for CLI commands"""

import logging
import os
import sys
from typing import Optional

from pydantic import ValidationError

from regionpedia.config.settings import Settings
from regionpedia.exceptions import ConfigurationError

logger = logging.getLogger("regionpedia")


def status(message: str, quiet: bool = False) -> None:
    """Print status message to stderr unless quiet mode is on.

    Args:
        message: Status message to display
        quiet: Whether to suppress the message
    """
    if not quiet:
        print(message, file=sys.stderr)


def print_error(message: str, debug: bool = False, exception: Exception = None) -> None:
    """Print error message to stderr with consistent formatting.

    Args:
        message: Error message to display
        debug: Whether to print full traceback
        exception: Optional exception for traceback
    """
    print(f"Error: {message}", file=sys.stderr)
    if debug and exception:
        import traceback
        traceback.print_exception(exception)


def load_settings() -> Settings:
    """Load settings, turning validation failures into ConfigurationError"""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def safe_write_file(
    file_path: str,
    content: str,
    create_dirs: bool = True
) -> None:
    """Safely write content to a file with error handling.

    Args:
        file_path: Path to file to write
        content: Content to write
        create_dirs: Whether to create parent directories if they don't exist

    Raises:
        IOError: If the file cannot be written
    """
    path = os.path.abspath(file_path)
    parent_dir = os.path.dirname(path)

    try:
        if create_dirs and parent_dir and not os.path.exists(parent_dir):
            os.makedirs(parent_dir, exist_ok=True)

        with open(path, 'w') as f:
            f.write(content)
    except PermissionError:
        raise IOError(f"Permission denied: Cannot write to '{file_path}'")
    except OSError as e:
        raise IOError(f"Failed to write to '{file_path}': {e}")


def write_output(output: str, output_path: Optional[str], quiet: bool = False) -> None:
    """Write output to file or stdout.

    Args:
        output: The output content
        output_path: Optional file path to write to
        quiet: Whether to suppress status messages

    Raises:
        IOError: If the file cannot be written
    """
    if output_path:
        safe_write_file(output_path, output)
        status(f"Output written to {output_path}", quiet)
    else:
        print(output)
