"""Logging configuration for categorytree.

Sets up logging to the console and, optionally, to a file.
"""

import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = "categorytree"


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """Set up application logging with console and optional file handlers.

    Args:
        level: Logging level name (e.g., "INFO", "DEBUG")
        log_file: Optional path of a log file to append to

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level.upper())
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The categorytree logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
