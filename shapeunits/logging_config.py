"""
Logging Configuration
Sets up the package logger for applications embedding the unit library.
"""
import logging
import os
import sys
from typing import Optional

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'shapeunits' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG). When omitted, the level name
            is read from the SHAPEUNITS_LOG_LEVEL environment variable.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    if level is None:
        name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("shapeunits")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
