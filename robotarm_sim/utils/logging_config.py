"""
Package logger setup for the simulator and its command-line runner.

Functions:
    setup_logging: Attach console (and optional file) handlers to the
        ``robotarm_sim`` logger.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "robotarm_sim"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``robotarm_sim`` logger.

    Args:
        level: Logging level (e.g. ``logging.DEBUG``, ``logging.INFO``).
        log_file: Optional path to also write log records to.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
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
