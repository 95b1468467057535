"""
Logging configuration utilities.

This module provides standardized logging setup for the API server and
the management commands.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    name: str = None,
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> logging.Logger:
    """
    Set up logging with optional file and console handlers.

    Args:
        name: Logger name (defaults to root logger if None)
        level: Logging level, as a number or a name such as "INFO"
        log_file: Path to log file (optional)
        console: Whether to add console handler (default: True)
        format_string: Log message format

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logging("vaad", log_file=Path("vaad.log"))
        >>> logger.info("Application started")
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(format_string)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
