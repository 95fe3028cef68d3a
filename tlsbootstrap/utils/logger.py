"""Logging configuration."""

import logging
from pathlib import Path
from typing import Optional

from tlsbootstrap.models.config import LoggingSettings


def setup_logger(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Configure application logger.

    Args:
        settings: Logging settings

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("tlsbootstrap")

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    level = logging.INFO
    if settings is not None:
        level = getattr(logging, settings.level, logging.INFO)

    logger.setLevel(level)

    # Console handler (stderr)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_formatter = logging.Formatter("%(levelname)s: %(message)s")
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # File handler (if configured)
    if settings is not None and settings.file:
        log_file = Path(settings.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(settings.format))
        logger.addHandler(file_handler)

    return logger
