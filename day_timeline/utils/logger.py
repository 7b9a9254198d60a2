# File: day_timeline/utils/logger.py
"""
Centralized logging configuration for the day timeline engine.
"""

import logging
import os
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

LOG_DIR_ENV = "DAY_TIMELINE_LOG_DIR"
LOG_LEVEL_ENV = "DAY_TIMELINE_LOG_LEVEL"


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    return getattr(logging, name, logging.INFO)


def setup_logger(name: str = "day_timeline", level: Optional[int] = None) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Logging level (default: DAY_TIMELINE_LOG_LEVEL or INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    level = _resolve_level(level)
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    console_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler for persistent logs, only when a log directory is set
    log_dir_value = os.getenv(LOG_DIR_ENV)
    if log_dir_value:
        log_dir = Path(log_dir_value)
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f"day_timeline_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        file_format = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


class LoggerMixin:
    """Mixin to add logging capability to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        if not hasattr(self, '_logger'):
            self._logger = setup_logger(self.__class__.__name__)
        return self._logger
