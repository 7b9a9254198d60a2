# File: day_timeline/core/config_manager.py
"""
Centralized configuration management for the day timeline engine.
Loads layout presets and window policy from environment variables.
"""

import logging
import os
from typing import Dict

import pytz
from dotenv import load_dotenv

from day_timeline.utils.logger import LOG_DIR_ENV, LOG_LEVEL_ENV, setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer value for {name}: {raw!r}")
        return default


class Config:
    """Application configuration singleton."""

    # Clock
    TIMEZONE = os.getenv("TIMEZONE", "Europe/Amsterdam")
    NOW_TICK_SECONDS = 60  # cadence the renderer should re-supply "now"

    # Logging (read directly by setup_logger as well)
    LOG_LEVEL = os.getenv(LOG_LEVEL_ENV, "INFO")
    LOG_DIR = os.getenv(LOG_DIR_ENV)  # None: stdout only

    # Dimensions: normal mode
    HOUR_HEIGHT_NORMAL = _env_int("HOUR_HEIGHT_NORMAL", 64)        # px per hour
    TIME_LABEL_WIDTH_NORMAL = _env_int("TIME_LABEL_WIDTH_NORMAL", 56)  # px gutter

    # Dimensions: compact mode (sidebar)
    HOUR_HEIGHT_COMPACT = _env_int("HOUR_HEIGHT_COMPACT", 40)
    TIME_LABEL_WIDTH_COMPACT = _env_int("TIME_LABEL_WIDTH_COMPACT", 48)

    BLOCK_GAP = _env_int("BLOCK_GAP", 4)                  # px between side-by-side blocks
    MIN_BLOCK_HEIGHT = _env_int("MIN_BLOCK_HEIGHT", 24)   # px floor for short blocks

    # Smart window policy
    WINDOW_MIN_HOUR = _env_int("WINDOW_MIN_HOUR", 5)
    WINDOW_MAX_HOUR = _env_int("WINDOW_MAX_HOUR", 23)
    WINDOW_PADDING_HOURS = _env_int("WINDOW_PADDING_HOURS", 1)
    WINDOW_VISIBLE_HOURS = _env_int("WINDOW_VISIBLE_HOURS", 10)
    WINDOW_MIN_SPAN_HOURS = _env_int("WINDOW_MIN_SPAN_HOURS", 8)
    WINDOW_DEFAULT_START = _env_int("WINDOW_DEFAULT_START", 8)
    WINDOW_DEFAULT_END = _env_int("WINDOW_DEFAULT_END", 18)
    WINDOW_LEAD_HOURS = 2    # hours shown before "now" on an empty day
    WINDOW_NOW_BEFORE = 1    # hours kept visible before the current hour
    WINDOW_NOW_AFTER = 2     # hours kept visible after the current hour

    # Hover slot policy
    HOVER_SNAP_MINUTES = _env_int("HOVER_SNAP_MINUTES", 30)
    HOVER_SLOT_MINUTES = _env_int("HOVER_SLOT_MINUTES", 60)

    @classmethod
    def dimension_preset(cls, compact: bool = False) -> Dict[str, int]:
        """Return hour height and gutter width for normal or compact mode."""
        if compact:
            return {
                'hour_height': cls.HOUR_HEIGHT_COMPACT,
                'time_label_width': cls.TIME_LABEL_WIDTH_COMPACT,
            }
        return {
            'hour_height': cls.HOUR_HEIGHT_NORMAL,
            'time_label_width': cls.TIME_LABEL_WIDTH_NORMAL,
        }

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configured policy is self-consistent."""
        errors = []

        if cls.TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone: {cls.TIMEZONE}")

        if not isinstance(logging.getLevelName(str(cls.LOG_LEVEL).upper()), int):
            errors.append(f"Unknown log level: {cls.LOG_LEVEL}")

        if not 0 <= cls.WINDOW_MIN_HOUR < cls.WINDOW_MAX_HOUR <= 24:
            errors.append(
                f"Window bounds must satisfy 0 <= min < max <= 24 "
                f"(got {cls.WINDOW_MIN_HOUR}..{cls.WINDOW_MAX_HOUR})"
            )

        if not cls.WINDOW_MIN_HOUR <= cls.WINDOW_DEFAULT_START < cls.WINDOW_DEFAULT_END <= cls.WINDOW_MAX_HOUR:
            errors.append("Default window must lie inside the window bounds")

        for name in ('HOUR_HEIGHT_NORMAL', 'HOUR_HEIGHT_COMPACT', 'WINDOW_VISIBLE_HOURS',
                     'WINDOW_MIN_SPAN_HOURS', 'HOVER_SNAP_MINUTES', 'HOVER_SLOT_MINUTES'):
            if getattr(cls, name) <= 0:
                errors.append(f"{name} must be positive")

        for name in ('TIME_LABEL_WIDTH_NORMAL', 'TIME_LABEL_WIDTH_COMPACT',
                     'BLOCK_GAP', 'MIN_BLOCK_HEIGHT', 'WINDOW_PADDING_HOURS'):
            if getattr(cls, name) < 0:
                errors.append(f"{name} cannot be negative")

        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
