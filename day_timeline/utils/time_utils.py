# File: day_timeline/utils/time_utils.py
"""
Time-of-day helpers: HH:MM parsing, display formatting and the live clock.
"""

import datetime
import re
from typing import Union

import pytz

from day_timeline.models.errors import FormatError

MINUTES_PER_DAY = 24 * 60

TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*$", re.ASCII)
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)


def parse_time_to_minutes(time: str) -> int:
    """Parse an ``HH:MM`` (or ``HH:MM:SS``) string into minutes since midnight."""
    if not isinstance(time, str):
        raise FormatError(time)
    match = TIME_PATTERN.match(time)
    if not match:
        raise FormatError(time)

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise FormatError(time)
    if match.group(3) is not None and int(match.group(3)) > 59:
        raise FormatError(time)
    return hours * 60 + minutes


def minutes_to_time_string(minutes: int) -> str:
    """Format minutes since midnight as zero-padded ``HH:MM`` (wraps at 24h)."""
    minutes = int(minutes) % MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def _to_12h(hour: int):
    ampm = "PM" if hour % 24 >= 12 else "AM"
    hour12 = hour % 12 or 12
    return hour12, ampm


def format_hour_label(hour: int) -> str:
    """9 -> "9 AM", 14 -> "2 PM", 0 -> "12 AM"."""
    hour12, ampm = _to_12h(hour)
    return f"{hour12} {ampm}"


def format_time_12h(minutes: int) -> str:
    """Minutes since midnight in 12-hour clock, e.g. 545 -> "9:05 AM"."""
    minutes = int(minutes) % MINUTES_PER_DAY
    hour12, ampm = _to_12h(minutes // 60)
    return f"{hour12}:{minutes % 60:02d} {ampm}"


def format_time_label(time: str) -> str:
    """``"14:30"`` -> ``"2:30 PM"``."""
    return format_time_12h(parse_time_to_minutes(time))


def parse_iso_date(value: Union[str, datetime.date]) -> datetime.date:
    """Accept a date/datetime or a ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        raise FormatError(value, expected="YYYY-MM-DD")
    try:
        return datetime.datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise FormatError(value, expected="YYYY-MM-DD") from e


def day_of_week(value: Union[str, datetime.date]) -> int:
    """ISO weekday of a date: 1=Monday .. 7=Sunday."""
    return parse_iso_date(value).isoweekday()


def current_time(timezone: str) -> datetime.datetime:
    """Timezone-aware "now" for the given pytz zone name."""
    tz = pytz.timezone(timezone)
    return datetime.datetime.now(pytz.utc).astimezone(tz)


def localize(dt: datetime.datetime, timezone: str) -> datetime.datetime:
    """Attach (naive) or convert (aware) a datetime to the given zone."""
    tz = pytz.timezone(timezone)
    if dt.tzinfo is None:
        return tz.localize(dt)
    return dt.astimezone(tz)


def minutes_since_midnight(dt: Union[datetime.datetime, datetime.time]) -> int:
    """Wall-clock minutes of a datetime or time."""
    return dt.hour * 60 + dt.minute
