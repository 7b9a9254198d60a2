# File: day_timeline/processors/window_calculator.py
"""
Smart visible-window calculation.

Instead of always drawing the full day, the timeline shows a focused range
of hours around the day's blocks and, for today, around the current time.
The thresholds are UX policy and live in Config.
"""

from typing import Iterable, Tuple

from day_timeline.core.config_manager import Config
from day_timeline.models import VisibleWindow
from day_timeline.processors.overlap_grouper import IntervalLike, to_intervals
from day_timeline.utils.logger import setup_logger

logger = setup_logger(__name__)


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def block_hour_span(start_minutes: int, end_minutes: int) -> Tuple[int, int]:
    """Hour range a block needs on the grid: its start hour to end hour + 1."""
    return start_minutes // 60, end_minutes // 60 + 1


def _enforce_min_span(start: int, end: int, min_hour: int, max_hour: int) -> Tuple[int, int]:
    """Re-center a too-narrow window on its midpoint, kept inside the bounds."""
    span = min(Config.WINDOW_MIN_SPAN_HOURS, max_hour - min_hour)
    if end - start >= span:
        return start, end

    center = (start + end) // 2
    start = center - span // 2
    end = start + span

    if start < min_hour:
        end += min_hour - start
        start = min_hour
    if end > max_hour:
        start -= end - max_hour
        end = max_hour
    return max(start, min_hour), end


def compute_visible_window(
    blocks: Iterable[IntervalLike],
    is_today: bool,
    current_hour: int,
) -> VisibleWindow:
    """
    Derive the visible hour range for a day.

    Args:
        blocks: The day's blocks (or their intervals)
        is_today: Whether the viewed day is today
        current_hour: Wall-clock hour (0-23), used only when is_today

    Returns:
        A non-empty VisibleWindow inside [WINDOW_MIN_HOUR, WINDOW_MAX_HOUR]
    """
    min_hour = Config.WINDOW_MIN_HOUR
    max_hour = Config.WINDOW_MAX_HOUR
    intervals = to_intervals(blocks)

    # No blocks: center around current time (today) or show the default range
    if not intervals:
        if is_today:
            start = _clamp(current_hour - Config.WINDOW_LEAD_HOURS, min_hour, max_hour - 1)
            end = min(max_hour, start + Config.WINDOW_VISIBLE_HOURS)
            # Late in the day, slide back instead of shrinking
            start = max(min_hour, min(start, end - Config.WINDOW_VISIBLE_HOURS))
            start, end = _enforce_min_span(start, end, min_hour, max_hour)
            return VisibleWindow(start, end)
        return VisibleWindow(Config.WINDOW_DEFAULT_START, Config.WINDOW_DEFAULT_END)

    spans = [block_hour_span(iv.start, iv.end) for iv in intervals]
    earliest = min(s for s, _ in spans)
    latest = max(e for _, e in spans)

    padding = Config.WINDOW_PADDING_HOURS
    start = _clamp(earliest - padding, min_hour, max_hour)
    end = _clamp(latest + padding, min_hour, max_hour)

    # Keep the current time in view
    if is_today:
        start = _clamp(min(start, current_hour - Config.WINDOW_NOW_BEFORE), min_hour, max_hour)
        end = _clamp(max(end, current_hour + Config.WINDOW_NOW_AFTER), min_hour, max_hour)

    start, end = _enforce_min_span(start, end, min_hour, max_hour)

    logger.debug(
        f"Visible window {start}:00-{end}:00 for {len(intervals)} blocks "
        f"(today={is_today}, hour={current_hour})"
    )
    return VisibleWindow(start, end)
