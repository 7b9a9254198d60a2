# File: day_timeline/processors/pixel_mapper.py
"""
Pixel layout module.
Turns minute intervals and column assignments into absolute pixel geometry,
and positions the hour grid and the live "now" line.
"""

from typing import Iterable, List, Optional

from day_timeline.models import (
    Block,
    BlockGeometry,
    HourMarker,
    NowMarker,
    TimelineDimensions,
    VisibleWindow,
)
from day_timeline.processors.column_assigner import assign_all
from day_timeline.processors.overlap_grouper import IntervalLike, to_intervals
from day_timeline.utils.logger import setup_logger
from day_timeline.utils.time_utils import format_hour_label, format_time_12h

logger = setup_logger(__name__)


def measure_content_width(container_width: float, time_label_width: float) -> float:
    """Content width = container width minus the time label gutter (never negative)."""
    return max(0.0, container_width - time_label_width)


def total_height(window: VisibleWindow, dimensions: TimelineDimensions) -> float:
    """Height of the whole visible grid in pixels."""
    return window.span_hours * dimensions.hour_height


def minutes_to_top(minutes: int, window: VisibleWindow, dimensions: TimelineDimensions) -> float:
    """Vertical offset of a minute within the window."""
    return (minutes - window.start_minutes) / 60 * dimensions.hour_height


def column_width(total_columns: int, dimensions: TimelineDimensions) -> float:
    """Width of one column when ``total_columns`` share the content width."""
    total_gaps = (total_columns - 1) * dimensions.block_gap
    return max(0.0, (dimensions.content_width - total_gaps) / total_columns)


def layout_blocks(
    blocks: Iterable[IntervalLike],
    window: VisibleWindow,
    dimensions: TimelineDimensions,
) -> List[BlockGeometry]:
    """
    Compute pixel geometry for a day's blocks.

    Overlap groups and columns are computed on the true intervals; each block
    is then clamped to the window and blocks entirely outside it are dropped.

    Args:
        blocks: Blocks (or Intervals) for the viewed day
        window: Visible hour range
        dimensions: Pixel parameters including the measured content width

    Returns:
        Geometry per visible block, or [] while the content width is not measured.
    """
    if dimensions.content_width <= 0:
        logger.debug("Content width not measured yet; skipping layout")
        return []

    intervals = to_intervals(blocks)
    if not intervals:
        return []

    window_start = window.start_minutes
    window_end = window.end_minutes
    result: List[BlockGeometry] = []

    for assignment in assign_all(intervals):
        interval = assignment.interval
        visible = interval.clamp(window_start, window_end)
        if visible is None:
            continue

        top = minutes_to_top(visible.start, window, dimensions)
        height = max(
            visible.duration() / 60 * dimensions.hour_height,
            dimensions.min_block_height,
        )
        width = column_width(assignment.total_columns, dimensions)
        left = dimensions.time_label_width + assignment.column * (width + dimensions.block_gap)

        block: Optional[Block] = interval.block
        result.append(BlockGeometry(
            block_id=interval.block_id,
            top=top,
            height=height,
            left=left,
            width=width,
            column=assignment.column,
            total_columns=assignment.total_columns,
            start_minutes=interval.start,
            end_minutes=interval.end,
            completed=block.completed if block else False,
            completable=block.completable if block else False,
            color=block.color if block else None,
            min_block_height=dimensions.min_block_height,
        ))

    logger.debug(f"Laid out {len(result)} of {len(intervals)} blocks")
    return result


def compute_now_marker(
    window: VisibleWindow,
    dimensions: TimelineDimensions,
    current_minutes: int,
    is_today: bool,
) -> Optional[NowMarker]:
    """Position of the "now" line, or None when not today or out of view."""
    if not is_today or not window.contains_minutes(current_minutes):
        return None
    return NowMarker(
        top=minutes_to_top(current_minutes, window, dimensions),
        minutes=current_minutes,
        label=format_time_12h(current_minutes),
    )


def hour_markers(window: VisibleWindow, dimensions: TimelineDimensions) -> List[HourMarker]:
    """One grid line per hour, both window ends included."""
    hours = window.hours
    return [
        HourMarker(
            hour=hour,
            top=(hour - window.start_hour) * dimensions.hour_height,
            label=format_hour_label(hour),
            is_noon=hour == 12,
            is_last=index == len(hours) - 1,
        )
        for index, hour in enumerate(hours)
    ]
