# File: day_timeline/processors/hover_resolver.py
"""
Hover slot resolution for click-to-create.
Maps a pointer offset on the timeline to a snapped, collision-free interval.
"""

import datetime
import math
from typing import Iterable, Optional, Union

from day_timeline.core.config_manager import Config
from day_timeline.models import (
    GhostGeometry,
    HoverSlot,
    Interval,
    TimelineDimensions,
    VisibleWindow,
)
from day_timeline.processors.overlap_grouper import IntervalLike, to_intervals
from day_timeline.processors.pixel_mapper import minutes_to_top, total_height
from day_timeline.utils.logger import setup_logger
from day_timeline.utils.time_utils import day_of_week, format_time_12h

logger = setup_logger(__name__)


def offset_to_minutes(
    pointer_offset_px: float,
    window: VisibleWindow,
    dimensions: TimelineDimensions,
) -> float:
    """Pointer offset (scroll included) to fractional minutes since midnight."""
    height = total_height(window, dimensions)
    if height <= 0:
        raise ValueError("Timeline height must be positive to resolve a pointer offset")
    span = window.end_minutes - window.start_minutes
    return window.start_minutes + pointer_offset_px / height * span


def snap_minutes(minutes: float, snap: Optional[int] = None) -> int:
    """Round to the nearest snap boundary; exact halves round up."""
    snap = snap or Config.HOVER_SNAP_MINUTES
    return int(math.floor(minutes / snap + 0.5)) * snap


def resolve_hover_slot(
    pointer_offset_px: float,
    window: VisibleWindow,
    dimensions: TimelineDimensions,
    existing_blocks: Iterable[IntervalLike],
    view_date: Union[str, datetime.date],
) -> Optional[HoverSlot]:
    """
    Resolve the candidate block under the pointer.

    Args:
        pointer_offset_px: Vertical pointer offset inside the scrollable grid
        window: Visible hour range
        dimensions: Pixel parameters (hour height is what matters here)
        existing_blocks: The day's blocks, compared on their true intervals
        view_date: The viewed day, for the new block's weekday

    Returns:
        HoverSlot, or None when the slot leaves the window or collides.
    """
    if dimensions.hour_height <= 0:
        return None

    minutes = offset_to_minutes(pointer_offset_px, window, dimensions)
    start = snap_minutes(minutes)
    end = start + Config.HOVER_SLOT_MINUTES

    if start < window.start_minutes or end > window.end_minutes:
        return None

    candidate = Interval("hover", start, end)
    for interval in to_intervals(existing_blocks):
        if candidate.overlaps(interval):
            logger.debug(f"Hover slot {start}-{end} collides with block {interval.block_id}")
            return None

    return HoverSlot(
        start_minutes=start,
        end_minutes=end,
        day_of_week=day_of_week(view_date),
    )


def ghost_geometry(
    slot: HoverSlot,
    window: VisibleWindow,
    dimensions: TimelineDimensions,
) -> Optional[GhostGeometry]:
    """Full-width preview rectangle for a hover slot."""
    if dimensions.content_width <= 0:
        return None
    return GhostGeometry(
        top=minutes_to_top(slot.start_minutes, window, dimensions),
        height=(slot.end_minutes - slot.start_minutes) / 60 * dimensions.hour_height,
        left=dimensions.time_label_width,
        width=dimensions.content_width,
        start_label=format_time_12h(slot.start_minutes),
        end_label=format_time_12h(slot.end_minutes),
    )
