# File: day_timeline/core/timeline_engine.py
"""
Timeline engine module.
Coordinates the layout components for one day in a single call.

The engine keeps no state between calls: the rendering layer owns the clock
tick and resize events and calls ``layout_day`` again with fresh inputs.
"""

import datetime
from typing import Iterable, Optional, Union

import pytz

from day_timeline.core.config_manager import Config
from day_timeline.models import (
    Block,
    GhostGeometry,
    HoverSlot,
    TimelineDimensions,
    TimelineLayout,
    VisibleWindow,
)
from day_timeline.processors.hover_resolver import ghost_geometry, resolve_hover_slot
from day_timeline.processors.pixel_mapper import (
    compute_now_marker,
    hour_markers,
    layout_blocks,
    measure_content_width,
    total_height,
)
from day_timeline.processors.window_calculator import compute_visible_window
from day_timeline.utils.logger import setup_logger
from day_timeline.utils.time_utils import (
    current_time,
    localize,
    minutes_since_midnight,
    parse_iso_date,
)

logger = setup_logger(__name__)

DateLike = Union[str, datetime.date]


class TimelineEngine:
    """
    Layout engine for the day calendar view.

    Runs the smart window, overlap grouping, column assignment and pixel
    mapping for a day's blocks, plus the now marker and hour grid.
    """

    def __init__(self, compact: bool = False, timezone: str = Config.TIMEZONE):
        """
        Initialize the engine.

        Args:
            compact: Use the compact (sidebar) dimension preset
            timezone: Timezone name used for "now" (e.g., 'Europe/Amsterdam')
        """
        if timezone not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {timezone}")
        self.compact = compact
        self.timezone = timezone
        self.base_dimensions = TimelineDimensions.for_mode(compact)

    def dimensions_for(self, container_width: float) -> TimelineDimensions:
        """Dimensions for a measured container width (gutter included)."""
        content_width = measure_content_width(
            container_width, self.base_dimensions.time_label_width
        )
        return self.base_dimensions.with_content_width(content_width)

    def _now(self, now: Optional[datetime.datetime]) -> datetime.datetime:
        if now is None:
            return current_time(self.timezone)
        return localize(now, self.timezone)

    def is_today(self, view_date: DateLike, now: Optional[datetime.datetime] = None) -> bool:
        return parse_iso_date(view_date) == self._now(now).date()

    def seconds_until_next_tick(self, now: Optional[datetime.datetime] = None) -> float:
        """Seconds until the next minute boundary, when the now line should move."""
        now = self._now(now)
        elapsed = now.second + now.microsecond / 1_000_000
        return Config.NOW_TICK_SECONDS - elapsed % Config.NOW_TICK_SECONDS

    def window_for(
        self,
        blocks: Iterable[Block],
        view_date: DateLike,
        now: Optional[datetime.datetime] = None,
    ) -> VisibleWindow:
        """Smart visible window for a day."""
        now = self._now(now)
        return compute_visible_window(blocks, self.is_today(view_date, now), now.hour)

    def layout_day(
        self,
        blocks: Iterable[Block],
        view_date: DateLike,
        container_width: float,
        now: Optional[datetime.datetime] = None,
        window: Optional[VisibleWindow] = None,
    ) -> TimelineLayout:
        """
        Run a full layout pass for one day.

        Args:
            blocks: Blocks materialized for the viewed day
            view_date: The viewed day (date or 'YYYY-MM-DD')
            container_width: Measured width of the timeline container in px
            now: Current time (defaults to the engine's clock)
            window: Explicit window overriding the smart window

        Returns:
            TimelineLayout with geometry, hour grid and now marker
        """
        blocks = list(blocks)
        now = self._now(now)
        today = self.is_today(view_date, now)

        if window is None:
            window = compute_visible_window(blocks, today, now.hour)

        dimensions = self.dimensions_for(container_width)
        geometry = layout_blocks(blocks, window, dimensions)
        now_marker = compute_now_marker(window, dimensions, minutes_since_midnight(now), today)

        logger.info(
            f"Layout for {parse_iso_date(view_date)}: {len(geometry)}/{len(blocks)} blocks "
            f"in {window.start_hour}:00-{window.end_hour}:00"
        )

        return TimelineLayout(
            window=window,
            blocks=geometry,
            hour_markers=hour_markers(window, dimensions),
            now_marker=now_marker,
            total_height=total_height(window, dimensions),
            is_today=today,
            is_empty=not blocks,
        )

    def hover_slot(
        self,
        pointer_offset_px: float,
        blocks: Iterable[Block],
        view_date: DateLike,
        window: VisibleWindow,
    ) -> Optional[HoverSlot]:
        """Candidate slot under the pointer, or None."""
        return resolve_hover_slot(
            pointer_offset_px, window, self.base_dimensions, blocks, view_date
        )

    def hover_ghost(
        self,
        slot: HoverSlot,
        window: VisibleWindow,
        container_width: float,
    ) -> Optional[GhostGeometry]:
        """Preview rectangle for a resolved hover slot."""
        return ghost_geometry(slot, window, self.dimensions_for(container_width))
