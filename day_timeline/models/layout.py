# File: day_timeline/models/layout.py
"""
Data models for layout inputs (window, dimensions) and outputs (geometry).
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from day_timeline.core.config_manager import Config
from day_timeline.utils.time_utils import minutes_to_time_string
from .block import Interval


@dataclass(frozen=True)
class VisibleWindow:
    """Visible hour range of the timeline, ``[start_hour, end_hour]``."""
    start_hour: int
    end_hour: int

    def __post_init__(self):
        if self.end_hour <= self.start_hour:
            raise ValueError(
                f"Window end must be after start: {self.start_hour}-{self.end_hour}"
            )

    @property
    def start_minutes(self) -> int:
        return self.start_hour * 60

    @property
    def end_minutes(self) -> int:
        return self.end_hour * 60

    @property
    def span_hours(self) -> int:
        return self.end_hour - self.start_hour

    @property
    def hours(self) -> List[int]:
        """Grid hours, both ends included."""
        return list(range(self.start_hour, self.end_hour + 1))

    def contains_minutes(self, minutes: int) -> bool:
        return self.start_minutes <= minutes <= self.end_minutes

    def contains_hours(self, start_hour: int, end_hour: int) -> bool:
        return self.start_hour <= start_hour and end_hour <= self.end_hour


@dataclass(frozen=True)
class TimelineDimensions:
    """Pixel parameters of one layout pass."""
    hour_height: float
    time_label_width: float
    content_width: float = 0.0
    block_gap: float = 4.0
    min_block_height: float = 24.0

    @classmethod
    def for_mode(cls, compact: bool = False, content_width: float = 0.0) -> 'TimelineDimensions':
        """Build the normal or compact (sidebar) preset."""
        preset = Config.dimension_preset(compact)
        return cls(
            hour_height=preset['hour_height'],
            time_label_width=preset['time_label_width'],
            content_width=content_width,
            block_gap=Config.BLOCK_GAP,
            min_block_height=Config.MIN_BLOCK_HEIGHT,
        )

    def with_content_width(self, content_width: float) -> 'TimelineDimensions':
        """Copy with a freshly measured content width (resize event)."""
        return replace(self, content_width=content_width)

    @property
    def is_measured(self) -> bool:
        return self.content_width > 0


@dataclass(frozen=True)
class ColumnAssignment:
    """Column slot of one interval inside its overlap group."""
    interval: Interval
    column: int
    total_columns: int

    @property
    def block_id(self) -> str:
        return self.interval.block_id


@dataclass(frozen=True)
class BlockGeometry:
    """Absolute pixel rectangle of a block on the timeline."""
    block_id: str
    top: float
    height: float
    left: float
    width: float
    column: int
    total_columns: int
    start_minutes: int
    end_minutes: int

    # Pass-through from the block
    completed: bool = False
    completable: bool = False
    color: Optional[str] = None
    min_block_height: float = field(default=0.0, repr=False)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def display_height(self) -> float:
        """Completed blocks collapse to the minimum block height."""
        if self.completed and self.min_block_height > 0:
            return min(self.height, self.min_block_height)
        return self.height

    def to_dict(self) -> Dict[str, object]:
        return {
            'block_id': self.block_id,
            'top': self.top,
            'height': self.height,
            'left': self.left,
            'width': self.width,
            'column': self.column,
            'total_columns': self.total_columns,
            'completed': self.completed,
            'completable': self.completable,
            'start_minutes': self.start_minutes,
            'end_minutes': self.end_minutes,
            'display_height': self.display_height,
            'color': self.color,
        }


@dataclass(frozen=True)
class NowMarker:
    """Position of the live "now" line."""
    top: float
    minutes: int
    label: str


@dataclass(frozen=True)
class HourMarker:
    """Hour grid line and its label."""
    hour: int
    top: float
    label: str
    is_noon: bool = False
    is_last: bool = False


@dataclass(frozen=True)
class HoverSlot:
    """Candidate interval for click-to-create."""
    start_minutes: int
    end_minutes: int
    day_of_week: int  # ISO: 1=Monday .. 7=Sunday

    @property
    def start_time(self) -> str:
        return minutes_to_time_string(self.start_minutes)

    @property
    def end_time(self) -> str:
        return minutes_to_time_string(self.end_minutes)

    def to_interval(self) -> Interval:
        return Interval("hover", self.start_minutes, self.end_minutes)

    def to_block_defaults(self) -> Dict[str, object]:
        """Default values for the new-block form."""
        return {
            'start_time': self.start_time,
            'end_time': self.end_time,
            'days_of_week': [self.day_of_week],
        }


@dataclass(frozen=True)
class GhostGeometry:
    """Preview rectangle of a hover slot."""
    top: float
    height: float
    left: float
    width: float
    start_label: str
    end_label: str


@dataclass
class TimelineLayout:
    """Everything a renderer needs for one day in one pass."""
    window: VisibleWindow
    blocks: List[BlockGeometry] = field(default_factory=list)
    hour_markers: List[HourMarker] = field(default_factory=list)
    now_marker: Optional[NowMarker] = None
    total_height: float = 0.0
    is_today: bool = False
    is_empty: bool = True

    def geometry_for(self, block_id: str) -> Optional[BlockGeometry]:
        for geometry in self.blocks:
            if geometry.block_id == block_id:
                return geometry
        return None
