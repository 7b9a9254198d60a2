from .errors import TimelineError, FormatError, InvalidBlockError
from .block import Block, Interval, block_from_dict, DEFAULT_BLOCK_COLOR
from .layout import (
    VisibleWindow,
    TimelineDimensions,
    ColumnAssignment,
    BlockGeometry,
    NowMarker,
    HourMarker,
    HoverSlot,
    GhostGeometry,
    TimelineLayout,
)

__all__ = [
    "TimelineError",
    "FormatError",
    "InvalidBlockError",
    "Block",
    "Interval",
    "block_from_dict",
    "DEFAULT_BLOCK_COLOR",
    "VisibleWindow",
    "TimelineDimensions",
    "ColumnAssignment",
    "BlockGeometry",
    "NowMarker",
    "HourMarker",
    "HoverSlot",
    "GhostGeometry",
    "TimelineLayout",
]
