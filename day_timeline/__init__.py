"""
Day timeline layout engine: overlap grouping, column assignment, smart
visible window, pixel geometry and hover-slot resolution for a day view.
"""

# Models first: the utilities import the model error types.
from day_timeline.models import (
    Block,
    BlockGeometry,
    ColumnAssignment,
    FormatError,
    HoverSlot,
    Interval,
    InvalidBlockError,
    TimelineDimensions,
    TimelineError,
    TimelineLayout,
    VisibleWindow,
    block_from_dict,
)
from day_timeline.core.config_manager import Config
from day_timeline.processors.overlap_grouper import group_overlapping
from day_timeline.processors.column_assigner import assign_columns, assign_all
from day_timeline.processors.window_calculator import compute_visible_window
from day_timeline.processors.pixel_mapper import layout_blocks, compute_now_marker
from day_timeline.processors.hover_resolver import resolve_hover_slot
from day_timeline.core.timeline_engine import TimelineEngine

__version__ = "0.1.0"

__all__ = [
    "Block",
    "BlockGeometry",
    "ColumnAssignment",
    "FormatError",
    "HoverSlot",
    "Interval",
    "InvalidBlockError",
    "TimelineDimensions",
    "TimelineError",
    "TimelineLayout",
    "VisibleWindow",
    "block_from_dict",
    "Config",
    "group_overlapping",
    "assign_columns",
    "assign_all",
    "compute_visible_window",
    "layout_blocks",
    "compute_now_marker",
    "resolve_hover_slot",
    "TimelineEngine",
]
