# File: day_timeline/models/errors.py
"""
Exception types raised by the layout engine.

All of them signal a caller contract violation (bad input), never a
transient condition.
"""


class TimelineError(Exception):
    """Base class for layout engine errors."""


class FormatError(TimelineError, ValueError):
    """A time or date string could not be parsed."""

    def __init__(self, value, expected: str = "HH:MM"):
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid time format: {value!r} (expected {expected})")


class InvalidBlockError(TimelineError, ValueError):
    """A block whose end is not after its start."""

    def __init__(self, block_id: str, start: str, end: str):
        self.block_id = block_id
        super().__init__(
            f"Block end time must be after start time: {block_id} ({start}-{end})"
        )
