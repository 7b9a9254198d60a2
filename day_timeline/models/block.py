# File: day_timeline/models/block.py

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from day_timeline.utils.time_utils import parse_time_to_minutes
from .errors import InvalidBlockError

DEFAULT_BLOCK_COLOR = "#6366f1"


@dataclass(frozen=True)
class Interval:
    """A half-open ``[start, end)`` span in minutes since midnight."""
    block_id: str
    start: int
    end: int
    block: Optional['Block'] = field(default=None, compare=False, repr=False)

    def overlaps(self, other: 'Interval') -> bool:
        """Half-open overlap: touching endpoints do not overlap."""
        return self.start < other.end and other.start < self.end

    def duration(self) -> int:
        return self.end - self.start

    def clamp(self, lower: int, upper: int) -> Optional['Interval']:
        """Intersect with ``[lower, upper)``; None if nothing is left."""
        if self.end <= lower or self.start >= upper:
            return None
        return Interval(self.block_id, max(self.start, lower), min(self.end, upper), self.block)


@dataclass(frozen=True)
class Block:
    """A time-ranged item on the day timeline (class, habit, timed task)."""
    id: str
    start_time: str  # "HH:MM"
    end_time: str    # "HH:MM"
    completed: bool = False
    completable: bool = False
    color: str = DEFAULT_BLOCK_COLOR

    # Optional pass-through metadata
    title: Optional[str] = None
    location: Optional[str] = None

    def __post_init__(self):
        """Validate block times."""
        # Raises FormatError on malformed strings
        start = parse_time_to_minutes(self.start_time)
        end = parse_time_to_minutes(self.end_time)
        if end <= start:
            raise InvalidBlockError(self.id, self.start_time, self.end_time)

    @property
    def start_minutes(self) -> int:
        return parse_time_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return parse_time_to_minutes(self.end_time)

    @property
    def start_hour(self) -> int:
        return self.start_minutes // 60

    @property
    def end_hour(self) -> int:
        return self.end_minutes // 60

    def duration_minutes(self) -> int:
        """Calculate block duration in minutes."""
        return self.end_minutes - self.start_minutes

    def to_interval(self) -> Interval:
        return Interval(self.id, self.start_minutes, self.end_minutes, self)

    def overlaps_with(self, other: 'Block') -> bool:
        """Check if this block overlaps with another."""
        return self.to_interval().overlaps(other.to_interval())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API-style dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'start_time': self.start_time,
            'end_time': self.end_time,
            'completed': self.completed,
            'is_completable': self.completable,
            'color': self.color,
            'location': self.location,
        }


def block_from_dict(data: dict) -> Block:
    """Create Block from an API dictionary (schedule block or timed task)."""
    completable = data.get('is_completable', data.get('completable', False))
    return Block(
        id=str(data.get('id', '')),
        start_time=data['start_time'],
        end_time=data['end_time'],
        completed=bool(data.get('completed', False)),
        completable=bool(completable),
        color=data.get('color') or DEFAULT_BLOCK_COLOR,
        title=data.get('title'),
        location=data.get('location'),
    )
