# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable blocks, windows and dimensions for all tests.
"""

import pytest
import random
from datetime import date, datetime
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pytz

from day_timeline.models import Block, TimelineDimensions, VisibleWindow
from day_timeline.utils.time_utils import minutes_to_time_string


def make_block(block_id, start, end, **kwargs):
    """Shorthand block factory: make_block("A", "09:00", "10:00")."""
    return Block(id=block_id, start_time=start, end_time=end, **kwargs)


def random_blocks(rng, count, first_hour=6, last_hour=21):
    """Random valid blocks on a 15-minute grid between the given hours."""
    blocks = []
    for i in range(count):
        start = rng.randrange(first_hour * 60, last_hour * 60, 15)
        duration = rng.choice([15, 30, 45, 60, 90, 120, 180])
        end = min(start + duration, last_hour * 60 + 59)
        blocks.append(make_block(
            f"b{i}",
            minutes_to_time_string(start),
            minutes_to_time_string(end),
        ))
    return blocks


# ==================== Block Fixtures ====================

@pytest.fixture
def block_factory():
    """Expose the block factory to tests."""
    return make_block


@pytest.fixture
def overlapping_pair_and_single():
    """A=(9:00,10:00), B=(9:30,10:30), C=(11:00,12:00)."""
    return [
        make_block("A", "09:00", "10:00"),
        make_block("B", "09:30", "10:30"),
        make_block("C", "11:00", "12:00"),
    ]


@pytest.fixture
def triple_overlap():
    """Three blocks that all overlap at 10:00-10:30."""
    return [
        make_block("X", "09:00", "11:00"),
        make_block("Y", "09:30", "10:30"),
        make_block("Z", "10:00", "11:30"),
    ]


@pytest.fixture
def adjacent_blocks():
    """Back-to-back blocks that touch but do not overlap."""
    return [
        make_block("A", "09:00", "10:00"),
        make_block("B", "10:00", "11:00"),
    ]


@pytest.fixture
def class_schedule():
    """A realistic student day: classes, a habit and a timed task."""
    return [
        make_block("lecture", "09:00", "10:30", color="#3b82f6", title="Linear Algebra"),
        make_block("lab", "10:00", "12:00", color="#10b981", title="Physics Lab"),
        make_block("gym", "12:30", "13:30", completable=True, title="Gym"),
        make_block("study", "14:00", "16:00", completable=True, completed=True, title="Study"),
        make_block("call", "15:00", "15:20", title="Call with mentor"),
    ]


@pytest.fixture
def rng():
    """Seeded random generator for property checks."""
    return random.Random(20240117)


@pytest.fixture
def random_block_sets(rng):
    """Fifty random days with 0-25 blocks each."""
    return [random_blocks(rng, rng.randint(0, 25)) for _ in range(50)]


@pytest.fixture
def full_day_block_sets(rng):
    """Fifty random days with blocks anywhere from midnight to 23:59."""
    return [random_blocks(rng, rng.randint(0, 25), first_hour=0, last_hour=23) for _ in range(50)]


# ==================== Layout Fixtures ====================

@pytest.fixture
def dimensions():
    """Normal-mode dimensions with a measured content width."""
    return TimelineDimensions(
        hour_height=64,
        time_label_width=56,
        content_width=400,
        block_gap=4,
        min_block_height=24,
    )


@pytest.fixture
def unmeasured_dimensions(dimensions):
    """Dimensions before the container has been measured."""
    return dimensions.with_content_width(0)


@pytest.fixture
def work_window():
    """8 AM - 6 PM window."""
    return VisibleWindow(8, 18)


# ==================== Clock Fixtures ====================

@pytest.fixture
def view_date():
    """A Wednesday."""
    return date(2025, 1, 15)


@pytest.fixture
def fixed_now():
    """14:25 on the view date, Amsterdam time."""
    return pytz.timezone("Europe/Amsterdam").localize(datetime(2025, 1, 15, 14, 25))
