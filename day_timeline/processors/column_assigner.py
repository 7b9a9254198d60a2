# File: day_timeline/processors/column_assigner.py
"""
Column assignment module.
Greedy first-fit interval coloring inside one overlap group.
"""

from typing import Iterable, List

from day_timeline.models import ColumnAssignment
from day_timeline.processors.overlap_grouper import (
    IntervalLike,
    group_overlapping,
    sort_intervals,
    to_intervals,
)
from day_timeline.utils.logger import setup_logger

logger = setup_logger(__name__)


def assign_columns(group: Iterable[IntervalLike]) -> List[ColumnAssignment]:
    """
    Assign each interval of an overlap group to the lowest free column.

    Processing in (start, end) order with first-fit uses exactly as many
    columns as the largest set of simultaneously active intervals.

    Args:
        group: One overlap group (Intervals or Blocks)

    Returns:
        One ColumnAssignment per interval, in (start, end) order, all
        carrying the group's final column count.
    """
    ordered = sort_intervals(to_intervals(group))
    column_ends: List[int] = []
    columns: List[int] = []

    for interval in ordered:
        assigned = -1
        for col, free_at in enumerate(column_ends):
            if free_at <= interval.start:
                assigned = col
                break

        if assigned == -1:
            assigned = len(column_ends)
            column_ends.append(interval.end)
        else:
            column_ends[assigned] = interval.end
        columns.append(assigned)

    total = len(column_ends)
    return [
        ColumnAssignment(interval=interval, column=col, total_columns=total)
        for interval, col in zip(ordered, columns)
    ]


def assign_all(items: Iterable[IntervalLike]) -> List[ColumnAssignment]:
    """Group a whole day and assign columns group by group."""
    assignments: List[ColumnAssignment] = []
    for group in group_overlapping(items):
        assignments.extend(assign_columns(group))
    return assignments


def max_simultaneous(items: Iterable[IntervalLike]) -> int:
    """Largest number of intervals active at any one instant (sweep line)."""
    events = []
    for interval in to_intervals(items):
        events.append((interval.start, 1))
        events.append((interval.end, -1))
    # Ends sort before starts at the same minute (half-open intervals)
    events.sort()

    active = peak = 0
    for _, delta in events:
        active += delta
        peak = max(peak, active)
    return peak
