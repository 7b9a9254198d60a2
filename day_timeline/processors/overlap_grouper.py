# File: day_timeline/processors/overlap_grouper.py
"""
Overlap grouping module.
Partitions a day's intervals into maximal groups of transitively
overlapping intervals using an index-based union-find.
"""

from typing import Dict, Iterable, List, Sequence, Union

from day_timeline.models import Block, Interval
from day_timeline.utils.logger import setup_logger

logger = setup_logger(__name__)

IntervalLike = Union[Interval, Block]


def to_intervals(items: Iterable[IntervalLike]) -> List[Interval]:
    """Normalize Blocks and Intervals into Intervals."""
    return [item.to_interval() if isinstance(item, Block) else item for item in items]


def sort_intervals(intervals: Iterable[Interval]) -> List[Interval]:
    """Order by start, then end (shorter-ending first)."""
    return sorted(intervals, key=lambda iv: (iv.start, iv.end))


class _UnionFind:
    """Disjoint sets over indices ``0..n-1`` with path compression."""

    def __init__(self, size: int):
        self.parent = list(range(size))

    def find(self, i: int) -> int:
        root = i
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def union(self, a: int, b: int) -> None:
        root_a, root_b = self.find(a), self.find(b)
        if root_a != root_b:
            self.parent[root_a] = root_b


def group_overlapping(items: Iterable[IntervalLike]) -> List[List[Interval]]:
    """
    Group intervals connected by the (half-open) overlap relation.

    Args:
        items: Intervals or Blocks for a single day

    Returns:
        Groups ordered by their earliest member; members sorted by (start, end).
    """
    ordered: Sequence[Interval] = sort_intervals(to_intervals(items))
    if not ordered:
        return []

    uf = _UnionFind(len(ordered))
    for i, current in enumerate(ordered):
        for j in range(i + 1, len(ordered)):
            # Sorted by start: nothing further along can reach back into i
            if ordered[j].start >= current.end:
                break
            if current.overlaps(ordered[j]):
                uf.union(i, j)

    groups: Dict[int, List[Interval]] = {}
    for i, interval in enumerate(ordered):
        groups.setdefault(uf.find(i), []).append(interval)

    result = list(groups.values())
    logger.debug(f"Grouped {len(ordered)} intervals into {len(result)} overlap groups")
    return result
