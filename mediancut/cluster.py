from __future__ import annotations
from dataclasses import dataclass
from functools import cmp_to_key
from typing import List, Optional, Tuple

from .factory import PointFactory
from .point import DataPoint, Scalar


# ----------------------------- Read-only view --------------------------------

@dataclass(frozen=True)
class ClusterView:
    """Snapshot of a finished cluster: bounding corners, mean and members."""
    min_point: DataPoint
    max_point: DataPoint
    representative_point: DataPoint
    points: Tuple[DataPoint, ...]

    @property
    def point_count(self) -> int:
        return len(self.points)


# ----------------------------- Cluster ---------------------------------------

def _truncated_mean(total: int, count: int) -> int:
    # integer division rounding toward zero, not toward -inf
    q = abs(total) // count
    return q if total >= 0 else -q


class Cluster:
    """
    Axis-aligned box over the points buffer[offset:offset + count].

    Every cluster of one run shares the same list; split() sorts the owned
    slice in place and hands the upper part to a new Cluster, so live
    clusters always cover disjoint ranges. The corners are only meaningful
    after shrink().
    """

    def __init__(self, buffer: List[DataPoint], factory: PointFactory,
                 offset: int = 0, count: Optional[int] = None):
        if count is None:
            count = len(buffer) - offset
        if count < 1 or offset < 0 or offset + count > len(buffer):
            raise ValueError(f"invalid cluster range offset={offset} count={count} "
                             f"for buffer of {len(buffer)} points")
        self.buffer = buffer
        self.factory = factory
        self.offset = offset
        self.count = count
        self.num_dimensions = buffer[offset].dimensions()
        self._init_corners()

    def _init_corners(self):
        self.min_corner = self.factory.create_point()
        self.min_corner.move_to_minimum()
        self.max_corner = self.factory.create_point()
        self.max_corner.move_to_maximum()

    def point_count(self) -> int:
        return self.count

    def points(self) -> Tuple[DataPoint, ...]:
        return tuple(self.buffer[self.offset:self.offset + self.count])

    # ---------- geometry ----------

    def longest_side_index(self) -> int:
        max_len = self.max_corner.difference(0, self.min_corner)
        dimension = 0
        for dim in range(1, self.num_dimensions):
            diff = self.max_corner.difference(dim, self.min_corner)
            if diff > max_len:
                max_len = diff
                dimension = dim
        return dimension

    def longest_side_length(self) -> Scalar:
        return self.max_corner.difference(self.longest_side_index(), self.min_corner)

    def shrink(self) -> None:
        """Fit the corners tightly around the points of the slice."""
        first = self.buffer[self.offset]
        for dim in range(self.num_dimensions):
            value = first.get(dim)
            self.min_corner.set(dim, value)
            self.max_corner.set(dim, value)
        for i in range(self.offset + 1, self.offset + self.count):
            point = self.buffer[i]
            for dim in range(self.num_dimensions):
                self.min_corner.set_min(dim, point)
                self.max_corner.set_max(dim, point)

    def split(self) -> "Cluster":
        """
        Sort the slice along the longest side and move the upper half into a
        new cluster. This cluster keeps ceil(count / 2) points. Neither half
        is shrunk; both corners of this cluster go back to the sentinels.
        """
        if self.count < 2:
            raise ValueError("cannot split a cluster with fewer than two points")
        dim = self.longest_side_index()
        start, end = self.offset, self.offset + self.count
        self.buffer[start:end] = sorted(
            self.buffer[start:end],
            key=cmp_to_key(lambda lhs, rhs: lhs.difference(dim, rhs)),
        )
        median = (self.count + 1) // 2
        other = Cluster(self.buffer, self.factory, start + median, self.count - median)
        self.count = median
        self._init_corners()
        return other

    # ---------- results ----------

    def representative_point(self) -> DataPoint:
        """Per-dimension arithmetic mean of the points in the slice."""
        members = self.buffer[self.offset:self.offset + self.count]
        average = self.factory.create_point()
        discrete = self.factory.is_discrete()
        for dim in range(self.num_dimensions):
            if discrete:
                total = sum(int(p.get(dim)) for p in members)
                average.set(dim, _truncated_mean(total, self.count))
            else:
                total = sum(float(p.get(dim)) for p in members)
                average.set(dim, total / self.count)
        return average

    def min_point(self) -> DataPoint:
        return _copy_point(self.min_corner, self.factory)

    def max_point(self) -> DataPoint:
        return _copy_point(self.max_corner, self.factory)

    def view(self) -> ClusterView:
        return ClusterView(self.min_point(), self.max_point(),
                           self.representative_point(), self.points())

    # ---------- ordering ----------

    def __lt__(self, other: "Cluster") -> bool:
        # longest side first
        return self.longest_side_length() > other.longest_side_length()

    def __repr__(self) -> str:
        return (f"Cluster(offset={self.offset}, count={self.count}, "
                f"min={self.min_corner!r}, max={self.max_corner!r})")


def _copy_point(point: DataPoint, factory: PointFactory) -> DataPoint:
    out = factory.create_point()
    for dim in range(point.dimensions()):
        out.set(dim, point.get(dim))
    return out
