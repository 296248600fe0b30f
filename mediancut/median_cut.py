from __future__ import annotations
from typing import List, Optional, Sequence
import heapq
import itertools
import logging

from .cluster import Cluster, ClusterView
from .errors import EmptyInputError, InvalidDimensionalityError
from .factory import PointFactory, VectorPointFactory
from .point import DataPoint, VectorPoint

logger = logging.getLogger(__name__)


class _QueueEntry:
    """Heap slot: cluster ordering first, insertion order among equals."""

    __slots__ = ("cluster", "seq")

    def __init__(self, cluster: Cluster, seq: int):
        self.cluster = cluster
        self.seq = seq

    def __lt__(self, other: "_QueueEntry") -> bool:
        if self.cluster < other.cluster:
            return True
        if other.cluster < self.cluster:
            return False
        return self.seq < other.seq


class ClusterQueue:
    """Priority queue surfacing the cluster with the longest side first."""

    def __init__(self):
        self._heap: List[_QueueEntry] = []
        self._counter = itertools.count()

    def push(self, cluster: Cluster) -> None:
        heapq.heappush(self._heap, _QueueEntry(cluster, next(self._counter)))

    def pop(self) -> Cluster:
        return heapq.heappop(self._heap).cluster

    def peek(self) -> Cluster:
        return self._heap[0].cluster

    def __len__(self) -> int:
        return len(self._heap)

    def drain(self):
        while self._heap:
            yield self.pop()


class MedianCut:
    """
    Median-cut quantizer.

    Starting from one cluster spanning all points, repeatedly split the
    cluster with the longest bounding-box side at the median of that side
    until `desired_levels` clusters exist or nothing is left to split.
    Clusters whose points are all identical (zero longest side) are never
    split, so inputs with many duplicates may yield fewer clusters than
    requested.
    """

    def __init__(self, factory: Optional[PointFactory] = None):
        self.factory = factory

    def _resolve_factory(self, first: DataPoint) -> PointFactory:
        if self.factory is not None:
            return self.factory
        if isinstance(first, VectorPoint):
            return VectorPointFactory.from_point(first)
        raise TypeError(f"no point factory given for {type(first).__name__} points")

    def _validate(self, buffer: List[DataPoint]) -> None:
        if not buffer:
            raise EmptyInputError("median cut needs at least one input point")
        dims = buffer[0].dimensions()
        for i, point in enumerate(buffer):
            if point.dimensions() != dims:
                raise InvalidDimensionalityError(
                    f"point {i} has {point.dimensions()} dimensions, expected {dims}")

    def run(self, points: Sequence[DataPoint], desired_levels: int) -> ClusterQueue:
        buffer = list(points)
        self._validate(buffer)
        factory = self._resolve_factory(buffer[0])
        logger.info("Median cut over %d points (%d-D) into %d levels",
                    len(buffer), buffer[0].dimensions(), desired_levels)

        queue = ClusterQueue()
        whole = Cluster(buffer, factory)
        whole.shrink()
        queue.push(whole)
        while len(queue) < desired_levels and self._splittable(queue.peek()):
            longest = queue.pop()
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Splitting cluster offset=%d count=%d dim=%d side=%s",
                             longest.offset, longest.count, longest.longest_side_index(),
                             longest.longest_side_length())
            other = longest.split()
            longest.shrink()
            other.shrink()
            queue.push(longest)
            queue.push(other)

        if len(queue) < desired_levels:
            logger.info("Stopped at %d of %d levels: no cluster left to split",
                        len(queue), desired_levels)
        return queue

    @staticmethod
    def _splittable(cluster: Cluster) -> bool:
        return cluster.point_count() > 1 and cluster.longest_side_length() > 0

    def median_cut(self, points: Sequence[DataPoint], desired_levels: int) -> List[DataPoint]:
        queue = self.run(points, desired_levels)
        return [cluster.representative_point() for cluster in queue.drain()]

    def clusters(self, points: Sequence[DataPoint], desired_levels: int) -> List[ClusterView]:
        queue = self.run(points, desired_levels)
        return [cluster.view() for cluster in queue.drain()]


def median_cut(points: Sequence[DataPoint],
               desired_levels: int,
               factory: Optional[PointFactory] = None) -> List[DataPoint]:
    """Representative point of each median-cut cluster, in queue drain order."""
    return MedianCut(factory).median_cut(points, desired_levels)


def median_cut_clusters(points: Sequence[DataPoint],
                        desired_levels: int,
                        factory: Optional[PointFactory] = None) -> List[ClusterView]:
    """Like median_cut(), but returns the clusters themselves."""
    return MedianCut(factory).clusters(points, desired_levels)
