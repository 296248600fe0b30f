from __future__ import annotations
from typing import Protocol
import numpy as np

from .point import DataPoint, Point3Byte, ScalarPoint, VectorPoint, domain_bounds, is_discrete
from .errors import InvalidDimensionalityError


class PointFactory(Protocol):
    """Creates fresh points for cluster corners and representatives."""
    def create_point(self) -> DataPoint: ...
    def is_discrete(self) -> bool: ...


class VectorPointFactory:
    """Zero-initialized VectorPoints of one dimensionality and dtype."""

    def __init__(self, dimensions: int, dtype=np.float64, point_cls=VectorPoint):
        if int(dimensions) < 1:
            raise InvalidDimensionalityError(f"dimensions must be >= 1, got {dimensions}")
        domain_bounds(dtype)
        self.dimensions = int(dimensions)
        self.dtype = np.dtype(dtype)
        self.point_cls = point_cls

    @classmethod
    def from_point(cls, point: VectorPoint) -> "VectorPointFactory":
        return cls(point.dimensions(), point.dtype, type(point))

    def create_point(self) -> VectorPoint:
        return self.point_cls.zeros(self.dimensions, self.dtype)

    def is_discrete(self) -> bool:
        return is_discrete(self.dtype)

    def __repr__(self) -> str:
        return f"VectorPointFactory(dimensions={self.dimensions}, dtype={self.dtype})"


BYTE3_FACTORY = VectorPointFactory(Point3Byte.DIMENSIONS, Point3Byte.DTYPE, Point3Byte)
SCALAR_FACTORY = VectorPointFactory(ScalarPoint.DIMENSIONS, ScalarPoint.DTYPE, ScalarPoint)
