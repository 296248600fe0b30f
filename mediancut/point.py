from __future__ import annotations
from typing import Optional, Protocol, Sequence, Tuple, Union
import math
import numpy as np

from .errors import InvalidDimensionalityError, OutOfRangeDimensionError

Scalar = Union[int, float]


# ----------------------------- Point API -------------------------------------

class DataPoint(Protocol):
    """Capability contract the median-cut engine needs from a point."""
    def dimensions(self) -> int: ...
    def get(self, dim: int) -> Scalar: ...
    def set(self, dim: int, value: Scalar) -> None: ...
    def move_to_minimum(self) -> None: ...
    def move_to_maximum(self) -> None: ...
    def difference(self, dim: int, other: "DataPoint") -> Scalar: ...
    def set_min(self, dim: int, other: "DataPoint") -> None: ...
    def set_max(self, dim: int, other: "DataPoint") -> None: ...


def domain_bounds(dtype) -> Tuple[Scalar, Scalar]:
    """(minimum, maximum) representable value of a numeric numpy dtype."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return int(info.min), int(info.max)
    if np.issubdtype(dtype, np.floating):
        info = np.finfo(dtype)
        return float(info.min), float(info.max)
    raise TypeError(f"unsupported point dtype: {dtype}")


def is_discrete(dtype) -> bool:
    return bool(np.issubdtype(np.dtype(dtype), np.integer))


# ----------------------------- Vector points ---------------------------------

class VectorPoint:
    """
    Fixed-dimension point stored in a 1-D numpy array.

    The dtype decides the scalar domain: its iinfo/finfo limits are the
    sentinels used by move_to_minimum()/move_to_maximum(). Values come back
    out of get() as plain Python scalars so differences of small integer
    dtypes never wrap.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Sequence[Scalar], dtype=None, dimensions: Optional[int] = None):
        raw = np.asarray(values)
        if raw.ndim != 1:
            raise InvalidDimensionalityError(f"point values must be 1-D, got shape {raw.shape}")
        if dimensions is not None and raw.size != dimensions:
            raise InvalidDimensionalityError(
                f"expected {dimensions} values, got {raw.size}")
        if raw.size == 0:
            raise InvalidDimensionalityError("point needs at least one dimension")
        dtype = np.dtype(dtype) if dtype is not None else raw.dtype
        domain_bounds(dtype)  # rejects non-numeric dtypes
        converted = raw.astype(dtype)
        if is_discrete(dtype) and not np.array_equal(converted, raw):
            raise ValueError(f"values {raw.tolist()} not representable as {dtype}")
        self._values = converted

    @classmethod
    def zeros(cls, dimensions: int, dtype) -> "VectorPoint":
        point = cls.__new__(cls)
        point._values = np.zeros(dimensions, dtype=dtype)
        return point

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    def dimensions(self) -> int:
        return int(self._values.size)

    def _check(self, dim: int) -> int:
        if not 0 <= dim < self._values.size:
            raise OutOfRangeDimensionError(dim, self.dimensions())
        return dim

    def get(self, dim: int) -> Scalar:
        return self._values[self._check(dim)].item()

    def set(self, dim: int, value: Scalar) -> None:
        self._check(dim)
        if is_discrete(self._values.dtype):
            lo, hi = domain_bounds(self._values.dtype)
            if not math.isfinite(value) or value != int(value) or not lo <= value <= hi:
                raise ValueError(f"value {value} not representable as {self._values.dtype}")
        self._values[dim] = value

    def move_to_minimum(self) -> None:
        self._values[:] = domain_bounds(self._values.dtype)[0]

    def move_to_maximum(self) -> None:
        self._values[:] = domain_bounds(self._values.dtype)[1]

    def difference(self, dim: int, other: DataPoint) -> Scalar:
        return self.get(dim) - other.get(dim)

    def set_min(self, dim: int, other: DataPoint) -> None:
        value = other.get(dim)
        if self.get(dim) > value:
            self._values[dim] = value

    def set_max(self, dim: int, other: DataPoint) -> None:
        value = other.get(dim)
        if self.get(dim) < value:
            self._values[dim] = value

    def values(self) -> np.ndarray:
        return self._values.copy()

    def copy(self) -> "VectorPoint":
        point = VectorPoint.__new__(type(self))
        point._values = self._values.copy()
        return point

    def __len__(self) -> int:
        return self.dimensions()

    def __eq__(self, other) -> bool:
        if not isinstance(other, VectorPoint):
            return NotImplemented
        return self.dtype == other.dtype and bool(np.array_equal(self._values, other._values))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values.tolist()}, dtype={self.dtype})"


class Point3Byte(VectorPoint):
    """Three signed 8-bit dimensions, e.g. an RGB-like sample."""

    DIMENSIONS = 3
    DTYPE = np.int8

    def __init__(self, values: Optional[Sequence[int]] = None):
        if values is None:
            values = [0] * self.DIMENSIONS
        super().__init__(values, dtype=self.DTYPE, dimensions=self.DIMENSIONS)


class ScalarPoint(VectorPoint):
    """A single float32 dimension."""

    DIMENSIONS = 1
    DTYPE = np.float32

    def __init__(self, value: Union[Scalar, Sequence[Scalar]] = 0.0):
        values = [value] if np.ndim(value) == 0 else value
        super().__init__(values, dtype=self.DTYPE, dimensions=self.DIMENSIONS)

    def __float__(self) -> float:
        return float(self._values[0])
