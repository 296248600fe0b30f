from __future__ import annotations


class MedianCutError(Exception):
    """Base class for errors raised by the median-cut engine."""


class InvalidDimensionalityError(MedianCutError, ValueError):
    """A point was given a value count that does not match its dimensionality."""


class EmptyInputError(MedianCutError, ValueError):
    """median_cut() was called without any input points."""


class OutOfRangeDimensionError(MedianCutError, IndexError):
    def __init__(self, dim: int, dimensions: int):
        super().__init__(f"dimension {dim} out of range for {dimensions}-D point")
        self.dim = dim
        self.dimensions = dimensions
