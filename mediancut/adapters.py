from __future__ import annotations
from typing import Iterable, List, Optional, Sequence
import logging
import numpy as np
import pandas as pd

from .cluster import ClusterView
from .errors import EmptyInputError, InvalidDimensionalityError
from .factory import SCALAR_FACTORY, VectorPointFactory
from .median_cut import median_cut, median_cut_clusters
from .point import DataPoint, ScalarPoint, VectorPoint

logger = logging.getLogger(__name__)


# ----------------------------- numpy / pandas --------------------------------

def points_from_array(array, dtype=None) -> List[VectorPoint]:
    """
    Wrap the rows of an (N, D) array as points. A 1-D array is read as N
    one-dimensional points.
    """
    arr = np.asarray(array)
    if dtype is not None:
        dtype = np.dtype(dtype)
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise InvalidDimensionalityError(f"expected a 1-D or 2-D array, got shape {arr.shape}")
    if arr.shape[0] > 0 and arr.shape[1] == 0:
        raise InvalidDimensionalityError("points need at least one dimension")
    return [VectorPoint(row, dtype=dtype, dimensions=arr.shape[1]) for row in arr]


def points_from_frame(frame: pd.DataFrame,
                      columns: Optional[Sequence[str]] = None,
                      dtype=None) -> List[VectorPoint]:
    """One point per row; each selected column is one dimension."""
    if columns is not None:
        missing = [c for c in columns if c not in frame.columns]
        if missing:
            raise ValueError(f"DataFrame missing columns: {missing}")
        frame = frame[list(columns)]
    return points_from_array(frame.to_numpy(), dtype=dtype)


def points_to_array(points: Iterable[DataPoint]) -> np.ndarray:
    points = list(points)
    if not points:
        raise EmptyInputError("no points to convert")
    if isinstance(points[0], VectorPoint):
        return np.vstack([p.values() for p in points])
    return np.array([[p.get(d) for d in range(p.dimensions())] for p in points])


def quantize_array(array, desired_levels: int, dtype=None) -> np.ndarray:
    """Palette of median-cut representatives for the rows of `array`, shape (K, D)."""
    points = points_from_array(array, dtype=dtype)
    if not points:
        raise EmptyInputError("cannot quantize an empty array")
    factory = VectorPointFactory.from_point(points[0])
    palette = points_to_array(median_cut(points, desired_levels, factory))
    logger.info("Quantized %d rows into a palette of %d", len(points), len(palette))
    return palette


# ----------------------------- Scalar wrapper --------------------------------

def median_cut_scalars(values: Iterable[float], desired_levels: int) -> List[ClusterView]:
    """
    Median cut over plain floats (single float32 dimension). Returns the
    clusters so callers can read each one's min, max and mean.
    """
    points = [ScalarPoint(v) for v in values]
    return median_cut_clusters(points, desired_levels, SCALAR_FACTORY)
