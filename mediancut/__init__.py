"""
Median-cut clustering over n-dimensional points.

Splits a point set into the requested number of clusters by repeatedly
halving the cluster with the longest bounding-box side at its median, and
returns the mean of each cluster as its representative.
"""
__version__ = "0.1.0"

from .errors import (
    MedianCutError,
    InvalidDimensionalityError,
    EmptyInputError,
    OutOfRangeDimensionError,
)
from .point import (
    DataPoint,
    VectorPoint,
    Point3Byte,
    ScalarPoint,
)
from .factory import (
    PointFactory,
    VectorPointFactory,
    BYTE3_FACTORY,
    SCALAR_FACTORY,
)
from .cluster import (
    Cluster,
    ClusterView,
)
from .median_cut import (
    MedianCut,
    median_cut,
    median_cut_clusters,
)
from .adapters import (
    points_from_array,
    points_from_frame,
    points_to_array,
    quantize_array,
    median_cut_scalars,
)

__all__ = [
    "MedianCutError",
    "InvalidDimensionalityError",
    "EmptyInputError",
    "OutOfRangeDimensionError",
    "DataPoint",
    "VectorPoint",
    "Point3Byte",
    "ScalarPoint",
    "PointFactory",
    "VectorPointFactory",
    "BYTE3_FACTORY",
    "SCALAR_FACTORY",
    "Cluster",
    "ClusterView",
    "MedianCut",
    "median_cut",
    "median_cut_clusters",
    "points_from_array",
    "points_from_frame",
    "points_to_array",
    "quantize_array",
    "median_cut_scalars",
]
