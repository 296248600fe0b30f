"""
Tests for cluster module.
"""
import numpy as np
import pytest

from mediancut.cluster import Cluster, ClusterView
from mediancut.factory import BYTE3_FACTORY, SCALAR_FACTORY, VectorPointFactory
from mediancut.point import Point3Byte, ScalarPoint, VectorPoint


def _scalars(*values):
    return [ScalarPoint(v) for v in values]


def _random_buffer(n=60, seed=42):
    rng = np.random.default_rng(seed)
    return [Point3Byte(row) for row in rng.integers(-100, 100, size=(n, 3))]


def test_cluster_spans_whole_buffer():
    """Test default range covers the buffer."""
    cluster = Cluster(_scalars(1.0, 2.0, 3.0), SCALAR_FACTORY)

    assert cluster.offset == 0
    assert cluster.point_count() == 3


def test_cluster_rejects_empty_range():
    """Test a cluster needs at least one point."""
    with pytest.raises(ValueError):
        Cluster(_scalars(1.0), SCALAR_FACTORY, offset=1, count=0)


def test_corners_start_at_sentinels():
    """Test corners are at the domain limits before shrink()."""
    cluster = Cluster([Point3Byte([1, 2, 3])], BYTE3_FACTORY)

    assert cluster.min_corner == Point3Byte([-128, -128, -128])
    assert cluster.max_corner == Point3Byte([127, 127, 127])


def test_shrink_is_tight_and_sound():
    """Test every point lies inside the box and each bound is attained."""
    buffer = _random_buffer()
    cluster = Cluster(buffer, BYTE3_FACTORY)
    cluster.shrink()

    arr = np.array([p.values() for p in buffer], dtype=int)
    for d in range(3):
        assert cluster.min_corner.get(d) == arr[:, d].min()
        assert cluster.max_corner.get(d) == arr[:, d].max()


def test_shrink_on_sub_range():
    """Test shrink only looks at the cluster's own slice."""
    buffer = _scalars(100.0, 1.0, 2.0, 3.0, -100.0)
    cluster = Cluster(buffer, SCALAR_FACTORY, offset=1, count=3)
    cluster.shrink()

    assert cluster.min_corner.get(0) == 1.0
    assert cluster.max_corner.get(0) == 3.0


def test_longest_side_index():
    """Test the widest dimension is chosen."""
    buffer = [Point3Byte([0, 0, 0]), Point3Byte([5, 20, 10])]
    cluster = Cluster(buffer, BYTE3_FACTORY)
    cluster.shrink()

    assert cluster.longest_side_index() == 1
    assert cluster.longest_side_length() == 20


def test_longest_side_tie_prefers_lowest_dimension():
    """Test ties between dimensions go to the first one."""
    buffer = [Point3Byte([0, 0, 0]), Point3Byte([3, 10, 10])]
    cluster = Cluster(buffer, BYTE3_FACTORY)
    cluster.shrink()

    assert cluster.longest_side_index() == 1

    buffer = [Point3Byte([0, 0, 0]), Point3Byte([7, 7, 7])]
    cluster = Cluster(buffer, BYTE3_FACTORY)
    cluster.shrink()

    assert cluster.longest_side_index() == 0


def test_split_even_count():
    """Test splitting four points gives two halves along the sorted axis."""
    buffer = _scalars(30.0, 0.0, 20.0, 10.0)
    cluster = Cluster(buffer, SCALAR_FACTORY)
    cluster.shrink()
    other = cluster.split()

    assert cluster.offset == 0 and cluster.point_count() == 2
    assert other.offset == 2 and other.point_count() == 2
    assert [p.get(0) for p in buffer] == [0.0, 10.0, 20.0, 30.0]
    assert other.buffer is buffer


def test_split_odd_count_keeps_ceiling_half():
    """Test the first half keeps (count + 1) // 2 points."""
    buffer = _scalars(4.0, 1.0, 3.0, 2.0, 5.0)
    cluster = Cluster(buffer, SCALAR_FACTORY)
    cluster.shrink()
    other = cluster.split()

    assert cluster.point_count() == 3
    assert other.point_count() == 2
    assert [p.get(0) for p in cluster.points()] == [1.0, 2.0, 3.0]
    assert [p.get(0) for p in other.points()] == [4.0, 5.0]


def test_split_sorts_on_longest_dimension():
    """Test the slice is ordered by the widest dimension."""
    buffer = [
        Point3Byte([0, 50, 1]),
        Point3Byte([1, -50, 2]),
        Point3Byte([2, 0, 3]),
        Point3Byte([3, 10, 4]),
    ]
    cluster = Cluster(buffer, BYTE3_FACTORY)
    cluster.shrink()
    other = cluster.split()

    assert [p.get(1) for p in cluster.points()] == [-50, 0]
    assert [p.get(1) for p in other.points()] == [10, 50]


def test_split_resets_corners():
    """Test the kept half has sentinel corners until shrunk again."""
    cluster = Cluster(_scalars(0.0, 1.0, 2.0), SCALAR_FACTORY)
    cluster.shrink()
    cluster.split()

    assert cluster.min_corner.get(0) < -1e30
    assert cluster.max_corner.get(0) > 1e30


def test_split_singleton_rejected():
    """Test a single point cannot be split."""
    cluster = Cluster(_scalars(1.0), SCALAR_FACTORY)
    cluster.shrink()

    with pytest.raises(ValueError):
        cluster.split()


def test_split_preserves_multiset():
    """Test splitting only permutes the buffer."""
    buffer = _random_buffer()
    before = sorted(tuple(p.values().tolist()) for p in buffer)
    cluster = Cluster(buffer, BYTE3_FACTORY)
    cluster.shrink()
    other = cluster.split()
    cluster.shrink()
    other.shrink()

    after = sorted(tuple(p.values().tolist()) for p in cluster.points() + other.points())
    assert after == before
    assert len(buffer) == 60


def test_representative_point_integer_truncates_toward_zero():
    """Test integer means use truncating division."""
    cluster = Cluster([Point3Byte([1, -1, 10]), Point3Byte([2, -2, 10])], BYTE3_FACTORY)

    rep = cluster.representative_point()

    assert isinstance(rep, Point3Byte)
    assert rep == Point3Byte([1, -1, 10])


def test_representative_point_float():
    """Test float means are not truncated."""
    cluster = Cluster(_scalars(1.0, 2.0), SCALAR_FACTORY)

    assert cluster.representative_point().get(0) == 1.5


def test_representative_point_matches_numpy_mean():
    """Test the mean over a random slice."""
    buffer = _random_buffer()
    cluster = Cluster(buffer, BYTE3_FACTORY, offset=10, count=25)

    arr = np.array([p.values() for p in buffer[10:35]], dtype=int)
    expected = np.trunc(arr.sum(axis=0) / 25).astype(int)
    rep = cluster.representative_point()

    assert [rep.get(d) for d in range(3)] == expected.tolist()


def test_representative_is_new_point():
    """Test the representative is not one of the buffer points."""
    buffer = _scalars(7.0)
    cluster = Cluster(buffer, SCALAR_FACTORY)

    assert cluster.representative_point() is not buffer[0]


def test_ordering_longest_side_first():
    """Test the cluster with the longest side sorts first."""
    wide = Cluster(_scalars(0.0, 100.0), SCALAR_FACTORY)
    narrow = Cluster(_scalars(0.0, 1.0), SCALAR_FACTORY)
    wide.shrink()
    narrow.shrink()

    assert wide < narrow
    assert not narrow < wide
    assert sorted([narrow, wide])[0] is wide


def test_ordering_equal_lengths():
    """Test equal side lengths are neither less nor greater."""
    a = Cluster(_scalars(0.0, 5.0), SCALAR_FACTORY)
    b = Cluster(_scalars(10.0, 15.0), SCALAR_FACTORY)
    a.shrink()
    b.shrink()

    assert not a < b
    assert not b < a


def test_view_snapshot():
    """Test the read-only view carries corners, mean and members."""
    buffer = [VectorPoint([0, 10], dtype=np.int32), VectorPoint([4, 20], dtype=np.int32)]
    cluster = Cluster(buffer, VectorPointFactory(2, np.int32))
    cluster.shrink()
    view = cluster.view()

    assert isinstance(view, ClusterView)
    assert view.point_count == 2
    assert view.min_point == VectorPoint([0, 10], dtype=np.int32)
    assert view.max_point == VectorPoint([4, 20], dtype=np.int32)
    assert view.representative_point == VectorPoint([2, 15], dtype=np.int32)
    assert view.min_point is not cluster.min_corner
    with pytest.raises(AttributeError):
        view.points = ()
