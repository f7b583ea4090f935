import numpy as np
import pytest

from kmeans_intuition.aggregate import centroid
from kmeans_intuition.errors import EmptyClusterError
from kmeans_intuition.records import CENTROID, POINTS, Flower, Point, flower_attributes, is_centroid


def test_centroid_of_single_record_is_that_record(small_iris):
    flower = small_iris[3]
    c = centroid([flower])

    assert flower_attributes(c) == flower_attributes(flower)
    assert c.species == CENTROID
    assert is_centroid(c)
    assert not is_centroid(flower)


def test_centroid_averages_every_attribute(small_iris):
    c = centroid(small_iris[:3])

    expected = np.mean([flower_attributes(f) for f in small_iris[:3]], axis=0)
    np.testing.assert_allclose(flower_attributes(c), expected)
    assert isinstance(c, Flower)


def test_point_centroid():
    c = centroid([Point((0.0, 0.0)), Point((0.0, 1.0))], POINTS)
    assert c == Point((0.0, 0.5), CENTROID)


def test_centroid_is_order_independent():
    rng = np.random.default_rng(7)
    points = [Point(tuple(v)) for v in rng.standard_normal((50, 3)) * 1e3]

    forward = centroid(points, POINTS)
    backward = centroid(points[::-1], POINTS)
    shuffled = centroid([points[i] for i in rng.permutation(50)], POINTS)

    assert forward == backward == shuffled


def test_centroid_of_empty_group_raises():
    with pytest.raises(EmptyClusterError):
        centroid([], POINTS)


def test_centroid_rejects_mixed_shapes():
    with pytest.raises(ValueError):
        centroid([Point((0.0, 0.0)), Point((1.0, 1.0, 1.0))], POINTS)
