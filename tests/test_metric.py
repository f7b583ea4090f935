import numpy as np
import pytest

from kmeans_intuition.metric import SquaredEuclidean, distance, petal_distance, point_distance
from kmeans_intuition.records import Flower, Point, point_attributes


def test_petal_distance_value():
    a = Flower(5.1, 3.5, 1.4, 0.2, 'Iris-setosa')
    b = Flower(6.3, 3.3, 5.5, 2.0, 'Iris-virginica')
    expected = (1.4 - 5.5) ** 2 + (0.2 - 2.0) ** 2
    assert distance(a, b) == pytest.approx(expected)


def test_distance_is_symmetric_and_zero_on_self(small_iris):
    for a in small_iris:
        assert distance(a, a) == 0.0
        for b in small_iris:
            assert distance(a, b) == distance(b, a)
            assert distance(a, b) >= 0.0


def test_distance_ignores_sepal_attributes():
    a = Flower(5.1, 3.5, 1.4, 0.2, 'Iris-setosa')
    b = Flower(7.0, 2.0, 1.4, 0.2, 'Iris-versicolor')
    assert petal_distance(a, b) == 0.0


def test_no_square_root_is_taken():
    assert point_distance(Point((0.0, 0.0)), Point((3.0, 4.0))) == 25.0


def test_weights_scale_each_attribute():
    metric = SquaredEuclidean(point_attributes, weights=[1.0, 0.0])
    assert metric(Point((0.0, 0.0)), Point((3.0, 4.0))) == 9.0

    metric = SquaredEuclidean(point_attributes, weights=[2.0, 0.5])
    assert metric(Point((0.0, 0.0)), Point((3.0, 4.0))) == 26.0


def test_invalid_weights_raise():
    with pytest.raises(ValueError):
        SquaredEuclidean(point_attributes, weights=[1.0, -1.0])
    with pytest.raises(ValueError):
        SquaredEuclidean(point_attributes, weights=[np.nan, 1.0])

    metric = SquaredEuclidean(point_attributes, weights=[1.0, 1.0, 1.0])
    with pytest.raises(ValueError):
        metric(Point((0.0, 0.0)), Point((1.0, 1.0)))


def test_pairwise_matches_scalar_distance(small_iris):
    centroids = small_iris[:2]
    D = petal_distance.pairwise(small_iris, centroids)

    assert D.shape == (len(small_iris), 2)
    for i, record in enumerate(small_iris):
        for k, c in enumerate(centroids):
            assert D[i, k] == pytest.approx(petal_distance(record, c))
