import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from kmeans_intuition.records import Flower, Point  # noqa: E402


@pytest.fixture
def four_points():
    """Two tight pairs, far apart: (0,0),(0,1) and (10,0),(10,1)."""
    return [Point((0.0, 0.0), 'left'), Point((0.0, 1.0), 'left'),
            Point((10.0, 0.0), 'right'), Point((10.0, 1.0), 'right')]


@pytest.fixture
def small_iris():
    return [
        Flower(5.1, 3.5, 1.4, 0.2, 'Iris-setosa'),
        Flower(4.9, 3.0, 1.3, 0.2, 'Iris-setosa'),
        Flower(4.7, 3.2, 1.5, 0.3, 'Iris-setosa'),
        Flower(6.3, 3.3, 5.5, 2.0, 'Iris-virginica'),
        Flower(6.5, 3.0, 5.8, 2.2, 'Iris-virginica'),
        Flower(7.2, 3.6, 6.0, 2.5, 'Iris-virginica'),
    ]


IRIS_LINES = """5.1,3.5,1.4,0.2,Iris-setosa
4.9,3.0,1.3,0.2,Iris-setosa
4.7,3.2,1.5,0.3,Iris-setosa
6.3,3.3,5.5,2.0,Iris-virginica
6.5,3.0,5.8,2.2,Iris-virginica
7.2,3.6,6.0,2.5,Iris-virginica

"""


@pytest.fixture
def iris_file(tmp_path):
    path = tmp_path / 'iris.data'
    path.write_text(IRIS_LINES)
    return path
