"""
RECORDS — What k-means actually clusters

===============================================================
TWO CONTRACTS, NOT ONE
===============================================================

A record has several numeric attributes, but the algorithm looks
at them through two different windows:

    AGGREGATOR:  averages EVERY numeric attribute
                 (a centroid is a complete synthetic record)
    METRIC:      compares only the CLUSTERING attributes
                 (for Iris: petal length and petal width)

So instead of hard-coding field access, each window is a plain
function record -> tuple of floats. A Schema bundles the
aggregator's window with a way to build a centroid back from a
tuple of averages. The metric's window lives in metric.py.

A centroid has the same shape as a record. Its label is the
sentinel CENTROID, marking it as synthetic (not observed).
===============================================================
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

CENTROID = "Centroid"


@dataclass(frozen=True)
class Flower:
    """One Iris observation (or a centroid, if species == CENTROID)."""
    sepal_length: float
    sepal_width: float
    petal_length: float
    petal_width: float
    species: str

    @classmethod
    def from_attributes(cls, values):
        sepal_length, sepal_width, petal_length, petal_width = values
        return cls(float(sepal_length), float(sepal_width),
                   float(petal_length), float(petal_width), CENTROID)


@dataclass(frozen=True)
class Point:
    """A record with an arbitrary numeric attribute vector."""
    values: Tuple[float, ...]
    label: Optional[str] = None

    @classmethod
    def from_attributes(cls, values):
        return cls(tuple(float(v) for v in values), CENTROID)


def flower_attributes(flower: Flower) -> Tuple[float, ...]:
    return (flower.sepal_length, flower.sepal_width,
            flower.petal_length, flower.petal_width)


def petal(flower: Flower) -> Tuple[float, ...]:
    """The two dimensions the Iris workshop clusters on."""
    return (flower.petal_length, flower.petal_width)


def point_attributes(point: Point) -> Tuple[float, ...]:
    return point.values


def label_of(record) -> Optional[str]:
    """Ground-truth label, whichever record type carries it."""
    if isinstance(record, Flower):
        return record.species
    return getattr(record, 'label', None)


def is_centroid(record) -> bool:
    return label_of(record) == CENTROID


@dataclass(frozen=True)
class Schema:
    """
    Aggregator contract for one record type.

    attributes : record -> all numeric attributes
    build      : tuple of attribute values -> synthetic centroid
    """
    attributes: Callable[[object], Sequence[float]]
    build: Callable[[Sequence[float]], object]


IRIS = Schema(attributes=flower_attributes, build=Flower.from_attributes)
POINTS = Schema(attributes=point_attributes, build=Point.from_attributes)


@dataclass(frozen=True)
class Cluster:
    """A centroid together with the records currently closest to it."""
    centroid: object
    members: Tuple[object, ...]

    def __len__(self):
        return len(self.members)


# One assignment pass: K clusters, in centroid order.
ClusterAssignment = Tuple[Cluster, ...]
