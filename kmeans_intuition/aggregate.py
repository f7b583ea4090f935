"""
AGGREGATOR — The centroid of a group

    μ = (1/n) Σ xᵢ      (attribute by attribute)

The mean is the point minimizing Σ ||xᵢ - μ||², which is why
the UPDATE step of Lloyd's algorithm can only lower the objective.
"""

import math

from .errors import EmptyClusterError
from .records import IRIS


def centroid(group, schema=IRIS):
    """
    Synthetic centroid of a non-empty group of records.

    Sums use math.fsum (correctly rounded), so the result does not
    depend on the order of the group, and a group of one record
    gives back exactly that record's values.
    """
    rows = [tuple(schema.attributes(record)) for record in group]
    if not rows:
        raise EmptyClusterError("Cannot compute the centroid of an empty group")

    n = len(rows)
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("All records in a group must have the same number of attributes")

    means = [math.fsum(row[j] for row in rows) / n for j in range(width)]
    return schema.build(means)
