"""
DATASETS — Getting records into memory

    read_flowers   : the UCI Iris file (iris.data), one flower per line
                     sepal_length,sepal_width,petal_length,petal_width,species
    make_clustered : synthetic 2-D blobs with known ground truth

The Iris file has 3 species, 50 flowers each. Setosa is far away
from the other two on petal size; versicolor and virginica touch.
https://archive.ics.uci.edu/ml/datasets/Iris/
"""

from pathlib import Path
from typing import List

import numpy as np

from .records import Flower, Point


def parse_flower(line: str) -> Flower:
    items = [item.strip() for item in line.split(',')]
    if len(items) != 5:
        raise ValueError(f"Expected 5 comma-separated fields, got {len(items)}")
    sepal_length, sepal_width, petal_length, petal_width = (float(v) for v in items[:4])
    return Flower(sepal_length, sepal_width, petal_length, petal_width, items[4])


def read_flowers(path) -> List[Flower]:
    """Read an iris.data style file. Blank lines are skipped."""
    flowers = []
    with open(Path(path), encoding='utf-8') as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                flowers.append(parse_flower(line))
            except ValueError as e:
                raise ValueError(f"{path}, line {lineno}: {e}") from e
    return flowers


def make_clustered(n_samples=300, n_clusters=3, random_state=42):
    """
    WHAT: Gaussian blobs in 2-D, one label per blob.
    TESTS: The easy case for k-means: round, separated clusters.

    The label is the true blob ('blob-0', ...). K-means never sees it;
    it is only there to cross-tabulate against afterwards.
    """
    rng = np.random.default_rng(random_state)
    n_per_cluster = n_samples // n_clusters

    points = []
    for i in range(n_clusters):
        # Random cluster center and spread
        center = rng.standard_normal(2) * 5
        spread = rng.random() * 0.5 + 0.3

        for xy in rng.standard_normal((n_per_cluster, 2)) * spread + center:
            points.append(Point((float(xy[0]), float(xy[1])), f'blob-{i}'))

    order = rng.permutation(len(points))
    return [points[i] for i in order]
