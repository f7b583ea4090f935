"""
EVALUATION — Did the clusters find the species?

K-means never sees labels. Afterwards we can ask, for each
cluster, which labels ended up in it (a cross-tabulation), and
how good the best one-to-one cluster→label matching is.
"""

from collections import Counter
from itertools import permutations

import numpy as np

from .clusterer import assign_labels
from .metric import petal_distance
from .records import label_of


def crosstab(records, centroids, metric=petal_distance):
    """
    For every centroid: how many records of each label are nearest to it.

    Returns a list of (centroid, Counter) in centroid order.
    """
    labels = assign_labels(centroids, records, metric)
    counts = [Counter() for _ in centroids]
    for record, k in zip(records, labels):
        counts[k][label_of(record)] += 1
    return list(zip(centroids, counts))


def inertia(records, centroids, metric=petal_distance):
    """Within-cluster sum of (squared) distances to the nearest centroid."""
    distances = metric.pairwise(records, centroids)
    return float(np.sum(np.min(distances, axis=1)))


def clustering_accuracy(y_true, y_pred):
    """
    Accuracy under the best cluster→label permutation.

    Clusters have arbitrary indices, so we try every matching.
    Only sensible for small numbers of clusters.
    """
    y_true = list(y_true)
    y_pred = [int(p) for p in y_pred]
    if len(y_true) != len(y_pred):
        raise ValueError("y_true and y_pred must have the same length")
    if not y_true:
        return 0.0

    classes = sorted(set(y_true), key=str)
    clusters = sorted(set(y_pred))
    # Pad so every cluster gets a (possibly dummy) label
    candidates = classes + [None] * max(0, len(clusters) - len(classes))

    best = 0
    for perm in permutations(candidates, len(clusters)):
        mapping = dict(zip(clusters, perm))
        hits = sum(1 for t, p in zip(y_true, y_pred) if mapping[p] == t)
        best = max(best, hits)
    return best / len(y_true)


def format_crosstab(table):
    """Human-readable cross-tabulation, one line per cluster."""
    lines = []
    for k, (centroid, counts) in enumerate(table):
        total = sum(counts.values())
        detail = ', '.join(f'{label}: {n}' for label, n in sorted(counts.items(), key=lambda kv: str(kv[0])))
        lines.append(f"Cluster {k} ({total} records) {centroid}: {detail}")
    return '\n'.join(lines)
