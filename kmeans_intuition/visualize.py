"""
VISUALIZATION — Records by label, centroids on top

The workshop picture: petal length vs petal width, one color per
species, and the K centroids as big X marks. If k-means worked,
each X sits in the middle of one species.
"""

from collections import defaultdict

import matplotlib.pyplot as plt

from .records import label_of, petal


def plot_records(records, centroids=None, select=petal, ax=None, title='',
                 xlabel='Petal length', ylabel='Petal width', alpha=0.6, s=25):
    """Scatter the records grouped by label; overlay centroids if given."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6.4))

    groups = defaultdict(list)
    for record in records:
        groups[label_of(record)].append(select(record)[:2])

    for label, xy in groups.items():
        xs, ys = zip(*xy)
        ax.scatter(xs, ys, alpha=alpha, s=s, label=str(label))

    if centroids:
        cxy = [select(c)[:2] for c in centroids]
        cx, cy = zip(*cxy)
        ax.scatter(cx, cy, c='red', marker='X', s=200, edgecolors='black',
                   linewidth=2, label='Centroids')

    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.legend()
    ax.grid(True, alpha=0.3)
    return ax


def visualize_clusters(records, model, select=petal, xlabel='Petal length', ylabel='Petal width'):
    """
    Two panels: left = true labels, right = k-means clusters.

    model must be a fitted KMeans.
    """
    fig, axes = plt.subplots(1, 2, figsize=(14, 6))

    plot_records(records, model.cluster_centers_, select=select, ax=axes[0],
                 title='True labels', xlabel=xlabel, ylabel=ylabel)

    for k, cluster in enumerate(model.clusters_):
        xy = [select(r)[:2] for r in cluster.members]
        if xy:
            xs, ys = zip(*xy)
            axes[1].scatter(xs, ys, alpha=0.6, s=25, label=f'Cluster {k}')
    cx, cy = zip(*[select(c)[:2] for c in model.cluster_centers_])
    axes[1].scatter(cx, cy, c='red', marker='X', s=200, edgecolors='black', linewidth=2)
    axes[1].set_xlabel(xlabel)
    axes[1].set_ylabel(ylabel)
    axes[1].set_title(f'K-means, K={len(model.cluster_centers_)}, '
                      f'{model.n_iter_} iterations')
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    plt.suptitle('K-MEANS CLUSTERING\nX marks = centroids', fontsize=12, fontweight='bold')
    plt.tight_layout()
    return fig
