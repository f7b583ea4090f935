"""
K-means from scratch: Lloyd's algorithm on records.

    from kmeans_intuition import KMeans, read_flowers

    flowers = read_flowers('iris.data')
    model = KMeans(n_clusters=3, random_state=0).fit(flowers)
    model.cluster_centers_
"""

from .aggregate import centroid
from .clusterer import (
    EMPTY_CLUSTER_POLICIES,
    KMeans,
    assign,
    assign_labels,
    clusterize,
    has_converged,
    init_centroids,
    nearest,
    update_centroids,
)
from .datasets import make_clustered, read_flowers
from .errors import (
    EmptyClusterError,
    InvalidConfigurationError,
    KMeansError,
    NonConvergenceError,
)
from .evaluation import clustering_accuracy, crosstab, inertia
from .metric import SquaredEuclidean, distance, petal_distance, point_distance
from .records import (
    CENTROID,
    IRIS,
    POINTS,
    Cluster,
    Flower,
    Point,
    Schema,
    flower_attributes,
    is_centroid,
    label_of,
    petal,
    point_attributes,
)

__version__ = "0.1.0"
