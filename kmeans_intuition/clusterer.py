"""
K-MEANS CLUSTERER — Lloyd's algorithm, run to a fixed point

===============================================================
THE LOOP
===============================================================

    INITIALIZE:  pick K distinct records as the first centroids
    ASSIGN:      every record → nearest centroid (K clusters)
    AGGREGATE:   every cluster → its mean (K new centroids)
    CHECK:       new centroids == previous centroids?
                     yes → CONVERGED, stop
                     no  → back to ASSIGN

States:  Initializing → Assigning ⇄ Aggregating → Converged

===============================================================
WHEN IS IT "DONE"?
===============================================================

tol = 0 (default): stop when every new centroid is EXACTLY equal
    (attribute by attribute) to one of the previous centroids.
    The fixed point is then stable: assigning again gives the
    same clusters, which give the same means.

tol > 0: stop when no attribute of any centroid moved by tol or
    more. Useful because exact float equality is not guaranteed
    to ever hold.

Either way the loop is bounded by max_iter. Running out of
iterations is a FAILURE (NonConvergenceError), never a silent
"best effort" answer.

===============================================================
EMPTY CLUSTERS
===============================================================

After an update a centroid can end up nearest to no record.
The mean of nothing is undefined, so one of three policies
applies (empty_cluster=...):

    'reseed' : replace that centroid by a random record
               (drawn from the run's own seeded generator)
               An iteration that reseeds never counts as converged.
    'drop'   : forget the cluster, continue with K-1
    'raise'  : EmptyClusterError
===============================================================
"""

import numpy as np

from .aggregate import centroid
from .errors import EmptyClusterError, InvalidConfigurationError, NonConvergenceError
from .metric import petal_distance, point_distance
from .records import IRIS, Cluster

EMPTY_CLUSTER_POLICIES = ('reseed', 'drop', 'raise')


def init_centroids(records, k, rng, schema=IRIS):
    """
    Sample K distinct records without replacement.

    Initial centroids are real observations, rebuilt as synthetic
    centroids so every centroid in a run has the same provenance.
    """
    indices = rng.choice(len(records), size=k, replace=False)
    return tuple(schema.build(schema.attributes(records[i])) for i in indices)


def nearest(record, centroids, metric=petal_distance):
    """Index of the closest centroid (first one wins a tie)."""
    return int(np.argmin(metric.pairwise([record], centroids)[0]))


def assign_labels(centroids, records, metric=petal_distance):
    """Nearest-centroid index for every record."""
    # argmin returns the FIRST minimum: ties go to the centroid
    # that comes first, so runs are reproducible.
    return np.argmin(metric.pairwise(records, centroids), axis=1)


def assign(centroids, records, metric=petal_distance):
    """
    ASSIGN step: group the records by nearest centroid.

    Returns one Cluster per centroid, in centroid order. Every
    record lands in exactly one cluster. A cluster may come back
    empty; the update step decides what that means.
    """
    labels = assign_labels(centroids, records, metric)
    groups = [[] for _ in centroids]
    for record, label in zip(records, labels):
        groups[label].append(record)
    return tuple(Cluster(c, tuple(g)) for c, g in zip(centroids, groups))


def update_centroids(assignment, records, rng, schema=IRIS, empty_cluster='reseed'):
    """
    AGGREGATE step: one new centroid per cluster.

    Returns (previous, updated, reseeded). previous and updated are
    aligned index by index; they only differ in length from the
    assignment under the 'drop' policy. reseeded holds the indices
    (into updated) of centroids replaced by a random record.
    """
    previous = []
    updated = []
    reseeded = []
    for k, cluster in enumerate(assignment):
        if cluster.members:
            previous.append(cluster.centroid)
            updated.append(centroid(cluster.members, schema))
        elif empty_cluster == 'reseed':
            reseeded.append(len(updated))
            previous.append(cluster.centroid)
            record = records[int(rng.integers(len(records)))]
            updated.append(schema.build(schema.attributes(record)))
        elif empty_cluster == 'drop':
            continue
        else:
            raise EmptyClusterError(f"Cluster {k} has no members", index=k)

    if not updated:
        raise EmptyClusterError("Every cluster was dropped")
    return tuple(previous), tuple(updated), tuple(reseeded)


def centroid_shift(previous, updated, schema=IRIS):
    """Largest change of any attribute of any centroid."""
    old = np.array([schema.attributes(c) for c in previous], dtype=float)
    new = np.array([schema.attributes(c) for c in updated], dtype=float)
    return float(np.max(np.abs(new - old)))


def has_converged(previous, updated, schema=IRIS, tol=0.0):
    """
    CHECK step.

    tol == 0: every updated centroid exactly matches SOME previous
              centroid (order does not matter).
    tol > 0:  the largest per-attribute move is below tol.
    """
    if tol > 0:
        return centroid_shift(previous, updated, schema) < tol
    seen = {tuple(schema.attributes(c)) for c in previous}
    return all(tuple(schema.attributes(c)) in seen for c in updated)


class KMeans:
    """
    K-Means Clustering — Lloyd's algorithm on records.

    - Hard assignment: each record belongs to exactly one cluster
    - Distance: squared Euclidean over the metric's attributes
    - Centroids: mean over ALL numeric attributes of the schema
    """

    def __init__(self, n_clusters=3, max_iter=300, tol=0.0, random_state=0,
                 empty_cluster='reseed', schema=IRIS, metric=None, verbose=False):
        """
        Parameters:
        -----------
        n_clusters : int
            Number of clusters K
        max_iter : int
            Maximum number of assign/update iterations
        tol : float
            0 → stop on exact fixed point; > 0 → stop when no
            centroid attribute moves by tol or more
        random_state : int
            Seed of the generator used for initialization (and reseeding)
        empty_cluster : str
            'reseed', 'drop' or 'raise'
        schema : Schema
            How to read all attributes of a record and build a centroid
        metric : callable or None
            Distance with a .pairwise method. None → petal distance
            for Iris flowers, distance over all values for points
        verbose : bool
            Print one line per iteration
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.tol = tol
        self.random_state = random_state
        self.empty_cluster = empty_cluster
        self.schema = schema
        self.metric = metric
        self.verbose = verbose

        # Attributes set after fit
        self.cluster_centers_ = None  # Final centroids (K,)
        self.clusters_ = None         # Final ClusterAssignment
        self.labels_ = None           # Cluster index per record (n_samples,)
        self.inertia_ = None          # Within-cluster sum of distances
        self.n_iter_ = None           # Iterations until convergence
        self.stop_reason_ = None      # 'exact' or 'tolerance'

    def _metric(self):
        if self.metric is not None:
            return self.metric
        return petal_distance if self.schema is IRIS else point_distance

    def _check_params(self, n_samples):
        if n_samples == 0:
            raise InvalidConfigurationError("Cannot cluster an empty collection of records")
        if isinstance(self.n_clusters, bool) or not isinstance(self.n_clusters, (int, np.integer)):
            raise InvalidConfigurationError(f"n_clusters must be an integer, got {self.n_clusters!r}")
        if self.n_clusters <= 0:
            raise InvalidConfigurationError(f"n_clusters must be positive, got {self.n_clusters}")
        if self.n_clusters > n_samples:
            raise InvalidConfigurationError(f"n_clusters ({self.n_clusters}) must not exceed "
                                            f"the number of records ({n_samples})")
        if isinstance(self.max_iter, bool) or not isinstance(self.max_iter, (int, np.integer)):
            raise InvalidConfigurationError(f"max_iter must be an integer, got {self.max_iter!r}")
        if self.max_iter < 1:
            raise InvalidConfigurationError(f"max_iter must be at least 1, got {self.max_iter}")
        if isinstance(self.tol, bool) or not isinstance(self.tol, (int, float, np.number)) \
                or not np.isfinite(self.tol):
            raise InvalidConfigurationError(f"tol must be a finite number, got {self.tol!r}")
        if self.tol < 0:
            raise InvalidConfigurationError(f"tol must be non-negative, got {self.tol}")
        if self.empty_cluster not in EMPTY_CLUSTER_POLICIES:
            raise InvalidConfigurationError(f"Unknown empty_cluster policy: {self.empty_cluster}")

    def fit(self, records):
        """
        Run Lloyd's algorithm until the centroids stop changing.

        Raises NonConvergenceError if max_iter is reached first, and
        EmptyClusterError if the final centroids leave a cluster empty.
        """
        records = list(records)
        self._check_params(len(records))
        metric = self._metric()
        rng = np.random.default_rng(self.random_state)

        # Initializing
        centroids = init_centroids(records, self.n_clusters, rng, self.schema)

        for iteration in range(1, self.max_iter + 1):
            # Assigning
            assignment = assign(centroids, records, metric)

            # Aggregating
            previous, updated, reseeded = update_centroids(assignment, records, rng,
                                                           self.schema, self.empty_cluster)
            # A reseeded centroid can coincide with an old one; that is
            # not a fixed point, the cluster it replaced was empty.
            converged = not reseeded and has_converged(previous, updated, self.schema, self.tol)
            centroids = updated

            if self.verbose:
                shift = centroid_shift(previous, updated, self.schema)
                print(f"  iter {iteration:>3}: {len(updated)} clusters, max shift={shift:.6g}")

            if converged:
                self._finish(records, centroids, metric, iteration)
                return self

        raise NonConvergenceError(f"No fixed point after {self.max_iter} iterations",
                                  n_iter=self.max_iter, centroids=centroids)

    def _finish(self, records, centroids, metric, n_iter):
        distances = metric.pairwise(records, centroids)
        labels = np.argmin(distances, axis=1)
        sizes = np.bincount(labels, minlength=len(centroids))
        if np.any(sizes == 0):
            k = int(np.flatnonzero(sizes == 0)[0])
            raise EmptyClusterError(f"Cluster {k} has no members in the final assignment "
                                    f"(duplicate or unreachable centroid)", index=k)

        self.cluster_centers_ = tuple(centroids)
        self.clusters_ = tuple(
            Cluster(c, tuple(r for r, label in zip(records, labels) if label == k))
            for k, c in enumerate(centroids)
        )
        self.labels_ = labels
        self.inertia_ = float(np.sum(distances[np.arange(len(records)), labels]))
        self.n_iter_ = n_iter
        self.stop_reason_ = 'tolerance' if self.tol > 0 else 'exact'

        if self.verbose:
            print(f"Converged ({self.stop_reason_}) after {n_iter} iterations, "
                  f"inertia={self.inertia_:.4f}")

    def predict(self, records):
        """Assign new records to the nearest fitted centroid."""
        if self.cluster_centers_ is None:
            raise RuntimeError("KMeans instance is not fitted yet")
        return assign_labels(self.cluster_centers_, list(records), self._metric())

    def fit_predict(self, records):
        """Fit and return cluster labels."""
        self.fit(records)
        return self.labels_


def clusterize(k, records, seed=0, **options):
    """
    Cluster the records into k groups and return the final centroids.

    Extra keyword options go to KMeans (max_iter, tol, empty_cluster,
    schema, metric, verbose).
    """
    return KMeans(n_clusters=k, random_state=seed, **options).fit(records).cluster_centers_
