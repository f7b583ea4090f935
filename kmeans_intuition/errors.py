"""Ways a clustering run can fail."""


class KMeansError(Exception):
    """Base class for every clustering failure."""


class InvalidConfigurationError(KMeansError, ValueError):
    """Parameters rejected before any work starts (bad K, empty input, ...)."""


class EmptyClusterError(KMeansError, RuntimeError):
    """
    A cluster lost all of its members.

    Happens when, after an update, some centroid is no longer the
    nearest one for any record. The mean of nothing is undefined.
    """

    def __init__(self, message, index=None):
        super().__init__(message)
        self.index = index


class NonConvergenceError(KMeansError, RuntimeError):
    """
    The update loop hit max_iter without reaching a fixed point.

    Exact float equality is not guaranteed to ever hold, so the loop
    is bounded. The last centroids are kept for inspection.
    """

    def __init__(self, message, n_iter, centroids):
        super().__init__(message)
        self.n_iter = n_iter
        self.centroids = tuple(centroids)
