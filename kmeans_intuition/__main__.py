"""
Run the Iris workshop end to end:

    python -m kmeans_intuition iris.data -k 3 --seed 0 --plot iris_kmeans.png

Reads the flowers, clusters them on petal length / petal width,
prints the centroids and how many flowers of each species landed
in each cluster.
"""

import argparse
import sys

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend for saving figures
import matplotlib.pyplot as plt

from .clusterer import EMPTY_CLUSTER_POLICIES, KMeans
from .datasets import read_flowers
from .errors import EmptyClusterError, InvalidConfigurationError, NonConvergenceError
from .evaluation import crosstab, format_crosstab
from .visualize import visualize_clusters


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='kmeans_intuition',
        description="K-means (Lloyd's algorithm) on the Iris dataset, "
                    "clustering on petal length and petal width.",
    )
    parser.add_argument("data", help="Path to iris.data (comma-separated, one flower per line)")
    parser.add_argument("-k", type=int, default=3, help="Number of clusters (default: 3)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed for initialization (default: 0)")
    parser.add_argument("--max-iter", type=int, default=300, help="Maximum iterations (default: 300)")
    parser.add_argument("--tol", type=float, default=0.0,
                        help="Stop when no centroid attribute moves by this much (default: 0 = exact fixed point)")
    parser.add_argument("--empty-cluster", choices=EMPTY_CLUSTER_POLICIES, default='reseed',
                        help="What to do when a cluster loses all its members (default: reseed)")
    parser.add_argument("--plot", metavar="FILE", help="Save a scatterplot of species vs clusters to FILE")
    parser.add_argument("--quiet", action="store_true", help="Do not print per-iteration progress")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        flowers = read_flowers(args.data)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("=" * 60)
    print(f"K-MEANS on {len(flowers)} flowers, K={args.k}, seed={args.seed}")
    print("=" * 60)

    model = KMeans(n_clusters=args.k, max_iter=args.max_iter, tol=args.tol,
                   random_state=args.seed, empty_cluster=args.empty_cluster,
                   verbose=not args.quiet)
    try:
        model.fit(flowers)
    except InvalidConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (EmptyClusterError, NonConvergenceError) as e:
        print(f"Clustering failed: {e}", file=sys.stderr)
        return 1

    print("\nCentroids:")
    for k, c in enumerate(model.cluster_centers_):
        print(f"  {k}: petal length={c.petal_length:.3f}, petal width={c.petal_width:.3f}")

    print("\nSpecies per cluster:")
    print(format_crosstab(crosstab(flowers, model.cluster_centers_)))

    if args.plot:
        fig = visualize_clusters(flowers, model)
        fig.savefig(args.plot, dpi=100, bbox_inches='tight')
        plt.close(fig)
        print(f"\nSaved: {args.plot}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
