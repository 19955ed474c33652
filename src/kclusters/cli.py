"""
Command line entry point: cluster a data file and score it against labels.

Example:
    kclusters breast_data.csv breast_truth.csv -k 2 --epochs 100 --runs 10 --seed 0
"""

import argparse
import sys
from typing import List, Optional

from .algorithms.kmeans import INIT_METHODS
from .base.errors import KClustersError
from .experiments.repeated import run_repeated
from .io.csv_source import read_csv, read_labels
from .updates.mean import EMPTY_CLUSTER_POLICIES

LABEL_NOTE = ("K-means is unsupervised, so cluster indices are arbitrary: the raw accuracy\n"
              "may be the mirror image of the expected one (read it as 1 - score for two\n"
              "clusters). The label-invariant accuracy takes the best relabeling.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='kclusters',
        description='Cluster rows of a delimited file with K-means and compare '
                    'the clusters with ground-truth labels.',
    )
    parser.add_argument('data', help='Delimited file, one observation per line')
    parser.add_argument('truth', help='Delimited file whose first column is the true label')
    parser.add_argument('-k', '--clusters', type=int, default=2,
                        help='Number of clusters (default: 2)')
    parser.add_argument('--epochs', type=int, default=100,
                        help='Epochs per run (default: 100)')
    parser.add_argument('--runs', type=int, default=1,
                        help='Number of independently seeded runs (default: 1)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Base seed; run i uses seed + i (default: fresh seeds)')
    parser.add_argument('--init', choices=INIT_METHODS, default='random',
                        help='Initial centroid sampling (default: random, with replacement)')
    parser.add_argument('--empty-cluster', choices=EMPTY_CLUSTER_POLICIES, default='keep',
                        help='Policy for clusters that lose all members (default: keep)')
    parser.add_argument('--delimiter', default=',', help="Token separator (default: ',')")
    parser.add_argument('--plot', metavar='FILE', default=None,
                        help='Save a 2D scatter plot of the best run to FILE')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Print one line per run (repeat for fitting progress)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        X = read_csv(args.data, delimiter=args.delimiter)
        y = read_labels(args.truth, delimiter=args.delimiter)
        if len(y) != len(X):
            print(f"error: {args.data} has {len(X)} rows but {args.truth} has {len(y)} labels",
                  file=sys.stderr)
            return 1

        result = run_repeated(
            X, y,
            n_runs=args.runs,
            n_clusters=args.clusters,
            n_epochs=args.epochs,
            seed=args.seed,
            init=args.init,
            empty_cluster=args.empty_cluster,
            verbose=args.verbose,
        )
    except (FileNotFoundError, ValueError, KClustersError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(LABEL_NOTE)
    summary = result.summary()
    if args.runs == 1:
        run = result.runs[0]
        print(f"Result: {run.accuracy:.5f}")
        print(f"Label-invariant result: {run.label_invariant_accuracy:.5f}")
    else:
        print(f"Runs: {summary['n_runs']}")
        print(f"Mean result: {summary['accuracy_mean']:.5f} (std {summary['accuracy_std']:.5f})")
        print(f"Mean label-invariant result: {summary['label_invariant_accuracy_mean']:.5f}")
        print(f"Best run: {summary['best_run'] + 1} (inertia {summary['best_inertia']:.3f})")

    if args.plot:
        if X.shape[1] < 2:
            print("error: plotting needs at least two coordinates per observation",
                  file=sys.stderr)
            return 1
        _save_plot(X, result.best_model, args)

    return 0


def _save_plot(X, model, args) -> None:
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    from .visualization.plot_clusters import plot_clusters_2d

    ax = plot_clusters_2d(X, model.labels_, model.cluster_centers_,
                          title=f'K-means (k={args.clusters}, epochs={args.epochs})')
    ax.figure.savefig(args.plot)
    plt.close(ax.figure)
    print(f"Plot saved to {args.plot}")


if __name__ == '__main__':
    sys.exit(main())
