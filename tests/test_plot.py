"""
2D scatter plots of a fitted clustering.
"""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest
import torch

from kclusters import KMeans
from kclusters.visualization import plot_clusters_2d


def test_plot_clusters_2d_returns_axes(two_blobs):
    X, _ = two_blobs
    km = KMeans(n_clusters=2, n_epochs=5, random_state=0).fit(X)

    ax = plot_clusters_2d(X, km.labels_, km.cluster_centers_, title="blobs")
    assert ax.get_title() == "blobs"
    labels = [t.get_text() for t in ax.get_legend().get_texts()]
    assert "Centers" in labels
    plt.close(ax.figure)


def test_plot_uses_given_axes(four_points):
    fig, ax = plt.subplots()
    out = plot_clusters_2d(four_points, torch.tensor([0, 0, 1, 1]), show_legend=False, ax=ax)
    assert out is ax
    assert ax.get_legend() is None
    plt.close(fig)


def test_plot_requires_two_coordinates():
    X = torch.zeros(3, 1, dtype=torch.float64)
    with pytest.raises(ValueError):
        plot_clusters_2d(X, torch.tensor([0, 0, 0]))
