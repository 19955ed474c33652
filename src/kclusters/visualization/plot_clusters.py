"""
Cluster visualization utilities.

Scatter plots of 2D clustering results with the fitted centroids on top.
"""

from typing import Optional, List
from torch import Tensor
import matplotlib.pyplot as plt
import numpy as np


def plot_clusters_2d(X: Tensor,
                     labels: Tensor,
                     centers: Optional[Tensor] = None,
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List[str]] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Observations with more than two coordinates are drawn using their first
    two coordinates.

    Args:
        X: (n, d) data points, d >= 2
        labels: (n,) cluster labels
        centers: Optional (k, d) cluster centers
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centers
        center_size: Size of center markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    X_np = X.detach().cpu().numpy()
    labels_np = labels.detach().cpu().numpy()
    if X_np.ndim != 2 or X_np.shape[1] < 2:
        raise ValueError(f"Expected (n, d>=2) data, got shape {X_np.shape}")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    unique_labels = np.unique(labels_np)
    n_clusters = len(unique_labels)

    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i % cmap.N) for i in range(n_clusters)]

    for i, label in enumerate(unique_labels):
        mask = labels_np == label
        ax.scatter(X_np[mask, 0], X_np[mask, 1],
                   c=[colors[i % len(colors)]],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {label}')

    if centers is not None:
        centers_np = centers.detach().cpu().numpy()
        ax.scatter(centers_np[:, 0], centers_np[:, 1],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centers',
                   zorder=10)

    ax.set_xlabel('Feature 1')
    ax.set_ylabel('Feature 2')

    if title:
        ax.set_title(title)

    if show_legend:
        ax.legend()

    return ax
