"""
Random initialization strategy for clustering algorithms.

Selects random points from the dataset as initial cluster centers.
"""

from typing import List, Optional
import torch
from torch import Tensor

from ..base.errors import InvalidConfiguration
from ..base.interfaces import InitializationStrategy, ClusterRepresentation
from ..representations.centroid import CentroidRepresentation


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    By default draws n_clusters indices uniformly *with* replacement, so two
    clusters may start on the same observation. Pass ``replace=False`` to
    draw distinct observations instead.
    """

    def __init__(self, replace: bool = True):
        """
        Args:
            replace: Sample with replacement (default) or without
        """
        self.replace = replace

    def sample_indices(self, n_points: int, n_clusters: int,
                       generator: Optional[torch.Generator] = None) -> Tensor:
        """Draw the dataset indices that seed each cluster, in cluster order."""
        if n_clusters > n_points:
            raise InvalidConfiguration(f"Cannot create {n_clusters} clusters from {n_points} points")

        if self.replace:
            return torch.randint(n_points, (n_clusters,), generator=generator)
        return torch.randperm(n_points, generator=generator)[:n_clusters]

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> List[ClusterRepresentation]:
        """Initialize clusters with random points.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            generator: Explicit source of randomness

        Returns:
            List of initialized CentroidRepresentations
        """
        n_points, dimension = points.shape
        indices = self.sample_indices(n_points, n_clusters, generator)

        representations = []
        for idx in indices.tolist():
            rep = CentroidRepresentation(dimension, points.device, points.dtype)
            rep.mean = points[idx].clone()
            representations.append(rep)

        return representations
