"""
Euclidean distance metric for clustering.

The distance used by K-means both for assignment and for prediction.
"""

import torch
from torch import Tensor

from ..base.errors import DimensionMismatch
from ..base.interfaces import DistanceMetric, ClusterRepresentation
from ..utils.linalg import distance


class EuclideanDistance(DistanceMetric):
    """Euclidean distance metric.

    Computes ||x - μ|| where μ is the cluster centroid.
    """

    def __init__(self, squared: bool = False):
        """
        Args:
            squared: If True, return squared distances.
                    If False (default), return actual Euclidean distances.
        """
        self.squared = squared

    def compute(self, points: Tensor, representation: ClusterRepresentation,
                **kwargs) -> Tensor:
        """Compute Euclidean distances from points to cluster centroid.

        Args:
            points: (n, d) tensor of points
            representation: Cluster representation with 'mean' parameter

        Returns:
            (n,) tensor of distances
        """
        params = representation.get_parameters()
        if 'mean' not in params:
            raise ValueError("Euclidean distance requires representation with 'mean' parameter")

        center = params['mean']
        if points.shape[1] != center.shape[0]:
            raise DimensionMismatch(center.shape[0], points.shape[1])

        diff = points - center.unsqueeze(0)
        squared_distances = torch.sum(diff * diff, dim=1)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)

    def between(self, a: Tensor, b: Tensor) -> float:
        """Distance between two single vectors."""
        d = distance(a, b)
        return d * d if self.squared else d
