"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest cluster based on the distance metric.
"""

from typing import List
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, ClusterRepresentation


def distance_matrix(points: Tensor, representations: List[ClusterRepresentation]) -> Tensor:
    """(n, K) distances from every point to every representation.

    Undefined (NaN) distances are reported as +inf so that such a cluster
    never wins a comparison.
    """
    n_points = points.shape[0]
    n_clusters = len(representations)

    distances = torch.empty(n_points, n_clusters, device=points.device, dtype=points.dtype)
    for k, representation in enumerate(representations):
        distances[:, k] = representation.distance_to_point(points)

    return torch.nan_to_num(distances, nan=float('inf'))


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest cluster.

    Each point is assigned to exactly one cluster based on minimum distance.
    On ties the cluster with the lowest index wins, matching a scan that only
    replaces the running best on a strictly smaller distance.
    """

    def compute_assignments(self, points: Tensor,
                            representations: List[ClusterRepresentation],
                            **kwargs) -> Tensor:
        """Assign each point to nearest cluster.

        Args:
            points: (n, d) data points
            representations: List of K cluster representations
            **kwargs: Ignored for basic hard assignment

        Returns:
            (n,) tensor of cluster indices
        """
        distances = distance_matrix(points, representations)
        # argmin returns the first minimal index
        return torch.argmin(distances, dim=1)
