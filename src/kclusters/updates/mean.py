"""
Mean update strategy for centroid-based clustering.
"""

from typing import Optional
import warnings
import torch
from torch import Tensor

from ..base.errors import EmptyClusterError
from ..base.interfaces import ParameterUpdater, ClusterRepresentation


EMPTY_CLUSTER_POLICIES = ('keep', 'reseed', 'error', 'nan')


class MeanUpdater(ParameterUpdater):
    """Updates cluster representation by computing mean of assigned points.

    When a cluster has no assigned points the mean is undefined, and the
    ``empty_cluster`` policy decides what happens:

    - 'keep': leave the previous centroid in place
    - 'reseed': move the centroid onto a random observation of the dataset
    - 'error': raise EmptyClusterError
    - 'nan': divide by zero anyway; the centroid becomes NaN and the
      cluster never attracts members again
    """

    def __init__(self, empty_cluster: str = 'keep', warn: bool = False):
        """
        Args:
            empty_cluster: Policy for clusters with no members (see class docstring)
            warn: Emit a UserWarning whenever a cluster is found empty
        """
        if empty_cluster not in EMPTY_CLUSTER_POLICIES:
            raise ValueError(f"Unknown empty_cluster policy: {empty_cluster}")
        self.empty_cluster = empty_cluster
        self.warn = warn

    def update(self, representation: ClusterRepresentation,
               points: Tensor,
               cluster_idx: Optional[int] = None,
               epoch: Optional[int] = None,
               data: Optional[Tensor] = None,
               generator: Optional[torch.Generator] = None,
               **kwargs) -> None:
        """Update cluster mean.

        Args:
            representation: Cluster representation to update
            points: Points assigned to this cluster (already filtered)
            cluster_idx: Position of the cluster, for messages
            epoch: Current epoch, for messages
            data: Full (n, d) dataset, required by the 'reseed' policy
            generator: Random source for the 'reseed' policy
        """
        if len(points) > 0:
            representation.update_from_points(points)
            return

        if self.warn:
            warnings.warn(f"Cluster {cluster_idx} received no points in epoch {epoch} "
                          f"(policy: {self.empty_cluster})")

        if self.empty_cluster == 'keep':
            return
        if self.empty_cluster == 'error':
            raise EmptyClusterError(cluster_idx, epoch)
        if self.empty_cluster == 'nan':
            representation.update_from_points(points)
            return

        # reseed
        if data is None:
            raise ValueError("The 'reseed' policy needs the full dataset")
        idx = torch.randint(data.shape[0], (1,), generator=generator).item()
        representation.set_parameters({'mean': data[idx].clone()})
