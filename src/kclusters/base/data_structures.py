"""
Core data structures for the kclusters engine.

This module provides the containers the epoch loop produces: hard
assignments with per-cluster lookups, per-epoch snapshots for the fit
history, and the engine lifecycle states.
"""

from enum import Enum
from typing import List
import torch
from torch import Tensor
from dataclasses import dataclass, field


class EngineState(Enum):
    """Lifecycle of a clustering engine."""
    UNINITIALIZED = 'uninitialized'
    INITIALIZED = 'initialized'
    ITERATING = 'iterating'
    FITTED = 'fitted'


class AssignmentMatrix:
    """Hard cluster assignments with per-cluster index lookup.

    Every point carries exactly one cluster index in ``[0, n_clusters)``,
    so the per-cluster index sets always form a partition of the points.
    """

    def __init__(self, assignments: Tensor, n_clusters: int):
        """
        Args:
            assignments: (n,) hard assignments
            n_clusters: Number of clusters K
        """
        self.n_clusters = n_clusters
        self._validate_and_store(assignments)

    def _validate_and_store(self, assignments: Tensor):
        """Validate and store assignments in canonical format."""
        if assignments.dim() != 1:
            raise ValueError(f"Expected 1D assignments, got {assignments.dim()}D")
        if assignments.numel() > 0 and (assignments.min() < 0
                                        or assignments.max() >= self.n_clusters):
            raise ValueError(f"Assignments must lie in [0, {self.n_clusters})")
        self._hard_assignments = assignments.long()

    def get_hard(self) -> Tensor:
        """Get hard assignments."""
        return self._hard_assignments

    def get_cluster_indices(self, cluster_idx: int) -> Tensor:
        """Get indices of points assigned to a specific cluster, in dataset order."""
        return torch.where(self._hard_assignments == cluster_idx)[0]

    def count_per_cluster(self) -> Tensor:
        """Count points per cluster."""
        return torch.bincount(self._hard_assignments, minlength=self.n_clusters)

    def empty_clusters(self) -> List[int]:
        """Indices of clusters that received no points."""
        counts = self.count_per_cluster()
        return [k for k in range(self.n_clusters) if counts[k].item() == 0]


@dataclass
class EpochState:
    """Snapshot of the engine after one epoch.

    Used for inspecting how centroids moved and for debugging empty clusters.
    """
    epoch: int
    centroids: Tensor  # (K, d), cloned after the update step
    counts: Tensor     # (K,) members per cluster in this epoch
    objective_value: float
    empty_clusters: List[int] = field(default_factory=list)
