"""
Core interfaces for the kclusters engine.

This module defines the abstract base classes that the engine's components
implement, so the epoch loop only talks to these seams.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, List
import torch
from torch import Tensor


class ClusterRepresentation(ABC):
    """Abstract base class for cluster representations.

    A representation owns the cluster's parameters (for K-means, just a
    centroid) together with the indices of the observations currently
    assigned to it.
    """

    @abstractmethod
    def distance_to_point(self, points: Tensor) -> Tensor:
        """Compute distance from points to this cluster representation.

        Args:
            points: (n, d) tensor of data points

        Returns:
            (n,) tensor of distances
        """
        pass

    @abstractmethod
    def update_from_points(self, points: Tensor, **kwargs) -> None:
        """Update cluster parameters given assigned points.

        Args:
            points: (m, d) tensor of assigned points
            **kwargs: Additional update-specific parameters
        """
        pass

    @abstractmethod
    def get_parameters(self) -> Dict[str, Tensor]:
        """Return all parameters defining this cluster representation."""
        pass

    @abstractmethod
    def set_parameters(self, params: Dict[str, Tensor]) -> None:
        """Set cluster parameters from dictionary."""
        pass

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Ambient dimension of the data."""
        pass

    @property
    @abstractmethod
    def members(self) -> List[int]:
        """Dataset indices currently assigned to this cluster."""
        pass

    @abstractmethod
    def is_defined(self) -> bool:
        """Whether the cluster parameters are usable (no NaN or inf)."""
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""

    @abstractmethod
    def compute_assignments(self, points: Tensor,
                            representations: List[ClusterRepresentation],
                            **kwargs) -> Tensor:
        """Compute cluster assignments for points.

        Args:
            points: (n, d) tensor of data points
            representations: List of K cluster representations

        Returns:
            (n,) tensor of cluster indices
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for cluster parameter update strategies."""

    @abstractmethod
    def update(self, representation: ClusterRepresentation,
               points: Tensor,
               **kwargs) -> None:
        """Update cluster parameters given the points assigned to it.

        Args:
            representation: Cluster representation to update
            points: (m, d) points assigned to this cluster (m may be 0)
            **kwargs: Update-specific parameters
        """
        pass


class DistanceMetric(ABC):
    """Abstract base class for distance computations."""

    @abstractmethod
    def compute(self, points: Tensor, representation: ClusterRepresentation,
                **kwargs) -> Tensor:
        """Compute distances from points to cluster.

        Args:
            points: (n, d) tensor of points
            representation: Cluster representation

        Returns:
            (n,) tensor of distances
        """
        pass


class InitializationStrategy(ABC):
    """Abstract base class for cluster initialization strategies."""

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> List[ClusterRepresentation]:
        """Initialize cluster representations.

        Args:
            points: (n, d) tensor of data points
            n_clusters: Number of clusters to initialize
            generator: Explicit source of randomness

        Returns:
            List of initialized cluster representations with empty membership
        """
        pass


class ClusteringObjective(ABC):
    """Abstract base class for clustering objective functions."""

    @abstractmethod
    def compute(self, points: Tensor,
                representations: List[ClusterRepresentation],
                assignments: Tensor) -> Tensor:
        """Compute objective function value.

        Args:
            points: (n, d) tensor of data points
            representations: List of cluster representations
            assignments: (n,) hard cluster assignments

        Returns:
            Scalar objective value
        """
        pass
