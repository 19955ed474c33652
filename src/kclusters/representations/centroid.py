"""
Centroid representation for K-means clustering.

The simplest cluster representation - a mean point in space plus the
indices of the observations currently assigned to it.
"""

from typing import Dict
import torch
from torch import Tensor

from .base_representation import BaseRepresentation
from ..distances.euclidean import EuclideanDistance
from ..utils.linalg import mean_of


class CentroidRepresentation(BaseRepresentation):
    """Cluster represented by a single centroid point."""

    _metric = EuclideanDistance()

    def distance_to_point(self, points: Tensor) -> Tensor:
        """Compute Euclidean distance from points to centroid.

        Args:
            points: (n, d) tensor of data points

        Returns:
            (n,) tensor of Euclidean distances
        """
        self._check_points_shape(points)
        return self._metric.compute(points, self)

    def update_from_points(self, points: Tensor, **kwargs) -> None:
        """Set centroid to the coordinatewise mean of assigned points.

        With no points the mean is undefined and the centroid becomes NaN;
        callers that want another outcome handle empty clusters first.

        Args:
            points: (m, d) tensor of assigned points
        """
        self._check_points_shape(points)
        self._mean = mean_of(points.to(dtype=self._dtype, device=self._device))

    def get_parameters(self) -> Dict[str, Tensor]:
        """Return parameters defining this centroid."""
        return {'mean': self._mean.clone()}

    def set_parameters(self, params: Dict[str, Tensor]) -> None:
        """Set centroid parameters."""
        if 'mean' in params:
            self.mean = params['mean']

    def __repr__(self) -> str:
        return (f"CentroidRepresentation(dimension={self._dimension}, "
                f"n_members={self.n_members}, mean={self._mean.tolist()})")
