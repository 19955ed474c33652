"""
Base representation class with common functionality for all cluster representations.
"""

from typing import List
import torch
from torch import Tensor

from ..base.errors import DimensionMismatch
from ..base.interfaces import ClusterRepresentation


class BaseRepresentation(ClusterRepresentation):
    """Base class providing the centroid storage and membership bookkeeping."""

    def __init__(self, dimension: int, device: torch.device,
                 dtype: torch.dtype = torch.float64):
        """
        Args:
            dimension: Ambient dimension d of the data
            device: Torch device for tensor allocation
            dtype: Floating point type of the centroid
        """
        self._dimension = dimension
        self._device = device
        self._dtype = dtype
        self._mean = torch.zeros(dimension, device=device, dtype=dtype)
        self._members: List[int] = []

    @property
    def dimension(self) -> int:
        """Ambient dimension of the data."""
        return self._dimension

    @property
    def mean(self) -> Tensor:
        """Cluster mean/centroid."""
        return self._mean

    @mean.setter
    def mean(self, value: Tensor):
        """Set cluster mean."""
        if value.shape != (self._dimension,):
            raise DimensionMismatch(self._dimension, value.shape[-1] if value.dim() else 0,
                                    what="centroid")
        self._mean = value.to(device=self._device, dtype=self._dtype)

    @property
    def members(self) -> List[int]:
        """Dataset indices assigned in the current epoch, in assignment order."""
        return self._members

    @property
    def n_members(self) -> int:
        return len(self._members)

    def extend_members(self, indices: Tensor) -> None:
        """Append a batch of dataset indices."""
        self._members.extend(int(i) for i in indices.tolist())

    def clear_members(self) -> None:
        """Forget the current membership; the centroid is kept."""
        self._members = []

    def is_defined(self) -> bool:
        """Whether every coordinate of the centroid is finite."""
        return bool(torch.isfinite(self._mean).all())

    def _check_points_shape(self, points: Tensor):
        """Validate shape of input points."""
        if points.dim() != 2:
            raise ValueError(f"Expected 2D tensor, got {points.dim()}D")
        if points.shape[1] != self._dimension:
            raise DimensionMismatch(self._dimension, points.shape[1])
