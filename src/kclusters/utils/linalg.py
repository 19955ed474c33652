"""
Vector helpers.

A vector is a 1-D tensor whose length is fixed once created. Every helper
that combines two vectors checks that their dimensions agree and raises
DimensionMismatch otherwise.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.errors import DimensionMismatch


def check_same_dimension(a: Tensor, b: Tensor) -> None:
    """Raise DimensionMismatch unless the last dimensions of a and b agree."""
    if a.shape[-1] != b.shape[-1]:
        raise DimensionMismatch(a.shape[-1], b.shape[-1])


def distance(a: Tensor, b: Tensor) -> float:
    """Euclidean distance sqrt(sum_i (a_i - b_i)^2) between two vectors.

    Args:
        a: (d,) vector
        b: (d,) vector

    Returns:
        Distance as a Python float
    """
    check_same_dimension(a, b)
    diff = a - b
    return torch.sqrt(torch.sum(diff * diff)).item()


def add(a: Tensor, b: Tensor) -> Tensor:
    """Elementwise sum of two vectors of the same dimension."""
    check_same_dimension(a, b)
    return a + b


def scale(a: Tensor, s: float) -> Tensor:
    """Multiply every coordinate of a by s."""
    return a * s


def zeroed(d: int, dtype: torch.dtype = torch.float64,
           device: Optional[torch.device] = None) -> Tensor:
    """All-zero vector of dimension d, used as an accumulator."""
    return torch.zeros(d, dtype=dtype, device=device)


def mean_of(points: Tensor) -> Tensor:
    """Coordinatewise mean of the rows of points.

    Sums into a zeroed accumulator and divides by the row count, so an empty
    input yields NaN coordinates rather than an error.
    """
    total = zeroed(points.shape[1], dtype=points.dtype, device=points.device)
    total = add(total, points.sum(dim=0))
    return total / points.shape[0]
