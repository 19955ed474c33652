"""Distance metrics for clustering algorithms."""

from .euclidean import EuclideanDistance
from ..utils.linalg import distance

__all__ = [
    'EuclideanDistance',
    'distance'
]
