"""Assignment strategies for clustering algorithms."""

from .hard import HardAssignment, distance_matrix

__all__ = [
    'HardAssignment',
    'distance_matrix'
]
