"""Parameter update strategies for clustering algorithms."""

from .mean import MeanUpdater, EMPTY_CLUSTER_POLICIES

__all__ = [
    'MeanUpdater',
    'EMPTY_CLUSTER_POLICIES'
]
