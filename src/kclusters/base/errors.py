"""
Exception hierarchy for the kclusters package.

Each error also derives from the builtin exception a caller would naturally
catch (ValueError for bad input, RuntimeError for bad model state).
"""

from typing import Optional


class KClustersError(Exception):
    """Base class for all kclusters errors."""


class DimensionMismatch(KClustersError, ValueError):
    """Two vectors (or a vector and a dataset) of different dimension were combined."""

    def __init__(self, expected: int, got: int, what: str = "vector"):
        self.expected = expected
        self.got = got
        super().__init__(f"Dimension mismatch for {what}: expected {expected}, got {got}")


class InvalidConfiguration(KClustersError, ValueError):
    """Clustering parameters are invalid for the given dataset."""


class EmptyModel(KClustersError, RuntimeError):
    """Prediction was requested from a model with no usable centroids."""


class EmptyClusterError(KClustersError, RuntimeError):
    """A cluster received no members during an epoch (raised only on request)."""

    def __init__(self, cluster_idx: int, epoch: Optional[int] = None):
        self.cluster_idx = cluster_idx
        self.epoch = epoch
        where = f" in epoch {epoch}" if epoch is not None else ""
        super().__init__(f"Cluster {cluster_idx} has no members{where}")


class ParseError(KClustersError, ValueError):
    """A data file contains a token that is not a real number."""

    def __init__(self, path: str, line_number: int, token: str):
        self.path = path
        self.line_number = line_number
        self.token = token
        super().__init__(f"{path}:{line_number}: cannot parse {token!r} as a number")
