"""
kclusters: fixed-epoch K-means clustering on PyTorch tensors.

The package splits K-means into small components:
- Euclidean distance between vectors and centroids
- Centroid clusters that track their member indices per epoch
- Nearest-centroid hard assignment (lowest index wins ties)
- Mean updates with an explicit empty-cluster policy
- Random (with replacement) or fixed initial centroids

Example usage:
    >>> import torch
    >>> from kclusters import KMeans
    >>>
    >>> X = torch.tensor([[0., 0.], [0., 1.], [10., 10.], [10., 11.]])
    >>>
    >>> kmeans = KMeans(n_clusters=2, n_epochs=10, random_state=0)
    >>> kmeans.fit(X)
    >>>
    >>> kmeans.predict(torch.tensor([1., 1.]))
"""

__version__ = '0.1.0'

from .algorithms.kmeans import KMeans

from .base import (
    KClustersError,
    DimensionMismatch,
    InvalidConfiguration,
    EmptyModel,
    EmptyClusterError,
    ParseError,
    AssignmentMatrix,
    EpochState,
    EngineState
)

from .prediction import NearestCentroidPredictor
from .io import read_csv, read_labels
from .experiments import run_repeated
from .utils import (
    distance,
    accuracy_score,
    label_invariant_accuracy,
    evaluate
)

__all__ = [
    # Algorithms
    'KMeans',
    'NearestCentroidPredictor',

    # Errors
    'KClustersError',
    'DimensionMismatch',
    'InvalidConfiguration',
    'EmptyModel',
    'EmptyClusterError',
    'ParseError',

    # Core data structures
    'AssignmentMatrix',
    'EpochState',
    'EngineState',

    # Data and reporting
    'read_csv',
    'read_labels',
    'run_repeated',
    'distance',
    'accuracy_score',
    'label_invariant_accuracy',
    'evaluate',

    # Version
    '__version__'
]
