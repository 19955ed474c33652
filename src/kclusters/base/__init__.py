"""Base classes and interfaces for kclusters algorithms."""

from .errors import (
    KClustersError,
    DimensionMismatch,
    InvalidConfiguration,
    EmptyModel,
    EmptyClusterError,
    ParseError
)

from .interfaces import (
    ClusterRepresentation,
    AssignmentStrategy,
    ParameterUpdater,
    DistanceMetric,
    InitializationStrategy,
    ClusteringObjective
)

from .data_structures import (
    AssignmentMatrix,
    EpochState,
    EngineState
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Errors
    'KClustersError',
    'DimensionMismatch',
    'InvalidConfiguration',
    'EmptyModel',
    'EmptyClusterError',
    'ParseError',

    # Interfaces
    'ClusterRepresentation',
    'AssignmentStrategy',
    'ParameterUpdater',
    'DistanceMetric',
    'InitializationStrategy',
    'ClusteringObjective',

    # Data structures
    'AssignmentMatrix',
    'EpochState',
    'EngineState',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
