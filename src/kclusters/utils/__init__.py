"""Utility functions for kclusters algorithms."""

from .linalg import (
    check_same_dimension,
    distance,
    add,
    scale,
    zeroed,
    mean_of
)

from .metrics import (
    inertia,
    accuracy_score,
    contingency_matrix,
    label_invariant_accuracy,
    evaluate
)

from .validation import (
    validate_data,
    validate_point,
    check_n_clusters,
    check_n_epochs,
    check_choice,
    check_random_state
)

__all__ = [
    # Vectors
    'check_same_dimension',
    'distance',
    'add',
    'scale',
    'zeroed',
    'mean_of',

    # Metrics
    'inertia',
    'accuracy_score',
    'contingency_matrix',
    'label_invariant_accuracy',
    'evaluate',

    # Validation
    'validate_data',
    'validate_point',
    'check_n_clusters',
    'check_n_epochs',
    'check_choice',
    'check_random_state'
]
