"""
Clustering evaluation metrics.

Cluster indices carry no meaning of their own, so comparing predictions to
ground-truth labels is reported two ways: raw accuracy (index i is read as
label i) and label-invariant accuracy (the best relabeling of the clusters).
For two clusters the latter is max(score, 1 - score).
"""

from typing import Dict, Any, Union
import torch
from torch import Tensor
import numpy as np
from scipy.optimize import linear_sum_assignment


def _as_labels(labels: Union[Tensor, np.ndarray, list]) -> Tensor:
    if isinstance(labels, Tensor):
        return labels.long().cpu()
    return torch.as_tensor(np.asarray(labels), dtype=torch.long)


def _check_lengths(labels_true: Tensor, labels_pred: Tensor) -> None:
    if labels_true.shape != labels_pred.shape:
        raise ValueError(f"Label shapes differ: {tuple(labels_true.shape)} "
                         f"vs {tuple(labels_pred.shape)}")
    if labels_true.numel() == 0:
        raise ValueError("Cannot score empty label arrays")


def inertia(X: Tensor, labels: Tensor, centers: Tensor) -> float:
    """Compute sum of squared distances to assigned centers (inertia).

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        centers: (k, d) cluster centers

    Returns:
        Total inertia (lower is better)
    """
    total = 0.0
    n_clusters = centers.shape[0]

    for k in range(n_clusters):
        mask = labels == k
        if mask.sum() > 0:
            cluster_points = X[mask]
            distances = torch.sum((cluster_points - centers[k]) ** 2, dim=1)
            total += distances.sum().item()

    return total


def accuracy_score(labels_true: Union[Tensor, np.ndarray, list],
                   labels_pred: Union[Tensor, np.ndarray, list]) -> float:
    """Fraction of points whose predicted index equals the true label."""
    labels_true = _as_labels(labels_true)
    labels_pred = _as_labels(labels_pred)
    _check_lengths(labels_true, labels_pred)
    return (labels_true == labels_pred).float().mean().item()


def contingency_matrix(labels_true: Union[Tensor, np.ndarray, list],
                       labels_pred: Union[Tensor, np.ndarray, list]) -> Tensor:
    """Build contingency matrix for comparing clusterings.

    Args:
        labels_true: (n,) true labels
        labels_pred: (n,) predicted labels

    Returns:
        Contingency matrix C where C[i,j] is the number of samples
        with true label i and predicted label j
    """
    labels_true = _as_labels(labels_true)
    labels_pred = _as_labels(labels_pred)
    _check_lengths(labels_true, labels_pred)
    if (labels_true < 0).any() or (labels_pred < 0).any():
        raise ValueError("Labels must be non-negative")

    n_true = labels_true.max().item() + 1
    n_pred = labels_pred.max().item() + 1

    flat = labels_true * n_pred + labels_pred
    return torch.bincount(flat, minlength=n_true * n_pred).reshape(n_true, n_pred)


def label_invariant_accuracy(labels_true: Union[Tensor, np.ndarray, list],
                             labels_pred: Union[Tensor, np.ndarray, list]) -> float:
    """Best accuracy over one-to-one relabelings of the predicted clusters.

    The best matching between true labels and cluster indices is found with
    the Hungarian algorithm on the contingency matrix. Unmatched labels or
    clusters (when their counts differ) score nothing.
    """
    contingency = contingency_matrix(labels_true, labels_pred).numpy()
    rows, cols = linear_sum_assignment(contingency, maximize=True)
    return float(contingency[rows, cols].sum() / contingency.sum())


def evaluate(model, X: Tensor, labels_true: Union[Tensor, np.ndarray, list]) -> Dict[str, Any]:
    """Score a fitted model's predictions on X against ground truth.

    Returns:
        Dictionary with 'accuracy', 'label_invariant_accuracy', 'inertia'
        and the predicted 'labels'
    """
    labels_pred = model.predict(X)
    X = model._validate_data(X)
    return {
        'accuracy': accuracy_score(labels_true, labels_pred),
        'label_invariant_accuracy': label_invariant_accuracy(labels_true, labels_pred),
        'inertia': inertia(X, labels_pred, model.cluster_centers_),
        'labels': labels_pred,
    }
