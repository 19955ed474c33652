"""
Input validation utilities.

Provides functions for validating data and parameters before clustering.
Configuration problems raise InvalidConfiguration before any work begins;
inconsistent row lengths raise DimensionMismatch.
"""

from typing import Optional, Union, Sequence
import torch
from torch import Tensor
import numpy as np

from ..base.errors import DimensionMismatch, InvalidConfiguration


def _check_ragged(rows: Sequence) -> None:
    """Raise DimensionMismatch if nested rows differ in length."""
    expected = None
    for row in rows:
        length = len(row) if hasattr(row, '__len__') else 1
        if expected is None:
            expected = length
        elif length != expected:
            raise DimensionMismatch(expected, length, what="observation")


def validate_data(X: Union[Tensor, np.ndarray, list],
                  dtype: torch.dtype = torch.float64,
                  device: Optional[torch.device] = None,
                  ensure_min_samples: int = 1,
                  ensure_finite: bool = True) -> Tensor:
    """Validate and convert input data to a 2-D tensor.

    Args:
        X: Input data (tensor, numpy array, or list of rows)
        dtype: Target data type
        device: Target device
        ensure_min_samples: Minimum number of samples required
        ensure_finite: Whether to check for inf/nan

    Returns:
        (n, d) tensor

    Raises:
        DimensionMismatch: If rows have different lengths
        ValueError: If the data is not 2-D or contains non-finite values
    """
    if isinstance(X, Tensor):
        X = X.to(dtype=dtype, device=device)
    elif isinstance(X, np.ndarray):
        if X.dtype == object:
            _check_ragged(X)
            X = np.asarray(X.tolist(), dtype=np.float64)
        X = torch.from_numpy(np.asarray(X, dtype=np.float64)).to(dtype=dtype, device=device)
    elif isinstance(X, (list, tuple)):
        _check_ragged(X)
        X = torch.tensor(X, dtype=dtype, device=device)
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if X.dim() != 2:
        raise ValueError(f"Expected 2D array, got {X.dim()}D")

    n_samples, n_features = X.shape
    if n_samples < ensure_min_samples:
        raise ValueError(f"Found {n_samples} samples, but need at least "
                         f"{ensure_min_samples}")
    if n_features < 1:
        raise ValueError("Observations must have at least one coordinate")

    if ensure_finite:
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def validate_point(point: Union[Tensor, np.ndarray, list],
                   dimension: int,
                   dtype: torch.dtype = torch.float64,
                   device: Optional[torch.device] = None) -> Tensor:
    """Validate a single point or a batch of points against a model dimension.

    Returns a tensor with the same rank as the input (1-D or 2-D).
    """
    if isinstance(point, Tensor):
        point = point.to(dtype=dtype, device=device)
    else:
        point = torch.as_tensor(np.asarray(point, dtype=np.float64), dtype=dtype, device=device)

    if point.dim() not in (1, 2):
        raise ValueError(f"Expected 1D point or 2D batch, got {point.dim()}D")
    if point.shape[-1] != dimension:
        raise DimensionMismatch(dimension, point.shape[-1], what="point")
    return point


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters: 1 <= n_clusters <= n_samples.

    Raises:
        InvalidConfiguration: If invalid
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, (int, np.integer)):
        raise InvalidConfiguration(f"n_clusters must be int, got {type(n_clusters).__name__}")

    if n_clusters < 1:
        raise InvalidConfiguration(f"n_clusters must be positive, got {n_clusters}")

    if n_clusters > n_samples:
        raise InvalidConfiguration(f"n_clusters ({n_clusters}) cannot be larger than "
                                   f"n_samples ({n_samples})")


def check_n_epochs(n_epochs: int) -> None:
    """Validate the epoch budget.

    Raises:
        InvalidConfiguration: If n_epochs is not a positive integer
    """
    if isinstance(n_epochs, bool) or not isinstance(n_epochs, (int, np.integer)):
        raise InvalidConfiguration(f"n_epochs must be int, got {type(n_epochs).__name__}")
    if n_epochs < 1:
        raise InvalidConfiguration(f"n_epochs must be at least 1, got {n_epochs}")


def check_choice(name: str, value: str, choices: Sequence[str]) -> None:
    """Validate a string option against its allowed values."""
    if value not in choices:
        raise InvalidConfiguration(f"Unknown {name} {value!r}; expected one of {list(choices)}")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create generator from random state.

    Args:
        random_state: Seed, generator, or None for a freshly seeded generator

    Returns:
        Generator owned by the caller; never the process-wide default
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")
