"""Prediction against fitted clusters."""

from .nearest import NearestCentroidPredictor

__all__ = [
    'NearestCentroidPredictor'
]
