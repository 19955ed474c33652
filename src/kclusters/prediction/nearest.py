"""
Nearest-centroid prediction against a fitted set of clusters.
"""

from typing import List, Union
from torch import Tensor

from ..assignments.hard import HardAssignment
from ..base.errors import EmptyModel
from ..base.interfaces import ClusterRepresentation
from ..utils.validation import validate_point


class NearestCentroidPredictor:
    """Classifies points by the index of the closest fitted centroid.

    Ties go to the lowest cluster index, as during fitting. Clusters whose
    centroid became undefined (NaN) are skipped.
    """

    def __init__(self, representations: List[ClusterRepresentation]):
        self.representations = representations
        self._assignment = HardAssignment()

    def _check_model(self) -> None:
        if not self.representations:
            raise EmptyModel("No clusters to predict against; fit the model first")
        # Undefined centroids never win an assignment; only a model with no
        # defined centroid at all cannot predict
        if not any(rep.is_defined() for rep in self.representations):
            raise EmptyModel("Every centroid is undefined; no cluster can be predicted")

    @property
    def dimension(self) -> int:
        self._check_model()
        return self.representations[0].dimension

    def predict_batch(self, X: Tensor) -> Tensor:
        """Predict cluster indices for an (n, d) batch.

        Returns:
            (n,) long tensor of cluster indices
        """
        self._check_model()
        reference = self.representations[0].get_parameters()['mean']
        X = validate_point(X, self.dimension, dtype=reference.dtype, device=reference.device)
        if X.dim() == 1:
            X = X.unsqueeze(0)
        return self._assignment.compute_assignments(X, self.representations)

    def predict(self, point: Union[Tensor, list]) -> int:
        """Predict the cluster index of a single (d,) point."""
        labels = self.predict_batch(point)
        if labels.shape[0] != 1:
            raise ValueError(f"predict expects a single point, got {labels.shape[0]}; "
                             f"use predict_batch")
        return int(labels[0].item())
