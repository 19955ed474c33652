"""
K-means clustering algorithm.

The classic K-means algorithm implemented using the modular framework.
"""

from typing import Optional, List, Union
import torch
from torch import Tensor
import numpy as np

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import ClusterRepresentation, ClusteringObjective
from ..assignments.hard import HardAssignment
from ..initialization.random import RandomInit
from ..initialization.from_previous import FromPreviousInit
from ..updates.mean import MeanUpdater, EMPTY_CLUSTER_POLICIES
from ..utils.validation import check_choice


INIT_METHODS = ('random', 'random-distinct')


class KMeansObjective(ClusteringObjective):
    """K-means objective: sum of squared distances to centroids."""

    def compute(self, points: Tensor, representations: List[ClusterRepresentation],
                assignments: Tensor) -> Tensor:
        """Compute within-cluster sum of squares."""
        total = torch.zeros((), dtype=points.dtype, device=points.device)

        for k, rep in enumerate(representations):
            cluster_points_mask = (assignments == k)
            if cluster_points_mask.any():
                distances = rep.distance_to_point(points[cluster_points_mask])
                total = total + (distances * distances).sum()

        return total


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Partitions data into K clusters by alternating nearest-centroid
    assignment with a mean update, for a fixed number of epochs.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    n_epochs : int, default=100
        Number of epochs to run; there is no early stopping
    init : str or array-like, default='random'
        Initialization method:
        - 'random' : K observations drawn uniformly with replacement
        - 'random-distinct' : K distinct observations
        - array of shape (n_clusters, n_features) : Use as initial centers
    empty_cluster : str, default='keep'
        What to do with a cluster that receives no points in an epoch:
        'keep', 'reseed', 'error' or 'nan'. See MeanUpdater.
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Seed or generator for initialization. An int gives the same
        clustering on every call to fit.
    device : torch.device, optional
        Device for computation
    dtype : torch.dtype, default=torch.float64
        Floating point type for data and centroids

    Attributes
    ----------
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Cluster centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster assignments from the final epoch
    inertia_ : float
        Sum of squared distances to the assigned centroid after the final epoch
    n_iter_ : int
        Number of epochs run (always n_epochs)
    representations : list of CentroidRepresentation
        Clusters with their final-epoch membership
    """

    def __init__(self,
                 n_clusters: int,
                 n_epochs: int = 100,
                 init: Union[str, Tensor, np.ndarray, list] = 'random',
                 empty_cluster: str = 'keep',
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[torch.device] = None,
                 dtype: torch.dtype = torch.float64):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            n_epochs=n_epochs,
            verbose=verbose,
            random_state=random_state,
            device=device,
            dtype=dtype
        )
        self.init = init
        self.empty_cluster = empty_cluster

    def _create_components(self) -> None:
        """Create K-means specific components."""
        check_choice('empty_cluster policy', self.empty_cluster, EMPTY_CLUSTER_POLICIES)

        self.assignment_strategy = HardAssignment()
        self.update_strategy = MeanUpdater(empty_cluster=self.empty_cluster,
                                           warn=self.verbose > 0)

        if isinstance(self.init, str):
            check_choice('init method', self.init, INIT_METHODS)
            self.initialization_strategy = RandomInit(replace=(self.init == 'random'))
        else:
            # Custom initial centers provided
            self.initialization_strategy = FromPreviousInit(self.init)

        self.objective = KMeansObjective()

    def fit(self, X: Union[Tensor, np.ndarray, list], y=None) -> 'KMeans':
        """Fit K-means clustering.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
            Training data
        y : Ignored
            Not used, present for API consistency

        Returns
        -------
        self : KMeans
            Fitted estimator
        """
        super().fit(X, y)
        return self

    def score(self, X: Union[Tensor, np.ndarray, list], y=None) -> float:
        """Opposite of the value of X on the K-means objective.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
            New data
        y : Ignored
            Not used

        Returns
        -------
        score : float
            Negative of sum of squared distances to the nearest centroid
        """
        X = self._validate_data(X)
        labels = self.predict(X)
        return -float(self.objective.compute(X, self.representations, labels))

    def get_params(self, deep: bool = True) -> dict:
        params = super().get_params(deep)
        params.update({'init': self.init, 'empty_cluster': self.empty_cluster})
        return params
