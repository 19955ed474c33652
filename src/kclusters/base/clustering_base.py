"""
Base class for clustering algorithms in the kclusters package.

Provides the common algorithmic skeleton: seed the clusters, then run a fixed
number of epochs, each one an assignment step followed by an update step.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, List, Union
import torch
from torch import Tensor
import numpy as np
import time

from .errors import EmptyModel
from .interfaces import (
    ClusterRepresentation, AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ClusteringObjective
)
from .data_structures import AssignmentMatrix, EpochState, EngineState
from ..prediction.nearest import NearestCentroidPredictor
from ..utils.validation import (
    validate_data, check_n_clusters, check_n_epochs, check_random_state
)


class BaseClusteringAlgorithm:
    """Base class implementing the fixed-epoch alternating loop.

    Subclasses need to specify:
    - Initialization strategy
    - Assignment strategy
    - Parameter update strategy
    - Objective function

    There is no convergence test: ``fit`` always runs exactly ``n_epochs``
    epochs. Cluster membership is rebuilt every epoch and kept after the
    last one for inspection.
    """

    def __init__(self,
                 n_clusters: int,
                 n_epochs: int = 100,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[torch.device] = None,
                 dtype: torch.dtype = torch.float64):
        """
        Args:
            n_clusters: Number of clusters K
            n_epochs: Number of assign/update epochs to run
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Seed or generator for initialization
            device: Torch device (None for CPU)
            dtype: Floating point type used for data and centroids
        """
        self.n_clusters = n_clusters
        self.n_epochs = n_epochs
        self.verbose = verbose
        self.random_state = random_state
        self.device = torch.device('cpu') if device is None else torch.device(device)
        self.dtype = dtype

        # These will be set by subclasses
        self.representations: Optional[List[ClusterRepresentation]] = None
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.objective: Optional[ClusteringObjective] = None

        # Algorithm state
        self.state_ = EngineState.UNINITIALIZED
        self.fitted_ = False
        self.n_iter_ = 0
        self.history_: List[EpochState] = []
        self.labels_: Optional[Tensor] = None

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.assignment_strategy
        - self.update_strategy
        - self.initialization_strategy
        - self.objective
        """
        pass

    def fit(self, X: Union[Tensor, np.ndarray, list], y=None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            X: (n, d) observations
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        return self._fit(X)

    def fit_predict(self, X: Union[Tensor, np.ndarray, list], y=None) -> Tensor:
        """Fit and return cluster assignments of the training data."""
        self._fit(X)
        return self.labels_

    def predict(self, X: Union[Tensor, np.ndarray, list]) -> Union[int, Tensor]:
        """Predict cluster assignments for new data.

        Args:
            X: (d,) single point or (n, d) batch

        Returns:
            int for a single point, (n,) tensor of cluster indices for a batch

        Raises:
            EmptyModel: If the model is not fitted or has undefined centroids
        """
        if not self.fitted_:
            raise EmptyModel("Model must be fitted before calling predict")

        predictor = NearestCentroidPredictor(self.representations)
        if isinstance(X, Tensor):
            point = X
        else:
            point = torch.as_tensor(np.asarray(X, dtype=np.float64))
        if point.dim() == 1:
            return predictor.predict(point)
        return predictor.predict_batch(point)

    def _fit(self, X: Union[Tensor, np.ndarray, list]) -> 'BaseClusteringAlgorithm':
        """Internal fit method implementing the epoch loop."""
        X = self._validate_data(X)
        n_points, dimension = X.shape

        # Configuration is checked before any work begins
        check_n_clusters(self.n_clusters, n_points)
        check_n_epochs(self.n_epochs)
        self._create_components()
        generator = check_random_state(self.random_state)

        self.fitted_ = False
        self.state_ = EngineState.UNINITIALIZED
        self.n_iter_ = 0
        self.history_ = []
        self.labels_ = None

        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters...")

        start_time = time.time()
        self.representations = self.initialization_strategy.initialize(
            X, self.n_clusters, generator=generator
        )
        self.state_ = EngineState.INITIALIZED

        last_epoch = self.n_epochs - 1
        for epoch in range(self.n_epochs):
            self.state_ = EngineState.ITERATING
            epoch_start_time = time.time()

            # Assignment step
            assignments = self.assignment_strategy.compute_assignments(
                X, self.representations
            )
            assignment_matrix = AssignmentMatrix(assignments, self.n_clusters)

            cluster_indices = []
            for k, representation in enumerate(self.representations):
                indices = assignment_matrix.get_cluster_indices(k)
                representation.extend_members(indices)
                cluster_indices.append(indices)

            # Update step
            for k, representation in enumerate(self.representations):
                self.update_strategy.update(
                    representation,
                    X[cluster_indices[k]],
                    cluster_idx=k,
                    epoch=epoch + 1,
                    data=X,
                    generator=generator
                )

            objective_value = self.objective.compute(
                X, self.representations, assignments
            )

            self.history_.append(EpochState(
                epoch=epoch + 1,
                centroids=self._stack_centroids(),
                counts=assignment_matrix.count_per_cluster(),
                objective_value=float(objective_value),
                empty_clusters=assignment_matrix.empty_clusters()
            ))
            self.n_iter_ = epoch + 1

            epoch_time = time.time() - epoch_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and epoch % 10 == 0):
                print(f"Epoch {epoch + 1:3d}/{self.n_epochs}: "
                      f"objective = {float(objective_value):.6f} ({epoch_time:.3f}s)")

            # Keep the final epoch's membership for inspection
            if epoch != last_epoch:
                for representation in self.representations:
                    representation.clear_members()
            else:
                self.labels_ = assignment_matrix.get_hard()

        total_time = time.time() - start_time
        if self.verbose:
            print(f"Total fitting time: {total_time:.3f}s")

        self.state_ = EngineState.FITTED
        self.fitted_ = True
        return self

    def _validate_data(self, X: Union[Tensor, np.ndarray, list]) -> Tensor:
        """Validate and prepare input data."""
        return validate_data(X, dtype=self.dtype, device=self.device)

    def _stack_centroids(self) -> Tensor:
        return torch.stack([
            rep.get_parameters()['mean']
            for rep in self.representations
        ])

    @property
    def cluster_centers_(self) -> Tensor:
        """Get cluster centroids as a (K, d) tensor."""
        if not self.fitted_:
            raise EmptyModel("Model must be fitted first")
        return self._stack_centroids()

    @property
    def inertia_(self) -> float:
        """Get final objective value."""
        if not self.fitted_:
            raise EmptyModel("Model must be fitted first")
        return self.history_[-1].objective_value

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'n_epochs': self.n_epochs,
            'verbose': self.verbose,
            'random_state': self.random_state,
            'device': self.device,
            'dtype': self.dtype
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        for key, value in params.items():
            setattr(self, key, value)
        return self
