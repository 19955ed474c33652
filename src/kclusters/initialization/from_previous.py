"""
Initialization from previous solution or custom centers.

Useful for warm starts or when the starting centroids must be fixed.
"""

from typing import List, Optional, Union
import torch
from torch import Tensor

from ..base.errors import DimensionMismatch, InvalidConfiguration
from ..base.interfaces import InitializationStrategy, ClusterRepresentation
from ..representations.centroid import CentroidRepresentation


class FromPreviousInit(InitializationStrategy):
    """Initialize from previous cluster centers or custom starting points.

    Accepts either:
    - A tensor (or nested list) of shape (n_clusters, dimension)
    - A list of ClusterRepresentation objects
    """

    def __init__(self, initial_state: Union[Tensor, list, List[ClusterRepresentation]]):
        """
        Args:
            initial_state: Previous solution to use for initialization
        """
        self.initial_state = initial_state

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> List[ClusterRepresentation]:
        """Initialize from previous state.

        Args:
            points: (n, d) data points (used for validation)
            n_clusters: Expected number of clusters
            generator: Unused

        Returns:
            List of initialized representations with empty membership
        """
        dimension = points.shape[1]
        device = points.device
        state = self.initial_state

        if isinstance(state, list) and state and isinstance(state[0], ClusterRepresentation):
            centers = torch.stack([rep.get_parameters()['mean'] for rep in state])
        elif isinstance(state, Tensor):
            centers = state
        elif isinstance(state, (list, tuple)):
            centers = torch.tensor(state, dtype=points.dtype)
        else:
            raise TypeError(f"Unknown initial_state type: {type(state)}")

        centers = centers.to(device=device, dtype=points.dtype)
        if centers.dim() != 2:
            raise InvalidConfiguration(f"Initial centers must be 2D, got {centers.dim()}D")
        if centers.shape[0] != n_clusters:
            raise InvalidConfiguration(f"Initial centers has {centers.shape[0]} clusters, "
                                       f"but n_clusters={n_clusters}")
        if centers.shape[1] != dimension:
            raise DimensionMismatch(dimension, centers.shape[1], what="initial centers")

        representations = []
        for k in range(n_clusters):
            rep = CentroidRepresentation(dimension, device, points.dtype)
            rep.mean = centers[k].clone()
            representations.append(rep)

        return representations
