"""
Initial centroid selection.

Covers:
- RandomInit draws with replacement by default and may duplicate a centroid
- RandomInit(replace=False) never duplicates
- Same generator seed gives the same picks
- FromPreviousInit validation
"""

from __future__ import annotations

import pytest
import torch

from kclusters.base.errors import DimensionMismatch, InvalidConfiguration
from kclusters.initialization import RandomInit, FromPreviousInit


def test_random_init_draws_with_replacement():
    init = RandomInit()
    saw_duplicate = False
    for seed in range(50):
        gen = torch.Generator().manual_seed(seed)
        idx = init.sample_indices(2, 2, gen)
        assert idx.min() >= 0 and idx.max() < 2
        if idx[0] == idx[1]:
            saw_duplicate = True
    assert saw_duplicate


def test_random_init_without_replacement_is_distinct():
    init = RandomInit(replace=False)
    for seed in range(20):
        gen = torch.Generator().manual_seed(seed)
        idx = init.sample_indices(5, 5, gen)
        assert sorted(idx.tolist()) == list(range(5))


def test_random_init_reproducible(four_points):
    reps_a = RandomInit().initialize(four_points, 3, generator=torch.Generator().manual_seed(11))
    reps_b = RandomInit().initialize(four_points, 3, generator=torch.Generator().manual_seed(11))

    for a, b in zip(reps_a, reps_b):
        assert torch.equal(a.mean, b.mean)
        assert a.members == []
    # Seeds come from observations
    for rep in reps_a:
        assert any(torch.equal(rep.mean, row) for row in four_points)


def test_random_init_rejects_too_many_clusters(four_points):
    with pytest.raises(InvalidConfiguration):
        RandomInit().initialize(four_points, 5, generator=torch.Generator().manual_seed(0))


def test_from_previous_accepts_tensor_and_list(four_points):
    reps = FromPreviousInit([[0.0, 0.0], [10.0, 10.0]]).initialize(four_points, 2)
    assert [r.mean.tolist() for r in reps] == [[0.0, 0.0], [10.0, 10.0]]

    reps2 = FromPreviousInit(reps).initialize(four_points, 2)
    assert [r.mean.tolist() for r in reps2] == [[0.0, 0.0], [10.0, 10.0]]

    centers = torch.tensor([[1.0, 2.0]], dtype=torch.float32)
    reps3 = FromPreviousInit(centers).initialize(four_points, 1)
    assert reps3[0].mean.dtype == torch.float64


def test_from_previous_validation(four_points):
    with pytest.raises(InvalidConfiguration):
        FromPreviousInit([[0.0, 0.0]]).initialize(four_points, 2)
    with pytest.raises(DimensionMismatch):
        FromPreviousInit([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]]).initialize(four_points, 2)
    with pytest.raises(TypeError):
        FromPreviousInit("nope").initialize(four_points, 2)
