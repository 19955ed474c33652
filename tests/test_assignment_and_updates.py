"""
Assignment step, AssignmentMatrix, and the mean update with empty-cluster policies.

Covers:
- HardAssignment picks the nearest centroid and gives ties to the lowest index
- NaN centroids never win an assignment
- AssignmentMatrix index sets partition the points
- MeanUpdater: mean of members; 'keep' / 'reseed' / 'error' / 'nan' on empty clusters
"""

from __future__ import annotations

import pytest
import torch

from kclusters.assignments import HardAssignment
from kclusters.base.data_structures import AssignmentMatrix
from kclusters.base.errors import EmptyClusterError
from kclusters.representations import CentroidRepresentation
from kclusters.updates import MeanUpdater


def _reps(centers, device):
    reps = []
    for c in centers:
        rep = CentroidRepresentation(len(c), device)
        rep.mean = torch.tensor(c, dtype=torch.float64)
        reps.append(rep)
    return reps


def test_hard_assignment_nearest_centroid(four_points, torch_device):
    reps = _reps([[0.0, 0.0], [10.0, 10.0]], torch_device)
    labels = HardAssignment().compute_assignments(four_points, reps)
    assert labels.tolist() == [0, 0, 1, 1]


def test_hard_assignment_ties_go_to_first_cluster(torch_device):
    # Three identical centroids: every point is equidistant
    reps = _reps([[1.0, 0.0], [1.0, 0.0], [1.0, 0.0]], torch_device)
    points = torch.tensor([[0.0, 0.0], [2.0, 0.0], [1.0, 5.0]], dtype=torch.float64)
    labels = HardAssignment().compute_assignments(points, reps)
    assert labels.tolist() == [0, 0, 0]

    # Midpoint between two distinct centroids
    reps = _reps([[0.0, 0.0], [2.0, 0.0]], torch_device)
    labels = HardAssignment().compute_assignments(
        torch.tensor([[1.0, 0.0]], dtype=torch.float64), reps)
    assert labels.tolist() == [0]


def test_nan_centroid_never_wins(torch_device):
    reps = _reps([[float('nan'), float('nan')], [100.0, 100.0]], torch_device)
    points = torch.tensor([[0.0, 0.0], [1.0, 1.0]], dtype=torch.float64)
    labels = HardAssignment().compute_assignments(points, reps)
    assert labels.tolist() == [1, 1]


def test_assignment_matrix_partition(rng, torch_device):
    n, K = 200, 5
    labels = torch.from_numpy(rng.integers(0, K, size=n))
    am = AssignmentMatrix(labels, K)

    seen = torch.cat([am.get_cluster_indices(k) for k in range(K)])
    assert seen.numel() == n
    assert sorted(seen.tolist()) == list(range(n))
    assert int(am.count_per_cluster().sum()) == n


def test_assignment_matrix_reports_empty_clusters():
    am = AssignmentMatrix(torch.tensor([0, 0, 2]), 4)
    assert am.count_per_cluster().tolist() == [2, 0, 1, 0]
    assert am.empty_clusters() == [1, 3]


def test_mean_update_is_coordinatewise_mean(rng, torch_device):
    points = torch.from_numpy(rng.normal(size=(30, 4)))
    rep = _reps([[0.0] * 4], torch_device)[0]
    MeanUpdater().update(rep, points, cluster_idx=0, epoch=1)
    assert torch.allclose(rep.mean, points.mean(dim=0), atol=1e-12)


def test_empty_cluster_keep(torch_device):
    rep = _reps([[3.0, 4.0]], torch_device)[0]
    MeanUpdater('keep').update(rep, torch.empty(0, 2, dtype=torch.float64),
                               cluster_idx=0, epoch=1)
    assert rep.mean.tolist() == [3.0, 4.0]


def test_empty_cluster_keep_warns_when_asked(torch_device):
    rep = _reps([[3.0, 4.0]], torch_device)[0]
    with pytest.warns(UserWarning, match="no points"):
        MeanUpdater('keep', warn=True).update(rep, torch.empty(0, 2, dtype=torch.float64),
                                              cluster_idx=0, epoch=1)


def test_empty_cluster_error(torch_device):
    rep = _reps([[3.0, 4.0]], torch_device)[0]
    with pytest.raises(EmptyClusterError) as exc:
        MeanUpdater('error').update(rep, torch.empty(0, 2, dtype=torch.float64),
                                    cluster_idx=1, epoch=3)
    assert exc.value.cluster_idx == 1
    assert exc.value.epoch == 3


def test_empty_cluster_nan(torch_device):
    rep = _reps([[3.0, 4.0]], torch_device)[0]
    MeanUpdater('nan').update(rep, torch.empty(0, 2, dtype=torch.float64))
    assert torch.isnan(rep.mean).all()
    assert not rep.is_defined()


def test_empty_cluster_reseed_moves_onto_an_observation(four_points, torch_device):
    rep = _reps([[50.0, 50.0]], torch_device)[0]
    gen = torch.Generator().manual_seed(0)
    MeanUpdater('reseed').update(rep, torch.empty(0, 2, dtype=torch.float64),
                                 data=four_points, generator=gen)
    assert any(torch.equal(rep.mean, row) for row in four_points)


def test_reseed_requires_dataset(torch_device):
    rep = _reps([[50.0, 50.0]], torch_device)[0]
    with pytest.raises(ValueError):
        MeanUpdater('reseed').update(rep, torch.empty(0, 2, dtype=torch.float64))


def test_unknown_policy_rejected():
    with pytest.raises(ValueError):
        MeanUpdater('bogus')


@pytest.mark.parametrize("labels", [
    torch.tensor([0, 1, 4]),
    torch.tensor([0, -1]),
    torch.tensor([[0, 1]]),
])
def test_assignment_matrix_rejects_bad_labels(labels):
    with pytest.raises(ValueError):
        AssignmentMatrix(labels, 3)
