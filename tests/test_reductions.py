"""FuzzyDBSCAN reduces to DBSCAN and its one-sided fuzzy variants.

A point is core when its weighted neighborhood (itself included) reaches the
density interval. Cores sharing a neighborhood join one cluster; borders reach
a core without being one; everything else is noise.
"""

import numpy as np
import pytest
from sklearn.cluster import DBSCAN

from fuzzy_dbscan import Category, FuzzyDBSCAN, FuzzyParameters, Point, analyze
from fuzzy_dbscan.infrastructure.backend import as_coordinate_array, make_neighbor_search
from fuzzy_dbscan.synthetic import bimodal_gaussian, gaussian_circle

BASE_N = 100
BASE_R = 10.0


def _any(assignments, pred):
    return any(pred(a) for a in assignments)


def test_reduce_to_dbscan(gaussian_points):
    # Every point has at least itself within the radius.
    fuzzy_dbscan = FuzzyDBSCAN(eps_min=BASE_R, eps_max=BASE_R, pts_min=1.0, pts_max=1.0)
    result = fuzzy_dbscan.analyze(gaussian_points)

    assert result.n_clusters == 1
    assert all(a.category is Category.CORE for a in result.assignments)
    assert all(a.label == 1.0 for a in result.assignments)


def test_reduce_to_fuzzy_core_dbscan(gaussian_points):
    fuzzy_dbscan = FuzzyDBSCAN(eps_min=BASE_R, eps_max=BASE_R, pts_min=1.0, pts_max=float(BASE_N))
    assignments = fuzzy_dbscan.cluster(gaussian_points)

    assert {a.cluster for a in assignments} == {0}
    assert _any(assignments, lambda a: a.category is Category.CORE and a.label != 1.0)
    assert not _any(assignments, lambda a: a.category is Category.BORDER)
    assert not _any(assignments, lambda a: a.category is Category.NOISE)


def test_reduce_to_fuzzy_border_dbscan(gaussian_points):
    half = float(BASE_N // 2)
    fuzzy_dbscan = FuzzyDBSCAN(eps_min=1.0, eps_max=BASE_R, pts_min=half, pts_max=half)
    assignments = fuzzy_dbscan.cluster(gaussian_points)

    assert {a.cluster for a in assignments if a.cluster is not None} == {0}
    assert not _any(assignments, lambda a: a.category is Category.CORE and a.label != 1.0)
    assert _any(assignments, lambda a: a.category is Category.BORDER)
    assert _any(assignments, lambda a: a.category is Category.BORDER and a.label < 1.0)


def test_full_fuzzy_dbscan_on_two_blobs():
    points = (
        gaussian_circle(BASE_N, 0.0, 0.0, BASE_R, seed=1)
        + gaussian_circle(BASE_N, 4 * BASE_R, 0.0, BASE_R, seed=2)
    )
    fuzzy_dbscan = FuzzyDBSCAN(eps_min=1.0, eps_max=BASE_R, pts_min=float(BASE_N // 2), pts_max=float(BASE_N))
    result = fuzzy_dbscan.analyze(points)

    assert result.n_clusters == 2
    assert _any(result.assignments, lambda a: a.category is Category.CORE and 0.0 < a.label < 1.0)
    assert _any(result.assignments, lambda a: a.category is Category.BORDER and a.label < 1.0)
    left = {a.cluster for a in result.assignments if a.index < BASE_N and a.cluster is not None}
    right = {a.cluster for a in result.assignments if a.index >= BASE_N and a.cluster is not None}
    assert left == {0}
    assert right == {1}


def test_valley_between_touching_blobs_borders_both_clusters():
    # The discs touch at (BASE_R, 0); only the dense centres reach pts_min.
    n = 4 * BASE_N
    points = bimodal_gaussian(n, BASE_R) + [Point.of(BASE_R, 0.0)]
    fuzzy_dbscan = FuzzyDBSCAN(
        eps_min=1.0,
        eps_max=BASE_R,
        pts_min=float(n // 2),
        pts_max=float(n),
        neighbor_search=make_neighbor_search("kd_tree"),
    )
    result = fuzzy_dbscan.analyze(points)

    assert result.n_clusters == 2
    valley = result.for_point(2 * n)
    assert [(a.cluster, a.category) for a in valley] == [(0, Category.BORDER), (1, Category.BORDER)]
    assert all(0.0 < a.label <= 1.0 for a in valley)
    assert 2 * n in result.multi_member_indices()


def test_noise(gaussian_points):
    fuzzy_dbscan = FuzzyDBSCAN(
        eps_min=BASE_R * 2.0,
        eps_max=BASE_R * 4.0,
        pts_min=BASE_N * 2.0,
        pts_max=BASE_N * 4.0,
    )
    assignments = fuzzy_dbscan.cluster(gaussian_points)

    assert len(assignments) == BASE_N
    assert all(a.category is Category.NOISE for a in assignments)
    assert all(a.cluster is None and a.label == 0.0 for a in assignments)


@pytest.mark.parametrize("eps, pts", [(1.0, 4), (1.5, 6), (2.5, 12)])
def test_crisp_parameters_match_sklearn_dbscan(gaussian_points, eps, pts):
    X = as_coordinate_array(gaussian_points)
    reference = DBSCAN(eps=eps, min_samples=pts).fit(X)
    result = analyze(gaussian_points, FuzzyParameters(eps, eps, float(pts), float(pts)))

    assert result.cores.core_indices() == sorted(reference.core_sample_indices_.tolist())
    assert result.noise_indices() == np.flatnonzero(reference.labels_ == -1).tolist()

    # Same partition of core points, up to renumbering.
    mapping = {}
    for i in result.cores.core_indices():
        ours = result.structure.cluster_of(i)
        theirs = int(reference.labels_[i])
        assert mapping.setdefault(ours, theirs) == theirs
    assert len(set(mapping.values())) == len(mapping) == result.n_clusters

    # Crisp borders carry full degree in every cluster they reach.
    for a in result.assignments:
        if a.category is not Category.NOISE:
            assert a.label == 1.0
