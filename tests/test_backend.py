"""Numeric backend: metrics, spatial indexes and the sparse-graph builder."""

import math

import numpy as np
import pytest

from fuzzy_dbscan import FuzzyParameters, Point, analyze
from fuzzy_dbscan.domain.strategies import AllPairsSearch
from fuzzy_dbscan.infrastructure.backend import (
    KDTreeNeighborSearch,
    SklearnRadiusSearch,
    SparseGraphClusterBuilder,
    as_coordinate_array,
    euclidean_distance,
    get_metric,
    make_neighbor_search,
    minkowski_order,
)

PARAMS = FuzzyParameters(eps_min=0.8, eps_max=2.5, pts_min=3.0, pts_max=9.0)


def test_as_coordinate_array_shapes():
    arr = as_coordinate_array([Point.of(1, 2), Point.of(3, 4)])
    assert arr.shape == (2, 2)
    assert arr.dtype == np.float64

    assert as_coordinate_array([1.0, 2.0, 3.0]).shape == (3, 1)
    assert as_coordinate_array(np.zeros((4, 3), dtype=np.float32)).dtype == np.float64


@pytest.mark.parametrize(
    "name, expected",
    [
        ("euclidean", 5.0),
        ("l2", 5.0),
        ("cityblock", 7.0),
        ("manhattan", 7.0),
        ("chebyshev", 4.0),
    ],
)
def test_get_metric(name, expected):
    fn = get_metric(name)
    assert fn(Point.of(0, 0), Point.of(3, 4)) == pytest.approx(expected)
    assert fn((0.0, 0.0), (3.0, 4.0)) == pytest.approx(expected)


def test_get_metric_minkowski_order():
    fn = get_metric("minkowski", p=3)
    assert fn((0.0, 0.0), (3.0, 4.0)) == pytest.approx((27 + 64) ** (1 / 3))


def test_get_metric_rejects_unknown_names():
    with pytest.raises(ValueError):
        get_metric("hamming-ish")


def test_euclidean_distance_matches_point_distance():
    a, b = Point.of(1, 2, 3), Point.of(-4, 0, 9)
    assert euclidean_distance(a, b) == pytest.approx(a.distance(b))


def test_minkowski_order():
    assert minkowski_order("euclidean") == 2.0
    assert minkowski_order("manhattan") == 1.0
    assert math.isinf(minkowski_order("chebyshev"))
    assert minkowski_order("minkowski", 4) == 4.0
    assert minkowski_order("cosine") is None


def test_index_pairs_cover_the_radius(gaussian_points):
    radius = 2.0
    expected = {
        (i, j)
        for i, j in AllPairsSearch().candidate_pairs(points=gaussian_points, radius=radius)
        if gaussian_points[i].distance(gaussian_points[j]) <= radius
    }

    for search in (KDTreeNeighborSearch(), SklearnRadiusSearch()):
        pairs = list(search.candidate_pairs(points=gaussian_points, radius=radius))
        assert all(i < j for i, j in pairs)
        assert len(pairs) == len(set(pairs))
        assert expected <= set(pairs)


def test_index_keeps_pairs_exactly_at_the_radius():
    points = [Point.of(0.0, 0.0), Point.of(0.3, 0.4), Point.of(3.0, 4.0)]
    pairs = list(KDTreeNeighborSearch().candidate_pairs(points=points, radius=5.0))
    assert (0, 2) in pairs


def test_index_handles_tiny_inputs():
    assert list(KDTreeNeighborSearch().candidate_pairs(points=[], radius=1.0)) == []
    assert list(SklearnRadiusSearch().candidate_pairs(points=[Point.of(1, 1)], radius=1.0)) == []


@pytest.mark.parametrize("name", ["auto", "brute", "kd_tree", "ball_tree"])
def test_neighbor_searches_do_not_change_the_result(gaussian_points, name):
    baseline = analyze(gaussian_points, PARAMS)
    indexed = analyze(
        gaussian_points,
        PARAMS,
        distance_fn=euclidean_distance,
        neighbor_search=make_neighbor_search(name),
    )
    assert len(indexed.assignments) == len(baseline.assignments)
    for ours, theirs in zip(indexed.assignments, baseline.assignments):
        assert (ours.index, ours.cluster, ours.category) == (theirs.index, theirs.cluster, theirs.category)
        assert ours.label == pytest.approx(theirs.label)


def test_cosine_metric_uses_sklearn_search():
    search = make_neighbor_search("auto", metric="cosine")
    assert isinstance(search, SklearnRadiusSearch)
    assert search.algorithm == "brute"

    points = [(1.0, 0.0), (2.0, 0.1), (0.0, 1.0), (0.1, 3.0)]
    params = FuzzyParameters(eps_min=0.01, eps_max=0.05, pts_min=1.0, pts_max=2.0)
    brute = analyze(points, params, distance_fn=get_metric("cosine"))
    indexed = analyze(points, params, distance_fn=get_metric("cosine"), neighbor_search=search)
    assert indexed.assignments == brute.assignments
    assert brute.n_clusters == 2


def test_neighbor_search_must_share_the_distance_metric():
    # Chebyshev distance 3 is inside eps_max, the Euclidean 4.24 is not.
    points = [(0.0, 0.0), (3.0, 3.0)]
    params = FuzzyParameters(eps_min=1.0, eps_max=4.0, pts_min=0.5, pts_max=1.2)
    chebyshev = get_metric("chebyshev")

    brute = analyze(points, params, distance_fn=chebyshev)
    matched = analyze(points, params, distance_fn=chebyshev,
                      neighbor_search=make_neighbor_search("kd_tree", metric="chebyshev"))
    mismatched = analyze(points, params, distance_fn=chebyshev, neighbor_search=KDTreeNeighborSearch())

    assert brute.n_clusters == 1
    assert matched.assignments == brute.assignments
    assert mismatched.n_clusters == 2


def test_make_neighbor_search_errors():
    with pytest.raises(ValueError):
        make_neighbor_search("octree")
    with pytest.raises(ValueError):
        make_neighbor_search("kd_tree", metric="cosine")


def test_make_neighbor_search_kinds():
    assert isinstance(make_neighbor_search("brute"), AllPairsSearch)
    assert make_neighbor_search("kd_tree", metric="manhattan") == KDTreeNeighborSearch(p=1.0)
    assert isinstance(make_neighbor_search("ball_tree"), SklearnRadiusSearch)


def test_sparse_graph_builder_matches_union_find(gaussian_points, bridge_points):
    for points, params in (
        (gaussian_points, PARAMS),
        (gaussian_points, FuzzyParameters(0.3, 0.9, 2.0, 3.0)),
        (bridge_points, FuzzyParameters(1.0, 5.0, 2.0, 2.5)),
    ):
        union_find = analyze(points, params)
        graph = analyze(points, params, cluster_builder=SparseGraphClusterBuilder())
        assert graph.structure == union_find.structure
        assert graph.assignments == union_find.assignments


def test_sparse_graph_builder_without_cores(scenario_points):
    result = analyze(
        scenario_points,
        FuzzyParameters(1.0, 2.0, 5.0, 6.0),
        cluster_builder=SparseGraphClusterBuilder(),
    )
    assert result.n_clusters == 0
    assert result.noise_indices() == [0, 1, 2, 3]
