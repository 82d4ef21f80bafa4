"""Grouped, crisp and matrix views of the fuzzy output."""

import pytest

from fuzzy_dbscan import (
    Assignment,
    Category,
    FuzzyParameters,
    analyze,
    crisp_labels,
    group_by_cluster,
    membership_matrix,
)
from fuzzy_dbscan.domain.grouping import NOISE_LABEL

BRIDGE = FuzzyParameters(eps_min=1.0, eps_max=5.0, pts_min=2.0, pts_max=2.5)


def test_group_by_cluster_puts_noise_last(scenario_points):
    result = analyze(scenario_points, FuzzyParameters(10.0, 20.0, 1.0, 2.0))
    groups = group_by_cluster(result.assignments)

    assert [g.cluster for g in groups] == [0, None]
    assert groups[0].indices() == [1, 2, 3]
    assert groups[1].is_noise
    assert groups[1].indices() == [0]


def test_group_by_cluster_repeats_multi_members(bridge_points):
    groups = group_by_cluster(analyze(bridge_points, BRIDGE).assignments)

    assert [g.cluster for g in groups] == [0, 1]
    assert groups[0].indices() == [0, 1, 2, 3]
    assert groups[1].indices() == [3, 4, 5, 6]


def test_group_by_cluster_empty():
    assert group_by_cluster([]) == []


def test_crisp_labels_break_ties_towards_lower_ids(bridge_points):
    labels = crisp_labels(analyze(bridge_points, BRIDGE).assignments, len(bridge_points))
    assert labels == [0, 0, 0, 0, 1, 1, 1]


def test_crisp_labels_prefer_the_stronger_cluster():
    assignments = [
        Assignment(0, 0, Category.CORE, 1.0),
        Assignment(1, 1, Category.CORE, 0.7),
        Assignment(2, 0, Category.BORDER, 0.2),
        Assignment(2, 1, Category.BORDER, 0.6),
        Assignment(3, None, Category.NOISE, 0.0),
    ]
    assert crisp_labels(assignments, 4) == [0, 1, 1, NOISE_LABEL]


def test_membership_matrix(bridge_points):
    result = analyze(bridge_points, BRIDGE)
    matrix = membership_matrix(result.assignments, result.n_points, result.n_clusters)

    assert len(matrix) == 7
    assert matrix[0] == [1.0, 0.0]
    assert matrix[3] == pytest.approx([0.25, 0.25])
    assert matrix[6] == [0.0, 1.0]


def test_assignment_to_dict():
    assert Assignment(4, None, Category.NOISE, 0.0).to_dict() == {
        "index": 4,
        "cluster": None,
        "category": "noise",
        "label": 0.0,
    }
