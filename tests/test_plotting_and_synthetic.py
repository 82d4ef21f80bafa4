"""Cluster plots, run summaries and the synthetic point generators."""

import logging
import math

from fuzzy_dbscan import Assignment, Category, FuzzyParameters, analyze
from fuzzy_dbscan.infrastructure.backend import as_coordinate_array
from fuzzy_dbscan.infrastructure.plotting import COLORS, _color_for, save_cluster_plot
from fuzzy_dbscan.infrastructure.presenters import category_counts, cluster_name, log_cluster_summary, log_run_header
from fuzzy_dbscan.synthetic import bimodal_gaussian, gaussian_circle, uniform_circle


def test_save_cluster_plot(tmp_path, bridge_points):
    result = analyze(bridge_points, FuzzyParameters(1.0, 5.0, 2.0, 2.5))
    coords = [(p.x, 0.0) for p in bridge_points]
    out = tmp_path / "plot.png"

    assert save_cluster_plot(coords, result.assignments, str(out))
    assert out.stat().st_size > 0


def test_save_cluster_plot_needs_two_dimensions(tmp_path, bridge_points, caplog):
    result = analyze(bridge_points, FuzzyParameters(1.0, 5.0, 2.0, 2.5))
    out = tmp_path / "plot.png"

    assert not save_cluster_plot(as_coordinate_array(bridge_points), result.assignments, str(out))
    assert not out.exists()
    assert "at least 2D" in caplog.text


def test_colors():
    assert _color_for(Assignment(0, None, Category.NOISE, 0.0)) == COLORS[0]
    assert _color_for(Assignment(0, 0, Category.CORE, 1.0)) == COLORS[1]
    assert _color_for(Assignment(0, 7, Category.CORE, 1.0)) == COLORS[1]


def test_presenters(scenario_points, caplog):
    result = analyze(scenario_points, FuzzyParameters(10.0, 20.0, 1.0, 2.0))
    assert cluster_name(None) == "Noise"
    assert cluster_name(0) == "Cluster-A"
    assert cluster_name(30) == "Cluster-31"
    assert category_counts(result) == {"core": 3, "border": 0, "noise": 1}

    with caplog.at_level(logging.INFO):
        log_run_header(result)
        log_cluster_summary(result)
    assert "Clusters: 1" in caplog.text
    assert "Cluster-A: 3 core" in caplog.text


def test_gaussian_circle_is_seeded_and_bounded():
    a = gaussian_circle(50, 3.0, -2.0, 5.0, seed=11)
    b = gaussian_circle(50, 3.0, -2.0, 5.0, seed=11)

    assert a == b
    assert len(a) == 50
    assert all(math.hypot(p.x - 3.0, p.y + 2.0) <= 5.0 for p in a)
    assert gaussian_circle(50, 3.0, -2.0, 5.0, seed=12) != a


def test_uniform_circle_is_bounded():
    points = uniform_circle(200, 50.0, 0.0, 10.0, seed=4)
    assert len(points) == 200
    assert all(math.hypot(p.x - 50.0, p.y) <= 10.0 + 1e-9 for p in points)


def test_bimodal_gaussian():
    points = bimodal_gaussian(30, 10.0, seed=5)
    assert len(points) == 60
    assert all(math.hypot(p.x, p.y) <= 10.0 for p in points[:30])
    assert all(math.hypot(p.x - 20.0, p.y) <= 10.0 for p in points[30:])
