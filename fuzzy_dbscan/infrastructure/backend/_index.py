"""Spatial indexes implementing the NeighborSearch port.

An index only narrows the candidate pairs; weights are still computed from the
distance function, so switching indexes never changes the clustering.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from fuzzy_dbscan.domain.strategies import AllPairsSearch
from fuzzy_dbscan.infrastructure.backend._distance import (
    as_coordinate_array,
    canonical_metric,
    minkowski_order,
)
from fuzzy_dbscan.ports import NeighborSearch

# Relative slack so pairs at exactly eps_max survive index rounding.
RADIUS_TOLERANCE = 1e-9

NEIGHBOR_SEARCHES = ("auto", "brute", "kd_tree", "ball_tree")


def search_radius(radius: float) -> float:
    return radius * (1.0 + RADIUS_TOLERANCE) + RADIUS_TOLERANCE


@dataclass(frozen=True)
class KDTreeNeighborSearch(NeighborSearch):
    """Candidate pairs from scipy's KD-tree (Minkowski metrics only)."""

    p: float = 2.0

    def candidate_pairs(self, *, points: Sequence[Any], radius: float) -> Iterable[Tuple[int, int]]:
        from scipy.spatial import KDTree

        if len(points) < 2:
            return []
        tree = KDTree(as_coordinate_array(points))
        pairs = tree.query_pairs(search_radius(radius), p=self.p, output_type="ndarray")
        if len(pairs) == 0:
            return []
        pairs = pairs[np.lexsort((pairs[:, 1], pairs[:, 0]))]
        return [(int(i), int(j)) for i, j in pairs]


@dataclass(frozen=True)
class SklearnRadiusSearch(NeighborSearch):
    """Candidate pairs from scikit-learn's radius neighbors (ball tree by default)."""

    metric: str = "euclidean"
    algorithm: str = "ball_tree"
    p: Optional[float] = None

    def candidate_pairs(self, *, points: Sequence[Any], radius: float) -> Iterable[Tuple[int, int]]:
        from sklearn.neighbors import NearestNeighbors

        if len(points) < 2:
            return []
        X = as_coordinate_array(points)
        metric = canonical_metric(self.metric)
        nn = NearestNeighbors(
            radius=search_radius(radius),
            metric=metric,
            algorithm=self.algorithm,
            p=2 if self.p is None else self.p,
        ).fit(X)
        neighborhoods = nn.radius_neighbors(X, return_distance=False)

        pairs: List[Tuple[int, int]] = []
        for i, row in enumerate(neighborhoods):
            pairs.extend((i, int(j)) for j in np.sort(row) if j > i)
        return pairs


def make_neighbor_search(
    name: str = "auto",
    metric: str = "euclidean",
    p: Optional[float] = None,
) -> NeighborSearch:
    """Build a NeighborSearch by name: auto, brute, kd_tree or ball_tree."""
    name = name.lower()
    if name not in NEIGHBOR_SEARCHES:
        raise ValueError(f"Unknown neighbor search {name!r}; expected one of {', '.join(NEIGHBOR_SEARCHES)}")

    if name == "brute":
        return AllPairsSearch()

    order = minkowski_order(metric, p)
    if name == "kd_tree":
        if order is None:
            raise ValueError(f"kd_tree search does not support metric {metric!r}")
        return KDTreeNeighborSearch(p=order)
    if name == "ball_tree":
        return SklearnRadiusSearch(metric=metric, algorithm="ball_tree", p=p)

    # auto
    if order is not None:
        return KDTreeNeighborSearch(p=order)
    return SklearnRadiusSearch(metric=metric, algorithm="brute", p=p)
