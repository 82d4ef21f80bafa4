"""Entrypoint: the `cluster` operation and its FuzzyDBSCAN facade.

This is the composition root for the engine. It validates parameters, wires the
default strategies and runs the domain service.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from fuzzy_dbscan.domain.model import INCLUDE_SELF, Assignment, ClusteringResult, FuzzyParameters
from fuzzy_dbscan.domain.services import ClusterBuilder, FuzzyDBSCANService
from fuzzy_dbscan.domain.strategies import (
    AllPairsSearch,
    LinearCoreClassifier,
    LinearNeighborWeighting,
    MaxMinMembershipAssigner,
    UnionFindClusterBuilder,
    method_distance,
)
from fuzzy_dbscan.ports import DistanceFn, NeighborSearch
from fuzzy_dbscan.validation.validate_parameters import ensure_valid_parameters

logger = logging.getLogger(__name__)


def build_service(
    params: FuzzyParameters,
    *,
    distance_fn: Optional[DistanceFn] = None,
    neighbor_search: Optional[NeighborSearch] = None,
    cluster_builder: Optional[ClusterBuilder] = None,
) -> FuzzyDBSCANService:
    """Wire the default strategies for `params`."""
    weighting = LinearNeighborWeighting(
        eps_min=params.eps_min,
        eps_max=params.eps_max,
        distance_fn=distance_fn or method_distance,
        search=neighbor_search or AllPairsSearch(),
    )
    classifier = LinearCoreClassifier(
        pts_min=params.pts_min,
        pts_max=params.pts_max,
        count_self=params.count_self,
    )
    return FuzzyDBSCANService(
        weighting=weighting,
        classifier=classifier,
        builder=cluster_builder or UnionFindClusterBuilder(),
        assigner=MaxMinMembershipAssigner(),
    )


def analyze(
    points: Sequence[Any],
    params: FuzzyParameters,
    *,
    distance_fn: Optional[DistanceFn] = None,
    neighbor_search: Optional[NeighborSearch] = None,
    cluster_builder: Optional[ClusterBuilder] = None,
) -> ClusteringResult:
    """Cluster `points` and keep the neighbor, core and cluster tables.

    Args:
        points: Any sequence of points. Without `distance_fn` every point must
            implement `distance(other)`.
        params: Fuzzy radius and density intervals.
        distance_fn: Optional symmetric, non-negative metric `(a, b) -> float`.
        neighbor_search: Optional candidate-pair enumeration (e.g. a KD-tree). It
            must measure distance no larger than `distance_fn` does, or pairs within
            `eps_max` are silently dropped. Build it with
            `make_neighbor_search(name, metric)` for the same metric as
            `get_metric(metric)`; a default `KDTreeNeighborSearch()` is Euclidean.
        cluster_builder: Optional replacement for the union-find builder.

    Raises:
        InvalidParametersError: before any distance is evaluated.
    """
    ensure_valid_parameters(params)

    service = build_service(
        params,
        distance_fn=distance_fn,
        neighbor_search=neighbor_search,
        cluster_builder=cluster_builder,
    )
    result = service.analyze(points)

    logger.debug(
        "Clustered %d points into %d clusters (%d noise, %d multi-member)",
        result.n_points,
        result.n_clusters,
        len(result.noise_indices()),
        len(result.multi_member_indices()),
    )
    return result


def cluster(
    points: Sequence[Any],
    params: FuzzyParameters,
    *,
    distance_fn: Optional[DistanceFn] = None,
    neighbor_search: Optional[NeighborSearch] = None,
) -> List[Assignment]:
    """Return the fuzzy assignments of `points`, ordered by point index."""
    result = analyze(points, params, distance_fn=distance_fn, neighbor_search=neighbor_search)
    return list(result.assignments)


@dataclass(frozen=True)
class FuzzyDBSCAN:
    """An instance of the FuzzyDBSCAN algorithm.

    Note that when setting `eps_min = eps_max` and `pts_min = pts_max` the algorithm
    reduces to classic DBSCAN.

    A `neighbor_search` must agree with `distance_fn` on the metric, see `analyze`.

    Example:
        fuzzy_dbscan = FuzzyDBSCAN(eps_min=10.0, eps_max=20.0, pts_min=1.0, pts_max=2.0,
                                   distance_fn=euclidean_distance)
        assignments = fuzzy_dbscan.cluster(points)
    """

    eps_min: float
    eps_max: float
    pts_min: float
    pts_max: float
    distance_fn: Optional[DistanceFn] = None
    count_self: bool = INCLUDE_SELF
    neighbor_search: Optional[NeighborSearch] = None

    @property
    def params(self) -> FuzzyParameters:
        return FuzzyParameters(
            eps_min=self.eps_min,
            eps_max=self.eps_max,
            pts_min=self.pts_min,
            pts_max=self.pts_max,
            count_self=self.count_self,
        )

    def analyze(self, points: Sequence[Any]) -> ClusteringResult:
        return analyze(
            points,
            self.params,
            distance_fn=self.distance_fn,
            neighbor_search=self.neighbor_search,
        )

    def cluster(self, points: Sequence[Any]) -> List[Assignment]:
        return list(self.analyze(points).assignments)
