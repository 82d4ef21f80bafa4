"""Default strategy implementations that depend only on ports.

These carry the FuzzyDBSCAN math (linear membership ramps, max-min reachability)
and leave point representation to the distance capability and neighbor
enumeration to the `NeighborSearch` port.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from fuzzy_dbscan.domain.model import (
    INCLUDE_SELF,
    SELF_WEIGHT,
    Assignment,
    Category,
    ClusterStructure,
    CoreTable,
    NeighborTable,
)
from fuzzy_dbscan.domain.services import (
    ClusterBuilder,
    CoreClassifier,
    MembershipAssigner,
    NeighborWeighting,
)
from fuzzy_dbscan.domain.union_find import DisjointSet
from fuzzy_dbscan.ports import DistanceFn, NeighborSearch


# ---------------------------------------------------------------------------
# Membership Functions
# ---------------------------------------------------------------------------


def neighbor_weight(distance: float, eps_min: float, eps_max: float) -> float:
    """Fuzzy neighborhood membership of a point at `distance`."""
    if distance <= eps_min:
        return 1.0
    if distance >= eps_max:
        return 0.0
    return (eps_max - distance) / (eps_max - eps_min)


def core_membership(density: float, pts_min: float, pts_max: float) -> float:
    """Fuzzy core membership for a weighted neighborhood density."""
    if density >= pts_max:
        return 1.0
    if density <= pts_min:
        return 0.0
    return (density - pts_min) / (pts_max - pts_min)


def method_distance(a: Any, b: Any) -> float:
    """Distance for points implementing the MetricSpace port."""
    return a.distance(b)


# ---------------------------------------------------------------------------
# Neighbor Search
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AllPairsSearch(NeighborSearch):
    """Naive baseline: every unordered pair is a candidate."""

    def candidate_pairs(self, *, points: Sequence[Any], radius: float) -> Iterable[Tuple[int, int]]:
        n = len(points)
        for i in range(n):
            for j in range(i + 1, n):
                yield i, j


# ---------------------------------------------------------------------------
# Strategy Implementations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LinearNeighborWeighting(NeighborWeighting):
    """Linear ramp from 1 at eps_min down to 0 at eps_max."""

    eps_min: float
    eps_max: float
    distance_fn: DistanceFn = method_distance
    search: NeighborSearch = field(default_factory=AllPairsSearch)

    def weigh(self, points: Sequence[Any]) -> NeighborTable:
        rows: List[Dict[int, float]] = [{} for _ in range(len(points))]
        for i, j in self.search.candidate_pairs(points=points, radius=self.eps_max):
            w = neighbor_weight(self.distance_fn(points[i], points[j]), self.eps_min, self.eps_max)
            if w > 0.0:
                rows[i][j] = w
                rows[j][i] = w
        return NeighborTable(rows=tuple(rows))


@dataclass(frozen=True)
class LinearCoreClassifier(CoreClassifier):
    """Linear ramp from 0 at pts_min up to 1 at pts_max."""

    pts_min: float
    pts_max: float
    count_self: bool = INCLUDE_SELF

    def classify(self, neighbors: NeighborTable) -> CoreTable:
        own = SELF_WEIGHT if self.count_self else 0.0
        densities = []
        memberships = []
        for i in range(len(neighbors)):
            # fsum keeps the density independent of neighbor enumeration order
            density = math.fsum(neighbors.neighbors(i).values()) + own
            densities.append(density)
            memberships.append(core_membership(density, self.pts_min, self.pts_max))
        return CoreTable(densities=tuple(densities), memberships=tuple(memberships))


def number_components(roots: Dict[int, int]) -> Dict[int, int]:
    """Map each core index to a cluster id, numbering components by smallest member."""
    ids: Dict[int, int] = {}
    clusters: Dict[int, int] = {}
    for index in sorted(roots):
        clusters[index] = ids.setdefault(roots[index], len(ids))
    return clusters


def reachable_clusters(
    neighbors: NeighborTable,
    cores: CoreTable,
    core_clusters: Dict[int, int],
) -> Dict[int, Tuple[int, ...]]:
    """For each non-core point, the clusters holding at least one of its neighbors."""
    reachable: Dict[int, Tuple[int, ...]] = {}
    for b in range(len(neighbors)):
        if cores.is_core(b):
            continue
        reachable[b] = tuple(sorted({
            core_clusters[p] for p in neighbors.neighbors(b) if p in core_clusters
        }))
    return reachable


@dataclass(frozen=True)
class UnionFindClusterBuilder(ClusterBuilder):
    """Merge density-connected core points with a disjoint-set arena."""

    def build(self, *, neighbors: NeighborTable, cores: CoreTable) -> ClusterStructure:
        dsu = DisjointSet(len(neighbors))
        core_indices = cores.core_indices()
        for p in core_indices:
            for q in neighbors.neighbors(p):
                if q > p and cores.is_core(q):
                    dsu.union(p, q)

        core_clusters = number_components({p: dsu.find(p) for p in core_indices})
        return ClusterStructure(
            core_clusters=core_clusters,
            reachable=reachable_clusters(neighbors, cores, core_clusters),
            n_clusters=len(set(core_clusters.values())),
        )


@dataclass(frozen=True)
class MaxMinMembershipAssigner(MembershipAssigner):
    """Border degree per cluster = max over its core neighbors of min(core, weight)."""

    def assign(
        self,
        *,
        neighbors: NeighborTable,
        cores: CoreTable,
        structure: ClusterStructure,
    ) -> List[Assignment]:
        assignments: List[Assignment] = []
        for i in range(len(neighbors)):
            cluster_id = structure.cluster_of(i)
            if cluster_id is not None:
                assignments.append(Assignment(i, cluster_id, Category.CORE, cores.memberships[i]))
                continue

            if not structure.reachable.get(i):
                assignments.append(Assignment(i, None, Category.NOISE, 0.0))
                continue

            assignments.extend(self._border_assignments(i, neighbors, cores, structure))
        return assignments

    @staticmethod
    def _border_assignments(
        index: int,
        neighbors: NeighborTable,
        cores: CoreTable,
        structure: ClusterStructure,
    ) -> List[Assignment]:
        degrees: Dict[int, float] = {}
        for p, w in neighbors.neighbors(index).items():
            cluster_id = structure.cluster_of(p)
            if cluster_id is None:
                continue
            degree = min(cores.memberships[p], w)
            if degree > degrees.get(cluster_id, 0.0):
                degrees[cluster_id] = degree
        return [
            Assignment(index, cluster_id, Category.BORDER, degrees[cluster_id])
            for cluster_id in structure.reachable[index]
            if degrees.get(cluster_id, 0.0) > 0.0
        ]
