"""Alternative views over a flat assignment sequence."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .model import Assignment, Category

NOISE_LABEL = -1


@dataclass(frozen=True)
class FuzzyCluster:
    """A group of assigned points; `cluster is None` marks the noise group."""

    cluster: Optional[int]
    members: Tuple[Assignment, ...]

    @property
    def is_noise(self) -> bool:
        return self.cluster is None

    def indices(self) -> List[int]:
        return [a.index for a in self.members]


def group_by_cluster(assignments: Iterable[Assignment]) -> List[FuzzyCluster]:
    """Group assignments per cluster id, with the noise group (if any) last."""
    groups: Dict[int, List[Assignment]] = {}
    noise: List[Assignment] = []
    for a in assignments:
        if a.cluster is None:
            noise.append(a)
        else:
            groups.setdefault(a.cluster, []).append(a)

    clusters = [FuzzyCluster(cluster=c, members=tuple(groups[c])) for c in sorted(groups)]
    if noise:
        clusters.append(FuzzyCluster(cluster=None, members=tuple(noise)))
    return clusters


def crisp_labels(assignments: Iterable[Assignment], n_points: int) -> List[int]:
    """Collapse fuzzy output to one label per point (-1 for noise).

    Border points take their highest-degree cluster; ties go to the lowest id.
    """
    labels = [NOISE_LABEL] * n_points
    best: Dict[int, float] = {}
    for a in assignments:
        if a.category is Category.NOISE:
            continue
        if a.category is Category.CORE:
            labels[a.index] = a.cluster
            best[a.index] = math.inf
            continue
        current = best.get(a.index)
        if current is None or a.label > current or (a.label == current and a.cluster < labels[a.index]):
            labels[a.index] = a.cluster
            best[a.index] = a.label
    return labels


def membership_matrix(
    assignments: Iterable[Assignment],
    n_points: int,
    n_clusters: int,
) -> List[List[float]]:
    """Degree of every point in every cluster; 0.0 where a point is not a member."""
    matrix = [[0.0] * n_clusters for _ in range(n_points)]
    for a in assignments:
        if a.cluster is not None:
            matrix[a.index][a.cluster] = a.label
    return matrix
