from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Final, List, Mapping, Optional, Tuple


# A point is always a full neighbor of itself.
SELF_WEIGHT: Final[float] = 1.0
# Whether SELF_WEIGHT contributes to a point's weighted density (classical MinPts counts the point).
INCLUDE_SELF: Final[bool] = True


class Category(str, Enum):
    CORE = "core"
    BORDER = "border"
    NOISE = "noise"


@dataclass(frozen=True)
class FuzzyParameters:
    """Fuzzy neighborhood radius and density intervals.

    Setting `eps_min == eps_max` and `pts_min == pts_max` reduces the algorithm to
    classic DBSCAN.
    """

    eps_min: float
    eps_max: float
    pts_min: float
    pts_max: float
    count_self: bool = INCLUDE_SELF

    @property
    def is_crisp(self) -> bool:
        return self.eps_min == self.eps_max and self.pts_min == self.pts_max


@dataclass(frozen=True)
class Assignment:
    """One (point, cluster) membership record."""

    index: int
    cluster: Optional[int]
    category: Category
    label: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "cluster": self.cluster,
            "category": self.category.value,
            "label": self.label,
        }


@dataclass(frozen=True)
class NeighborTable:
    """Positive neighbor weights per point.

    Notes:
    - Self pairs are never stored; `weight(i, i)` reports SELF_WEIGHT.
    - The table is symmetric: `rows[i][j] == rows[j][i]`.
    """

    rows: Tuple[Mapping[int, float], ...]

    def __len__(self) -> int:
        return len(self.rows)

    def neighbors(self, index: int) -> Mapping[int, float]:
        return self.rows[index]

    def weight(self, i: int, j: int) -> float:
        if i == j:
            return SELF_WEIGHT
        return self.rows[i].get(j, 0.0)


@dataclass(frozen=True)
class CoreTable:
    densities: Tuple[float, ...]
    memberships: Tuple[float, ...]

    def __len__(self) -> int:
        return len(self.memberships)

    def is_core(self, index: int) -> bool:
        return self.memberships[index] > 0.0

    def core_indices(self) -> List[int]:
        return [i for i, mu in enumerate(self.memberships) if mu > 0.0]


@dataclass(frozen=True)
class ClusterStructure:
    """Connected core components and the clusters each non-core point can reach.

    Cluster ids run from 0 to n_clusters - 1, ordered by the smallest core index of
    each component.
    """

    core_clusters: Mapping[int, int]
    reachable: Mapping[int, Tuple[int, ...]]
    n_clusters: int

    def cluster_of(self, index: int) -> Optional[int]:
        return self.core_clusters.get(index)

    def members(self, cluster_id: int) -> List[int]:
        return sorted(i for i, c in self.core_clusters.items() if c == cluster_id)


@dataclass(frozen=True)
class ClusteringResult:
    assignments: Tuple[Assignment, ...]
    neighbors: NeighborTable
    cores: CoreTable
    structure: ClusterStructure
    _by_point: Dict[int, List[Assignment]] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for a in self.assignments:
            self._by_point.setdefault(a.index, []).append(a)

    @property
    def n_points(self) -> int:
        return len(self.cores)

    @property
    def n_clusters(self) -> int:
        return self.structure.n_clusters

    def for_point(self, index: int) -> List[Assignment]:
        return list(self._by_point.get(index, []))

    def noise_indices(self) -> List[int]:
        return [a.index for a in self.assignments if a.category is Category.NOISE]

    def multi_member_indices(self) -> List[int]:
        """Border points that belong to more than one cluster."""
        return sorted(i for i, rows in self._by_point.items() if len(rows) > 1)
