"""Ports (Protocol interfaces) for the fuzzy clustering engine.

The domain layer depends only on these abstractions: points are opaque and only
need a distance, and neighbor enumeration can be swapped for a spatial index.
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Iterable, List, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from fuzzy_dbscan.domain.model import ClusteringResult

# Must be symmetric, non-negative and zero only between identical points.
DistanceFn = Callable[[Any, Any], float]


# ---------------------------------------------------------------------------
# Distance Capability
# ---------------------------------------------------------------------------


class MetricSpace(Protocol):
    """Port: a point that knows its distance to another point of the same type."""

    def distance(self, other: Any) -> float:
        ...


# ---------------------------------------------------------------------------
# Neighbor Search Port
# ---------------------------------------------------------------------------


class NeighborSearch(Protocol):
    """Port: enumerate candidate neighbor pairs.

    Implementations yield each unordered pair once as `(i, j)` with `i < j`. They may
    yield extra pairs, but never omit a pair whose distance is <= radius.
    """

    def candidate_pairs(self, *, points: Sequence[Any], radius: float) -> Iterable[Tuple[int, int]]:
        ...


# ---------------------------------------------------------------------------
# IO Ports
# ---------------------------------------------------------------------------


class PointSource(Protocol):
    """Port: load points from a file."""

    def load(self, *, path: Path) -> List[Any]:
        ...


class AssignmentRepository(Protocol):
    """Port: persist clustering results."""

    def save(self, *, result: ClusteringResult, path: Path) -> None:
        ...
