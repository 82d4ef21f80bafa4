"""Domain services (and strategy protocols) for fuzzy density-based clustering."""
from __future__ import annotations

from typing import Any, List, Protocol, Sequence

from .model import (
    Assignment,
    ClusterStructure,
    ClusteringResult,
    CoreTable,
    NeighborTable,
)


# ---------------------------------------------------------------------------
# Strategy Protocols
# ---------------------------------------------------------------------------


class NeighborWeighting(Protocol):
    """Strategy port: fuzzy neighbor membership for every point pair."""

    def weigh(self, points: Sequence[Any]) -> NeighborTable: ...


class CoreClassifier(Protocol):
    """Strategy port: weighted density -> fuzzy core membership per point."""

    def classify(self, neighbors: NeighborTable) -> CoreTable: ...


class ClusterBuilder(Protocol):
    """Strategy port: connect core points into clusters, record reachability."""

    def build(
        self,
        *,
        neighbors: NeighborTable,
        cores: CoreTable,
    ) -> ClusterStructure: ...


class MembershipAssigner(Protocol):
    """Strategy port: emit labelled assignments for every point."""

    def assign(
        self,
        *,
        neighbors: NeighborTable,
        cores: CoreTable,
        structure: ClusterStructure,
    ) -> List[Assignment]: ...


# ---------------------------------------------------------------------------
# Orchestration Service
# ---------------------------------------------------------------------------


class FuzzyDBSCANService:
    """Domain service: runs the four FuzzyDBSCAN stages in order.

    Orchestrates four strategy protocols:
    - NeighborWeighting
    - CoreClassifier
    - ClusterBuilder
    - MembershipAssigner

    Each stage is a pure function of the previous stage's tables, so the result
    does not depend on visitation order.
    """

    def __init__(
        self,
        *,
        weighting: NeighborWeighting,
        classifier: CoreClassifier,
        builder: ClusterBuilder,
        assigner: MembershipAssigner,
    ) -> None:
        self._weighting = weighting
        self._classifier = classifier
        self._builder = builder
        self._assigner = assigner

    def analyze(self, points: Sequence[Any]) -> ClusteringResult:
        """Cluster `points` and return the assignments plus intermediate tables."""

        # Step 1: Neighbor weights
        neighbors = self._weighting.weigh(points)

        # Step 2: Core memberships
        cores = self._classifier.classify(neighbors)

        # Step 3: Connected core components
        structure = self._builder.build(neighbors=neighbors, cores=cores)

        # Step 4: Fuzzy labels
        assignments = self._assigner.assign(
            neighbors=neighbors, cores=cores, structure=structure)

        return ClusteringResult(
            assignments=tuple(assignments),
            neighbors=neighbors,
            cores=cores,
            structure=structure,
        )
