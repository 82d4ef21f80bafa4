"""Application layer: use cases for clustering point files."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

from fuzzy_dbscan.domain.model import ClusteringResult
from fuzzy_dbscan.ports import AssignmentRepository, PointSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClusterPointsUseCase:
    """Use case: load points, cluster them, optionally persist the assignments.

    This is an application service that orchestrates:
    - Point loading (via PointSource port)
    - Clustering (via any `points -> ClusteringResult` callable, e.g. FuzzyDBSCAN.analyze)
    - Persistence (via optional AssignmentRepository port)
    """

    source: PointSource
    clusterer: Callable[[Sequence[Any]], ClusteringResult]
    repository: Optional[AssignmentRepository] = None

    def run(self, *, input_path: Path, output_path: Optional[Path] = None) -> ClusteringResult:
        """Cluster the points stored at `input_path`.

        Args:
            input_path: File readable by the configured PointSource.
            output_path: Where the repository writes results; ignored without one.

        Returns:
            The full ClusteringResult.
        """
        points = self.source.load(path=Path(input_path))
        logger.info("Loaded %d points from %s", len(points), input_path)
        return self.cluster_points(points, output_path=output_path)

    def cluster_points(self, points: Sequence[Any], *, output_path: Optional[Path] = None) -> ClusteringResult:
        """Cluster already-loaded points and persist them like `run` does."""
        result = self.clusterer(points)

        if self.repository is not None and output_path is not None:
            self.repository.save(result=result, path=Path(output_path))
            logger.info("Wrote %d assignments to %s", len(result.assignments), output_path)

        return result
