"""Output presentation helpers for clustering results.

Separates log formatting from the clustering use case.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from fuzzy_dbscan.domain.grouping import group_by_cluster
from fuzzy_dbscan.domain.model import Category, ClusteringResult

logger = logging.getLogger(__name__)


def cluster_name(cluster_id: Optional[int]) -> str:
    """Human-friendly cluster label."""
    if cluster_id is None:
        return "Noise"
    return f"Cluster-{chr(65 + cluster_id) if cluster_id < 26 else cluster_id + 1}"


def category_counts(result: ClusteringResult) -> Dict[str, int]:
    counts = {c.value: 0 for c in Category}
    seen = set()
    for a in result.assignments:
        if a.index in seen:
            continue
        seen.add(a.index)
        counts[a.category.value] += 1
    return counts


def log_run_header(result: ClusteringResult) -> None:
    counts = category_counts(result)
    logger.info("FuzzyDBSCAN results")
    logger.info("Points: %d", result.n_points)
    logger.info("Clusters: %d", result.n_clusters)
    logger.info(
        "Core: %d, Border: %d, Noise: %d",
        counts["core"], counts["border"], counts["noise"],
    )
    multi = result.multi_member_indices()
    if multi:
        logger.info("Points in more than one cluster: %d", len(multi))


def log_cluster_summary(result: ClusteringResult) -> None:
    """Log member counts and label ranges for every cluster."""
    for group in group_by_cluster(result.assignments):
        if group.is_noise:
            continue
        cores = [a.label for a in group.members if a.category is Category.CORE]
        borders = [a.label for a in group.members if a.category is Category.BORDER]
        logger.info(
            "  %s: %d core (min label %.3f), %d border%s",
            cluster_name(group.cluster),
            len(cores),
            min(cores) if cores else 0.0,
            len(borders),
            f" (max label {max(borders):.3f})" if borders else "",
        )
