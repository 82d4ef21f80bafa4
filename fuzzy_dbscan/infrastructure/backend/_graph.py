"""Connected components of the core graph via scipy.sparse.csgraph."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from fuzzy_dbscan.domain.model import ClusterStructure, CoreTable, NeighborTable
from fuzzy_dbscan.domain.services import ClusterBuilder
from fuzzy_dbscan.domain.strategies import number_components, reachable_clusters


@dataclass(frozen=True)
class SparseGraphClusterBuilder(ClusterBuilder):
    """Same partition and ids as the union-find builder, computed by scipy."""

    def build(self, *, neighbors: NeighborTable, cores: CoreTable) -> ClusterStructure:
        from scipy.sparse import coo_matrix
        from scipy.sparse.csgraph import connected_components

        core_indices = cores.core_indices()
        if not core_indices:
            return ClusterStructure(
                core_clusters={},
                reachable=reachable_clusters(neighbors, cores, {}),
                n_clusters=0,
            )

        position = {p: k for k, p in enumerate(core_indices)}
        rows: List[int] = []
        cols: List[int] = []
        for p in core_indices:
            for q in neighbors.neighbors(p):
                if q in position:
                    rows.append(position[p])
                    cols.append(position[q])

        m = len(core_indices)
        graph = coo_matrix(
            (np.ones(len(rows), dtype=np.int8), (rows, cols)), shape=(m, m)
        ).tocsr()
        n_components, labels = connected_components(graph, directed=False)

        core_clusters = number_components({p: int(labels[k]) for p, k in position.items()})
        return ClusterStructure(
            core_clusters=core_clusters,
            reachable=reachable_clusters(neighbors, cores, core_clusters),
            n_clusters=int(n_components),
        )
