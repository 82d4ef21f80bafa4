"""Numeric backend: scipy/scikit-learn distances, spatial indexes and graph components."""
from fuzzy_dbscan.infrastructure.backend._distance import (
    as_coordinate_array,
    coordinates,
    euclidean_distance,
    get_metric,
    minkowski_order,
)
from fuzzy_dbscan.infrastructure.backend._index import (
    KDTreeNeighborSearch,
    SklearnRadiusSearch,
    make_neighbor_search,
)
from fuzzy_dbscan.infrastructure.backend._graph import SparseGraphClusterBuilder

__all__ = [
    "as_coordinate_array",
    "coordinates",
    "euclidean_distance",
    "get_metric",
    "minkowski_order",
    "KDTreeNeighborSearch",
    "SklearnRadiusSearch",
    "make_neighbor_search",
    "SparseGraphClusterBuilder",
]
