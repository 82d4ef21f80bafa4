"""An implementation of the FuzzyDBSCAN algorithm.

FuzzyDBSCAN replaces DBSCAN's neighborhood radius and MinPts with intervals
(`eps_min..eps_max`, `pts_min..pts_max`), yielding fuzzy core memberships and
letting border points belong to several clusters at once.

The scipy-backed neighbor searches and the scikit-learn estimator are imported
explicitly, e.g.
`from fuzzy_dbscan.infrastructure.sklearn_estimator import FuzzyDBSCANClustering`.

Example:
    from fuzzy_dbscan import FuzzyDBSCAN, Point

    points = [Point.of(0, 0), Point.of(100, 100), Point.of(105, 105), Point.of(115, 115)]
    fuzzy_dbscan = FuzzyDBSCAN(eps_min=10.0, eps_max=20.0, pts_min=1.0, pts_max=2.0)
    print(fuzzy_dbscan.cluster(points))
"""

from fuzzy_dbscan.domain.model import (
    INCLUDE_SELF,
    Assignment,
    Category,
    ClusteringResult,
    FuzzyParameters,
)
from fuzzy_dbscan.domain.grouping import FuzzyCluster, crisp_labels, group_by_cluster, membership_matrix
from fuzzy_dbscan.entrypoints.cluster import FuzzyDBSCAN, analyze, cluster
from fuzzy_dbscan.exceptions import FuzzyDBSCANError, InvalidParametersError, PointFormatError
from fuzzy_dbscan.infrastructure.points import Point

__version__ = "0.3.0"

__all__ = [
    "INCLUDE_SELF",
    "Assignment",
    "Category",
    "ClusteringResult",
    "FuzzyParameters",
    "FuzzyCluster",
    "crisp_labels",
    "group_by_cluster",
    "membership_matrix",
    "FuzzyDBSCAN",
    "analyze",
    "cluster",
    "FuzzyDBSCANError",
    "InvalidParametersError",
    "PointFormatError",
    "Point",
]
