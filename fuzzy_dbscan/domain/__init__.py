"""Domain layer: value objects, strategy protocols and the FuzzyDBSCAN service."""

from .model import (
    INCLUDE_SELF,
    SELF_WEIGHT,
    Category,
    FuzzyParameters,
    Assignment,
    NeighborTable,
    CoreTable,
    ClusterStructure,
    ClusteringResult,
)
from .services import (
    NeighborWeighting,
    CoreClassifier,
    ClusterBuilder,
    MembershipAssigner,
    FuzzyDBSCANService,
)
from .strategies import (
    AllPairsSearch,
    LinearNeighborWeighting,
    LinearCoreClassifier,
    UnionFindClusterBuilder,
    MaxMinMembershipAssigner,
    neighbor_weight,
    core_membership,
)
from .grouping import FuzzyCluster, group_by_cluster, crisp_labels, membership_matrix

__all__ = [
    # Value Objects
    "INCLUDE_SELF",
    "SELF_WEIGHT",
    "Category",
    "FuzzyParameters",
    "Assignment",
    "NeighborTable",
    "CoreTable",
    "ClusterStructure",
    "ClusteringResult",
    "FuzzyCluster",
    # Domain Services
    "NeighborWeighting",
    "CoreClassifier",
    "ClusterBuilder",
    "MembershipAssigner",
    "FuzzyDBSCANService",
    # Default strategy implementations
    "AllPairsSearch",
    "LinearNeighborWeighting",
    "LinearCoreClassifier",
    "UnionFindClusterBuilder",
    "MaxMinMembershipAssigner",
    "neighbor_weight",
    "core_membership",
    # Result views
    "group_by_cluster",
    "crisp_labels",
    "membership_matrix",
]
