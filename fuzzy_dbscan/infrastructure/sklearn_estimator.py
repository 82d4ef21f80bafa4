"""scikit-learn compatible estimator over numeric feature matrices."""
from __future__ import annotations

from typing import Optional

import numpy as np
from sklearn.base import BaseEstimator, ClusterMixin
from sklearn.utils.validation import check_array

from fuzzy_dbscan.domain.grouping import crisp_labels, membership_matrix
from fuzzy_dbscan.domain.model import INCLUDE_SELF, FuzzyParameters
from fuzzy_dbscan.entrypoints.cluster import analyze
from fuzzy_dbscan.infrastructure.backend import get_metric, make_neighbor_search


class FuzzyDBSCANClustering(ClusterMixin, BaseEstimator):
    """FuzzyDBSCAN with the DBSCAN estimator interface.

    Parameters
    ----------
    eps_min, eps_max : float
        Fuzzy neighborhood radius interval.
    pts_min, pts_max : float
        Fuzzy weighted-density interval.
    metric : str
        euclidean, cityblock/manhattan, chebyshev, minkowski or cosine.
    p : float, optional
        Minkowski order when ``metric="minkowski"``.
    algorithm : str
        Neighbor search: auto, brute, kd_tree or ball_tree. Does not affect results.
    count_self : bool
        Whether a point counts towards its own density.

    Attributes
    ----------
    labels_ : ndarray of shape (n_samples,)
        Crisp labels: core cluster, strongest border cluster, or -1 for noise.
    membership_ : ndarray of shape (n_samples, n_clusters_)
        Fuzzy degree of each sample in each cluster.
    categories_ : ndarray of shape (n_samples,)
        "core", "border" or "noise".
    core_sample_indices_ : ndarray
        Indices of samples with positive core membership.
    assignments_ : list of Assignment
        Raw fuzzy output; border samples may appear more than once.
    """

    def __init__(
        self,
        eps_min: float = 0.5,
        eps_max: float = 1.0,
        pts_min: float = 1.0,
        pts_max: float = 5.0,
        metric: str = "euclidean",
        p: Optional[float] = None,
        algorithm: str = "auto",
        count_self: bool = INCLUDE_SELF,
    ):
        self.eps_min = eps_min
        self.eps_max = eps_max
        self.pts_min = pts_min
        self.pts_max = pts_max
        self.metric = metric
        self.p = p
        self.algorithm = algorithm
        self.count_self = count_self

    def fit(self, X, y=None):
        X = check_array(X, dtype=np.float64)
        self.n_features_in_ = X.shape[1]

        params = FuzzyParameters(
            eps_min=self.eps_min,
            eps_max=self.eps_max,
            pts_min=self.pts_min,
            pts_max=self.pts_max,
            count_self=self.count_self,
        )
        result = analyze(
            X,
            params,
            distance_fn=get_metric(self.metric, self.p),
            neighbor_search=make_neighbor_search(self.algorithm, self.metric, self.p),
        )

        n = result.n_points
        k = result.n_clusters
        self.assignments_ = list(result.assignments)
        self.n_clusters_ = k
        self.labels_ = np.asarray(crisp_labels(self.assignments_, n), dtype=int)
        self.membership_ = np.asarray(
            membership_matrix(self.assignments_, n, k), dtype=np.float64
        ).reshape(n, k)
        categories = np.empty(n, dtype=object)
        for a in self.assignments_:
            categories[a.index] = a.category.value
        self.categories_ = categories
        self.core_sample_indices_ = np.asarray(result.cores.core_indices(), dtype=int)
        return self
