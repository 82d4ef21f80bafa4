"""Distance functions and coordinate extraction."""
from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from fuzzy_dbscan.ports import DistanceFn

METRIC_ALIASES = {
    "manhattan": "cityblock",
    "l1": "cityblock",
    "l2": "euclidean",
}

SUPPORTED_METRICS = ("euclidean", "cityblock", "chebyshev", "minkowski", "cosine")


def coordinates(point: Any) -> Any:
    """Numeric coordinates of a point: its `coords` attribute or the point itself."""
    return getattr(point, "coords", point)


def as_coordinate_array(points: Sequence[Any]) -> np.ndarray:
    """Stack points into an (n, d) float64 array."""
    if isinstance(points, np.ndarray):
        arr = points.astype(np.float64, copy=False)
    else:
        arr = np.asarray([coordinates(p) for p in points], dtype=np.float64)
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    return arr


def euclidean_distance(a: Any, b: Any) -> float:
    return float(np.linalg.norm(np.subtract(coordinates(a), coordinates(b), dtype=np.float64)))


def canonical_metric(name: str) -> str:
    name = METRIC_ALIASES.get(name.lower(), name.lower())
    if name not in SUPPORTED_METRICS:
        raise ValueError(f"Unsupported metric {name!r}; expected one of {', '.join(SUPPORTED_METRICS)}")
    return name


def get_metric(name: str, p: Optional[float] = None) -> DistanceFn:
    """Resolve a metric name to a point distance backed by scipy.spatial.distance."""
    from scipy.spatial import distance as ssd

    name = canonical_metric(name)
    if name == "euclidean":
        return euclidean_distance
    if name == "minkowski":
        order = 2.0 if p is None else float(p)
        return lambda a, b: float(ssd.minkowski(coordinates(a), coordinates(b), order))

    fn = getattr(ssd, name)
    return lambda a, b: float(fn(coordinates(a), coordinates(b)))


def minkowski_order(name: str, p: Optional[float] = None) -> Optional[float]:
    """Minkowski p for metrics a KD-tree can answer, else None."""
    name = canonical_metric(name)
    if name == "euclidean":
        return 2.0
    if name == "cityblock":
        return 1.0
    if name == "chebyshev":
        return float(np.inf)
    if name == "minkowski":
        return 2.0 if p is None else float(p)
    return None
