# fuzzy_dbscan/synthetic.py
from __future__ import annotations

import math
from typing import List, Optional

import numpy as np

from fuzzy_dbscan.infrastructure.points import Point

DEFAULT_SEED = 1


# ---------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------

def _rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(DEFAULT_SEED if seed is None else int(seed))


# ---------------------------------------------------------------------
# 1) Gaussian blob clipped to a disc
# ---------------------------------------------------------------------

def gaussian_circle(
    n: int,
    cx: float = 0.0,
    cy: float = 0.0,
    r: float = 10.0,
    seed: Optional[int] = None,
) -> List[Point]:
    """
    Sample `n` points from an isotropic Gaussian centred on (cx, cy) with
    sigma = r / 3, rejecting samples that fall outside the disc of radius `r`.

    The same seed always yields the same points.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    if r <= 0:
        raise ValueError("r must be > 0")

    rng = _rng(seed)
    sigma = r / 3.0
    points: List[Point] = []
    while len(points) < n:
        x, y = rng.normal((cx, cy), sigma)
        if math.hypot(x - cx, y - cy) <= r:
            points.append(Point.of(float(x), float(y)))
    return points


# ---------------------------------------------------------------------
# 2) Disc with density falling off towards the rim
# ---------------------------------------------------------------------

def uniform_circle(
    n: int,
    cx: float = 0.0,
    cy: float = 0.0,
    r: float = 10.0,
    seed: Optional[int] = None,
) -> List[Point]:
    """
    Points on a disc of radius `r`: uniform angle, radius from the folded sum of
    two uniforms (triangular on [0, 1]).
    """
    if n < 0:
        raise ValueError("n must be >= 0")

    rng = _rng(seed)
    t = 2.0 * np.pi * rng.random(n)
    u = rng.random(n) + rng.random(n)
    u = np.where(u > 1.0, 2.0 - u, u)
    xs = cx + r * u * np.cos(t)
    ys = cy + r * u * np.sin(t)
    return [Point.of(float(x), float(y)) for x, y in zip(xs, ys)]


# ---------------------------------------------------------------------
# 3) Two touching Gaussian discs
# ---------------------------------------------------------------------

def bimodal_gaussian(n: int = 100, r: float = 10.0, seed: Optional[int] = None) -> List[Point]:
    """Two `gaussian_circle`s of `n` points each, centred at (0, 0) and (2r, 0)."""
    base = DEFAULT_SEED if seed is None else int(seed)
    return gaussian_circle(n, 0.0, 0.0, r, seed=base) + gaussian_circle(n, 2.0 * r, 0.0, r, seed=base + 1)
