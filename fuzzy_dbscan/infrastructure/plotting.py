from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from fuzzy_dbscan.domain.model import Assignment, Category

logger = logging.getLogger(__name__)

# Black for noise, then ColorBrewer Set1.
COLORS = (
    "#000000",
    "#e41a1c",
    "#377eb8",
    "#4daf4a",
    "#984ea3",
    "#ff7f00",
    "#a65628",
    "#f781bf",
)


def save_cluster_plot(
    coords: np.ndarray,
    assignments: Iterable[Assignment],
    out_path: str,
    title: str = "FuzzyDBSCAN",
    marker_size: float = 18.0,
) -> bool:
    """Scatter the first two coordinates, one layer per assignment.

    Colour encodes the cluster, opacity the label; core points get a black edge.
    A border point in two clusters is drawn once per cluster. Returns False if the
    figure could not be written.
    """
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError as e:
        logger.warning("matplotlib unavailable, skipping plot: %s", e)
        return False

    xy = np.asarray(coords, dtype=float)
    if xy.ndim != 2 or xy.shape[1] < 2:
        logger.warning("Cluster plot needs at least 2D points, got shape %s", xy.shape)
        return False

    fig, ax = plt.subplots(figsize=(6, 6))
    for a in assignments:
        color = _color_for(a)
        ax.scatter(
            xy[a.index, 0],
            xy[a.index, 1],
            s=marker_size,
            c=color,
            alpha=(1.0 if a.category is Category.NOISE else a.label) * 0.9 + 0.1,
            edgecolors="k" if a.category is Category.CORE else "none",
            linewidths=0.5,
        )
    ax.set_aspect('equal', adjustable='box')
    ax.set_title(title)
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    fig.tight_layout()
    try:
        fig.savefig(out_path, dpi=150)
    except OSError as e:
        logger.warning("Could not save cluster plot to %s: %s", out_path, e)
        return False
    finally:
        plt.close(fig)
    return True


def _color_for(a: Assignment) -> str:
    if a.cluster is None:
        return COLORS[0]
    return COLORS[1 + a.cluster % (len(COLORS) - 1)]
