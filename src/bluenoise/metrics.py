"""Quality statistics for a finished point set."""
from __future__ import annotations

import math
from typing import Any, Dict, Sequence

import numpy as np
from scipy.spatial import cKDTree

from bluenoise.geometry import domain_metrics

__all__ = ["packing_bound", "nearest_neighbor_distances", "min_separation", "summarize"]


def _as_points(points) -> np.ndarray:
    return np.asarray(points, dtype=float).reshape(-1, 2)


def packing_bound(width: float, height: float, r: float) -> float:
    """Upper bound on the sample count: ``area / (pi (r/2)^2)``."""
    _, area = domain_metrics(width, height)
    return area / (math.pi * (0.5 * r) ** 2)


def nearest_neighbor_distances(points: Sequence[Sequence[float]]) -> np.ndarray:
    """Distance from each sample to its closest neighbour (``inf`` if alone)."""
    P = _as_points(points)
    if P.shape[0] < 2:
        return np.full((P.shape[0],), np.inf)
    d, _ = cKDTree(P).query(P, k=2)
    return d[:, 1]


def min_separation(points: Sequence[Sequence[float]]) -> float:
    nn = nearest_neighbor_distances(points)
    return float(nn.min()) if nn.size else math.inf


def summarize(points, width: float, height: float, r: float) -> Dict[str, Any]:
    """Return count, packing bound, fill ratio and neighbour distances.

    ``min_nn``/``mean_nn`` are ``None`` for fewer than two samples so the
    result stays valid JSON.
    """
    P = _as_points(points)
    nn = nearest_neighbor_distances(P)
    bound = packing_bound(width, height, r)
    finite = nn[np.isfinite(nn)]
    return {
        "count": int(P.shape[0]),
        "packing_bound": float(bound),
        "fill_ratio": float(P.shape[0] / bound),
        "min_nn": float(finite.min()) if finite.size else None,
        "mean_nn": float(finite.mean()) if finite.size else None,
        "in_domain": bool(
            np.all((P[:, 0] >= 0) & (P[:, 0] < width) & (P[:, 1] >= 0) & (P[:, 1] < height))
        ),
    }
