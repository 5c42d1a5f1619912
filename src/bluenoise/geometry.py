"""2D point helpers shared by the grid and the sampler."""
from __future__ import annotations

import math
from typing import NamedTuple

from .errors import InvalidDimension, InvalidRadius

__all__ = [
    "Point",
    "add",
    "scale",
    "from_polar",
    "distance",
    "distance_squared",
    "in_domain",
    "domain_metrics",
    "check_domain",
    "check_radius",
]


class Point(NamedTuple):
    """An accepted sample position."""

    x: float
    y: float


def add(p: Point, v: tuple[float, float]) -> Point:
    return Point(p[0] + v[0], p[1] + v[1])


def scale(v: tuple[float, float], s: float) -> Point:
    return Point(v[0] * s, v[1] * s)


def from_polar(origin: Point, theta: float, rho: float) -> Point:
    """Return ``origin + rho * (cos theta, sin theta)``."""
    return add(origin, scale((math.cos(theta), math.sin(theta)), rho))


def distance_squared(p: tuple[float, float], q: tuple[float, float]) -> float:
    dx = p[0] - q[0]
    dy = p[1] - q[1]
    return dx * dx + dy * dy


def distance(p: tuple[float, float], q: tuple[float, float]) -> float:
    return math.sqrt(distance_squared(p, q))


def in_domain(p: tuple[float, float], width: float, height: float) -> bool:
    """Half-open containment test against ``[0, width) x [0, height)``."""
    return 0.0 <= p[0] < width and 0.0 <= p[1] < height


def domain_metrics(width: float, height: float) -> tuple[float, float]:
    """Return diagonal length and area of the sampling rectangle.

    Parameters
    ----------
    width, height:
        Size of the domain.

    Returns
    -------
    D, A: float
        Diagonal length and area.
    """
    w, h = float(width), float(height)
    return math.hypot(w, h), w * h


def check_domain(width: float, height: float) -> tuple[float, float]:
    """Validate the rectangle size and return it as floats."""
    try:
        w, h = float(width), float(height)
    except (TypeError, ValueError) as exc:
        raise InvalidDimension(f"width/height must be numbers, got {width!r}, {height!r}") from exc
    if not (math.isfinite(w) and math.isfinite(h)) or w <= 0 or h <= 0:
        raise InvalidDimension(f"width and height must be positive finite, got ({w}, {h})")
    return w, h


def check_radius(r: float) -> float:
    """Validate the minimum distance and return it as a float."""
    try:
        rr = float(r)
    except (TypeError, ValueError) as exc:
        raise InvalidRadius(f"r must be a number, got {r!r}") from exc
    if not math.isfinite(rr) or rr <= 0:
        raise InvalidRadius(f"r must be positive finite, got {rr}")
    return rr
