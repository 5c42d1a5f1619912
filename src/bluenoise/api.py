"""Array-level helpers around :class:`~bluenoise.sampling.Sampler`."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import numpy as np

from bluenoise.config.loader import DEFAULT_CONFIG_PATH, load_profile
from bluenoise.rng import UniformSource
from bluenoise.sampling import Sampler

__all__ = ["poisson_disc", "sample_from_config"]


def poisson_disc(
    rng: UniformSource,
    width: float,
    height: float,
    r_min: float,
    k: int = 30,
    x0: float = 0.0,
    y0: float = 0.0,
    max_points: int | None = None,
) -> np.ndarray:
    """Generate 2D Poisson-disc samples inside a rectangle.

    Parameters
    ----------
    rng : np.random.Generator
        Random source (anything with ``random()``).
    width, height : float
        Size of the sampling rectangle.
    r_min : float
        Minimum distance between samples.
    k : int, optional
        Candidates per active point, by default ``30``.
    x0, y0 : float, optional
        Origin of the rectangle, by default ``(0,0)``.
    max_points : int, optional
        Stop after this many samples.

    Returns
    -------
    np.ndarray
        ``(N, 2)`` samples in acceptance order.
    """
    cfg = {"rejection_limit": k, "max_points": max_points}
    sampler = Sampler(width, height, r_min, cfg, source=rng)
    sampler.generate_all()
    pts = sampler.as_array()
    if x0 or y0:
        pts = pts + np.array([x0, y0], dtype=float)
    return pts


def sample_from_config(
    path: str | Path = DEFAULT_CONFIG_PATH,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Sampler:
    """Build a ready-to-run sampler from a YAML profile.

    The profile must define a ``domain`` section (directly or via
    ``overrides``).
    """
    profile = load_profile(path, overrides)
    if profile.domain is None:
        raise ValueError(f"no 'domain' section in {path} or overrides")
    d = profile.domain
    return Sampler(d.width, d.height, d.radius, profile.sampler)
