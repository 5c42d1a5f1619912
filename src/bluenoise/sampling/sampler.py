"""Bridson Poisson-disk sampler over a rectangle.

Candidates are drawn area-uniformly from the annulus ``[r, 2r)`` around a
randomly chosen active sample (``rho = r * sqrt(1 + 3u)``), which packs
noticeably denser than drawing the radius uniformly.

Random draws happen in a fixed order so that a seed pins down the output:
seed ``x``, seed ``y``; then per pick one draw for the active entry and per
attempt one draw for the angle followed by one for the radius.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping

import numpy as np

from bluenoise.config.schema import SamplerConfig
from bluenoise.geometry import Point, check_domain, check_radius, from_polar
from bluenoise.rng import UniformSource, make_source
from bluenoise.utils.logging import logger

from .active import ActiveList
from .grid import AccelerationGrid

__all__ = ["Sampler", "SamplerStats"]

TWO_PI = 2.0 * math.pi


@dataclass
class SamplerStats:
    picks: int = 0
    candidates: int = 0
    rejected: int = 0
    retired: int = 0


def _coerce_config(config: SamplerConfig | Mapping[str, Any] | None) -> SamplerConfig:
    if config is None:
        return SamplerConfig()
    if isinstance(config, SamplerConfig):
        return config
    return SamplerConfig.model_validate(dict(config))


class Sampler:
    """One Poisson-disk sampling run over ``[0, width) x [0, height)``.

    Parameters
    ----------
    width, height : float
        Size of the sampling rectangle.
    r : float
        Minimum distance between any two samples.
    config : SamplerConfig or mapping, optional
        ``max_points``, ``rejection_limit`` (``k``) and ``seed``.
    source : object with ``random() -> float``, optional
        Uniform ``[0, 1)`` source.  Overrides ``config.seed`` when given.

    A sampler is single use.  Iterate it (or call :meth:`next`) to pull
    samples one at a time, or call :meth:`generate_all` to run it out.
    """

    def __init__(
        self,
        width: float,
        height: float,
        r: float,
        config: SamplerConfig | Mapping[str, Any] | None = None,
        *,
        source: UniformSource | None = None,
    ):
        self.radius = check_radius(r)
        self.width, self.height = check_domain(width, height)
        self.config = _coerce_config(config)
        self.rejection_limit = self.config.rejection_limit
        self.max_points = self.config.max_points
        self._source = source if source is not None else make_source(self.config.seed)

        self._samples: List[Point] = []
        self._grid = AccelerationGrid(self.width, self.height, self.radius)
        self._active = ActiveList()
        self.stats = SamplerStats()
        self._emitted = 0
        self._exhausted = False
        logger.debug(
            "sampler %gx%g r=%g grid=%dx%d cell=%.6g k=%d cap=%s",
            self.width,
            self.height,
            self.radius,
            self._grid.cols,
            self._grid.rows,
            self._grid.cell_size,
            self.rejection_limit,
            self.max_points,
        )

        self._accept(self._seed_point())

    # ------------------------------------------------------------------
    # state
    # ------------------------------------------------------------------
    @property
    def points(self) -> tuple[Point, ...]:
        """Every sample accepted so far, in acceptance order."""
        return tuple(self._samples)

    @property
    def active_count(self) -> int:
        return len(self._active)

    @property
    def grid(self) -> AccelerationGrid:
        return self._grid

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def as_array(self) -> np.ndarray:
        """Accepted samples as an ``(N, 2)`` float array."""
        return np.asarray(self._samples, dtype=float).reshape(-1, 2)

    def _at_cap(self) -> bool:
        return self.max_points is not None and len(self._samples) >= self.max_points

    # ------------------------------------------------------------------
    # generation
    # ------------------------------------------------------------------
    def _seed_point(self) -> Point:
        x = self._source.random() * self.width
        y = self._source.random() * self.height
        # u * w can round up to w for u just below 1
        if x >= self.width:
            x = math.nextafter(self.width, 0.0)
        if y >= self.height:
            y = math.nextafter(self.height, 0.0)
        return Point(x, y)

    def _accept(self, p: Point) -> Point:
        idx = len(self._samples)
        self._samples.append(p)
        self._grid.insert(p, idx)
        self._active.add(idx)
        return p

    def _candidate(self, parent: Point) -> Point:
        theta = TWO_PI * self._source.random()
        rho = self.radius * math.sqrt(1.0 + 3.0 * self._source.random())
        return from_polar(parent, theta, rho)

    def _step(self) -> Point | None:
        """Run one pick; return the accepted sample or ``None`` if the pick retired."""
        pos, idx = self._active.pick_random(self._source)
        parent = self._samples[idx]
        self.stats.picks += 1
        for _ in range(self.rejection_limit):
            cand = self._candidate(parent)
            self.stats.candidates += 1
            if self._grid.is_valid(cand, self._samples, self.radius):
                return self._accept(cand)
            self.stats.rejected += 1
        self._active.remove_at(pos)
        self.stats.retired += 1
        return None

    def _advance(self) -> Point | None:
        """Produce the next sample not yet handed out, or ``None`` when done."""
        if self._emitted < len(self._samples):
            p = self._samples[self._emitted]
            self._emitted += 1
            return p
        while not self._active.is_empty() and not self._at_cap():
            p = self._step()
            if p is not None:
                self._emitted += 1
                return p
        return None

    def _finish(self) -> None:
        self._exhausted = True
        logger.info(
            "sampler done: %d points, %d candidates (%d rejected), %d retired",
            len(self._samples),
            self.stats.candidates,
            self.stats.rejected,
            self.stats.retired,
        )

    def next(self) -> Point | None:
        """Return the next accepted sample, or ``None`` once the run is over."""
        if self._exhausted:
            return None
        p = self._advance()
        if p is None:
            self._finish()
        return p

    def __iter__(self) -> Iterator[Point]:
        return self

    def __next__(self) -> Point:
        p = self.next()
        if p is None:
            raise StopIteration
        return p

    def generate_all(self) -> List[Point]:
        """Run to completion and return all accepted samples, seed first."""
        while self.next() is not None:
            pass
        return list(self._samples)
