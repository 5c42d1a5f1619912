"""Uniform random sources accepted by the sampler.

The sampler only ever asks for one thing: a float uniform in ``[0, 1)``.
Anything exposing ``random() -> float`` qualifies, which covers
:class:`numpy.random.Generator`, :class:`random.Random` and the
:class:`FixedSequence` helper below.

The reference source is ``numpy.random.default_rng(seed)`` (PCG64).  Runs
with the same seed and parameters produce bit-identical point lists.
"""
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

import numpy as np

__all__ = ["UniformSource", "FixedSequence", "make_source"]


@runtime_checkable
class UniformSource(Protocol):
    def random(self) -> float:
        ...


class FixedSequence:
    """Replays a fixed list of values in ``[0, 1)``, wrapping around at the end."""

    def __init__(self, values: Iterable[float]):
        vals = [float(v) for v in values]
        if not vals:
            raise ValueError("FixedSequence needs at least one value")
        for i, v in enumerate(vals):
            if not 0.0 <= v < 1.0:
                raise ValueError(f"values[{i}]={v} outside [0, 1)")
        self._values = vals
        self._pos = 0

    @property
    def draws(self) -> int:
        return self._pos

    def random(self) -> float:
        v = self._values[self._pos % len(self._values)]
        self._pos += 1
        return v


def make_source(seed: int | None = None) -> np.random.Generator:
    """Return the default source; ``seed=None`` draws entropy from the OS."""
    return np.random.default_rng(seed)
