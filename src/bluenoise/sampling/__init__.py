"""Poisson-disk sampling engine."""
from .active import ActiveList
from .grid import AccelerationGrid
from .sampler import Sampler, SamplerStats

__all__ = ["ActiveList", "AccelerationGrid", "Sampler", "SamplerStats"]
