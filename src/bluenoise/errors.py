"""Exceptions raised when a sampler is configured with an unusable domain."""
from __future__ import annotations

__all__ = ["BlueNoiseError", "InvalidDimension", "InvalidRadius"]


class BlueNoiseError(ValueError):
    """Base class for sampler construction errors."""


class InvalidDimension(BlueNoiseError):
    """``width`` or ``height`` is not a positive finite number."""


class InvalidRadius(BlueNoiseError):
    """The minimum distance ``r`` is not a positive finite number."""
