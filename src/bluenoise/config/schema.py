"""Pydantic models for sampler and domain configuration."""
from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["SamplerConfig", "DomainConfig", "SampleProfile"]


class SamplerConfig(BaseModel):
    """Tuning knobs of a single sampling run.

    ``rejection_limit`` is the number of candidates tried around an active
    sample before it is retired.  ``seed=None`` means a fresh entropy seed;
    seeds must be non-negative since they go straight to
    ``numpy.random.default_rng``.
    """

    max_points: int | None = Field(default=None, ge=1)
    rejection_limit: int = Field(default=30, ge=0)
    seed: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")


class DomainConfig(BaseModel):
    width: float
    height: float
    radius: float

    model_config = ConfigDict(extra="forbid")

    # Positivity is left to the sampler so callers get InvalidDimension /
    # InvalidRadius rather than a generic validation error.
    @field_validator("width", "height", "radius")
    @classmethod
    def _check_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("must be finite")
        return v


class SampleProfile(BaseModel):
    sampler: SamplerConfig = Field(default_factory=SamplerConfig)
    domain: DomainConfig | None = None
    log_level: Literal["none", "info", "debug"] = "none"

    model_config = ConfigDict(extra="forbid")
