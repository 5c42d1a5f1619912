"""Sampler configuration loader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from bluenoise.utils.dict_merge import deep_update
from .schema import SampleProfile, SamplerConfig

__all__ = ["load_profile", "load_sampler_config", "DEFAULT_CONFIG_PATH"]

DEFAULT_CONFIG_PATH = "configs/sampler.yaml"

_SECTIONS = set(SampleProfile.model_fields)


def _read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise TypeError(f"Top-level YAML at {path} must be a mapping")
        return data


def _ensure_known_sections(d: Mapping[str, Any]) -> None:
    extra = set(d.keys()) - _SECTIONS
    if extra:
        raise ValueError(f"unexpected top-level keys: {sorted(extra)}")


def load_profile(
    path: str | Path = DEFAULT_CONFIG_PATH,
    overrides: Optional[Mapping[str, Any]] = None,
) -> SampleProfile:
    """Read ``path`` (missing file means defaults), apply ``overrides`` and validate."""

    raw = _read_yaml(path)
    _ensure_known_sections(raw)

    cfg: Dict[str, Any] = deep_update({}, raw)
    if overrides:
        _ensure_known_sections(overrides)
        cfg = deep_update(cfg, overrides)

    return SampleProfile.model_validate(cfg)


def load_sampler_config(
    path: str | Path = DEFAULT_CONFIG_PATH,
    overrides: Optional[Mapping[str, Any]] = None,
) -> SamplerConfig:
    return load_profile(path, overrides).sampler
