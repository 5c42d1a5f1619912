"""Configuration loading utilities."""
from .loader import load_profile, load_sampler_config
from .schema import DomainConfig, SampleProfile, SamplerConfig

__all__ = ["load_profile", "load_sampler_config", "DomainConfig", "SampleProfile", "SamplerConfig"]
