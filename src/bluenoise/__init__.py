"""bluenoise: Poisson-disk sampling over a rectangle.

External users can simply ``from bluenoise import Sampler``::

    sampler = Sampler(100.0, 100.0, 10.0, {"seed": 42})
    points = sampler.generate_all()
"""

from .api import poisson_disc, sample_from_config
from .config.schema import SamplerConfig
from .errors import BlueNoiseError, InvalidDimension, InvalidRadius
from .geometry import Point
from .rng import FixedSequence, make_source
from .sampling import Sampler

__all__ = [
    "Sampler",
    "SamplerConfig",
    "Point",
    "poisson_disc",
    "sample_from_config",
    "BlueNoiseError",
    "InvalidDimension",
    "InvalidRadius",
    "FixedSequence",
    "make_source",
]
