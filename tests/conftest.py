import numpy as np
import pytest

from bluenoise import Sampler


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def make_sampler():
    """Build a seeded sampler; keyword args go into the config."""
    def _fn(width=100.0, height=100.0, r=10.0, **cfg):
        cfg.setdefault("seed", 0)
        return Sampler(width, height, r, cfg)
    return _fn


def pairwise_min(points):
    P = np.asarray(points, dtype=float).reshape(-1, 2)
    if P.shape[0] < 2:
        return np.inf
    d = np.linalg.norm(P[None, :, :] - P[:, None, :], axis=-1)
    np.fill_diagonal(d, np.inf)
    return d.min()
