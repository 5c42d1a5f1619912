import math

import numpy as np
import pytest

from bluenoise import Sampler
from bluenoise.metrics import min_separation, nearest_neighbor_distances, packing_bound, summarize


def test_packing_bound_value():
    assert packing_bound(100, 100, 10) == pytest.approx(10000 / (math.pi * 25))


def test_nearest_neighbor_distances():
    pts = [(0, 0), (3, 4), (10, 0)]
    nn = nearest_neighbor_distances(pts)
    assert np.allclose(nn, [5.0, 5.0, math.hypot(7, 4)])
    assert min_separation(pts) == pytest.approx(5.0)


def test_degenerate_sets():
    assert min_separation([]) == math.inf
    assert min_separation([(1.0, 1.0)]) == math.inf


def test_summarize_sampler_output():
    pts = Sampler(100, 100, 10, {"seed": 42}).generate_all()
    s = summarize(pts, 100, 100, 10)
    assert s["count"] == len(pts)
    assert s["min_nn"] >= 10 - 1e-9
    assert 0 < s["fill_ratio"] <= 1
    assert s["in_domain"] is True


def test_summarize_single_point_has_no_neighbour_distances():
    s = summarize([(2.0, 2.0)], 5, 5, 10)
    assert s["count"] == 1
    assert s["min_nn"] is None and s["mean_nn"] is None
