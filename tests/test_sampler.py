import math
import random

import numpy as np
import pytest
from conftest import pairwise_min

from bluenoise import FixedSequence, InvalidDimension, InvalidRadius, Sampler, make_source
from bluenoise.metrics import packing_bound


def _in_domain(points, w, h):
    P = np.asarray(points, dtype=float).reshape(-1, 2)
    return bool(np.all((P[:, 0] >= 0) & (P[:, 0] < w) & (P[:, 1] >= 0) & (P[:, 1] < h)))


@pytest.mark.parametrize("w,h,r,seed", [(100, 100, 10, 0), (60, 25, 3, 1), (7.5, 40, 1.5, 2)])
def test_separation_and_containment(w, h, r, seed):
    pts = Sampler(w, h, r, {"seed": seed}).generate_all()
    assert len(pts) > 1
    assert pairwise_min(pts) >= r - 1e-9
    assert _in_domain(pts, w, h)


@pytest.mark.parametrize("w,h,r", [(100, 100, 10), (30, 30, 1), (50, 10, 4), (3, 3, 0.5)])
def test_packing_bound(w, h, r):
    pts = Sampler(w, h, r, {"seed": 3}).generate_all()
    assert len(pts) <= packing_bound(w, h, r)


def test_same_seed_same_points():
    a = Sampler(100, 100, 10, {"seed": 42}).generate_all()
    b = Sampler(100, 100, 10, {"seed": 42}).generate_all()
    assert a == b
    c = Sampler(100, 100, 10, source=make_source(42)).generate_all()
    assert a == c


def test_different_seed_different_points():
    a = Sampler(100, 100, 10, {"seed": 1}).generate_all()
    b = Sampler(100, 100, 10, {"seed": 2}).generate_all()
    assert a != b


def test_stdlib_random_is_a_valid_source():
    pts = Sampler(40, 40, 4, source=random.Random(5)).generate_all()
    assert pairwise_min(pts) >= 4 - 1e-9


def test_more_retries_pack_denser():
    def mean_count(k):
        return np.mean([
            len(Sampler(30, 30, 2, {"seed": s, "rejection_limit": k}).generate_all())
            for s in range(20)
        ])

    assert mean_count(30) >= mean_count(1)


def test_radius_larger_than_domain_gives_seed_only():
    s = Sampler(5, 5, 10, {"seed": 0})
    assert len(s.generate_all()) == 1


def test_zero_retries_gives_seed_only():
    s = Sampler(100, 100, 10, {"seed": 0, "rejection_limit": 0})
    pts = s.generate_all()
    assert len(pts) == 1
    assert s.stats.retired == 1 and s.stats.candidates == 0


def test_cap_of_one():
    assert len(Sampler(100, 100, 1, {"seed": 0, "max_points": 1}).generate_all()) == 1


def test_cap_is_prefix_of_uncapped_run():
    capped = Sampler(100, 100, 5, {"seed": 9, "max_points": 50}).generate_all()
    full = Sampler(100, 100, 5, {"seed": 9}).generate_all()
    assert len(capped) == 50
    assert capped == full[:50]
    assert pairwise_min(capped) >= 5 - 1e-9


def test_incremental_matches_eager():
    lazy = list(Sampler(60, 60, 5, {"seed": 4}))
    eager = Sampler(60, 60, 5, {"seed": 4}).generate_all()
    assert lazy == eager


def test_first_pull_is_the_seed_point():
    s = Sampler(60, 60, 5, {"seed": 4})
    seed = s.points[0]
    assert s.next() == seed
    assert len(s.points) == 1


def test_exhausted_stays_exhausted():
    s = Sampler(20, 20, 5, {"seed": 0})
    pts = list(s)
    assert s.exhausted and s.active_count == 0
    assert s.next() is None
    with pytest.raises(StopIteration):
        next(s)
    assert s.generate_all() == pts


def test_generate_all_after_partial_pull():
    s = Sampler(60, 60, 5, {"seed": 11})
    head = [s.next() for _ in range(5)]
    rest = s.generate_all()
    assert rest[:5] == head
    assert rest == Sampler(60, 60, 5, {"seed": 11}).generate_all()


def test_fixed_sequence_walk():
    # every draw is 0.5: seed at the centre, candidates always point left
    # at distance r*sqrt(2.5), so samples march to the left edge.
    src = FixedSequence([0.5])
    s = Sampler(10, 10, 1, {"rejection_limit": 3}, source=src)
    pts = s.generate_all()
    step = math.sqrt(2.5)
    assert [p.x for p in pts] == pytest.approx([5.0 - i * step for i in range(4)])
    assert [p.y for p in pts] == pytest.approx([5.0] * 4)
    assert s.stats.retired == 4


def test_as_array_and_points():
    s = Sampler(30, 30, 3, {"seed": 0})
    pts = s.generate_all()
    arr = s.as_array()
    assert arr.shape == (len(pts), 2)
    assert s.points == tuple(pts)


def test_construction_errors():
    with pytest.raises(InvalidRadius):
        Sampler(10, 10, 0)
    with pytest.raises(InvalidRadius):
        Sampler(10, 10, -2)
    with pytest.raises(InvalidDimension):
        Sampler(0, 10, 1)
    with pytest.raises(InvalidDimension):
        Sampler(10, -5, 1)
    with pytest.raises(ValueError):
        Sampler(10, 10, 1, {"max_points": 0})
    with pytest.raises(ValueError):
        Sampler(10, 10, 1, {"rejection_limit": -1})
    with pytest.raises(ValueError):
        Sampler(10, 10, 1, {"samples": 4})


def test_debug_log_reports_grid_as_cols_by_rows(caplog):
    import logging

    caplog.set_level(logging.DEBUG, logger="bluenoise")
    s = Sampler(10, 5, 1, {"seed": 0})
    rows, cols = s.grid.shape
    msgs = [rec.getMessage() for rec in caplog.records]
    assert any(f"sampler 10x5 r=1 grid={cols}x{rows}" in m for m in msgs)
