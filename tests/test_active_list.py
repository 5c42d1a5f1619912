import pytest

from bluenoise.rng import FixedSequence
from bluenoise.sampling.active import ActiveList


def test_add_and_len():
    a = ActiveList()
    assert a.is_empty() and len(a) == 0
    for i in range(3):
        a.add(i)
    assert not a.is_empty() and len(a) == 3
    assert 2 in a


def test_remove_swaps_last_into_slot():
    a = ActiveList()
    for i in (10, 11, 12, 13):
        a.add(i)
    assert a.remove_at(1) == 11
    assert len(a) == 3
    assert 11 not in a and 13 in a
    # last slot removal just shrinks
    assert a.remove_at(2) == 12
    assert len(a) == 2


def test_pick_random_is_uniform_over_positions():
    a = ActiveList()
    for i in (5, 6, 7, 8):
        a.add(i)
    src = FixedSequence([0.0, 0.26, 0.5, 0.99])
    picks = [a.pick_random(src) for _ in range(4)]
    assert picks == [(0, 5), (1, 6), (2, 7), (3, 8)]
    assert src.draws == 4


def test_pick_from_empty_raises():
    with pytest.raises(IndexError):
        ActiveList().pick_random(FixedSequence([0.5]))
