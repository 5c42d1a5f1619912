import json

import numpy as np
import pytest

from bluenoise import Sampler
from bluenoise.io import load_points, save_points


@pytest.fixture
def pts():
    return Sampler(40, 40, 5, {"seed": 2}).generate_all()


@pytest.mark.parametrize("name", ["p.json", "p.csv", "p.npz"])
def test_save_then_load(tmp_path, pts, name):
    path = save_points(tmp_path / "nested" / name, pts, meta={"seed": 2})
    assert path.exists()
    assert np.array_equal(load_points(path), np.asarray(pts, dtype=float))


def test_json_keeps_meta(tmp_path, pts):
    path = save_points(tmp_path / "p.json", pts, meta={"seed": 2})
    data = json.loads(path.read_text("utf-8"))
    assert data["meta"] == {"seed": 2}
    assert len(data["points"]) == len(pts)


def test_unsupported_extension(tmp_path, pts):
    with pytest.raises(ValueError):
        save_points(tmp_path / "p.txt", pts)


def test_json_rejects_non_finite_meta(tmp_path, pts):
    with pytest.raises(ValueError):
        save_points(tmp_path / "p.json", pts, meta={"min_nn": float("inf")})
