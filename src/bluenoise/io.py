"""Saving and loading point sets."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np

__all__ = ["save_points", "load_points"]

_FORMATS = (".json", ".csv", ".npz")


def _suffix(path: Path) -> str:
    suf = path.suffix.lower()
    if suf not in _FORMATS:
        raise ValueError(f"unsupported point file '{path.name}', expected one of {_FORMATS}")
    return suf


def save_points(path: str | Path, points, meta: dict[str, Any] | None = None) -> Path:
    """Write ``points`` to ``path``; format follows the extension.

    ``meta`` is stored alongside the points for JSON and NPZ.
    """
    path = Path(path)
    suf = _suffix(path)
    P = np.asarray(points, dtype=float).reshape(-1, 2)
    path.parent.mkdir(parents=True, exist_ok=True)
    if suf == ".json":
        payload = {"points": P.tolist(), "meta": meta or {}}
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2, allow_nan=False)
    elif suf == ".csv":
        np.savetxt(path, P, delimiter=",", header="x,y", comments="", fmt="%.17g")
    else:
        np.savez_compressed(path, points=P, meta=np.array(meta or {}, dtype=object))
    return path


def load_points(path: str | Path) -> np.ndarray:
    path = Path(path)
    suf = _suffix(path)
    if suf == ".json":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return np.asarray(data["points"], dtype=float).reshape(-1, 2)
    if suf == ".csv":
        return np.loadtxt(path, delimiter=",", skiprows=1, dtype=float, ndmin=2).reshape(-1, 2)
    with np.load(path, allow_pickle=True) as z:
        return np.asarray(z["points"], dtype=float).reshape(-1, 2)
