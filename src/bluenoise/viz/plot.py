"""Scatter plots of sample sets."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np

from .backend import setup_matplotlib_backend

__all__ = ["plot_points", "save_plot"]


def plot_points(
    points,
    width: float,
    height: float,
    r: Optional[float] = None,
    ax=None,
    show_disks: bool = False,
    color: str = "#1f4e79",
):
    """Draw ``points`` inside the ``width x height`` frame and return the axes.

    With ``show_disks`` each sample gets a circle of radius ``r/2``; for a
    valid set those circles never overlap.
    """
    setup_matplotlib_backend(prefer="Agg")
    import matplotlib.pyplot as plt
    from matplotlib.collections import PatchCollection
    from matplotlib.patches import Circle, Rectangle

    P = np.asarray(points, dtype=float).reshape(-1, 2)
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6 * height / width))

    ax.add_patch(Rectangle((0, 0), width, height, fill=False, lw=0.8, ec="#444444"))
    if show_disks and r is not None and P.shape[0]:
        disks = [Circle((x, y), 0.5 * r) for x, y in P]
        ax.add_collection(PatchCollection(disks, facecolor="none", edgecolor=color, lw=0.5, alpha=0.6))
    ax.scatter(P[:, 0], P[:, 1], s=4, c=color)
    ax.set_xlim(0, width)
    ax.set_ylim(0, height)
    ax.set_aspect("equal")
    title = f"{P.shape[0]} samples"
    if r is not None:
        title += f", r={r:g}"
    ax.set_title(title)
    return ax


def save_plot(path: str | Path, points, width: float, height: float, r: Optional[float] = None, **kw) -> Path:
    """Render :func:`plot_points` to an image file."""
    setup_matplotlib_backend(prefer="Agg")
    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    ax = plot_points(points, width, height, r=r, **kw)
    fig = ax.figure
    fig.savefig(path, dpi=120, bbox_inches="tight")
    plt.close(fig)
    return path
