"""Matplotlib helpers for inspecting sample sets."""
from .backend import detect_backend, setup_matplotlib_backend
from .plot import plot_points, save_plot

__all__ = ["detect_backend", "setup_matplotlib_backend", "plot_points", "save_plot"]
