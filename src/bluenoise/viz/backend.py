from __future__ import annotations

import importlib
import importlib.util
import os
import sys
from typing import Optional


def _has_display() -> bool:
    """Best-effort check for a GUI display."""
    if sys.platform.startswith("linux"):
        if not os.environ.get("DISPLAY") and not os.environ.get("WAYLAND_DISPLAY"):
            return False
    return True


def detect_backend(prefer: str = "TkAgg") -> str:
    """Decide which matplotlib backend to use."""
    env = os.environ.get("MPLBACKEND")
    if env:
        return env
    if prefer.lower() in ("tkagg", "tk") and _has_display():
        if importlib.util.find_spec("tkinter") is not None:
            return "TkAgg"
    return "Agg"


def setup_matplotlib_backend(prefer: str = "TkAgg", force: Optional[str] = None) -> str:
    """Pick a backend before pyplot is imported; headless hosts get ``Agg``.

    If pyplot is already imported the current backend is kept.  Returns the
    backend in use.
    """
    import matplotlib

    if "matplotlib.pyplot" in sys.modules:
        return matplotlib.get_backend()

    backend = force or detect_backend(prefer=prefer)
    matplotlib.use(backend, force=True)
    importlib.import_module("matplotlib.pyplot")
    return matplotlib.get_backend()


__all__ = ["detect_backend", "setup_matplotlib_backend"]
