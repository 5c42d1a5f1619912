from __future__ import annotations

import logging
import os
from typing import Optional

_LEVEL_MAP = {
    "none": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

ENV_LEVEL = "BLUENOISE_LOG_LEVEL"


def _normalize(level: Optional[str]) -> int:
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().lower(), logging.WARNING)


def init_logging(level: int | str | None = None) -> int:
    """Set up the root and ``bluenoise`` loggers without stacking handlers.

    ``level`` may be ``"none"``, ``"info"``, ``"debug"`` or a numeric level.
    ``BLUENOISE_LOG_LEVEL`` in the environment wins over the argument.
    Returns the level applied.
    """
    env = os.getenv(ENV_LEVEL)
    if env:
        level = env
    lvl = _normalize(level) if isinstance(level, str) or level is None else int(level)

    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    datefmt = "%H:%M:%S"

    root = logging.getLogger()
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
        root.addHandler(h)
    root.setLevel(lvl)

    logging.getLogger("bluenoise").setLevel(lvl)
    return lvl
