"""Package-wide logger.

Every submodule logs through the ``bluenoise`` logger.  It is silent by
default (a ``NullHandler`` is installed) and can be switched on or off with
:func:`configure_logging`.
"""

import logging


logger = logging.getLogger("bluenoise")
logger.addHandler(logging.NullHandler())


def configure_logging(enabled: bool = True, level: int = logging.INFO) -> None:
    """Configure the global ``bluenoise`` logger.

    Parameters
    ----------
    enabled:
        If ``True`` (default) a ``StreamHandler`` is installed.  If ``False``
        logging output is suppressed.
    level:
        Level used when enabling the handler.  Per-pick sampler messages are
        emitted at ``DEBUG``.
    """

    logger.handlers.clear()

    if enabled:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(level)
    else:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)


__all__ = ["logger", "configure_logging"]
