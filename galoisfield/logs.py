"""Library loggers.

All loggers hang off the ``galoisfield`` root logger, which carries a
``NullHandler``; applications attach their own handlers.
"""

from __future__ import annotations

import logging
import warnings
from typing import Optional

from galoisfield.config import LOG_LEVEL

ROOT_LOGGER_NAME = "galoisfield"

_root = logging.getLogger(ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the library root logger."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def apply_level(name: Optional[str]) -> None:
    """Set the library logger level from a level name such as ``"DEBUG"``.

    ``None`` or an empty name leaves the level alone.  An unknown name
    emits a ``RuntimeWarning`` and also leaves the level alone.
    """
    if not name:
        return
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        warnings.warn(
            f"ignoring unknown GALOISFIELD_LOG_LEVEL {name!r}",
            RuntimeWarning,
            stacklevel=2,
        )
        return
    _root.setLevel(level)


apply_level(LOG_LEVEL)
