"""Mini README: Application-wide logging helpers for WalletLedger.

Structure:
    * configure_root_logger - installs a single stream handler on the root logger.
    * get_logger - factory returning module loggers with baseline configuration.

Usage:
    Modules create ``LOGGER = get_logger(__name__)`` at import time. The entry
    point may call ``configure_root_logger`` first with the configured level;
    later calls are ignored so reloading modules never stacks handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    """Translate level names such as ``"debug"`` into logging constants."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Install the shared handler once; an explicit level is always applied."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(_resolve_level(level))
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(_resolve_level(logging.INFO if level is None else level))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
