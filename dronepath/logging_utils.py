"""Mini README: Application-wide logging helpers for Dronepath.

Structure:
    * get_logger - factory that returns module loggers with baseline setup.
    * configure_root_logger - optional helper to adjust global logging level.

Usage:
    Modules import ``get_logger`` to create contextual loggers that include
    module names. Configuration is performed exactly once so repeated imports
    (or the CLI and web entry points both calling in) never stack handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with a timestamped formatter."""

    global _LOGGER_INITIALISED
    resolved_level = level.upper() if isinstance(level, str) else level
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        root_logger.setLevel(resolved_level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(resolved_level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
