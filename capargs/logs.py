"""Logging helpers.

The library only ever logs through the ``capargs`` logger hierarchy and
installs a ``NullHandler`` on it; applications decide where output goes.
``enable_debug_logging`` is the switch the demo CLI and ``CAPARGS_DEBUG``
use to print parser diagnostics on stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

__all__ = ["LOGGER_NAME", "get_logger", "enable_debug_logging", "disable_debug_logging"]

LOGGER_NAME = "capargs"
_DEBUG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class _DebugHandler(logging.StreamHandler):
    """Marker subclass so repeated enables can find the installed handler."""


def get_logger(name: str | None = None) -> logging.Logger:
    if not name:
        return logging.getLogger(LOGGER_NAME)
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def enable_debug_logging(stream: Optional[IO[str]] = None) -> logging.Handler:
    logger = get_logger()
    for handler in logger.handlers:
        if isinstance(handler, _DebugHandler):
            return handler
    handler = _DebugHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_DEBUG_FORMAT))
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler


def disable_debug_logging() -> None:
    logger = get_logger()
    for handler in list(logger.handlers):
        if isinstance(handler, _DebugHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
