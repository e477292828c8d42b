# folio/logging/logger.py
"""
Unified logging setup for folio.

All modules use:
    from folio.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once per CLI invocation, via configure_logging().
Library code only ever asks for loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER = "folio"

_HANDLER_MARK = "_folio_handler"


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the "folio" logger hierarchy.

    Safe to call multiple times: the handler installed by a previous call
    is replaced, never duplicated.
    """
    numeric_level = _coerce_level(level)
    root = logging.getLogger(ROOT_LOGGER)
    reset_logging()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _HANDLER_MARK, True)
    root.addHandler(handler)

    root.setLevel(numeric_level)


def reset_logging() -> None:
    """Remove the handler installed by configure_logging(), if any."""
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Example:
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)


__all__ = ["configure_logging", "reset_logging", "get_logger", "DEFAULT_FORMAT"]
