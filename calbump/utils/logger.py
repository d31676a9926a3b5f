"""
Logging utilities for calbump.

The increment engine is used both as a library (embedded in release
tooling) and through the ``calbump`` CLI. Library use must stay silent
unless the host configures logging, so every logger lives under the
``calbump`` namespace and gets a ``NullHandler`` by default. The CLI
calls :func:`setup_logging` once per invocation.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional

from calbump.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "calbump"

_logging_configured: bool = False
_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in ANSI colors.

    The record itself is left untouched so that other handlers attached
    to the same logger still see the plain level name.
    """

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if not (color and self.use_color and self._should_use_color()):
            return super().format(record)

        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original

    @staticmethod
    def _should_use_color() -> bool:
        """Colors only go to an interactive stderr outside CI."""
        if os.environ.get("NO_COLOR") or os.environ.get("CI"):
            return False
        try:
            return sys.stderr.isatty()
        except (AttributeError, OSError):
            return False


def level_for_verbosity(verbose: int) -> int:
    """Map a ``-v`` count to a logging level.

    ``0`` → WARNING, ``1`` → INFO, ``2`` or more → DEBUG.
    """
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    *,
    level: int = logging.INFO,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Attach a single stream handler to the ``calbump`` logger.

    Safe to call repeatedly; each call replaces the previous handler.

    Args:
        level: Logging level (e.g., ``logging.INFO``, ``logging.DEBUG``).
        verbose: Use the timestamped format including the logger name.
        stream: Output stream; defaults to ``sys.stderr``.
    """
    global _logging_configured

    formatter = ColoredFormatter(
        LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        use_color=not os.environ.get("NO_COLOR"),
    )
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.setLevel(level)
        root_logger.addHandler(handler)
        root_logger.propagate = False
        _logging_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the calbump namespace.

    ``get_logger("core.resolver")`` and ``get_logger("calbump.core.resolver")``
    return the same logger.
    """
    if not name or name == ROOT_LOGGER_NAME:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
    elif name.startswith(ROOT_LOGGER_NAME + "."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    # Library-safe default when the host has not configured logging
    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())

    return logger


def is_logging_configured() -> bool:
    """Return True if :func:`setup_logging` has run since the last reset."""
    return _logging_configured


def disable_logging() -> None:
    """Silence calbump logging and forget any previous configuration."""
    global _logging_configured

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.NOTSET)
        _logging_configured = False
