"""
Calendar version incrementer.

:class:`CalverIncrementer` is the entry point of the increment engine.
It holds the increment configuration and runs the pipeline::

    normalize → interpret → resolve(increment)
                          ↘ resolve(fallback_increment)   (on failure)
                          ↘ original version               (on failure)

Version computation must never block a release pipeline, so no
:class:`~calbump.exceptions.IncrementError` ever escapes: callers get the
next version, or the unchanged input when nothing could be applied.

Typical usage::

    incrementer = CalverIncrementer()
    incrementer.set_context({"format": "yyyy.mm.minor", "increment": "calendar.minor"})
    incrementer.get_incremented_version(latest_version="2025.7.5")
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional

from calbump.core.resolver import resolve
from calbump.core.interpreter import interpret
from calbump.exceptions import IncrementError
from calbump.utils.logger import get_logger
from calbump.core.normalizer import normalize_version
from calbump.utils.version_utils import is_newer
from calbump.constants import (
    DEFAULT_FALLBACK_INCREMENT,
    DEFAULT_FORMAT,
    DEFAULT_INCREMENT,
)

if TYPE_CHECKING:
    from calbump.config import CalbumpConfig

logger = get_logger("core.incrementer")

#: Callable returning the current date.
Clock = Callable[[], date]

# Context keys as spelled by JavaScript-style hosts
_CONTEXT_ALIASES: Mapping[str, str] = {"fallbackIncrement": "fallback_increment"}


class CalverIncrementer:
    """Compute the next calendar version of a project.

    Args:
        context: Initial configuration, see :meth:`set_context`.
        clock: Provider of the current date. Defaults to
            :meth:`datetime.date.today`; tests inject a fixed date.

    Example:
        >>> incrementer = CalverIncrementer(
        ...     {"format": "yyyy.mm.minor.patch", "increment": "minor"}
        ... )
        >>> incrementer.get_incremented_version(latest_version="2021.1.1.0")
        '2021.1.2.0'
    """

    __slots__ = ("_context", "_clock")

    def __init__(
        self,
        context: Optional[Mapping[str, Any]] = None,
        *,
        clock: Optional[Clock] = None,
    ) -> None:
        self._context: Dict[str, Any] = {}
        self._clock: Clock = clock or date.today
        if context:
            self.set_context(context)

    @classmethod
    def from_config(
        cls,
        config: "CalbumpConfig",
        *,
        clock: Optional[Clock] = None,
    ) -> "CalverIncrementer":
        """Build an incrementer from a loaded configuration file."""
        return cls(config.to_context(), clock=clock)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_context(self, options: Mapping[str, Any]) -> None:
        """Merge ``options`` into the current configuration.

        Recognized keys are ``format``, ``increment`` and
        ``fallback_increment`` (also accepted as ``fallbackIncrement``).
        Keys not present in ``options`` keep their previous value.
        """
        for key, value in options.items():
            self._context[_CONTEXT_ALIASES.get(key, key)] = value

    def get_context(self) -> Dict[str, Any]:
        """Return a copy of the current configuration."""
        return dict(self._context)

    def get_format(self) -> str:
        return self._context.get("format") or DEFAULT_FORMAT

    def get_inc(self) -> str:
        return self._context.get("increment") or DEFAULT_INCREMENT

    def get_fallback_inc(self) -> str:
        return self._context.get("fallback_increment") or DEFAULT_FALLBACK_INCREMENT

    # ------------------------------------------------------------------
    # Increment pipeline
    # ------------------------------------------------------------------

    def normalize_version(self, version: Optional[str]) -> Optional[str]:
        """Strip leading zeros from numeric parts, see :func:`normalize_version`."""
        return normalize_version(version)

    def get_incremented_version(
        self,
        latest_version: Optional[str] = None,
    ) -> Optional[str]:
        """Return the version following ``latest_version``.

        The configured increment is tried first, then the fallback
        increment. If neither applies, ``latest_version`` is returned
        exactly as given (not normalized).

        Args:
            latest_version: The last released version.

        Returns:
            The next version, ``latest_version`` itself when it cannot be
            incremented, or ``None`` when no version was given.
        """
        if not latest_version:
            return None

        fmt = self.get_format()
        today = self._clock()
        normalized = normalize_version(latest_version)

        for directive in (self.get_inc(), self.get_fallback_inc()):
            try:
                incremented = resolve(interpret(fmt, normalized), directive, today)
            except IncrementError as exc:
                logger.debug(
                    "Cannot apply %r to %s with format %r: %s",
                    directive,
                    latest_version,
                    fmt,
                    exc,
                )
                continue

            logger.info("%s -> %s (%s)", latest_version, incremented, directive)
            if is_newer(normalized, incremented) is False:
                logger.warning(
                    "Incremented version %s does not sort after %s",
                    incremented,
                    latest_version,
                )
            return incremented

        logger.warning(
            "Could not increment %s with format %r; keeping it unchanged",
            latest_version,
            fmt,
        )
        return latest_version

    def get_increment(self, latest_version: Optional[str] = None) -> Optional[str]:
        """Alias of :meth:`get_incremented_version`."""
        return self.get_incremented_version(latest_version)

    def get_incremented_version_ci(
        self,
        latest_version: Optional[str] = None,
    ) -> Optional[str]:
        """Alias of :meth:`get_incremented_version` for CI hosts."""
        return self.get_incremented_version(latest_version)
