"""
Custom exception hierarchy for calbump.

This module defines structured exception types used across calbump.
All exceptions inherit from :class:`CalbumpError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

The :class:`IncrementError` family is internal to the increment engine:
:class:`~calbump.core.incrementer.CalverIncrementer` recovers from every
one of them and never lets them reach its callers.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional, Sequence


class CalbumpError(Exception):
    """Base exception for all calbump errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class ConfigError(CalbumpError):
    """Raised when a configuration file cannot be loaded or is invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


# ---------------------------------------------------------------------------
# Increment engine signals
# ---------------------------------------------------------------------------


class IncrementError(CalbumpError):
    """Base class for failures to compute an incremented version."""


class FormatMismatchError(IncrementError):
    """Raised when a version does not fit its format.

    Covers a component count that differs from the number of format
    tokens, non-numeric values at numeric positions, malformed
    prerelease segments and unknown format tokens.

    Args:
        message: Error description.
        format: Format specification being applied.
        version: Version string being interpreted.
    """

    __slots__ = ("format", "version")

    def __init__(
        self,
        message: str,
        *,
        format: Optional[str] = None,
        version: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "format", format)
        _add_if(details, "version", version)

        super().__init__(message, details)

        self.format = format
        self.version = version


class UnknownRoleError(IncrementError):
    """Raised when a directive names a role the format does not declare.

    Args:
        message: Error description.
        role: Role named by the directive.
        format: Format specification that lacks the role.
    """

    __slots__ = ("role", "format")

    def __init__(
        self,
        message: str,
        *,
        role: Optional[str] = None,
        format: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "role", role)
        _add_if(details, "format", format)

        super().__init__(message, details)

        self.role = role
        self.format = format


class LabelMismatchError(IncrementError):
    """Raised when a prerelease track does not match the current label.

    Args:
        message: Error description.
        track: Prerelease track named by the directive.
        label: Current prerelease label, or ``None`` if the version has
            no prerelease segment.
    """

    __slots__ = ("track", "label")

    def __init__(
        self,
        message: str,
        *,
        track: Optional[str] = None,
        label: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "track", track)
        _add_if(details, "label", label)

        super().__init__(message, details)

        self.track = track
        self.label = label


class DirectiveExhaustedError(IncrementError):
    """Raised when no sub-directive of a directive could be applied.

    Args:
        message: Error description.
        directive: The full directive that was attempted.
        reasons: One message per failed or no-op sub-directive.
    """

    __slots__ = ("directive", "reasons")

    def __init__(
        self,
        message: str,
        *,
        directive: Optional[str] = None,
        reasons: Optional[Sequence[str]] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "directive", directive)
        if reasons:
            details["reasons"] = "; ".join(reasons)

        super().__init__(message, details)

        self.directive = directive
        self.reasons = list(reasons) if reasons else []
