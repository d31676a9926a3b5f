"""
PEP 440 helpers for calbump.

Calver strings such as ``2021.1.1.0-alpha.1`` are valid PEP 440
versions once normalized (``2021.1.1.0a1``). These helpers expose that
normal form for Python packaging and let the incrementer sanity-check
that a computed version actually sorts after its predecessor.
"""

from __future__ import annotations

from typing import Optional

from packaging.version import InvalidVersion, Version


def to_pep440(version: Optional[str]) -> Optional[str]:
    """Return the PEP 440 normal form of ``version``.

    Args:
        version: Version string, possibly ``None``.

    Returns:
        The normalized string, or ``None`` when ``version`` is empty or
        cannot be expressed under PEP 440.

    Examples:
        >>> to_pep440("2021.1.1.0-alpha.1")
        '2021.1.1.0a1'
        >>> to_pep440("26.10.0")
        '26.10.0'
        >>> to_pep440("not.a.version") is None
        True
    """
    parsed = _parse_version(version)
    return str(parsed) if parsed is not None else None


def is_newer(previous: Optional[str], candidate: Optional[str]) -> Optional[bool]:
    """Return whether ``candidate`` sorts after ``previous`` under PEP 440.

    Returns:
        ``True`` or ``False``, or ``None`` when either side is not a valid
        PEP 440 version.

    Examples:
        >>> is_newer("26.8.3", "26.10.0")
        True
        >>> is_newer("26.10.0", "26.10.0")
        False
    """
    before = _parse_version(previous)
    after = _parse_version(candidate)
    if before is None or after is None:
        return None
    return after > before


def _parse_version(value: Optional[str]) -> Optional[Version]:
    """Parse a version string into a PEP 440 Version object."""
    if not value:
        return None
    try:
        return Version(value)
    except InvalidVersion:
        return None
