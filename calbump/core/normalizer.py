"""
Version normalization.

Strips redundant leading zeros from the numeric parts of a version
string so that ``2025.07.05`` and ``2025.7.5`` are treated alike.
"""

from __future__ import annotations

from typing import List, Optional

from calbump.constants import COMPONENT_SEPARATOR, PRERELEASE_SEPARATOR


def normalize_version(version: Optional[str]) -> Optional[str]:
    """Normalize a version by stripping leading zeros from numeric parts.

    Non-numeric parts, such as prerelease labels, pass through unchanged;
    validating them is left to :func:`calbump.core.interpreter.interpret`.
    Normalizing an already normalized version returns it unchanged.

    Args:
        version: Raw version string. Empty or ``None`` values are returned
            as-is.

    Returns:
        The normalized version string.

    Examples:
        >>> normalize_version("2025.07.05.01.001")
        '2025.7.5.1.1'
        >>> normalize_version("2021.01.1.0-alpha.007")
        '2021.1.1.0-alpha.7'
    """
    if not version:
        return version

    main, separator, prerelease = version.partition(PRERELEASE_SEPARATOR)

    normalized = _strip_zeros(main)
    if separator:
        normalized += PRERELEASE_SEPARATOR + _strip_zeros(prerelease)
    return normalized


def _strip_zeros(segment: str) -> str:
    parts: List[str] = []
    for part in segment.split(COMPONENT_SEPARATOR):
        parts.append((part.lstrip("0") or "0") if is_numeric(part) else part)
    return COMPONENT_SEPARATOR.join(parts)


def is_numeric(part: str) -> bool:
    """Return True if ``part`` is a non-empty run of ASCII digits."""
    # str.isdigit() also accepts superscripts and other non-ASCII digits
    return part.isascii() and part.isdigit()
