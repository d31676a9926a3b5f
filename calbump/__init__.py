"""
calbump — calendar-aware version incrementing

calbump computes the next release version of a project that uses a
calendar versioning scheme ("calver"). Version components may encode
calendar units (year, month, week, day) and/or semantic counters
(major, minor, patch, prerelease tracks such as ``alpha``).

Features include:
    • Leading-zero normalization of version strings
    • Format templates such as ``yy.mm.minor`` or ``yyyy.mm.minor.patch``
    • Composite increment policies (``calendar.minor``) with a fallback
    • Prerelease track bumping (``2021.1.1.0-alpha.0`` → ``-alpha.1``)
    • A small CLI for release pipelines

Typical usage::

    from calbump import CalverIncrementer

    incrementer = CalverIncrementer({"format": "yyyy.mm.minor"})
    incrementer.get_incremented_version(latest_version="2025.7.5")
"""

from __future__ import annotations

from calbump.__version__ import __version__
from calbump.core import (
    CalverIncrementer,
    interpret,
    normalize_version,
    resolve,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "calbump Contributors"
__license__ = "Apache-2.0"
__description__ = "Calendar-aware version incrementing for release pipelines."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    "CalverIncrementer",
    "interpret",
    "normalize_version",
    "resolve",
]
