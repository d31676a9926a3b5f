"""
Core increment engine for calbump.

Exports the normalizer, the format interpreter, the increment resolver and
the :class:`CalverIncrementer` that chains them.
"""

from __future__ import annotations

from calbump.core.normalizer import normalize_version
from calbump.core.interpreter import interpret, parse_format
from calbump.core.resolver import calendar_value, resolve
from calbump.core.incrementer import CalverIncrementer, Clock

__all__ = [
    "CalverIncrementer",
    "Clock",
    "calendar_value",
    "interpret",
    "normalize_version",
    "parse_format",
    "resolve",
]
