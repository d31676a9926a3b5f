"""
Centralized constants for calbump.

This module defines immutable configuration values used across calbump,
including increment defaults, format tokens, configuration file names and
logging formats. All values are intended to be treated as read-only.
"""

from typing import Final, FrozenSet

# ---------------------------------------------------------------------------
# Increment defaults
# ---------------------------------------------------------------------------

#: Format used when none is configured.
DEFAULT_FORMAT: Final[str] = "yy.mm.minor"

#: Primary increment directive used when none is configured.
DEFAULT_INCREMENT: Final[str] = "calendar"

#: Directive retried when the primary increment cannot be applied.
DEFAULT_FALLBACK_INCREMENT: Final[str] = "minor"

# ---------------------------------------------------------------------------
# Version and directive grammar
# ---------------------------------------------------------------------------

#: Separator between version components, format tokens and sub-directives.
COMPONENT_SEPARATOR: Final[str] = "."

#: Separator between the main version and its prerelease segment.
PRERELEASE_SEPARATOR: Final[str] = "-"

#: Group directive that moves calendar components to the current date.
CALENDAR_DIRECTIVE: Final[str] = "calendar"

#: Short years are rendered relative to this year (``2026`` → ``26``).
SHORT_YEAR_BASE: Final[int] = 2000

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Dedicated configuration file name (settings under ``[calbump]``).
CONFIG_FILE_NAME: Final[str] = "calbump.toml"

#: Table name used in both ``calbump.toml`` and ``[tool.*]`` of pyproject.
CONFIG_SECTION: Final[str] = "calbump"

#: Keys accepted in the configuration section.
CONFIG_KEYS: Final[FrozenSet[str]] = frozenset(
    {"format", "increment", "fallback_increment"}
)

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
