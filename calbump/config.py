"""Configuration file loader for calbump.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``calbump.toml`` — settings under ``[calbump]`` table
- ``pyproject.toml`` — settings under ``[tool.calbump]`` table

Discovery order:

1. Explicit path from ``--config`` or ``CALBUMP_CONFIG``
2. ``calbump.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.calbump]`` section

Configuration precedence: defaults < config file < environment < CLI args.

Example (``pyproject.toml``)::

    [tool.calbump]
    format = "yyyy.mm.minor.patch"
    increment = "calendar.minor"
    fallback_increment = "patch"
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from calbump.exceptions import ConfigError
from calbump.utils.logger import get_logger
from calbump.constants import (
    CONFIG_FILE_NAME,
    CONFIG_KEYS,
    CONFIG_SECTION,
    DEFAULT_FALLBACK_INCREMENT,
    DEFAULT_FORMAT,
    DEFAULT_INCREMENT,
)

logger = get_logger("config")


@dataclass
class CalbumpConfig:
    """Parsed and validated calbump configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        format: Format specification, e.g. ``"yy.mm.minor"``.
        increment: Primary increment directive, e.g. ``"calendar"``.
        fallback_increment: Directive retried when ``increment`` fails.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    format: str = DEFAULT_FORMAT
    increment: str = DEFAULT_INCREMENT
    fallback_increment: str = DEFAULT_FALLBACK_INCREMENT

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging.

        Excludes ``source_path`` metadata.
        """
        return {
            "format": self.format,
            "increment": self.increment,
            "fallback_increment": self.fallback_increment,
        }

    def to_context(self) -> Dict[str, Any]:
        """Return the options understood by ``CalverIncrementer.set_context``."""
        return self.to_log_dict()


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_calbump_section(pyproject_toml):
        logger.debug("Found [tool.%s] in pyproject.toml: %s", CONFIG_SECTION, pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_calbump_section(path: Path) -> bool:
    """Check if pyproject.toml contains a ``[tool.calbump]`` section.

    An unreadable pyproject.toml is treated as having no section so that
    discovery falls back to defaults.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    return CONFIG_SECTION in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> CalbumpConfig:
    """Load and validate calbump configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`CalbumpConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return CalbumpConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get(CONFIG_SECTION, {})
    else:
        # calbump.toml and explicit files keep settings under [calbump]
        section = raw.get(CONFIG_SECTION, {})

    if not section:
        logger.debug("Config file found but no calbump section, using defaults")
        return CalbumpConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> CalbumpConfig:
    """Validate a ``[calbump]`` table and build the configuration.

    Raises:
        ConfigError: Unknown keys, non-string values or empty strings.
    """
    unknown = set(section.keys()) - CONFIG_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    config = CalbumpConfig()
    for key in sorted(CONFIG_KEYS & set(section.keys())):
        value = section[key]
        if not isinstance(value, str):
            raise ConfigError(
                f"{key} must be a string, got {type(value).__name__}",
                config_path=config_path,
                option=key,
            )
        if not value.strip():
            raise ConfigError(
                f"{key} must not be empty",
                config_path=config_path,
                option=key,
            )
        setattr(config, key, value.strip())

    return config
