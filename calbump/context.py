"""
Shared context object for calbump CLI commands.

Carries the loaded configuration and global options from the ``calbump``
group to its subcommands through Click's context mechanism.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from calbump.config import CalbumpConfig


class CalbumpContext:
    """Global context object for calbump CLI commands.

    Attributes:
        config_path: Path of the loaded configuration file, if any.
        config: Loaded configuration; defaults when no file was found.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
    """

    __slots__ = ("config_path", "config", "verbose", "color")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.config: CalbumpConfig = CalbumpConfig()
        self.verbose: int = 0
        self.color: bool = True


#: Click decorator for injecting :class:`CalbumpContext` into commands.
pass_context = click.make_pass_decorator(CalbumpContext, ensure=True)
