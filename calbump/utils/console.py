"""
Console output utilities for calbump using Rich.

User-facing status messages and tables for the CLI go through this
module; diagnostics go through :mod:`calbump.utils.logger`. Results that
scripts consume (the incremented version itself) are written with
``click.echo`` so they stay free of markup.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, List, Optional

from rich.table import Table
from rich.theme import Theme
from rich.console import Console

CALBUMP_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
        "highlight": "bold magenta",
    }
)

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return sys.stderr.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return the shared stderr console, creating it on first use."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    stderr=True,
                    theme=CALBUMP_THEME,
                    no_color=not use_color,
                    highlight=use_color,
                )
    return _console


def reconfigure_console() -> None:
    """Drop the shared console so the next call re-reads ``NO_COLOR``."""
    global _console
    with _console_lock:
        _console = None


def get_raw_console() -> Console:
    """Return the underlying Rich Console instance."""
    return _get_console()


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    _get_console().print(f"{prefix} {message}", style="success", markup=False)


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    _get_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    _get_console().print(f"{prefix} {message}", style="warning", markup=False)


def print_table(
    data: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
    caption: Optional[str] = None,
) -> None:
    """Render rows of data as a Rich table.

    Args:
        data: List of row dictionaries. Values may contain Rich markup.
        headers: Column order. Defaults to keys of the first row.
        title: Optional table title.
        caption: Optional table caption.
    """
    if not data:
        return

    if headers is None:
        headers = list(data[0].keys())

    table = Table(title=title, caption=caption, header_style="bold")
    for header in headers:
        table.add_column(header, overflow="fold")
    for row in data:
        table.add_row(*(str(row.get(h, "")) for h in headers))

    _get_console().print(table)


def colorize_role(kind: str, text: Optional[str] = None) -> str:
    """Return Rich markup coloring ``text`` by component kind.

    Args:
        kind: ``"calendar"``, ``"semantic"`` or ``"prerelease"``.
        text: Text to color; defaults to ``kind`` itself.
    """
    color_map = {
        "calendar": "cyan",
        "semantic": "yellow",
        "prerelease": "magenta",
    }

    label = kind if text is None else text
    color = color_map.get(kind.lower())
    return f"[{color}]{label}[/{color}]" if color else label
