"""Normalize and explain commands for calbump.

Both commands are diagnostics for release engineers setting up a format:
``normalize`` shows how a version is read, ``explain`` shows which role
each component takes under a format.

Typical usage::

    $ calbump normalize 2025.07.05
    2025.7.5

    $ calbump explain 2021.1.1.0-alpha.0 --format yyyy.mm.minor.patch
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import click

from calbump.models import VersionComponents
from calbump.exceptions import FormatMismatchError
from calbump.core import interpret, normalize_version
from calbump.context import pass_context, CalbumpContext
from calbump.utils import colorize_role, get_logger, print_error, print_table

logger = get_logger("commands.explain")


@click.command("normalize")
@click.argument("version")
def normalize(version: str) -> None:
    """Print VERSION with leading zeros stripped."""
    click.echo(normalize_version(version))


@click.command("explain")
@click.argument("version")
@click.option(
    "--format",
    "-f",
    "fmt",
    envvar="CALBUMP_FORMAT",
    help="Version format; defaults to the configured one.",
)
@pass_context
def explain(ctx: CalbumpContext, version: str, fmt: Optional[str]) -> None:
    """Show the role of each component of VERSION under a format."""
    fmt = fmt or ctx.config.format
    normalized = normalize_version(version)

    try:
        parsed = interpret(fmt, normalized)
    except FormatMismatchError as exc:
        logger.debug("explain failed: %r", exc)
        print_error(str(exc))
        raise SystemExit(1) from exc

    print_table(
        _rows(parsed),
        headers=["Position", "Token", "Kind", "Value"],
        title=f"{normalized} as {fmt}",
    )


def _rows(parsed: VersionComponents) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = [
        {
            "Position": position,
            "Token": component.role.value,
            "Kind": colorize_role(component.role.kind),
            "Value": component.render(),
        }
        for position, component in enumerate(parsed.components, start=1)
    ]

    if parsed.label is not None:
        rows.append(
            {
                "Position": "-",
                "Token": "label",
                "Kind": colorize_role("prerelease"),
                "Value": parsed.label,
            }
        )
        rows.append(
            {
                "Position": "-",
                "Token": "counter",
                "Kind": colorize_role("prerelease"),
                "Value": "" if parsed.counter is None else parsed.counter,
            }
        )
    return rows
