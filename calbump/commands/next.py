"""Next command implementation for calbump.

Prints the version that follows the given latest release. The increment
settings are resolved from, in increasing priority: built-in defaults,
the configuration file, ``CALBUMP_*`` environment variables and the
command-line options.

Typical usage::

    # Defaults: format yy.mm.minor, increment calendar, fallback minor
    $ calbump next 26.8.3
    26.10.0

    # Prerelease track
    $ calbump next 2021.1.1.0-alpha.0 --format yyyy.mm.minor.patch --increment alpha
    2021.1.1.0-alpha.1

    # Machine-readable output with the PEP 440 form
    $ calbump next 2021.1.1.0-alpha.0 -f yyyy.mm.minor.patch -i alpha --pep440 -o json
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import click

from calbump.core import CalverIncrementer
from calbump.context import pass_context, CalbumpContext
from calbump.utils import get_logger, to_pep440

logger = get_logger("commands.next")


@click.command("next")
@click.argument("latest_version")
@click.option(
    "--format",
    "-f",
    "fmt",
    envvar="CALBUMP_FORMAT",
    help="Version format, e.g. yy.mm.minor or yyyy.mm.minor.patch.",
)
@click.option(
    "--increment",
    "-i",
    envvar="CALBUMP_INCREMENT",
    help="Increment directive, e.g. calendar, minor, calendar.minor, alpha.",
)
@click.option(
    "--fallback-increment",
    envvar="CALBUMP_FALLBACK_INCREMENT",
    help="Directive used when --increment cannot be applied.",
)
@click.option(
    "--pep440",
    is_flag=True,
    help="Also report the PEP 440 normal form of the result.",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 when the version could not be incremented.",
)
@pass_context
def next_version(
    ctx: CalbumpContext,
    latest_version: str,
    fmt: Optional[str],
    increment: Optional[str],
    fallback_increment: Optional[str],
    pep440: bool,
    output: str,
    strict: bool,
) -> None:
    """Print the version that follows LATEST_VERSION."""
    incrementer = CalverIncrementer.from_config(ctx.config)
    overrides = {
        "format": fmt,
        "increment": increment,
        "fallback_increment": fallback_increment,
    }
    incrementer.set_context({k: v for k, v in overrides.items() if v})
    logger.debug("Increment settings: %s", incrementer.get_context())

    incremented = incrementer.get_incremented_version(latest_version)
    unchanged = incremented == latest_version

    if output.lower() == "json":
        payload: Dict[str, Any] = {
            "latest": latest_version,
            "next": incremented,
            "incremented": not unchanged,
            "format": incrementer.get_format(),
        }
        if pep440:
            payload["pep440"] = to_pep440(incremented)
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(incremented)
        if pep440:
            click.echo(to_pep440(incremented) or "")

    # The incrementer has already warned about an unchanged version
    if unchanged and strict:
        raise SystemExit(1)
