"""
Command-line interface for calbump.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import click

from calbump.config import load_config
from calbump.__version__ import __version__
from calbump.context import CalbumpContext
from calbump.exceptions import CalbumpError, ConfigError
from calbump.commands.next import next_version
from calbump.commands.explain import explain, normalize
from calbump.utils.console import print_error, print_warning, reconfigure_console
from calbump.utils.logger import get_logger, level_for_verbosity, setup_logging

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="CALBUMP_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="CALBUMP_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="calbump",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """calbump — compute the next calendar version of a project.

    \b
    Available commands:
      calbump next VERSION         Print the version following VERSION
      calbump normalize VERSION    Strip leading zeros from VERSION
      calbump explain VERSION      Show the role of each component

    \b
    Examples:
      calbump next 26.8.3
      calbump next 2025.7.5 --format yyyy.mm.minor --increment calendar.minor
      calbump -v explain 2021.1.1.0-alpha.0 -f yyyy.mm.minor.patch
    """
    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose >= 2)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    calbump_ctx = CalbumpContext()
    calbump_ctx.config_path = loaded_config.source_path
    calbump_ctx.config = loaded_config
    calbump_ctx.color = color
    calbump_ctx.verbose = verbose
    ctx.obj = calbump_ctx

    logger.debug("calbump v%s", __version__)
    logger.debug("Config path: %s", calbump_ctx.config_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


cli.add_command(next_version)
cli.add_command(normalize)
cli.add_command(explain)


def main() -> int:
    """Main entry point for the calbump CLI.

    Returns:
        Exit code:
            0   Success
            1   Unhandled or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.exceptions.Abort:
        print_warning("Operation cancelled by user")
        return 130

    except CalbumpError as exc:
        print_error(str(exc))
        logger.debug(
            "CalbumpError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("Operation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
