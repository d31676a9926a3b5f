"""
Executable module for calbump.

Running:
    python -m calbump

is equivalent to:
    calbump

This module simply forwards execution to the CLI entrypoint defined in
`calbump.cli`.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Report a CLI import failure, typically a missing dependency."""
    sys.stderr.write("calbump CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing `python -m calbump`.

    Returns:
        Exit code returned by the CLI.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from calbump.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
