"""
calbump version information.

Single source of truth for the package version, read by the build backend
and by ``calbump --version``. Follows PEP 440.
"""

__version__ = "0.1.0.dev0"
