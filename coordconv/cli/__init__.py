"""CLI module for coordinate conversion.

Provides the `coordconv` command-line interface for converting, formatting,
parsing and analyzing coordinates.
"""

from coordconv.cli.main import app

__all__ = ["app"]
