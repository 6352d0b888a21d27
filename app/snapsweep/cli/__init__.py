"""CLI package for snapsweep.

This package contains the Typer application and all subcommands.
"""

from snapsweep.cli.main import app

__all__ = ["app"]
