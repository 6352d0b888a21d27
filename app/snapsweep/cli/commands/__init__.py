"""CLI commands for snapsweep.

This package contains all subcommand implementations.
"""

from snapsweep.cli.commands import clean, listing

__all__ = ["clean", "listing"]
