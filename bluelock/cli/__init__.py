"""CLI commands for Blue Lock Terminal.

This package provides the command-line views over the record store:
ego ratings, trades, drills, statistics, settings and backups.
"""

from bluelock.cli.main import cli, main

__all__ = ["cli", "main"]
