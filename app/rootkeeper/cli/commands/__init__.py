"""CLI commands for rootkeeper.

This package contains all subcommand implementations.
"""

from rootkeeper.cli.commands import config, roots

__all__ = ["config", "roots"]
