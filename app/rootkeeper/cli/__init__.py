"""CLI package for rootkeeper.

This package contains the Typer application and all subcommands.
"""

from rootkeeper.cli.main import app

__all__ = ["app"]
