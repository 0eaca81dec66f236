"""CLI package for fsops.

This package contains the Typer application and all subcommands.
"""

from fsops.cli.main import app

__all__ = ["app"]
