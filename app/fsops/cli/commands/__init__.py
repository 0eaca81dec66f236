"""CLI commands for fsops.

This package contains all subcommand implementations.
"""

from fsops.cli.commands import config, file, path, tree

__all__ = ["config", "file", "path", "tree"]
