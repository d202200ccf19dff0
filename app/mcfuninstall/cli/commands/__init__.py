"""CLI commands for mcf-uninstall.

This package contains all subcommand implementations.
"""

from mcfuninstall.cli.commands import config, generate, scan

__all__ = ["config", "generate", "scan"]
