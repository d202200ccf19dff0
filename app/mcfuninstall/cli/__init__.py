"""CLI package for mcf-uninstall.

This package contains the Typer application and all subcommands.
"""

from mcfuninstall.cli.main import app

__all__ = ["app"]
