"""Config command implementation.

Shows, locates and initializes the configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer

from mcfuninstall.cli.types import ConfigOption
from mcfuninstall.core.config import (
    ConfigError,
    UninstallConfig,
    config_to_toml,
    load_config,
    save_config,
)
from mcfuninstall.core.paths import get_config_path
from mcfuninstall.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Manage the mcf-uninstall configuration file.",
    no_args_is_help=True,
)


@app.command()
def path() -> None:
    """Print the default config file path."""
    typer.echo(str(get_config_path()))


@app.command()
def show(config_path: ConfigOption = None) -> None:
    """Show the effective configuration as TOML."""
    try:
        config = load_config(config_path, required=config_path is not None)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = config_path or get_config_path()
    if source.exists():
        console.print(f"[muted]# {source}[/muted]")
    else:
        console.print("[muted]# defaults (no config file)[/muted]")
    console.print(config_to_toml(config), markup=False, highlight=False, soft_wrap=True)


@app.command()
def init(
    config_path: ConfigOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with the default settings."""
    target: Path = config_path or get_config_path()
    if target.exists() and not force:
        print_info(f"Config file already exists: {target} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        written = save_config(UninstallConfig(), target)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {written}")
