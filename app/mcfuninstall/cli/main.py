"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from mcfuninstall import __version__
from mcfuninstall.cli.commands import config, generate, scan
from mcfuninstall.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="mcf-uninstall",
    help="Create uninstall functions for your datapack.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"mcf-uninstall version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """mcf-uninstall - create uninstall functions for your datapack.

    Recursively scans function files for scoreboard objectives, teams,
    bossbars, storage and entity tags, and writes the commands that
    remove them.
    """
    configure_logging(verbose)
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="generate")(generate.generate_uninstall)
app.command(name="scan")(scan.scan_resources)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
