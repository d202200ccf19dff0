"""Shared option types and helpers for CLI commands.

This module provides the options and the config loading shared by the
``generate`` and ``scan`` commands.
"""

from pathlib import Path
from typing import Annotated

import typer

from mcfuninstall.core.config import (
    ConfigError,
    UninstallConfig,
    build_scan_config,
    load_config,
    parse_filter_option,
)
from mcfuninstall.models.match import Category
from mcfuninstall.models.settings import ScanConfig
from mcfuninstall.utils.formatting import print_error

# Exit code for invalid configuration or option combinations
USAGE_EXIT_CODE = 2

PathsArgument = Annotated[
    list[Path],
    typer.Argument(
        help="Files or directories containing function files.",
        show_default=False,
    ),
]

SkipOption = Annotated[
    list[Category] | None,
    typer.Option(
        "--skip",
        "-x",
        help="Category to skip (repeatable).",
        case_sensitive=False,
    ),
]

FilterOption = Annotated[
    list[str] | None,
    typer.Option(
        "--filter",
        "-F",
        help=(
            "Filter as CATEGORY=TOKEN (repeatable). TOKEN is a substring, "
            "[bold]!substring[/bold], [bold]/regex/flags[/bold] or [bold]!/regex/flags[/bold]."
        ),
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Config file (default: ~/.config/mcf-uninstall/config.toml).",
    ),
]


def is_quiet(ctx: typer.Context) -> bool:
    """Whether --quiet was given on the main command."""
    return bool(ctx.obj and ctx.obj.get("quiet"))


def load_settings(
    config_path: Path | None,
    skip: list[Category] | None,
    filters: list[str] | None,
) -> tuple[UninstallConfig, ScanConfig]:
    """Load the config file and apply command-line overrides.

    Exits with the usage exit code on any configuration error, before any
    file is scanned.
    """
    try:
        file_config = load_config(config_path, required=config_path is not None)
        grouped: dict[Category, list[str]] = {}
        for value in filters or []:
            category, token = parse_filter_option(value)
            grouped.setdefault(category, []).append(token)
        scan_config = build_scan_config(file_config, skip or [], grouped)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=USAGE_EXIT_CODE) from e

    return file_config, scan_config
