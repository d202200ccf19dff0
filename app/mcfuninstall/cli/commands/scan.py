"""Scan command implementation.

Lists the resources a datapack declares without writing anything.
"""

import json
from enum import Enum
from typing import Annotated, Any

import typer

from mcfuninstall.cli.display import create_matches_table, format_location
from mcfuninstall.cli.types import (
    ConfigOption,
    FilterOption,
    PathsArgument,
    SkipOption,
    is_quiet,
    load_settings,
)
from mcfuninstall.core.pipeline import CategoryResult, InputPathError, run_scan
from mcfuninstall.models.match import Category
from mcfuninstall.scanner.walker import WalkError
from mcfuninstall.utils.formatting import console, print_error, print_info


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def scan_resources(
    ctx: typer.Context,
    paths: PathsArgument,
    skip: SkipOption = None,
    filters: FilterOption = None,
    config_path: ConfigOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List declared resources found in function files.

    Examples:
        mcf-uninstall scan ./mypack                      # Table of identifiers
        mcf-uninstall scan ./mypack -x tag -x storage    # Skip categories
        mcf-uninstall scan ./mypack -F 'team=/^red/i'    # Filter identifiers
        mcf-uninstall scan ./mypack --format json        # Output as JSON
    """
    _, scan_config = load_settings(config_path, skip, filters)

    try:
        results = run_scan(paths, scan_config)
    except (InputPathError, WalkError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(_results_to_dict(results)))
        return

    total = sum(len(result.matches) for result in results.values())
    if total == 0:
        print_info("No declared resources found.")
        return

    console.print(create_matches_table(results))

    if not is_quiet(ctx):
        counts = ", ".join(
            f"{category.value}: {len(result.matches)}" for category, result in results.items()
        )
        console.print(f"\n[muted]Found {total} identifier(s) ({counts})[/]")


def _results_to_dict(results: dict[Category, CategoryResult]) -> dict[str, Any]:
    """Convert scan results to a JSON-serializable dictionary."""
    return {
        category.value: {
            "total": result.total,
            "filtered_out": result.filtered_out,
            "matches": [
                {
                    "id": match.id,
                    "file": str(match.file),
                    "line": match.line,
                    "location": format_location(match),
                }
                for match in result.matches
            ],
        }
        for category, result in results.items()
    }
