"""Shared Rich display functions for scan results.

Provides the table builders used by the ``generate`` and ``scan``
commands.
"""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from mcfuninstall.core.pipeline import CategoryResult
from mcfuninstall.models.match import Category, Match
from mcfuninstall.utils.formatting import console, create_match_table


def create_summary_table(results: dict[Category, CategoryResult]) -> Table:
    """Create a table with per-category identifier counts.

    ``Found`` counts every extracted occurrence, ``Filtered`` the occurrences
    the category filter removed, ``Kept`` the occurrences left over and
    ``Unique`` the distinct identifiers among them.

    Args:
        results: Scan results per enabled category.

    Returns:
        Rich Table with Category, Found, Filtered, Kept and Unique columns.
    """
    table = Table(
        title="Scan Summary",
        show_header=True,
        header_style="heading",
        border_style="border",
    )
    table.add_column("Category")
    table.add_column("Found", justify="right")
    table.add_column("Filtered", justify="right")
    table.add_column("Kept", justify="right")
    table.add_column("Unique", justify="right")

    for category, result in results.items():
        unique = len({match.id for match in result.matches})
        table.add_row(
            category.label,
            str(result.total),
            str(result.filtered_out),
            str(len(result.matches)),
            f"[success]{unique}[/success]",
        )

    return table


def print_category_summary(results: dict[Category, CategoryResult]) -> None:
    """Print the per-category summary table."""
    console.print(create_summary_table(results))


def format_location(match: Match, base: Path | None = None) -> str:
    """Format a match location relative to ``base`` when possible."""
    base = base or Path.cwd()
    try:
        file = match.file.relative_to(base)
    except ValueError:
        file = match.file
    return f"{file}:{match.line}" if match.line else str(file)


def create_matches_table(results: dict[Category, CategoryResult]) -> Table:
    """Create a table listing every kept identifier with its location."""
    table = create_match_table()
    for category, result in results.items():
        for match in result.matches:
            table.add_row(category.value, match.id, escape(format_location(match)))
    return table
