"""Generate command implementation.

Scans function files and writes the uninstall function(s) removing every
declared resource.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from mcfuninstall.cli.display import print_category_summary
from mcfuninstall.cli.types import (
    USAGE_EXIT_CODE,
    ConfigOption,
    FilterOption,
    PathsArgument,
    SkipOption,
    is_quiet,
    load_settings,
)
from mcfuninstall.core.config import UninstallConfig
from mcfuninstall.core.pipeline import InputPathError, matches_by_category, run_scan
from mcfuninstall.scanner.walker import WalkError
from mcfuninstall.synth.function_tags import build_unload_tags
from mcfuninstall.synth.uninstall import OutputMode, UninstallDocument, synthesize
from mcfuninstall.synth.writer import (
    OutputError,
    adjacent_output_path,
    consolidated_output_path,
    write_document,
)
from mcfuninstall.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def generate_uninstall(
    ctx: typer.Context,
    paths: PathsArgument,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="File path for the complete uninstall function.",
            show_default="./uninstall.mcfunction",
        ),
    ] = None,
    adjacent: Annotated[
        bool,
        typer.Option(
            "--adjacent",
            "-a",
            help=(
                "Write uninstall functions next to the functions that add scoreboard "
                "objectives instead of one function."
            ),
        ),
    ] = False,
    function_tag: Annotated[
        bool,
        typer.Option(
            "--function-tag",
            "-f",
            help="Create an unload function tag per namespace (implies --adjacent).",
        ),
    ] = False,
    kill_tags: Annotated[
        bool,
        typer.Option(
            "--kill-tags",
            "-k",
            help="Kill non-player entities carrying a tag instead of removing the tag.",
        ),
    ] = False,
    skip: SkipOption = None,
    filters: FilterOption = None,
    config_path: ConfigOption = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Print the generated files instead of writing them."),
    ] = False,
) -> None:
    """Create uninstall functions for a datapack.

    Examples:
        mcf-uninstall generate ./mypack                     # One uninstall.mcfunction
        mcf-uninstall generate ./mypack -o out/remove       # Custom output path
        mcf-uninstall generate ./mypack --adjacent          # One per directory
        mcf-uninstall generate ./mypack -f                  # Adjacent + unload tags
        mcf-uninstall generate ./mypack -F 'storage=!temp'  # Filter identifiers
        mcf-uninstall generate ./mypack -x tag --dry-run    # Skip tags, print only
    """
    if function_tag:
        adjacent = True
    if output is not None and adjacent:
        print_error("--output cannot be used with --adjacent or --function-tag.")
        raise typer.Exit(code=USAGE_EXIT_CODE)

    file_config, scan_config = load_settings(config_path, skip, filters)
    kill = kill_tags or file_config.output.kill_tags
    quiet = is_quiet(ctx)

    try:
        results = run_scan(paths, scan_config)
    except InputPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except WalkError as e:
        print_error(f"Scan aborted, nothing was written: {e}")
        raise typer.Exit(code=1) from e

    mode = OutputMode.ADJACENT if adjacent else OutputMode.CONSOLIDATED
    documents = synthesize(matches_by_category(results), mode, kill)

    if not quiet:
        print_category_summary(results)

    try:
        if mode == OutputMode.ADJACENT:
            _emit_adjacent(documents, file_config, function_tag, dry_run, quiet)
        else:
            target = consolidated_output_path(output or Path(file_config.output.path))
            _emit(target, documents[0].text, dry_run, quiet)
    except OutputError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


# === Private helper functions ===


def _emit(path: Path, text: str, dry_run: bool, quiet: bool) -> None:
    """Write one file, or print it on a dry run."""
    if dry_run:
        console.print(f"[muted]--- {escape(str(path))}[/muted]")
        console.print(text, markup=False, highlight=False, soft_wrap=True, end="")
        return
    write_document(path, text)
    if not quiet:
        print_success(f"Wrote {path}")


def _emit_adjacent(
    documents: list[UninstallDocument],
    file_config: UninstallConfig,
    function_tag: bool,
    dry_run: bool,
    quiet: bool,
) -> None:
    """Write one function per directory, plus unload tags if requested."""
    if not documents:
        if not quiet:
            print_info("No scoreboard objectives found; no adjacent functions to write.")
        return

    written: list[Path] = []
    for document in documents:
        if document.source_dir is None:
            continue
        path = adjacent_output_path(document.source_dir)
        _emit(path, document.text, dry_run, quiet)
        written.append(path)

    if not function_tag:
        return

    namespace = file_config.namespace
    tags, unresolved = build_unload_tags(
        written,
        target_name=namespace.target,
        depth_limit=namespace.depth_limit,
        height_limit=namespace.height_limit,
    )
    for path in unresolved:
        print_warning(f"No '{namespace.target}' directory found for {path}; not tagged.")
    for tag in tags:
        _emit(tag.path, tag.text, dry_run, quiet)
