"""Rendering of uninstall functions from filtered matches.

This module only produces text. Writing the documents is left to
:mod:`mcfuninstall.synth.writer`.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from mcfuninstall import __version__
from mcfuninstall.models.match import Category, Match
from mcfuninstall.scanner.patterns import render_inverse


class OutputMode(str, Enum):
    """Layout of the generated uninstall functions.

    Attributes:
        CONSOLIDATED: One function covering every category.
        ADJACENT: One function per directory that declares scoreboard
            objectives, holding only that directory's objectives.
    """

    CONSOLIDATED = "consolidated"
    ADJACENT = "adjacent"


@dataclass(frozen=True, slots=True)
class UninstallDocument:
    """A rendered uninstall function.

    Attributes:
        text: Function file content.
        source_dir: Directory the document belongs to (None when consolidated).
        identifiers: Identifiers removed by the document, in output order.
    """

    text: str
    source_dir: Path | None
    identifiers: tuple[str, ...]


def dedupe_matches(matches: Iterable[Match]) -> list[Match]:
    """Collapse matches with equal identifiers to their first occurrence."""
    seen: set[str] = set()
    unique: list[Match] = []
    for match in matches:
        if match.id in seen:
            continue
        seen.add(match.id)
        unique.append(match)
    return unique


def _header(mode: OutputMode, source_dir: Path | None = None) -> list[str]:
    lines = [
        f"# Uninstall function generated by mcf-uninstall {__version__}",
    ]
    if mode == OutputMode.ADJACENT and source_dir is not None:
        lines.append(f"# Removes the scoreboard objectives added in {source_dir.name}/")
    else:
        lines.append("# Removes every resource the datapack declares.")
    return lines


def render_section(
    category: Category, matches: Sequence[Match], kill_tags: bool = False
) -> list[str]:
    """Render a labeled section: heading then one command per identifier."""
    lines = [f"# {category.label}"]
    lines.extend(render_inverse(category, match.id, kill_tags) for match in matches)
    return lines


def synthesize_consolidated(
    results: Mapping[Category, Sequence[Match]], kill_tags: bool = False
) -> UninstallDocument:
    """Render one document with a section per category present in ``results``.

    Sections follow the canonical category order. A category present with
    no identifiers still gets its heading.
    """
    lines = _header(OutputMode.CONSOLIDATED)
    identifiers: list[str] = []

    for category in Category:
        if category not in results:
            continue
        unique = dedupe_matches(results[category])
        lines.append("")
        lines.extend(render_section(category, unique, kill_tags))
        identifiers.extend(match.id for match in unique)

    return UninstallDocument(
        text="\n".join(lines) + "\n",
        source_dir=None,
        identifiers=tuple(identifiers),
    )


def synthesize_adjacent(scoreboard_matches: Sequence[Match]) -> list[UninstallDocument]:
    """Render one document per directory declaring scoreboard objectives.

    Directories appear in first-encounter order; each document removes only
    the objectives whose match was recorded in that directory.
    """
    by_dir: dict[Path, list[Match]] = {}
    for match in scoreboard_matches:
        by_dir.setdefault(match.dir, []).append(match)

    documents: list[UninstallDocument] = []
    for directory, matches in by_dir.items():
        unique = dedupe_matches(matches)
        lines = _header(OutputMode.ADJACENT, directory)
        lines.append("")
        lines.extend(render_section(Category.SCOREBOARD, unique))
        documents.append(
            UninstallDocument(
                text="\n".join(lines) + "\n",
                source_dir=directory,
                identifiers=tuple(match.id for match in unique),
            )
        )
    return documents


def synthesize(
    results: Mapping[Category, Sequence[Match]],
    mode: OutputMode = OutputMode.CONSOLIDATED,
    kill_tags: bool = False,
) -> list[UninstallDocument]:
    """Render the uninstall documents for a scan.

    Args:
        results: Filtered matches per enabled category.
        mode: Output layout.
        kill_tags: Kill tagged entities (never players) instead of untagging them.

    Returns:
        One document in consolidated mode, one per directory in adjacent mode.
    """
    if mode == OutputMode.ADJACENT:
        return synthesize_adjacent(results.get(Category.SCOREBOARD, ()))
    return [synthesize_consolidated(results, kill_tags)]
