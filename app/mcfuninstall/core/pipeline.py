"""Scan orchestration: roots in, filtered matches per category out.

Each enabled category gets its own walk of the roots, so no state is
shared between categories. Everything is collected before anything is
written: a failed walk leaves no partial output behind.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from mcfuninstall.filters.expression import apply_filter
from mcfuninstall.models.match import Category, Match
from mcfuninstall.models.settings import CategoryState, ScanConfig
from mcfuninstall.scanner.extractor import extract_all

logger = logging.getLogger(__name__)


class InputPathError(Exception):
    """Raised when scan roots do not exist."""

    def __init__(self, missing: Sequence[Path]) -> None:
        self.missing = tuple(missing)
        paths = ", ".join(f'"{p}"' for p in self.missing)
        super().__init__(
            f"Invalid path {paths}. Please use a path to an existing file or directory."
        )


@dataclass(frozen=True, slots=True)
class CategoryResult:
    """Matches of one category after filtering.

    Attributes:
        category: Scanned category.
        matches: Filtered matches in encounter order (duplicates kept).
        total: Number of matches before filtering.
    """

    category: Category
    matches: tuple[Match, ...]
    total: int

    @property
    def filtered_out(self) -> int:
        return self.total - len(self.matches)


def validate_roots(roots: Iterable[Path]) -> list[Path]:
    """Check that every root exists before anything is scanned.

    Returns:
        The roots as absolute paths, in the given order.

    Raises:
        InputPathError: Listing every missing root.
    """
    root_list = list(roots)
    missing = [root for root in root_list if not root.exists()]
    if missing:
        raise InputPathError(missing)
    return [root.absolute() for root in root_list]


def scan_category(category: Category, roots: Sequence[Path], config: ScanConfig) -> CategoryResult:
    """Extract and filter one category.

    Raises:
        WalkError: If a root cannot be read.
    """
    setting = config.setting(category)
    matches = list(extract_all(category, roots, config.suffixes))

    if setting.state == CategoryState.FILTERED and setting.filter_spec is not None:
        kept = apply_filter(setting.filter_spec, matches)
    else:
        kept = matches

    logger.debug(
        "%s: %d match(es), %d after filtering", category.value, len(matches), len(kept)
    )
    return CategoryResult(category=category, matches=tuple(kept), total=len(matches))


def run_scan(roots: Iterable[Path], config: ScanConfig) -> dict[Category, CategoryResult]:
    """Scan every enabled category over ``roots``.

    Args:
        roots: Files or directories to scan.
        config: Category settings and file suffixes.

    Returns:
        Result per enabled category, in canonical category order. Disabled
        categories are absent.

    Raises:
        InputPathError: If a root does not exist.
        WalkError: If a directory or file cannot be read.
    """
    checked = validate_roots(roots)
    return {
        category: scan_category(category, checked, config)
        for category in config.enabled_categories
    }


def matches_by_category(results: dict[Category, CategoryResult]) -> dict[Category, list[Match]]:
    """Strip results down to their match lists for synthesis."""
    return {category: list(result.matches) for category, result in results.items()}
