"""Identifier extraction for one category over a walked tree."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from mcfuninstall.models.match import Category, Match
from mcfuninstall.scanner.patterns import get_rule
from mcfuninstall.scanner.walker import walk

logger = logging.getLogger(__name__)


def extract(
    category: Category, root: Path, suffixes: Iterable[str] | None = None
) -> Iterator[Match]:
    """Extract every identifier of ``category`` declared under ``root``.

    A fresh walk is started on every call, so each category scan is
    independent of any other.

    Args:
        category: Category whose extraction rule is applied.
        root: File or directory to scan.
        suffixes: File suffixes to read (None reads every file).

    Yields:
        Match instances in encounter order: directory pre-order, then line
        order, then left-to-right within a line.

    Raises:
        WalkError: If the tree cannot be read.
    """
    rule = get_rule(category)
    for line in walk(root, suffixes):
        file = line.path.absolute()
        for identifier in rule.find(line.text):
            logger.debug("Match found: %s %s (%s:%d)", category.value, identifier, file, line.number)
            yield Match(id=identifier, file=file, dir=file.parent, line=line.number)


def extract_all(
    category: Category, roots: Iterable[Path], suffixes: Iterable[str] | None = None
) -> Iterator[Match]:
    """Extract ``category`` identifiers from several roots, in the given order."""
    wanted = tuple(suffixes) if suffixes is not None else None
    for root in roots:
        yield from extract(category, root, wanted)
