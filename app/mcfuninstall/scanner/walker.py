"""Recursive line-by-line walker over function files.

Visits a root path depth-first in pre-order, following symbolic links by
resolving their target type, and yields every line of every regular file.
Any read failure aborts the walk: a partial scan could silently miss a
declaration.
"""

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import NamedTuple

logger = logging.getLogger(__name__)


class WalkError(Exception):
    """Raised when a directory or file cannot be read during a walk."""


class Line(NamedTuple):
    """A single line of a scanned file."""

    path: Path
    number: int
    text: str


def walk(root: Path, suffixes: Iterable[str] | None = None) -> Iterator[Line]:
    """Yield every line of every file under ``root``.

    Directories (and links to directories) are descended into before the
    walk continues with their siblings. Siblings are visited in name order.
    Broken links and special files are skipped.

    Args:
        root: File or directory to walk. A file root is always read.
        suffixes: Only read files below ``root`` whose name ends with one
            of these suffixes. None reads every file.

    Yields:
        Line tuples in directory pre-order, then line order.

    Raises:
        WalkError: If a directory cannot be listed or a file cannot be read.
    """
    wanted = tuple(suffixes) if suffixes is not None else None

    if root.is_file():
        yield from _read_lines(root)
        return

    if not root.is_dir():
        logger.debug("Skipping %s: not a file or directory", root)
        return

    yield from _walk_directory(root, wanted, ancestors=frozenset())


def _walk_directory(
    directory: Path, suffixes: tuple[str, ...] | None, ancestors: frozenset[str]
) -> Iterator[Line]:
    """Walk one directory, recursing into subdirectories in listing order."""
    real = os.path.realpath(directory)
    if real in ancestors:
        logger.debug("Skipping %s: link back to %s", directory, real)
        return
    ancestors = ancestors | {real}

    logger.debug("Entering directory: %s", directory)
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        msg = f"Cannot read directory {directory}: {e}"
        raise WalkError(msg) from e

    for entry in entries:
        # is_dir()/is_file() follow symlinks, so links resolve to their target type
        if entry.is_dir():
            yield from _walk_directory(entry, suffixes, ancestors)
        elif entry.is_file():
            if suffixes is not None and not entry.name.endswith(suffixes):
                continue
            yield from _read_lines(entry)
        else:
            logger.debug("Skipping %s: broken link or special file", entry)


def _read_lines(path: Path) -> Iterator[Line]:
    """Read a file and yield its lines numbered from 1."""
    logger.debug("Checking file: %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read file {path}: {e}"
        raise WalkError(msg) from e

    for number, line in enumerate(text.splitlines(), start=1):
        yield Line(path, number, line)
