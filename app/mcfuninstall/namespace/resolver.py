"""Bounded search for a named directory around a path.

Used to find the ``data`` directory of a datapack from a function file
deep inside it. The search only needs directory listings, so it runs over
an injectable :class:`DirectoryLister` and can be exercised against a
virtual tree.

Two phases, both walking upward from the directory containing the start
path:

1. For ``depth_limit`` steps, look for the target among the children of
   the current directory.
2. Then, for at most ``height_limit`` further steps, look for it among the
   children of the current directory's parent, stopping at the root.

A miss is a normal outcome and yields an empty result.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import PurePath
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_TARGET = "data"
DEFAULT_DEPTH_LIMIT = 5
DEFAULT_HEIGHT_LIMIT = 10


class DirectoryLister(Protocol):
    """Lists the entry names of a directory."""

    def child_names(self, directory: PurePath) -> set[str]:
        """Return the names of the immediate children of ``directory``."""
        ...


class FilesystemLister:
    """DirectoryLister backed by the real filesystem.

    Unreadable or missing directories are reported as empty.
    """

    def child_names(self, directory: PurePath) -> set[str]:
        try:
            return set(os.listdir(directory))
        except OSError as e:
            logger.debug("Cannot list %s: %s", directory, e)
            return set()


@dataclass(frozen=True, slots=True)
class NamespaceResult:
    """Outcome of a namespace search.

    Attributes:
        namespace: Name of the matched directory, or None on a miss.
        relative_path: POSIX path from the matched directory to the start
            path ("" on a miss).
        root: The matched directory (None on a miss).
    """

    namespace: str | None = None
    relative_path: str = ""
    root: PurePath | None = None

    def __post_init__(self) -> None:
        """Reject partially populated results."""
        if self.namespace is None and (self.relative_path or self.root is not None):
            msg = "A failed namespace result cannot carry a path"
            raise ValueError(msg)
        if self.namespace is not None and self.root is None:
            msg = "A resolved namespace needs its root directory"
            raise ValueError(msg)

    @property
    def found(self) -> bool:
        return self.namespace is not None

    @property
    def segments(self) -> tuple[str, ...]:
        """Segments of ``relative_path``."""
        if not self.relative_path:
            return ()
        return tuple(self.relative_path.split("/"))


def relative_segments(start: PurePath, root: PurePath) -> str:
    """POSIX path from ``root`` to ``start``, using ``..`` when not below it."""
    try:
        relative = start.relative_to(root)
    except ValueError:
        relative = PurePath(os.path.relpath(start, root))
    return relative.as_posix()


def resolve(
    start_path: PurePath,
    target_name: str = DEFAULT_TARGET,
    depth_limit: int = DEFAULT_DEPTH_LIMIT,
    height_limit: int = DEFAULT_HEIGHT_LIMIT,
    lister: DirectoryLister | None = None,
) -> NamespaceResult:
    """Locate the directory named ``target_name`` around ``start_path``.

    Args:
        start_path: Path the search starts from (usually a file).
        target_name: Exact directory name to find.
        depth_limit: Steps of the first phase.
        height_limit: Maximum steps of the second phase.
        lister: Source of directory listings (real filesystem by default).

    Returns:
        NamespaceResult, empty when nothing was found within the bounds.
    """
    if depth_limit < 0 or height_limit < 0:
        msg = "Search limits cannot be negative"
        raise ValueError(msg)

    lister = lister or FilesystemLister()
    current = start_path.parent

    for step in range(depth_limit):
        if step:
            if current.parent == current:
                break
            current = current.parent
        if target_name in lister.child_names(current):
            return _hit(start_path, current / target_name)

    for _ in range(height_limit):
        parent = current.parent
        if parent == current:
            break
        if target_name in lister.child_names(parent):
            return _hit(start_path, parent / target_name)
        current = parent

    logger.debug("No '%s' directory found around %s", target_name, start_path)
    return NamespaceResult()


def _hit(start_path: PurePath, root: PurePath) -> NamespaceResult:
    logger.debug("Found '%s' for %s", root, start_path)
    return NamespaceResult(
        namespace=root.name,
        relative_path=relative_segments(start_path, root),
        root=root,
    )
