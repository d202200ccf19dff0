"""Unload function tags referencing generated uninstall functions.

Every generated function is located inside its datapack by searching for
the ``data`` directory around it. The path below ``data`` gives the
namespace and the function's resource location; one ``unload`` tag is
rendered per namespace.
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Any

from mcfuninstall.core.paths import FUNCTION_SUFFIX
from mcfuninstall.namespace.resolver import (
    DEFAULT_DEPTH_LIMIT,
    DEFAULT_HEIGHT_LIMIT,
    DEFAULT_TARGET,
    DirectoryLister,
    resolve,
)
from mcfuninstall.synth.writer import OutputError

logger = logging.getLogger(__name__)

# Function directory names: "functions" before 1.21, "function" since
FUNCTION_DIR_NAMES: tuple[str, ...] = ("functions", "function")

UNLOAD_TAG_NAME = "unload"

# Tag entry: a resource location, or an object such as {"id": ..., "required": false}
TagValue = str | dict[str, Any]


class FunctionTagError(OutputError):
    """Raised when an existing function tag cannot be merged."""


@dataclass(frozen=True, slots=True)
class FunctionLocation:
    """Where a function file lives inside a datapack.

    Attributes:
        data_root: The datapack's ``data`` directory.
        namespace: Namespace directory below ``data_root``.
        function_dir: Name of the function directory ("functions" or "function").
        resource: Resource location, e.g. ``ns:path/to/uninstall``.
    """

    data_root: PurePath
    namespace: str
    function_dir: str
    resource: str


@dataclass(frozen=True, slots=True)
class FunctionTag:
    """A rendered function tag file.

    Attributes:
        path: Location of the tag file.
        values: Tag entries; plain resource locations, or objects with an
            ``id`` key as found in an existing tag.
        replace: Value of the tag's ``replace`` flag (written only when set).
    """

    path: Path
    values: tuple[TagValue, ...]
    replace: bool = False

    @property
    def text(self) -> str:
        document: dict[str, Any] = {"values": list(self.values)}
        if self.replace:
            document = {"replace": True, **document}
        return json.dumps(document, indent=2) + "\n"


def locate_function(
    function_file: PurePath,
    target_name: str = DEFAULT_TARGET,
    depth_limit: int = DEFAULT_DEPTH_LIMIT,
    height_limit: int = DEFAULT_HEIGHT_LIMIT,
    lister: DirectoryLister | None = None,
) -> FunctionLocation | None:
    """Find the namespace and resource location of a function file.

    Returns:
        FunctionLocation, or None when the file is not inside a
        ``<data>/<namespace>/functions/`` tree within the search bounds.
    """
    result = resolve(function_file, target_name, depth_limit, height_limit, lister)
    if not result.found or result.root is None:
        return None

    segments = result.segments
    if len(segments) < 3 or ".." in segments or segments[1] not in FUNCTION_DIR_NAMES:
        logger.debug("%s is not inside a function directory of %s", function_file, result.root)
        return None

    namespace, function_dir, *rest = segments
    name = rest[-1]
    if name.endswith(FUNCTION_SUFFIX):
        rest[-1] = name[: -len(FUNCTION_SUFFIX)]

    return FunctionLocation(
        data_root=result.root,
        namespace=namespace,
        function_dir=function_dir,
        resource=f"{namespace}:{'/'.join(rest)}",
    )


def read_function_tag(path: Path) -> tuple[list[TagValue], bool]:
    """Read the entries of an existing function tag file.

    Args:
        path: Tag file path.

    Returns:
        Tuple of (entries in file order, ``replace`` flag). A missing file
        has no entries.

    Raises:
        FunctionTagError: If the file cannot be read or is not a function tag.
    """
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return [], False
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        msg = f"Cannot read existing function tag {path}: {e}"
        raise FunctionTagError(msg) from e

    values = document.get("values", []) if isinstance(document, dict) else None
    if not isinstance(values, list) or not all(_entry_id(value) for value in values):
        msg = f"Existing function tag {path} has no valid 'values' list"
        raise FunctionTagError(msg)
    return values, document.get("replace") is True


def merge_function_tag(tag: FunctionTag) -> FunctionTag:
    """Merge a generated tag into the tag file already on disk.

    Existing entries keep their order and come first; generated entries
    not yet referenced are appended.
    """
    existing, replace = read_function_tag(tag.path)
    present = {_entry_id(value) for value in existing}
    added = [value for value in tag.values if _entry_id(value) not in present]
    if added:
        logger.debug("Adding %d entries to %s", len(added), tag.path)
    return FunctionTag(tag.path, (*existing, *added), replace)


def _entry_id(value: object) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and isinstance(value.get("id"), str):
        return value["id"]
    return None


def build_unload_tags(
    function_files: Iterable[PurePath],
    target_name: str = DEFAULT_TARGET,
    depth_limit: int = DEFAULT_DEPTH_LIMIT,
    height_limit: int = DEFAULT_HEIGHT_LIMIT,
    lister: DirectoryLister | None = None,
    merge_existing: bool = True,
) -> tuple[list[FunctionTag], list[PurePath]]:
    """Group function files into one unload tag per namespace.

    Args:
        function_files: Generated uninstall function paths.
        target_name: Name of the datapack data directory.
        depth_limit: First-phase bound of the namespace search.
        height_limit: Second-phase bound of the namespace search.
        lister: Directory listing source (real filesystem by default).
        merge_existing: Keep the entries of tag files that already exist.

    Returns:
        Tuple of (tags sorted by path, files that could not be located).

    Raises:
        FunctionTagError: If an existing tag file cannot be merged.
    """
    grouped: dict[Path, set[str]] = {}
    unresolved: list[PurePath] = []

    for function_file in function_files:
        location = locate_function(function_file, target_name, depth_limit, height_limit, lister)
        if location is None:
            logger.warning("Cannot find a datapack namespace for %s", function_file)
            unresolved.append(function_file)
            continue
        tag_path = Path(
            location.data_root,
            location.namespace,
            "tags",
            location.function_dir,
            f"{UNLOAD_TAG_NAME}.json",
        )
        grouped.setdefault(tag_path, set()).add(location.resource)

    tags = [FunctionTag(path, tuple(sorted(values))) for path, values in grouped.items()]
    if merge_existing:
        tags = [merge_function_tag(tag) for tag in tags]
    tags.sort(key=lambda tag: str(tag.path))
    return tags, unresolved
