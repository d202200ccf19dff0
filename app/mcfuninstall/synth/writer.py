"""Persistence of generated documents.

Files are written atomically by first writing to a temporary file in the
target directory and then renaming it into place.
"""

import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile

from mcfuninstall.core.paths import ADJACENT_DIR_NAME, DEFAULT_OUTPUT_NAME, FUNCTION_SUFFIX

logger = logging.getLogger(__name__)


class OutputError(Exception):
    """Raised when a generated file cannot be written."""


def consolidated_output_path(path: Path | None = None) -> Path:
    """Output path for the consolidated function, with the function suffix.

    Args:
        path: Requested path. None uses ``uninstall.mcfunction`` in the
            working directory.

    Returns:
        ``path`` with ``.mcfunction`` appended when it lacks it.
    """
    if path is None:
        return Path(DEFAULT_OUTPUT_NAME)
    if path.name.endswith(FUNCTION_SUFFIX):
        return path
    return path.with_name(path.name + FUNCTION_SUFFIX)


def adjacent_output_path(source_dir: Path) -> Path:
    """Output path of the uninstall function generated for ``source_dir``."""
    return source_dir / ADJACENT_DIR_NAME / DEFAULT_OUTPUT_NAME


def write_document(path: Path, text: str) -> Path:
    """Write UTF-8 text to ``path`` atomically, creating parent directories.

    Args:
        path: Destination file.
        text: Content to write.

    Returns:
        The path written.

    Raises:
        OutputError: If the path is a directory or cannot be written.
    """
    if path.is_dir():
        msg = f"Output path is a directory: {path}"
        raise OutputError(msg)

    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            f.write(text)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        msg = f"Failed to write {path}: {e}"
        raise OutputError(msg) from e

    logger.debug("Wrote %s", path)
    return path
