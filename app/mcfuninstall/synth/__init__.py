"""Uninstall function synthesis and output.

This module renders uninstall functions and unload function tags from
scan results, and writes them to disk.
"""

from mcfuninstall.synth.function_tags import (
    FunctionLocation,
    FunctionTag,
    build_unload_tags,
    locate_function,
)
from mcfuninstall.synth.uninstall import (
    OutputMode,
    UninstallDocument,
    dedupe_matches,
    synthesize,
    synthesize_adjacent,
    synthesize_consolidated,
)
from mcfuninstall.synth.writer import (
    OutputError,
    adjacent_output_path,
    consolidated_output_path,
    write_document,
)

__all__ = [
    "FunctionLocation",
    "FunctionTag",
    "OutputError",
    "OutputMode",
    "UninstallDocument",
    "adjacent_output_path",
    "build_unload_tags",
    "consolidated_output_path",
    "dedupe_matches",
    "locate_function",
    "synthesize",
    "synthesize_adjacent",
    "synthesize_consolidated",
    "write_document",
]
