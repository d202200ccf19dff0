"""Identifier filter expressions."""

from mcfuninstall.filters.expression import (
    FilterCompileError,
    FilterSpec,
    apply_filter,
    compile_filter,
    compile_pattern,
    is_pattern_token,
)

__all__ = [
    "FilterCompileError",
    "FilterSpec",
    "apply_filter",
    "compile_filter",
    "compile_pattern",
    "is_pattern_token",
]
