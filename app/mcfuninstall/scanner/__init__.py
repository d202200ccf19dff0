"""Function file scanning.

This module provides the recursive line walker, the per-category
extraction rules and the extractor combining them.
"""

from mcfuninstall.scanner.extractor import extract, extract_all
from mcfuninstall.scanner.patterns import (
    KILL_TAG_TEMPLATE,
    RULES,
    TEMPLATES,
    ExtractionRule,
    get_rule,
    get_template,
    render_inverse,
)
from mcfuninstall.scanner.walker import Line, WalkError, walk

__all__ = [
    "KILL_TAG_TEMPLATE",
    "RULES",
    "TEMPLATES",
    "ExtractionRule",
    "Line",
    "WalkError",
    "extract",
    "extract_all",
    "get_rule",
    "get_template",
    "render_inverse",
    "walk",
]
