"""Data models for mcf-uninstall.

This module exports the core data structures used throughout the application.
"""

from mcfuninstall.models.match import Category, Match

__all__ = [
    "Category",
    "Match",
]
