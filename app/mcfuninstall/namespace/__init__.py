"""Namespace directory resolution."""

from mcfuninstall.namespace.resolver import (
    DEFAULT_DEPTH_LIMIT,
    DEFAULT_HEIGHT_LIMIT,
    DEFAULT_TARGET,
    DirectoryLister,
    FilesystemLister,
    NamespaceResult,
    resolve,
)

__all__ = [
    "DEFAULT_DEPTH_LIMIT",
    "DEFAULT_HEIGHT_LIMIT",
    "DEFAULT_TARGET",
    "DirectoryLister",
    "FilesystemLister",
    "NamespaceResult",
    "resolve",
]
