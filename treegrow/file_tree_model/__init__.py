"""Domain model for scanned directory trees.

This package contains non-UI tree primitives:
- the ``TreeNode`` datatype with rolled-up size/count aggregates
- filesystem scanning and one-level directory listing
- whole-tree statistics
"""

from __future__ import annotations

from .fs import (
    SCAN_NOT_A_DIRECTORY,
    SCAN_NOT_FOUND,
    SCAN_PERMISSION_DENIED,
    DirectoryChild,
    ScanError,
    list_directory_children,
    scan_tree,
)
from .stats import TreeStats, compute_stats
from .types import DIRECTORY, FILE, TreeNode

__all__ = [
    "DIRECTORY",
    "FILE",
    "TreeNode",
    "ScanError",
    "SCAN_NOT_FOUND",
    "SCAN_NOT_A_DIRECTORY",
    "SCAN_PERMISSION_DENIED",
    "DirectoryChild",
    "list_directory_children",
    "scan_tree",
    "TreeStats",
    "compute_stats",
]
