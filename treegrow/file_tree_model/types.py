"""Domain datatypes for scanned directory trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DIRECTORY = "directory"
FILE = "file"


@dataclass(eq=False)
class TreeNode:
    """One scanned filesystem entry with subtree aggregates.

    Everything except ``revealed`` is fixed once the scan returns. ``revealed``
    belongs to the growth scheduler and is the only per-tick mutation.
    """

    name: str
    path: Path
    kind: str
    depth: int
    size: int = 0
    children: list["TreeNode"] = field(default_factory=list)
    loose_file_size: int = 0
    file_count: int = 0
    entry_count: int = 0
    deepest: int = 0
    is_symlink: bool = False
    unreadable: bool = False
    revealed: bool = False

    @property
    def is_dir(self) -> bool:
        return self.kind == DIRECTORY

    def iter_nodes(self):
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


__all__ = [
    "DIRECTORY",
    "FILE",
    "TreeNode",
]
