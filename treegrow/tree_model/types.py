"""Flattened tree-row datatype shared by rendering and click mapping."""

from __future__ import annotations

from dataclasses import dataclass

from ..file_tree_model import TreeNode


@dataclass(frozen=True)
class TreeRow:
    """One display line of the tree pane.

    ``guides`` has one flag per ancestor level between the root's children and
    this row's parent; a ``True`` flag means a vertical guide continues there.
    """

    node: TreeNode
    depth: int
    is_last_child: bool
    guides: tuple[bool, ...] = ()


@dataclass
class ScrollState:
    """Line offset into a flat list plus the visible window height."""

    offset: int = 0
    viewport_height: int = 1

    def max_offset(self, total_lines: int) -> int:
        return max(0, total_lines - self.viewport_height)
