"""Pre-order linearization of the revealed part of a tree.

This is the only place rows are derived from the tree. The renderer draws
``rows[i]`` on tree-pane line ``i - offset`` and the click mapper resolves
line ``i - offset`` back to ``rows[i]``, so both always agree.
"""

from __future__ import annotations

from ..file_tree_model import TreeNode
from .types import TreeRow


def flatten_revealed(root: TreeNode) -> list[TreeRow]:
    """Return revealed nodes in pre-order, children in stored order."""
    if not root.revealed:
        return []

    rows: list[TreeRow] = []
    stack: list[tuple[TreeNode, bool, tuple[bool, ...]]] = [(root, True, ())]
    while stack:
        node, is_last, guides = stack.pop()
        rows.append(TreeRow(node=node, depth=node.depth, is_last_child=is_last, guides=guides))

        visible = [child for child in node.children if child.revealed]
        if not visible:
            continue
        child_guides = guides + (not is_last,) if node.depth > 0 else ()
        last_idx = len(visible) - 1
        for idx in range(last_idx, -1, -1):
            stack.append((visible[idx], idx == last_idx, child_guides))
    return rows
