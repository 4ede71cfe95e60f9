"""Whole-tree statistics derived once from a scanned tree."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .types import TreeNode


@dataclass(frozen=True)
class TreeStats:
    """Read-only snapshot of tree totals.

    ``current_reveal_depth`` is the only field that changes after the scan; use
    ``with_reveal_depth`` to derive the per-tick snapshot.
    """

    folder_count: int
    file_count: int
    total_size: int
    max_depth: int
    current_reveal_depth: int = 0

    @property
    def total_items(self) -> int:
        return self.folder_count + self.file_count

    def with_reveal_depth(self, depth: int) -> TreeStats:
        if depth == self.current_reveal_depth:
            return self
        return replace(self, current_reveal_depth=max(0, depth))


def compute_stats(root: TreeNode) -> TreeStats:
    """Count folders over the tree and read the rolled-up root aggregates."""
    folder_count = sum(1 for node in root.iter_nodes() if node.is_dir)
    return TreeStats(
        folder_count=folder_count,
        file_count=root.file_count,
        total_size=root.size,
        max_depth=root.deepest,
    )


__all__ = [
    "TreeStats",
    "compute_stats",
]
