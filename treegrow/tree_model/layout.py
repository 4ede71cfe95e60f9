"""Screen geometry for the tree pane and the info/preview pane."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TREE_PANEL_PERCENT = 70.0
# Row 1 holds the pane titles; the last row is the status bar.
TREE_PANEL_TOP_ROW = 2
STATUS_ROWS = 1


def clamp_left_width(total_width: int, desired_left: int) -> int:
    """Clamp tree-pane width so both panes keep a usable minimum."""
    max_possible = max(1, total_width - 2)
    min_left = max(12, min(20, total_width - 12))
    max_left = max(min_left, total_width - 12)
    max_left = min(max_left, max_possible)
    min_left = min(min_left, max_left)
    return max(min_left, min(desired_left, max_left))


def compute_left_width(total_width: int, percent: float | None = None) -> int:
    """Return the tree-pane width for ``percent`` of ``total_width``."""
    share = DEFAULT_TREE_PANEL_PERCENT if percent is None else percent
    return clamp_left_width(total_width, int(total_width * share / 100.0))


@dataclass(frozen=True)
class ScreenLayout:
    """Resolved pane geometry for one terminal size (1-based rows/cols)."""

    columns: int
    lines: int
    left_width: int

    @property
    def content_rows(self) -> int:
        """Rows available to the tree and preview lists."""
        return max(1, self.lines - (TREE_PANEL_TOP_ROW - 1) - STATUS_ROWS)

    @property
    def right_col(self) -> int:
        """First column of the right-hand pane (after the divider)."""
        return self.left_width + 2

    @property
    def right_width(self) -> int:
        return max(1, self.columns - self.left_width - 1)

    def in_tree_pane(self, col: int, row: int) -> bool:
        return 1 <= col <= self.left_width and TREE_PANEL_TOP_ROW <= row < TREE_PANEL_TOP_ROW + self.content_rows

    def in_right_pane(self, col: int) -> bool:
        return col >= self.right_col


def build_layout(columns: int, lines: int, percent: float | None = None) -> ScreenLayout:
    columns = max(1, columns)
    lines = max(1, lines)
    return ScreenLayout(columns=columns, lines=lines, left_width=compute_left_width(columns, percent))


__all__ = [
    "DEFAULT_TREE_PANEL_PERCENT",
    "TREE_PANEL_TOP_ROW",
    "STATUS_ROWS",
    "clamp_left_width",
    "compute_left_width",
    "ScreenLayout",
    "build_layout",
]
