"""Formatting helpers for tree rows."""

from __future__ import annotations

from ..sizes import format_size
from ..ui_theme import DEFAULT_THEME, UITheme
from .types import TreeRow

GUIDE_CONTINUES = "│   "
GUIDE_BLANK = "    "
BRANCH_MIDDLE = "├── "
BRANCH_LAST = "╰── "
ROOT_MARKER = "◆ "
DIR_MARKER = "▸ "
LINK_MARKER = "↪ "
FILE_MARKER = "· "


def tree_prefix(row: TreeRow, frontier_frame: int | None = None) -> str:
    """Return guide lines plus the branch connector for ``row``.

    ``frontier_frame`` draws the connector partially grown (frames 0 and 1)
    for rows on the level that was revealed last.
    """
    if row.depth == 0:
        return ""
    guides = "".join(GUIDE_CONTINUES if flag else GUIDE_BLANK for flag in row.guides)
    branch = BRANCH_LAST if row.is_last_child else BRANCH_MIDDLE
    if frontier_frame is None:
        return guides + branch
    stem = branch[0]
    if frontier_frame % 3 == 0:
        return guides + f"{stem}─  "
    if frontier_frame % 3 == 1:
        return guides + f"{stem}── "
    return guides + branch


def format_tree_row(
    row: TreeRow,
    selected: bool = False,
    frontier_frame: int | None = None,
    show_size_labels: bool = False,
    theme: UITheme | None = None,
) -> str:
    """Render one tree row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    node = row.node
    connector_color = active_theme.tree_frontier if frontier_frame is not None else active_theme.tree_connector
    prefix = tree_prefix(row, frontier_frame)

    if row.depth == 0:
        marker, name_color = ROOT_MARKER, active_theme.tree_root
        name = str(node.path) if not node.name else node.name
    elif node.is_dir:
        marker = LINK_MARKER if node.is_symlink else DIR_MARKER
        name_color = active_theme.tree_dir
        name = node.name + "/"
    else:
        marker, name_color = FILE_MARKER, active_theme.tree_file
        name = node.name

    if selected:
        name_color = active_theme.tree_selected or active_theme.reverse

    size_label = ""
    if show_size_labels:
        size_label = f" {active_theme.tree_size}[{format_size(node.size)}]{reset}"
    return f"{connector_color}{prefix}{reset}{name_color}{marker}{name}{reset}{size_label}"


def tree_panel_title(
    visible_rows: int,
    total_nodes: int,
    reveal_depth: int,
    max_depth: int,
    complete: bool,
) -> str:
    """Return the tree-pane header text, e.g. ``tree (12/40) - Depth 2/5``."""
    label = "tree" if complete else "growing"
    return f" {label} ({visible_rows}/{total_nodes}) - Depth {reveal_depth}/{max_depth} "


__all__ = [
    "tree_prefix",
    "format_tree_row",
    "tree_panel_title",
]
