"""Frame composition for the split tree/info terminal view.

Defines the per-frame render context and builds fully composed ANSI frames.
Rendering reads state only; scrolling and selection never change here.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..ansi import fit_ansi_line
from ..file_tree_model import TreeNode, TreeStats
from ..preview_pane import PreviewPane
from ..runtime.state import FOCUS_PREVIEW
from ..sizes import format_size
from ..tree_model import (
    GrowthScheduler,
    ScreenLayout,
    TreeRow,
    flatten_revealed,
    format_tree_row,
    tree_panel_title,
)
from ..ui_theme import DEFAULT_THEME, UITheme
from .info import info_panel_lines, preview_header_line, preview_lines, status_line

# Stats block plus one spacer row; the preview header and entries follow it.
INFO_PANEL_ROWS = 11


def preview_viewport_height(layout: ScreenLayout) -> int:
    """Rows left for preview entries below the stats block and its header."""
    return max(1, layout.content_rows - INFO_PANEL_ROWS - 1)


@dataclass
class RenderContext:
    layout: ScreenLayout
    tree_rows: list[TreeRow]
    tree_offset: int
    total_nodes: int
    stats: TreeStats
    root_path: Path
    preview: PreviewPane
    selected_path: Path | None = None
    complete: bool = False
    frontier_depth: int | None = None
    # Deepest level the tree pane can show; defaults to ``stats.max_depth``.
    tree_depth: int | None = None
    growth_frame: int = 0
    show_size_labels: bool = False
    focus: str = "tree"
    status_message: str = ""
    theme: UITheme = DEFAULT_THEME


def _tree_lines(context: RenderContext) -> list[str]:
    layout = context.layout
    rows = context.tree_rows
    out: list[str] = []
    for line_idx in range(layout.content_rows):
        flat_idx = context.tree_offset + line_idx
        if flat_idx >= len(rows):
            out.append("")
            continue
        row = rows[flat_idx]
        frontier_frame = (
            context.growth_frame
            if context.frontier_depth is not None and row.depth == context.frontier_depth and row.depth > 0
            else None
        )
        out.append(
            format_tree_row(
                row,
                selected=row.node.path == context.selected_path,
                frontier_frame=frontier_frame,
                show_size_labels=context.show_size_labels,
                theme=context.theme,
            )
        )
    return out


def _right_lines(context: RenderContext) -> list[str]:
    theme = context.theme
    lines = info_panel_lines(context.stats, context.root_path, theme)
    lines = lines[:INFO_PANEL_ROWS] + [""] * max(0, INFO_PANEL_ROWS - len(lines))
    lines.append(
        preview_header_line(
            context.preview,
            focused=context.focus == FOCUS_PREVIEW,
            theme=theme,
        )
    )
    lines.extend(preview_lines(context.preview, theme))
    return lines


def build_frame(context: RenderContext) -> str:
    """Compose one full-screen frame as a single ANSI string."""
    layout = context.layout
    theme = context.theme
    reset = theme.reset
    left_width = layout.left_width
    right_width = layout.right_width - 1
    divider = f"{theme.divider}│{reset}"

    tree_title = tree_panel_title(
        len(context.tree_rows),
        context.total_nodes,
        context.stats.current_reveal_depth,
        context.stats.max_depth if context.tree_depth is None else context.tree_depth,
        context.complete,
    )
    tree_title_color = theme.reverse if context.focus != FOCUS_PREVIEW else theme.title
    out: list[str] = ["\033[H\033[J"]
    out.append(fit_ansi_line(f"{tree_title_color}{tree_title}{reset}", left_width))
    out.append(divider)
    out.append(fit_ansi_line(f"{theme.title} Info {reset}", right_width))
    out.append("\r\n")

    tree_lines = _tree_lines(context)
    right_lines = _right_lines(context)
    for line_idx in range(layout.content_rows):
        out.append(fit_ansi_line(tree_lines[line_idx], left_width))
        out.append(divider)
        right_text = right_lines[line_idx] if line_idx < len(right_lines) else ""
        out.append(fit_ansi_line(right_text, right_width))
        out.append("\r\n")

    out.append(fit_ansi_line(status_line(context.status_message, context.complete, theme), layout.columns - 1))
    return "".join(out)


def write_to_stdout(frame: str) -> None:
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))


def render_frame(context: RenderContext, write: Callable[[str], None] | None = None) -> None:
    """Build the frame for ``context`` and hand it to ``write`` (stdout by default)."""
    (write or write_to_stdout)(build_frame(context))


def render_static_tree(root: TreeNode, stats: TreeStats, theme: UITheme = DEFAULT_THEME) -> str:
    """Render the fully revealed tree and totals for non-interactive output."""
    scheduler = GrowthScheduler(root)
    scheduler.start()
    while scheduler.tick():
        pass
    lines = [format_tree_row(row, show_size_labels=True, theme=theme) for row in flatten_revealed(root)]
    lines.append("")
    lines.append(
        f"{stats.folder_count} folders, {stats.file_count} files, "
        f"{format_size(stats.total_size)}, max depth {stats.max_depth}"
    )
    return "\n".join(lines) + "\n"


__all__ = [
    "INFO_PANEL_ROWS",
    "RenderContext",
    "build_frame",
    "preview_viewport_height",
    "render_frame",
    "render_static_tree",
    "write_to_stdout",
]
