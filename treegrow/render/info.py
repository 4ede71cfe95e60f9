"""Right-pane stats block, preview listing, and bottom status bar text.

Presentation only: every helper returns display strings and never touches
runtime state.
"""

from __future__ import annotations

from pathlib import Path

from ..file_tree_model import TreeStats
from ..preview_pane import PreviewPane
from ..sizes import format_size
from ..ui_theme import UITheme

HINTS_COMPLETE = " ↑/↓ scroll  PgUp/PgDn fast  click folder select/open  Enter open  Tab focus  s sizes  q quit"
HINTS_ANIMATING = " ↑/↓ scroll  PgUp/PgDn fast  Wait for animation...  q quit"


def _stat_line(label: str, value: str, label_color: str, value_color: str, reset: str) -> str:
    return f" {label_color}{label}:{reset} {value_color}{value}{reset}"


def info_panel_lines(stats: TreeStats, root_path: Path, theme: UITheme) -> list[str]:
    reset = theme.reset
    label = theme.stats_label
    return [
        f" {theme.stats_heading}Statistics{reset}",
        "",
        _stat_line("Path", str(root_path), label, "", reset),
        "",
        _stat_line("Folders", str(stats.folder_count), label, theme.stats_folders, reset),
        _stat_line("Files", str(stats.file_count), label, theme.stats_files, reset),
        _stat_line("Total Items", str(stats.total_items), label, theme.stats_items, reset),
        _stat_line("Total Size", format_size(stats.total_size), label, theme.stats_size, reset),
        _stat_line("Max Depth", str(stats.max_depth), label, theme.stats_depth, reset),
        _stat_line("Revealed", str(stats.current_reveal_depth), label, theme.stats_depth, reset),
        "",
    ]


def preview_header_line(preview: PreviewPane, focused: bool, theme: UITheme) -> str:
    reset = theme.reset
    color = theme.reverse if focused else theme.stats_heading
    if preview.target_path is None:
        return f" {color}Preview{reset}"
    name = preview.target_path.name or str(preview.target_path)
    return f" {color}Preview: {name} ({len(preview.entries)}){reset}"


def preview_lines(preview: PreviewPane, theme: UITheme) -> list[str]:
    reset = theme.reset
    if preview.target_path is None:
        return [f" {theme.hint_dim}Click a folder to preview it{reset}"]
    if preview.error is not None:
        return [f" {theme.preview_error}({preview.error}){reset}"]
    if not preview.entries:
        return [f" {theme.hint_dim}(empty){reset}"]

    out: list[str] = []
    for entry in preview.visible_entries():
        if entry.is_dir:
            out.append(f" {theme.preview_dir}▸ {entry.name}/{reset}")
            continue
        size_label = ""
        if entry.file_size is not None:
            size_label = f" {theme.tree_size}[{format_size(entry.file_size)}]{reset}"
        out.append(f"   {theme.preview_file}{entry.name}{reset}{size_label}")
    return out


def status_line(status_message: str, complete: bool, theme: UITheme) -> str:
    reset = theme.reset
    if status_message:
        return f" {theme.status}{status_message}{reset}"
    if complete:
        return f"{theme.hint_active}{HINTS_COMPLETE}{reset}"
    return f"{theme.hint_dim}{HINTS_ANIMATING}{reset}"
