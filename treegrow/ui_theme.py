"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the tree, stats, preview and status areas.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reverse: str
    reset: str
    title: str
    tree_connector: str
    tree_frontier: str
    tree_root: str
    tree_dir: str
    tree_file: str
    tree_size: str
    tree_selected: str
    stats_heading: str
    stats_label: str
    stats_folders: str
    stats_files: str
    stats_items: str
    stats_size: str
    stats_depth: str
    hint_active: str
    hint_dim: str
    preview_dir: str
    preview_file: str
    preview_error: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[32m",
    reverse="\033[7m",
    reset="\033[0m",
    title="\033[1;32m",
    tree_connector="\033[32m",
    tree_frontier="\033[1;92m",
    tree_root="\033[1;32m",
    tree_dir="\033[1;36m",
    tree_file="\033[38;5;252m",
    tree_size="\033[38;5;109m",
    tree_selected="\033[1;36;100m",
    stats_heading="\033[1;33m",
    stats_label="\033[1m",
    stats_folders="\033[36m",
    stats_files="\033[32m",
    stats_items="\033[35m",
    stats_size="\033[33m",
    stats_depth="\033[34m",
    hint_active="\033[32m",
    hint_dim="\033[2;37m",
    preview_dir="\033[1;36m",
    preview_file="\033[38;5;252m",
    preview_error="\033[31m",
    status="\033[1;38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    tree_connector="\033[38;5;31m",
    tree_frontier="\033[1;38;5;81m",
    tree_root="\033[1;38;5;45m",
    tree_dir="\033[1;38;5;117m",
    tree_file="\033[38;5;252m",
    tree_size="\033[38;5;73m",
    tree_selected="\033[1;38;5;117;48;5;24m",
    stats_heading="\033[1;38;5;45m",
    stats_label="\033[1m",
    stats_folders="\033[38;5;117m",
    stats_files="\033[38;5;84m",
    stats_items="\033[38;5;153m",
    stats_size="\033[38;5;215m",
    stats_depth="\033[38;5;39m",
    hint_active="\033[38;5;84m",
    hint_dim="\033[2;38;5;110m",
    preview_dir="\033[1;38;5;117m",
    preview_file="\033[38;5;252m",
    preview_error="\033[38;5;203m",
    status="\033[1;38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="",
    reset="",
    title="",
    tree_connector="",
    tree_frontier="",
    tree_root="",
    tree_dir="",
    tree_file="",
    tree_size="",
    tree_selected="",
    stats_heading="",
    stats_label="",
    stats_folders="",
    stats_files="",
    stats_items="",
    stats_size="",
    stats_depth="",
    hint_active="",
    hint_dim="",
    preview_dir="",
    preview_file="",
    preview_error="",
    status="",
)

_THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    """Names accepted by ``--theme``; ``plain`` is reached through ``--no-color``."""
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    candidate = (name or "").strip().lower()
    return candidate if candidate in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the palette for ``name``; ``no_color`` always yields the plain theme."""
    return PLAIN_THEME if no_color else _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
