"""Tree rows, growth animation, row formatting, and pane geometry.

Defines ``TreeRow`` plus the single flattening function shared by drawing and
click resolution, and the ``GrowthScheduler`` that reveals levels over time.
"""

from __future__ import annotations

from .flatten import flatten_revealed
from .growth import (
    DEFAULT_TICK_INTERVAL_SECONDS,
    PHASE_ANIMATING,
    PHASE_COMPLETE,
    PHASE_IDLE,
    GrowthScheduler,
    nodes_by_level,
)
from .layout import (
    TREE_PANEL_TOP_ROW,
    ScreenLayout,
    build_layout,
    clamp_left_width,
    compute_left_width,
)
from .rendering import format_tree_row, tree_panel_title, tree_prefix
from .types import ScrollState, TreeRow

__all__ = [
    "TreeRow",
    "ScrollState",
    "flatten_revealed",
    "GrowthScheduler",
    "nodes_by_level",
    "PHASE_IDLE",
    "PHASE_ANIMATING",
    "PHASE_COMPLETE",
    "DEFAULT_TICK_INTERVAL_SECONDS",
    "TREE_PANEL_TOP_ROW",
    "ScreenLayout",
    "build_layout",
    "clamp_left_width",
    "compute_left_width",
    "format_tree_row",
    "tree_panel_title",
    "tree_prefix",
]
