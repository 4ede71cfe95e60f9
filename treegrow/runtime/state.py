from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..file_tree_model import TreeNode, TreeStats
from ..tree_model import ScreenLayout, ScrollState, TreeRow, build_layout

CLICK_POLICY_SECOND_CLICK = "second-click"
CLICK_POLICY_SINGLE = "single"
CLICK_POLICIES: tuple[str, ...] = (CLICK_POLICY_SECOND_CLICK, CLICK_POLICY_SINGLE)

FOCUS_TREE = "tree"
FOCUS_PREVIEW = "preview"


@dataclass
class AppState:
    tree_root: TreeNode
    stats: TreeStats
    tree_rows: list[TreeRow] = field(default_factory=list)
    tree_scroll: ScrollState = field(default_factory=ScrollState)
    layout: ScreenLayout = field(default_factory=lambda: build_layout(80, 24))
    selected_path: Path | None = None
    click_policy: str = CLICK_POLICY_SECOND_CLICK
    focus: str = FOCUS_TREE
    show_size_labels: bool = False
    left_pane_percent: float | None = None
    status_message: str = ""
    status_message_until: float = 0.0
    dirty: bool = True
    quit_requested: bool = False
