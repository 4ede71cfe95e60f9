"""Tree-pane click interpretation for selection and file-manager launches.

The handlers translate a tree-pane pointer position into a flattened row using
the same ``state.tree_rows`` list the renderer drew, so a click always lands
on the row that is on screen. Clicks are ignored until the growth animation
has completed; clicks outside the content are no-ops rather than errors.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from pathlib import Path

from ..runtime.state import CLICK_POLICY_SINGLE, AppState
from ..tree_model import TREE_PANEL_TOP_ROW, TreeRow

STATUS_MESSAGE_SECONDS = 2.5


class TreePaneMouseHandlers:
    """Resolve tree-pane clicks and apply selection/open intents.

    Selection changes repopulate the preview pane. Opening a folder in the OS
    file manager follows ``state.click_policy``: ``"single"`` opens on every
    folder click, ``"second-click"`` only when the folder was already selected.
    """

    def __init__(
        self,
        *,
        state: AppState,
        interaction_enabled: Callable[[], bool],
        show_preview: Callable[[Path], None],
        open_in_file_manager: Callable[[Path], bool],
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        """Create click handlers bound to shared app state.

        Args:
            state: Mutable runtime state to update in place.
            interaction_enabled: Returns ``True`` once the growth animation is
                complete; selection and opening are disabled before that.
            show_preview: Repopulates the preview pane for a folder path.
            open_in_file_manager: OS launcher returning success.
            monotonic: Clock used for status-message expiry.
        """
        self._state = state
        self._interaction_enabled = interaction_enabled
        self._show_preview = show_preview
        self._open_in_file_manager = open_in_file_manager
        self._monotonic = monotonic

    def resolve_row(self, row: int) -> TreeRow | None:
        """Map a 1-based terminal row inside the tree pane to its tree row."""
        state = self._state
        flat_index = state.tree_scroll.offset + (row - TREE_PANEL_TOP_ROW)
        if row < TREE_PANEL_TOP_ROW or row >= TREE_PANEL_TOP_ROW + state.tree_scroll.viewport_height:
            return None
        if not (0 <= flat_index < len(state.tree_rows)):
            return None
        return state.tree_rows[flat_index]

    def handle_click(self, col: int, row: int) -> bool:
        """Handle a left-button press inside the tree pane.

        Returns ``True`` when the click fell inside the tree pane (handled or
        ignored), ``False`` when it belongs to another pane.
        """
        state = self._state
        if not state.layout.in_tree_pane(col, row):
            return False
        if not self._interaction_enabled():
            return True

        target = self.resolve_row(row)
        if target is None or not target.node.is_dir:
            return True

        path = target.node.path
        already_selected = state.selected_path == path
        if not already_selected:
            state.selected_path = path
            self._show_preview(path)
            state.dirty = True

        if already_selected or state.click_policy == CLICK_POLICY_SINGLE:
            self.open_path(path)
        return True

    def open_selected(self) -> bool:
        """Open the current selection in the file manager (Enter key)."""
        state = self._state
        if not self._interaction_enabled() or state.selected_path is None:
            return False
        self.open_path(state.selected_path)
        return True

    def open_path(self, path: Path) -> bool:
        """Launch the file manager for ``path`` and report the outcome."""
        opened = self._open_in_file_manager(path)
        if opened:
            self._set_status(f"Opened {path}")
        else:
            self._set_status(f"Could not open {path}")
        return opened

    def _set_status(self, message: str) -> None:
        state = self._state
        state.status_message = message
        state.status_message_until = self._monotonic() + STATUS_MESSAGE_SECONDS
        state.dirty = True


__all__ = [
    "STATUS_MESSAGE_SECONDS",
    "TreePaneMouseHandlers",
]
