"""Mouse routing between the tree pane and the preview pane."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..runtime.state import AppState

WHEEL_SCROLL_LINES = 3


def parse_mouse_col_row(mouse_key: str) -> tuple[int | None, int | None]:
    parts = mouse_key.split(":")
    if len(parts) < 3:
        return None, None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None, None


@dataclass(frozen=True)
class MouseCallbacks:
    handle_tree_click: Callable[[int, int], bool]
    scroll_tree: Callable[[int], bool]
    scroll_preview: Callable[[int], bool]


class MouseRouter:
    """Dispatch decoded mouse tokens by the pane under the pointer."""

    def __init__(self, state: AppState, callbacks: MouseCallbacks) -> None:
        self._state = state
        self._callbacks = callbacks

    def handle(self, mouse_key: str) -> bool:
        """Return ``True`` when ``mouse_key`` was a mouse token (consumed)."""
        if not mouse_key.startswith("MOUSE"):
            return False
        col, row = parse_mouse_col_row(mouse_key)
        if col is None or row is None:
            return True

        state = self._state
        if mouse_key.startswith("MOUSE_WHEEL_"):
            direction = -1 if mouse_key.startswith("MOUSE_WHEEL_UP:") else 1
            if state.layout.in_right_pane(col):
                moved = self._callbacks.scroll_preview(direction * WHEEL_SCROLL_LINES)
            else:
                moved = self._callbacks.scroll_tree(direction * WHEEL_SCROLL_LINES)
            if moved:
                state.dirty = True
            return True

        if mouse_key.startswith("MOUSE_LEFT_DOWN:"):
            self._callbacks.handle_tree_click(col, row)
        return True


__all__ = [
    "WHEEL_SCROLL_LINES",
    "MouseCallbacks",
    "MouseRouter",
    "parse_mouse_col_row",
]
