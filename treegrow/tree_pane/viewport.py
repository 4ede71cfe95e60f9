"""Scroll window over a flat list of display lines.

Both the tree pane and the preview pane own one ``ViewportController`` each.
Every mutation clamps ``offset`` into ``[0, max(0, total - height)]``; moving
past either end is a silent no-op.
"""

from __future__ import annotations

from collections.abc import Callable

from ..tree_model.types import ScrollState

PAGE_SCROLL_LINES = 10


class ViewportController:
    """Clamp-on-write scrolling for one ``ScrollState``."""

    def __init__(
        self,
        scroll: ScrollState,
        line_count: Callable[[], int],
        page_size: int = PAGE_SCROLL_LINES,
    ) -> None:
        self.scroll_state = scroll
        self._line_count = line_count
        self.page_size = max(1, int(page_size))

    @property
    def offset(self) -> int:
        return self.scroll_state.offset

    @property
    def height(self) -> int:
        return self.scroll_state.viewport_height

    def clamp(self) -> bool:
        """Re-clamp the offset after the line count changed."""
        state = self.scroll_state
        clamped = max(0, min(state.offset, state.max_offset(self._line_count())))
        if clamped == state.offset:
            return False
        state.offset = clamped
        return True

    def scroll(self, delta_lines: int) -> bool:
        """Move by ``delta_lines`` and return whether the offset changed."""
        state = self.scroll_state
        previous = state.offset
        target = previous + int(delta_lines)
        state.offset = max(0, min(target, state.max_offset(self._line_count())))
        return state.offset != previous

    def page(self, direction: int) -> bool:
        """Scroll one page; ``direction`` is +1 (down) or -1 (up)."""
        if direction == 0:
            return False
        step = self.page_size if direction > 0 else -self.page_size
        return self.scroll(step)

    def scroll_to_start(self) -> bool:
        return self.scroll(-self.scroll_state.offset)

    def scroll_to_end(self) -> bool:
        return self.scroll(self._line_count())

    def resize(self, new_height: int) -> bool:
        """Apply a new window height and re-clamp the offset."""
        state = self.scroll_state
        height = max(1, int(new_height))
        changed = height != state.viewport_height
        state.viewport_height = height
        return self.clamp() or changed

    def visible_range(self) -> range:
        """Flat indexes currently inside the window."""
        total = self._line_count()
        start = min(self.scroll_state.offset, total)
        return range(start, min(total, start + self.scroll_state.viewport_height))


__all__ = [
    "PAGE_SCROLL_LINES",
    "ScrollState",
    "ViewportController",
]
