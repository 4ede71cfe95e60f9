"""Level-by-level reveal animation for a scanned tree.

The scheduler is a small state machine (``idle -> animating -> complete``).
Progress is a discrete level counter advanced by ``tick``; wall-clock time only
decides *when* the loop calls ``tick``, never how far it advances. Missing
several deadlines therefore still advances exactly one level per wake.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from ..file_tree_model import TreeNode

PHASE_IDLE = "idle"
PHASE_ANIMATING = "animating"
PHASE_COMPLETE = "complete"

DEFAULT_TICK_INTERVAL_SECONDS = 0.010
GROWTH_FRAME_COUNT = 3


def nodes_by_level(root: TreeNode) -> list[list[TreeNode]]:
    """Group nodes by depth, each level in stored breadth-first order."""
    levels: list[list[TreeNode]] = []
    current = [root]
    while current:
        levels.append(current)
        current = [child for node in current for child in node.children]
    return levels


class GrowthScheduler:
    """Reveal tree levels over time and expose animation progress."""

    def __init__(
        self,
        root: TreeNode,
        interval_seconds: float = DEFAULT_TICK_INTERVAL_SECONDS,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._root = root
        self._levels = nodes_by_level(root)
        self._monotonic = monotonic
        self.interval_seconds = max(0.0, float(interval_seconds))
        self.phase = PHASE_IDLE
        self.current_depth = 0
        self.growth_frame = 0
        self._last_tick_at = 0.0

    @property
    def max_depth(self) -> int:
        """Deepest retained level; ticks needed from start to completion."""
        return len(self._levels) - 1

    @property
    def is_animating(self) -> bool:
        return self.phase == PHASE_ANIMATING

    @property
    def is_complete(self) -> bool:
        return self.phase == PHASE_COMPLETE

    def start(self, now: float | None = None) -> None:
        """Leave ``idle``: reveal the root and begin animating."""
        if self.phase != PHASE_IDLE:
            return
        self._last_tick_at = self._monotonic() if now is None else now
        self.current_depth = 0
        self._reveal_level(0)
        self.phase = PHASE_ANIMATING
        if self.current_depth >= self.max_depth:
            self._complete()

    def tick(self) -> bool:
        """Advance one level. Returns ``False`` when nothing changed."""
        if self.phase != PHASE_ANIMATING:
            return False
        self.current_depth += 1
        self._reveal_level(self.current_depth)
        if self.current_depth >= self.max_depth:
            self._complete()
        else:
            self.growth_frame = (self.growth_frame + 1) % GROWTH_FRAME_COUNT
        return True

    def maybe_tick(self, now: float | None = None) -> bool:
        """Tick once if the interval elapsed since the previous tick."""
        if self.phase != PHASE_ANIMATING:
            return False
        current = self._monotonic() if now is None else now
        if current - self._last_tick_at < self.interval_seconds:
            return False
        self._last_tick_at = current
        return self.tick()

    def seconds_until_tick(self, now: float | None = None) -> float | None:
        """Return the wait before the next tick, or ``None`` once not animating."""
        if self.phase != PHASE_ANIMATING:
            return None
        current = self._monotonic() if now is None else now
        return max(0.0, self.interval_seconds - (current - self._last_tick_at))

    def _reveal_level(self, depth: int) -> None:
        if 0 <= depth < len(self._levels):
            for node in self._levels[depth]:
                node.revealed = True

    def _complete(self) -> None:
        for level in self._levels:
            for node in level:
                node.revealed = True
        self.current_depth = self.max_depth
        self.growth_frame = 0
        self.phase = PHASE_COMPLETE


__all__ = [
    "PHASE_IDLE",
    "PHASE_ANIMATING",
    "PHASE_COMPLETE",
    "DEFAULT_TICK_INTERVAL_SECONDS",
    "GROWTH_FRAME_COUNT",
    "GrowthScheduler",
    "nodes_by_level",
]
