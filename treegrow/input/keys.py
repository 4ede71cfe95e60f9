"""Keyboard dispatch for the tree viewer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..runtime.state import FOCUS_PREVIEW, FOCUS_TREE, AppState

QUIT_KEYS = frozenset({"q", "Q", "ESC", "CTRL_C"})


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyBindingTable:
    """Exact-match key dispatch table."""

    def __init__(self, *bindings: KeyBinding) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler

    def dispatch(self, key: str) -> bool | None:
        """Run the handler bound to ``key``; ``None`` means unbound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


@dataclass(frozen=True)
class KeyActions:
    """Bound operations the keyboard can trigger."""

    scroll_tree: Callable[[int], bool]
    page_tree: Callable[[int], bool]
    scroll_preview: Callable[[int], bool]
    page_preview: Callable[[int], bool]
    open_selected: Callable[[], bool]
    toggle_size_labels: Callable[[], None]
    handle_mouse: Callable[[str], bool]


class KeyHandler:
    """Apply one key token to app state; scroll keys follow ``state.focus``."""

    def __init__(self, state: AppState, actions: KeyActions) -> None:
        self.state = state
        self.actions = actions
        self._table = KeyBindingTable(
            KeyBinding(("UP", "k"), lambda: self._scroll(-1)),
            KeyBinding(("DOWN", "j"), lambda: self._scroll(1)),
            KeyBinding(("PAGE_UP",), lambda: self._page(-1)),
            KeyBinding(("PAGE_DOWN", " "), lambda: self._page(1)),
            KeyBinding(("HOME", "g"), lambda: self._page_to_edge(-1)),
            KeyBinding(("END", "G"), lambda: self._page_to_edge(1)),
            KeyBinding(("TAB",), self._toggle_focus),
            KeyBinding(("s",), self.actions.toggle_size_labels),
            KeyBinding(("ENTER",), self.actions.open_selected),
        )

    def handle(self, key: str) -> bool:
        """Handle one key and return ``True`` when the app should quit."""
        if key in QUIT_KEYS:
            self.state.quit_requested = True
            return True
        if self.actions.handle_mouse(key):
            return False
        self._table.dispatch(key)
        return False

    def _scroll(self, delta: int) -> bool:
        if self.state.focus == FOCUS_PREVIEW:
            moved = self.actions.scroll_preview(delta)
        else:
            moved = self.actions.scroll_tree(delta)
        if moved:
            self.state.dirty = True
        return moved

    def _page(self, direction: int) -> bool:
        if self.state.focus == FOCUS_PREVIEW:
            moved = self.actions.page_preview(direction)
        else:
            moved = self.actions.page_tree(direction)
        if moved:
            self.state.dirty = True
        return moved

    def _page_to_edge(self, direction: int) -> bool:
        moved = False
        while self._page(direction):
            moved = True
        return moved

    def _toggle_focus(self) -> None:
        self.state.focus = FOCUS_PREVIEW if self.state.focus == FOCUS_TREE else FOCUS_TREE
        self.state.dirty = True


__all__ = [
    "QUIT_KEYS",
    "KeyActions",
    "KeyBinding",
    "KeyBindingTable",
    "KeyHandler",
]
