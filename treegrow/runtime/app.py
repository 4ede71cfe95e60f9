"""Runtime composition layer for treegrow.

Builds initial state from a scanned tree, wires the scheduler, viewports,
preview pane and input handlers together, and starts the loop.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable
from functools import partial
from pathlib import Path

from ..file_tree_model import TreeNode, TreeStats, compute_stats
from ..input import KeyActions, KeyHandler, MouseCallbacks, MouseRouter
from ..input import read_key as read_terminal_key
from ..preview_pane import PreviewPane
from ..render import RenderContext, preview_viewport_height, render_frame
from ..tree_model import DEFAULT_TICK_INTERVAL_SECONDS, GrowthScheduler, build_layout, flatten_revealed
from ..tree_pane import TreePaneMouseHandlers, ViewportController
from ..ui_theme import DEFAULT_THEME, UITheme
from .config import save_show_size_labels
from .loop import RuntimeLoopCallbacks, run_main_loop
from .opener import open_in_file_manager
from .state import CLICK_POLICY_SECOND_CLICK, AppState
from .terminal import TerminalController

log = logging.getLogger(__name__)


class TreeViewerApp:
    """Own every runtime collaborator for one interactive session."""

    def __init__(
        self,
        root: TreeNode,
        root_path: Path,
        terminal,
        *,
        stats: TreeStats | None = None,
        tick_interval_seconds: float = DEFAULT_TICK_INTERVAL_SECONDS,
        click_policy: str = CLICK_POLICY_SECOND_CLICK,
        theme: UITheme = DEFAULT_THEME,
        show_size_labels: bool = False,
        left_pane_percent: float | None = None,
        read_key: Callable[[int], str] | None = None,
        write: Callable[[str], None] | None = None,
        open_path: Callable[[Path], bool] = open_in_file_manager,
        persist_size_labels: Callable[[bool], None] = save_show_size_labels,
        preview: PreviewPane | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.root_path = root_path
        self.terminal = terminal
        self.theme = theme
        self._write = write
        self._read_key = read_key if read_key is not None else partial(read_terminal_key, terminal.stdin_fd)
        self._persist_size_labels = persist_size_labels
        self._monotonic = monotonic

        self.state = AppState(
            tree_root=root,
            stats=stats if stats is not None else compute_stats(root),
            click_policy=click_policy,
            show_size_labels=show_size_labels,
            left_pane_percent=left_pane_percent,
        )
        self.total_nodes = sum(1 for _ in root.iter_nodes())
        self.scheduler = GrowthScheduler(root, tick_interval_seconds, monotonic)
        self.tree_viewport = ViewportController(self.state.tree_scroll, lambda: len(self.state.tree_rows))
        self.preview = preview if preview is not None else PreviewPane()

        self.tree_handlers = TreePaneMouseHandlers(
            state=self.state,
            interaction_enabled=lambda: self.scheduler.is_complete,
            show_preview=self.preview.show,
            open_in_file_manager=open_path,
            monotonic=monotonic,
        )
        self.mouse = MouseRouter(
            self.state,
            MouseCallbacks(
                handle_tree_click=self.tree_handlers.handle_click,
                scroll_tree=self.tree_viewport.scroll,
                scroll_preview=self.preview.viewport.scroll,
            ),
        )
        self.keys = KeyHandler(
            self.state,
            KeyActions(
                scroll_tree=self.tree_viewport.scroll,
                page_tree=self.tree_viewport.page,
                scroll_preview=self.preview.viewport.scroll,
                page_preview=self.preview.viewport.page,
                open_selected=self.tree_handlers.open_selected,
                toggle_size_labels=self.toggle_size_labels,
                handle_mouse=self.mouse.handle,
            ),
        )

    def sync_terminal_size(self) -> None:
        """Rebuild the layout when the terminal size changed."""
        size = self.terminal.size()
        state = self.state
        layout = state.layout
        if (
            size.columns == layout.columns
            and size.lines == layout.lines
            and self.tree_viewport.height == layout.content_rows
        ):
            return
        state.layout = build_layout(size.columns, size.lines, state.left_pane_percent)
        self.tree_viewport.resize(state.layout.content_rows)
        self.preview.viewport.resize(preview_viewport_height(state.layout))
        state.dirty = True

    def on_growth_tick(self) -> None:
        """Refresh rows and reveal depth after the scheduler revealed a level."""
        state = self.state
        state.tree_rows = flatten_revealed(state.tree_root)
        state.stats = state.stats.with_reveal_depth(self.scheduler.current_depth)
        self.tree_viewport.clamp()
        state.dirty = True
        if self.scheduler.is_complete:
            log.debug("growth complete at depth %d", self.scheduler.current_depth)

    def toggle_size_labels(self) -> None:
        state = self.state
        state.show_size_labels = not state.show_size_labels
        self._persist_size_labels(state.show_size_labels)
        state.dirty = True

    def render_context(self) -> RenderContext:
        state = self.state
        scheduler = self.scheduler
        return RenderContext(
            layout=state.layout,
            tree_rows=state.tree_rows,
            tree_offset=state.tree_scroll.offset,
            total_nodes=self.total_nodes,
            stats=state.stats,
            root_path=self.root_path,
            preview=self.preview,
            selected_path=state.selected_path,
            complete=scheduler.is_complete,
            frontier_depth=scheduler.current_depth if scheduler.is_animating else None,
            tree_depth=scheduler.max_depth,
            growth_frame=scheduler.growth_frame,
            show_size_labels=state.show_size_labels,
            focus=state.focus,
            status_message=state.status_message,
            theme=self.theme,
        )

    def render(self) -> None:
        render_frame(self.render_context(), self._write)

    def read_key(self, timeout_ms: int) -> str:
        return self._read_key(timeout_ms)

    def handle_key(self, key: str) -> bool:
        return self.keys.handle(key)

    def run(self) -> None:
        run_main_loop(
            self.state,
            self.terminal,
            self.scheduler,
            RuntimeLoopCallbacks(
                sync_terminal_size=self.sync_terminal_size,
                render=self.render,
                read_key=self.read_key,
                handle_key=self.handle_key,
                on_growth_tick=self.on_growth_tick,
            ),
            monotonic=self._monotonic,
        )


def run_app(
    root: TreeNode,
    root_path: Path,
    *,
    stats: TreeStats | None = None,
    tick_interval_seconds: float = DEFAULT_TICK_INTERVAL_SECONDS,
    click_policy: str = CLICK_POLICY_SECOND_CLICK,
    theme: UITheme = DEFAULT_THEME,
    show_size_labels: bool = False,
    left_pane_percent: float | None = None,
) -> None:
    """Run the interactive viewer on the controlling terminal until quit."""
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    app = TreeViewerApp(
        root,
        root_path,
        terminal,
        stats=stats,
        tick_interval_seconds=tick_interval_seconds,
        click_policy=click_policy,
        theme=theme,
        show_size_labels=show_size_labels,
        left_pane_percent=left_pane_percent,
    )
    app.run()
