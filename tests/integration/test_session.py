"""End-to-end session: scan, grow, click, preview, open and quit.

Drives ``TreeViewerApp`` with a fake terminal and a scripted key reader so
every frame the user would see is captured as text.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from contextlib import contextmanager
from pathlib import Path

from treegrow.file_tree_model import scan_tree
from treegrow.runtime.app import TreeViewerApp
from treegrow.runtime.state import CLICK_POLICY_SINGLE
from treegrow.tree_model import TREE_PANEL_TOP_ROW
from treegrow.ui_theme import PLAIN_THEME


class _FakeTerminal:
    stdin_fd = -1

    def __init__(self, columns: int = 100, lines: int = 30) -> None:
        self.columns = columns
        self.lines = lines
        self.raw_entries = 0

    def size(self) -> os.terminal_size:
        return os.terminal_size((self.columns, self.lines))

    @contextmanager
    def raw_mode(self):
        self.raw_entries += 1
        yield


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class _ScriptedKeys:
    """Return scripted tokens; an empty token is an idle (timeout) wake."""

    def __init__(self, clock: _Clock, keys: list) -> None:
        self._clock = clock
        self._keys = list(keys)

    def __call__(self, timeout_ms: int) -> str:
        self._clock.now += 0.1
        key = self._keys.pop(0) if self._keys else "q"
        if callable(key):
            key = key()
        return key


def _click(row_line: int) -> str:
    return f"MOUSE_LEFT_DOWN:3:{TREE_PANEL_TOP_ROW + row_line}"


class SessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve() / "proj"
        dir_c = self.root / "dirC"
        dir_c.mkdir(parents=True)
        (dir_c / "leafA").write_bytes(b"a" * 100)
        (dir_c / "leafB").write_bytes(b"b" * 200)
        (self.root / "other" / "sub").mkdir(parents=True)

    def _app(self, keys: list, **kwargs) -> tuple[TreeViewerApp, list[str], list[Path], list[bool]]:
        clock = _Clock()
        frames: list[str] = []
        opened: list[Path] = []
        saved: list[bool] = []
        tree = scan_tree(self.root)
        app = TreeViewerApp(
            tree,
            tree.path,
            kwargs.pop("terminal", None) or _FakeTerminal(),
            tick_interval_seconds=0.0,
            theme=PLAIN_THEME,
            read_key=_ScriptedKeys(clock, keys),
            write=frames.append,
            open_path=lambda path: opened.append(path) or True,
            persist_size_labels=saved.append,
            monotonic=clock,
            **kwargs,
        )
        return app, frames, opened, saved

    def test_growth_then_select_and_open(self) -> None:
        keys = [
            _click(1),  # during growth: ignored
            "",
            "",
            _click(1),
            _click(1),
            "q",
        ]
        app, frames, opened, _ = self._app(keys)
        app.run()

        state = app.state
        self.assertTrue(app.scheduler.is_complete)
        self.assertEqual([row.node.name for row in state.tree_rows], ["proj", "dirC", "other", "sub"])
        self.assertEqual(state.selected_path, self.root / "dirC")
        self.assertEqual([entry.name for entry in app.preview.entries], ["leafA", "leafB"])
        self.assertEqual(opened, [self.root / "dirC"])
        self.assertEqual(state.stats.total_size, 300)
        self.assertEqual(state.stats.current_reveal_depth, 2)

        self.assertIn(" growing (1/4) - Depth 0/2 ", frames[0])
        self.assertIn(" tree (4/4) - Depth 2/2 ", frames[-1])
        self.assertIn("Preview: dirC (2)", frames[-1])
        self.assertIn("leafA [100 B]", frames[-1])
        self.assertIn(f"Opened {self.root / 'dirC'}", frames[-1])

    def test_title_depth_counts_only_shown_levels(self) -> None:
        # Files are dropped in folders-only mode, so this file adds a stats
        # level the tree pane never shows.
        (self.root / "other" / "sub" / "deep.bin").write_bytes(b"d" * 10)
        app, frames, _, _ = self._app(["", "", "", "q"])
        app.run()

        self.assertTrue(app.scheduler.is_complete)
        self.assertEqual(app.state.stats.max_depth, 3)
        self.assertIn(" tree (4/4) - Depth 2/2 ", frames[-1])

    def test_no_selection_possible_before_growth_completes(self) -> None:
        app, _, opened, _ = self._app([_click(0), "ENTER", _click(0), "q"])
        app.run()
        self.assertIsNone(app.state.selected_path)
        self.assertEqual(opened, [])
        self.assertIsNone(app.preview.target_path)

    def test_single_click_policy_opens_immediately(self) -> None:
        app, _, opened, _ = self._app(["", "", _click(2), "q"], click_policy=CLICK_POLICY_SINGLE)
        app.run()
        self.assertEqual(app.state.selected_path, self.root / "other")
        self.assertEqual(opened, [self.root / "other"])

    def test_enter_opens_selection_and_size_toggle_persists(self) -> None:
        app, frames, opened, saved = self._app(["", "", _click(1), "ENTER", "s", "q"])
        app.run()
        self.assertEqual(opened, [self.root / "dirC"])
        self.assertEqual(saved, [True])
        self.assertTrue(app.state.show_size_labels)
        self.assertIn("dirC/ [300 B]", frames[-1])

    def test_resize_reflows_layout_and_viewports(self) -> None:
        terminal = _FakeTerminal(columns=100, lines=30)

        def shrink() -> str:
            terminal.lines = 6
            terminal.columns = 60
            return "x"

        app, frames, _, _ = self._app(["", "", shrink, "END", "q"], terminal=terminal)
        app.run()

        self.assertEqual(app.state.layout.lines, 6)
        self.assertEqual(app.state.tree_scroll.viewport_height, 4)
        self.assertEqual(app.state.tree_scroll.offset, 0)
        self.assertEqual(frames[-1].count("\r\n"), 5)

    def test_scrolling_is_allowed_while_growing(self) -> None:
        terminal = _FakeTerminal(columns=100, lines=4)
        app, _, _, _ = self._app(["", "DOWN", "q"], terminal=terminal)
        app.run()
        self.assertTrue(app.scheduler.is_animating)
        self.assertEqual(app.state.tree_scroll.viewport_height, 2)
        self.assertEqual(app.state.tree_scroll.offset, 1)


if __name__ == "__main__":
    unittest.main()
