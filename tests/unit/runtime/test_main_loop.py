from __future__ import annotations

import unittest
from contextlib import contextmanager
from pathlib import Path

from treegrow.file_tree_model import DIRECTORY, TreeNode, compute_stats
from treegrow.runtime import RuntimeLoopCallbacks, run_main_loop
from treegrow.runtime.loop import IDLE_POLL_MS, poll_timeout_ms
from treegrow.runtime.state import AppState
from treegrow.tree_model import GrowthScheduler


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _chain(depth: int) -> TreeNode:
    root = TreeNode(name="r", path=Path("/r"), kind=DIRECTORY, depth=0)
    tail = root
    for level in range(1, depth + 1):
        nxt = TreeNode(name=f"n{level}", path=tail.path / f"n{level}", kind=DIRECTORY, depth=level)
        tail.children.append(nxt)
        tail = nxt
    return root


class _LoopHarness:
    def __init__(self, keys: list, depth: int = 3, interval: float = 0.0) -> None:
        self.root = _chain(depth)
        self.state = AppState(tree_root=self.root, stats=compute_stats(self.root))
        self.clock = _Clock()
        self.scheduler = GrowthScheduler(self.root, interval_seconds=interval, monotonic=self.clock)
        self.terminal = _FakeTerminal()
        self.keys = list(keys)
        self.timeouts: list[int] = []
        self.handled: list[str] = []
        self.renders = 0
        self.ticks = 0
        self.size_syncs = 0

    def read_key(self, timeout_ms: int) -> str:
        self.timeouts.append(timeout_ms)
        self.clock.now += 1.0
        key = self.keys.pop(0) if self.keys else "q"
        if isinstance(key, BaseException):
            raise key
        return key

    def handle_key(self, key: str) -> bool:
        self.handled.append(key)
        if key == "q":
            self.state.quit_requested = True
            return True
        return False

    def render(self) -> None:
        self.renders += 1

    def on_growth_tick(self) -> None:
        self.ticks += 1
        self.state.dirty = True

    def sync_terminal_size(self) -> None:
        self.size_syncs += 1

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
            monotonic=self.clock,
        )


class RuntimeLoopTests(unittest.TestCase):
    def test_quit_key_exits_and_restores_terminal(self) -> None:
        harness = _LoopHarness(["q"])
        harness.run()
        self.assertEqual((harness.terminal.entered, harness.terminal.exited), (1, 1))
        self.assertEqual(harness.handled, ["q"])

    def test_idle_wakes_tick_once_each(self) -> None:
        harness = _LoopHarness(["", "", "", "q"], depth=3)
        harness.run()
        # One refresh for the root at start, then one per level.
        self.assertEqual(harness.ticks, 4)
        self.assertTrue(harness.scheduler.is_complete)
        self.assertTrue(all(node.revealed for node in harness.root.iter_nodes()))

    def test_key_event_wakes_do_not_tick(self) -> None:
        harness = _LoopHarness(["x", "y", "q"], depth=3)
        harness.run()
        self.assertEqual(harness.ticks, 1)
        self.assertEqual(harness.scheduler.current_depth, 0)

    def test_keyboard_interrupt_is_ignored(self) -> None:
        harness = _LoopHarness([KeyboardInterrupt(), "q"])
        harness.run()
        self.assertEqual(harness.handled, ["q"])
        self.assertEqual(harness.terminal.exited, 1)

    def test_renders_only_when_dirty(self) -> None:
        harness = _LoopHarness(["x", "x", "x", "q"], depth=0)
        harness.run()
        self.assertEqual(harness.renders, 1)
        self.assertEqual(harness.size_syncs, 4)

    def test_status_message_expires(self) -> None:
        harness = _LoopHarness(["x", "x", "q"], depth=0)
        harness.state.status_message = "Opened /r"
        harness.state.status_message_until = 1.5
        harness.run()
        self.assertEqual(harness.state.status_message, "")
        self.assertEqual(harness.renders, 2)

    def test_poll_timeout_is_bounded_by_next_tick(self) -> None:
        harness = _LoopHarness(["q"], depth=2, interval=0.05)
        harness.run()
        self.assertEqual(harness.timeouts, [50])

        done = GrowthScheduler(_chain(0))
        done.start()
        self.assertEqual(poll_timeout_ms(done, 0.0), IDLE_POLL_MS)


if __name__ == "__main__":
    unittest.main()
