"""Main interactive event loop for the terminal UI.

Each iteration polls for at most one key (waiting no longer than the next
growth tick), applies at most one state mutation, and redraws when dirty.
Feature logic lives in the injected callbacks.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from ..tree_model import GrowthScheduler
from .state import AppState

IDLE_POLL_MS = 120


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    sync_terminal_size: Callable[[], None]
    render: Callable[[], None]
    read_key: Callable[[int], str]
    handle_key: Callable[[str], bool]
    on_growth_tick: Callable[[], None]


def poll_timeout_ms(scheduler: GrowthScheduler, now: float) -> int:
    """Bound the key wait by the next growth tick while animating."""
    wait = scheduler.seconds_until_tick(now)
    if wait is None:
        return IDLE_POLL_MS
    return max(0, min(IDLE_POLL_MS, int(wait * 1000)))


def run_main_loop(
    state: AppState,
    terminal,
    scheduler: GrowthScheduler,
    callbacks: RuntimeLoopCallbacks,
    monotonic: Callable[[], float] = time.monotonic,
) -> None:
    """Run the interactive loop until a quit key sets ``state.quit_requested``."""
    ops = callbacks
    with terminal.raw_mode():
        scheduler.start(monotonic())
        ops.on_growth_tick()
        while not state.quit_requested:
            now = monotonic()
            ops.sync_terminal_size()
            if state.status_message and now >= state.status_message_until:
                state.status_message = ""
                state.status_message_until = 0.0
                state.dirty = True

            if state.dirty:
                ops.render()
                state.dirty = False

            try:
                key = ops.read_key(poll_timeout_ms(scheduler, now))
            except KeyboardInterrupt:
                continue
            if key != "":
                if ops.handle_key(key):
                    break
                continue

            if scheduler.maybe_tick(monotonic()):
                ops.on_growth_tick()


__all__ = [
    "IDLE_POLL_MS",
    "RuntimeLoopCallbacks",
    "poll_timeout_ms",
    "run_main_loop",
]
