"""Terminal control for the full-screen session.

Switches the tty into raw mode on the alternate screen with SGR mouse
reporting, and puts everything back on the way out.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

FALLBACK_SIZE = os.terminal_size((80, 24))

ALT_SCREEN_ON = b"\x1b[?1049h"
ALT_SCREEN_OFF = b"\x1b[?1049l"
CURSOR_HIDE = b"\x1b[?25l"
CURSOR_SHOW = b"\x1b[?25h"
# Button press/release tracking (1000) in SGR extended encoding (1006).
MOUSE_ON = b"\x1b[?1000h\x1b[?1006h"
MOUSE_OFF = b"\x1b[?1000l\x1b[?1006l"

ENTER_TUI = ALT_SCREEN_ON + CURSOR_HIDE + MOUSE_ON
LEAVE_TUI = MOUSE_OFF + CURSOR_SHOW + ALT_SCREEN_OFF


class TerminalController:
    """Own the tty attributes saved at startup for one session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_attrs = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI)

    def disable_tui_mode(self) -> None:
        """Leave the alternate screen and restore the saved tty attributes."""
        os.write(self.stdout_fd, LEAVE_TUI)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_attrs)

    def size(self) -> os.terminal_size:
        """Current size of the output terminal, 80x24 when it cannot be queried."""
        try:
            return os.get_terminal_size(self.stdout_fd)
        except OSError:
            return FALLBACK_SIZE

    @contextlib.contextmanager
    def raw_mode(self):
        """Bracket the enclosed block with TUI enter and exit, even on errors."""
        self.enable_tui_mode()
        try:
            yield
        finally:
            self.disable_tui_mode()
