"""Input-layer public API for key decoding and interaction handlers.

Exports are split between low-level terminal decoding (``read_key``) and the
higher-level keyboard/mouse dispatchers used by the runtime loop.
"""

from .keys import QUIT_KEYS, KeyActions, KeyBinding, KeyBindingTable, KeyHandler
from .mouse import WHEEL_SCROLL_LINES, MouseCallbacks, MouseRouter, parse_mouse_col_row
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "QUIT_KEYS",
    "KeyActions",
    "KeyBinding",
    "KeyBindingTable",
    "KeyHandler",
    "WHEEL_SCROLL_LINES",
    "MouseCallbacks",
    "MouseRouter",
    "parse_mouse_col_row",
]
