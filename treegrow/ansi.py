"""ANSI-aware text measurement and clipping.

Escape sequences are preserved and never counted toward width, so colored
tree rows can be fitted to a pane exactly.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
RESET = "\033[0m"


def char_display_width(ch: str) -> int:
    """Terminal columns used by ``ch``: 0 for combining marks, 2 for wide glyphs."""
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in ANSI_ESCAPE_RE.sub("", text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences inside the kept prefix are copied through; control
    whitespace is shown as a single space.
    """
    if max_cols <= 0:
        return ""
    pieces: list[str] = []
    used = 0
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        kept, used, full = _take_columns(text[pos:match.start()], max_cols - used, used)
        pieces.append(kept)
        if not full:
            return "".join(pieces)
        pieces.append(match.group(0))
        pos = match.end()
    kept, _, _ = _take_columns(text[pos:], max_cols - used, used)
    pieces.append(kept)
    return "".join(pieces)


def _take_columns(segment: str, budget: int, used: int) -> tuple[str, int, bool]:
    # Returns (kept text, columns used so far, whether the whole segment fit).
    kept: list[str] = []
    for ch in segment:
        if ch in "\t\r\n":
            ch = " "
        width = char_display_width(ch)
        if width > budget:
            return "".join(kept), used, False
        kept.append(ch)
        budget -= width
        used += width
    return "".join(kept), used, True


def fit_ansi_line(text: str, width: int, reset: str = RESET) -> str:
    """Clip ``text`` to ``width`` columns and pad the rest with spaces."""
    clipped = clip_ansi_line(text, width)
    padding = " " * max(0, width - display_width(clipped))
    if "\033" in clipped:
        return clipped + reset + padding
    return clipped + padding
