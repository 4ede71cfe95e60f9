"""Low-level terminal input decoding.

Turns raw stdin bytes into key tokens such as ``"UP"``, ``"PAGE_DOWN"`` or
``"MOUSE_LEFT_DOWN:12:7"``. A lone Esc is reported once the sequence timeout
passes without a follow-up byte. Escape sequences that are read in full but
have no binding come back as ``"UNKNOWN"``.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
SGR_PAYLOAD_LIMIT = 64
UNKNOWN_KEY = "UNKNOWN"

# A byte read ahead after a bare ESC, returned by the next read_key call.
_PENDING_BYTES: list[bytes] = []

_SINGLE_BYTE_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\t": "TAB",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

# ESC [ n ~ forms; terminals disagree on Home/End so both variants map.
_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}

_WHEEL_FLAG = 0b0100_0000
_MOTION_FLAG = 0b0010_0000
_CSI_FINAL_MIN = 0x40
_CSI_FINAL_MAX = 0x7E


def _poll_byte(fd: int, timeout_ms: int | None) -> bytes | None:
    """Read one byte, waiting at most ``timeout_ms`` (forever when ``None``)."""
    if timeout_ms is not None:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return None
    return os.read(fd, 1) or None


def _decode_sgr_mouse(fd: int) -> str:
    """Decode the rest of ``ESC [ < btn ; col ; row (M|m)``."""
    payload = bytearray()
    while True:
        part = _poll_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None or len(payload) > SGR_PAYLOAD_LIMIT:
            return UNKNOWN_KEY
        if part in (b"M", b"m"):
            break
        payload += part

    try:
        btn, col, row = (int(field) for field in payload.decode("ascii").split(";"))
    except ValueError:
        return UNKNOWN_KEY

    button = btn & 0b11
    if btn & _WHEEL_FLAG:
        return {0: f"MOUSE_WHEEL_UP:{col}:{row}", 1: f"MOUSE_WHEEL_DOWN:{col}:{row}"}.get(button, "MOUSE")
    if button != 0 or btn & _MOTION_FLAG:
        return "MOUSE"
    action = "DOWN" if part == b"M" else "UP"
    return f"MOUSE_LEFT_{action}:{col}:{row}"


def _decode_csi(fd: int) -> str:
    """Consume ``ESC [ params intermediates final`` and name it if known.

    Modifier parameters are ignored, so Ctrl+Up still reads as ``UP``.
    """
    params = bytearray()
    while True:
        part = _poll_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None or len(params) > SGR_PAYLOAD_LIMIT:
            return UNKNOWN_KEY
        if part == b"<" and not params:
            return _decode_sgr_mouse(fd)
        if _CSI_FINAL_MIN <= part[0] <= _CSI_FINAL_MAX:
            break
        params += part

    if part in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[part]
    if part == b"~":
        return _TILDE_KEYS.get(bytes(params).split(b";")[0], UNKNOWN_KEY)
    return UNKNOWN_KEY


def _decode_escape(fd: int) -> str:
    lead = _poll_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if lead is None:
        return "ESC"
    if lead == b"[":
        return _decode_csi(fd)
    if lead == b"O":
        # SS3: exactly one more byte (application cursor keys, F1-F4).
        final = _poll_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return UNKNOWN_KEY
        return _CSI_FINAL_KEYS.get(final, UNKNOWN_KEY)
    _PENDING_BYTES.append(lead)
    return "ESC"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token, or ``""`` when ``timeout_ms`` elapses first."""
    if _PENDING_BYTES:
        ch: bytes | None = _PENDING_BYTES.pop(0)
    else:
        ch = _poll_byte(fd, timeout_ms)
    if ch is None:
        return ""
    if ch in _SINGLE_BYTE_KEYS:
        return _SINGLE_BYTE_KEYS[ch]
    if ch == b"\x1b":
        return _decode_escape(fd)
    return ch.decode("utf-8", errors="replace")


__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "read_key",
]
