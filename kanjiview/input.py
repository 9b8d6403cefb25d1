"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, arrow keys, UTF-8 text, and SGR mouse events.
"""

from __future__ import annotations

import os
import select

from .errors import EventError
from .events import RESIZE_TOKEN, UNKNOWN_KEY, Event, OtherEvent, event_from_key

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []
_ARROW_FINALS = {b"A": "UP", b"B": "DOWN", b"C": "RIGHT", b"D": "LEFT"}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_sequence_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_text(fd: int, ch: bytes) -> str:
    """Collect continuation bytes so multi-byte characters arrive as one key."""
    data = ch
    for _ in range(_utf8_sequence_length(ch[0]) - 1):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    return data.decode("utf-8", errors="replace")


def _read_csi(fd: int) -> bytes | None:
    """Read the remainder of ``ESC [`` up to and including its final byte."""
    body = b""
    while len(body) <= 64:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return None
        body += part
        if 0x40 <= part[0] <= 0x7E:
            return body
    return None


def _mouse_token(body: bytes) -> str:
    # SGR mouse body: < btn ; col ; row (M/m)
    try:
        btn_s, _col_s, _row_s = body[1:-1].decode("ascii").split(";")
        btn = int(btn_s)
    except ValueError:
        return UNKNOWN_KEY
    if btn & 0b0100_0000:
        button = btn & 0b11
        if button == 0:
            return "MOUSE_WHEEL_UP"
        if button == 1:
            return "MOUSE_WHEEL_DOWN"
    return "MOUSE"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Return the next key token, or ``""`` on timeout or end of input.

    A lone Escape yields ``"ESC"``; escape sequences the viewer has no use
    for are consumed whole and yield ``"UNKNOWN"``.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch == b"\t":
        return "TAB"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch in {b"\r", b"\n"}:
        return "ENTER"

    if ch != b"\x1b":
        return _decode_text(fd, ch)

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"\x1b":
        # Two Escape presses in a row.
        _PENDING_BYTES.append(seq)
        return "ESC"
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        return _ARROW_FINALS.get(final, UNKNOWN_KEY)
    if seq != b"[":
        # Alt+key.
        _decode_text(fd, seq)
        return UNKNOWN_KEY

    body = _read_csi(fd)
    if body is None:
        return UNKNOWN_KEY
    if body in _ARROW_FINALS:
        return _ARROW_FINALS[body]
    if body.startswith(b"<") and body[-1:] in {b"M", b"m"}:
        return _mouse_token(body)
    return UNKNOWN_KEY


def _drain(fd: int) -> None:
    while True:
        try:
            if not os.read(fd, 64):
                return
        except BlockingIOError:
            return


def read_event(fd: int, wake_fd: int | None = None) -> Event:
    """Block until one input event is available and return it.

    When ``wake_fd`` becomes readable first (a terminal resize was signalled),
    it is drained and a ``"RESIZE"`` event is returned so the caller redraws.
    Raises ``EventError`` when reading fails or the input stream has closed.
    """
    try:
        if wake_fd is not None and not _PENDING_BYTES:
            ready, _, _ = select.select([fd, wake_fd], [], [])
            if wake_fd in ready:
                _drain(wake_fd)
                if fd not in ready:
                    return OtherEvent(RESIZE_TOKEN)
        key = read_key(fd)
    except OSError as exc:
        raise EventError(f"reading terminal input failed: {exc}") from exc
    if key == "":
        raise EventError("terminal input closed")
    return event_from_key(key)
