"""Input events delivered to the view-state mapper.

Raw key tokens from :func:`kanjiview.input.read_key` are normalized into a
small tagged union: key presses, vertical pointer scrolls, and everything
else.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


UNKNOWN_KEY = "UNKNOWN"
RESIZE_TOKEN = "RESIZE"


class ScrollDirection(enum.Enum):
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class KeyPress:
    code: str


@dataclass(frozen=True)
class PointerScroll:
    direction: ScrollDirection


@dataclass(frozen=True)
class OtherEvent:
    token: str = ""


Event = KeyPress | PointerScroll | OtherEvent


def event_from_key(token: str) -> Event:
    """Classify one decoded key token."""
    if token == "MOUSE_WHEEL_UP":
        return PointerScroll(ScrollDirection.UP)
    if token == "MOUSE_WHEEL_DOWN":
        return PointerScroll(ScrollDirection.DOWN)
    if not token or token in {UNKNOWN_KEY, RESIZE_TOKEN} or token.startswith("MOUSE"):
        return OtherEvent(token)
    return KeyPress(token)
