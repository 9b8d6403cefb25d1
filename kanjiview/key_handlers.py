"""Map input events onto view-state actions.

Keys are dispatched through a combo table: each binding lists the key tokens
that trigger it and the action to run. Pointer scrolling is handled
separately because it carries a direction rather than a key token. No I/O
happens here; reloads are only requested and carried out by the runtime loop.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .config import ViewerSettings
from .events import Event, KeyPress, PointerScroll, ScrollDirection
from .state import ViewState

SCROLL_DOWN_KEYS = ("j", "DOWN")
SCROLL_UP_KEYS = ("k", "UP")
HIDE_KEYS = (" ",)
REVERSE_KEYS = ("r",)
NARROW_LEFT_KEYS = ("h", "LEFT")
WIDEN_LEFT_KEYS = ("l", "RIGHT")
RELOAD_KEYS = ("R",)
EXIT_KEYS = ("ESC",)


@dataclass(frozen=True)
class KeyBinding:
    """One or more key tokens mapped to a single action."""

    keys: tuple[str, ...]
    action: Callable[[], None]


class KeyBindingTable:
    """Exact-match dispatch table from key tokens to actions."""

    def __init__(self) -> None:
        self._actions: dict[str, Callable[[], None]] = {}

    def bind(self, *bindings: KeyBinding) -> KeyBindingTable:
        """Register bindings; later bindings win for repeated keys."""
        for binding in bindings:
            for key in binding.keys:
                self._actions[key] = binding.action
        return self

    def dispatch(self, key: str) -> bool:
        action = self._actions.get(key)
        if action is None:
            return False
        action()
        return True


class InputMapper:
    """Apply events to one ``ViewState`` using the configured step sizes."""

    def __init__(self, state: ViewState, settings: ViewerSettings | None = None) -> None:
        self.state = state
        self.settings = settings if settings is not None else ViewerSettings()
        steps = self.settings
        self._keys = KeyBindingTable().bind(
            KeyBinding(SCROLL_DOWN_KEYS, lambda: state.scroll_down(steps.keyboard_scroll_step)),
            KeyBinding(SCROLL_UP_KEYS, lambda: state.scroll_up(steps.keyboard_scroll_step)),
            KeyBinding(HIDE_KEYS, state.toggle_hidden),
            KeyBinding(REVERSE_KEYS, state.toggle_reverse),
            KeyBinding(NARROW_LEFT_KEYS, lambda: state.adjust_space_ratio(-steps.space_step)),
            KeyBinding(WIDEN_LEFT_KEYS, lambda: state.adjust_space_ratio(steps.space_step)),
            KeyBinding(RELOAD_KEYS, state.request_reload),
            KeyBinding(EXIT_KEYS, state.request_exit),
        )

    def handle(self, event: Event) -> bool:
        """Apply ``event``; return whether it was bound to an action."""
        if isinstance(event, KeyPress):
            return self._keys.dispatch(event.code)
        if isinstance(event, PointerScroll):
            if event.direction is ScrollDirection.UP:
                self.state.scroll_up(self.settings.mouse_scroll_step)
            else:
                self.state.scroll_down(self.settings.mouse_scroll_step)
            return True
        return False


def apply_event(state: ViewState, event: Event, settings: ViewerSettings | None = None) -> ViewState:
    """Reduce one event into ``state`` (mutated in place) and return it."""
    InputMapper(state, settings).handle(event)
    return state
