"""Main interactive event loop.

Strictly synchronous: draw the current state, block for exactly one input
event, apply it, repeat. The loop is wiring only; drawing and event reads are
injected so the loop can be driven by scripted events in tests. Unbound
events, such as the resize wake-up, still cause a fresh draw.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..events import Event
from ..key_handlers import InputMapper
from ..state import ViewState
from ..terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Render-bridge operations used by ``run_main_loop``."""

    draw: Callable[[ViewState], None]
    read_event: Callable[[], Event]


def run_main_loop(
    state: ViewState,
    terminal: TerminalController,
    mapper: InputMapper,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run until an exit action is mapped.

    Any error raised by drawing, reading, or reloading ends the session;
    ``terminal.raw_mode`` restores the terminal before it propagates.
    """
    with terminal.raw_mode():
        while not state.should_exit:
            if state.reload_requested:
                state.reload()
            callbacks.draw(state)
            event = callbacks.read_event()
            if not mapper.handle(event):
                logger.debug("ignored event %r", event)
    logger.debug("session ended at offset %d", state.scroll_offset)
