"""Session bootstrap: load the file, pick output mode, and run the loop."""

from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

from ..config import ViewerSettings, load_settings
from ..input import read_event
from ..key_handlers import InputMapper
from ..render import draw_frame, render_plain
from ..state import ViewState
from ..terminal import ResizeNotifier, TerminalController
from .loop import RuntimeLoopCallbacks, run_main_loop

logger = logging.getLogger(__name__)


def run_viewer(path: Path, nopager: bool = False, settings: ViewerSettings | None = None) -> None:
    """Open ``path`` in the dual-pane viewer.

    With ``nopager`` or a non-interactive stdin, the side-by-side view of the
    whole file is printed once instead.
    """
    if settings is None:
        settings = load_settings()
    state = ViewState.from_path(path, space_ratio=settings.space_ratio)

    if nopager or not os.isatty(sys.stdin.fileno()):
        columns = shutil.get_terminal_size((80, 24)).columns
        sys.stdout.write(render_plain(state.render_plan(), max(1, columns - 1)))
        return

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)

    def draw(current: ViewState) -> None:
        term = shutil.get_terminal_size((80, 24))
        draw_frame(current, term.columns, term.lines, stdout_fd)

    logger.info("viewing %s (%d lines)", path, state.line_count)
    with ResizeNotifier().installed() as resize:
        run_main_loop(
            state,
            terminal,
            InputMapper(state, settings),
            RuntimeLoopCallbacks(
                draw=draw,
                read_event=lambda: read_event(stdin_fd, wake_fd=resize.read_fd),
            ),
        )
