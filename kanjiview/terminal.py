"""Terminal control for the interactive session.

Owns raw-mode lifecycle, alternate-screen switching, cursor visibility,
mouse reporting, and resize notification. Mode failures are reported as
``SetupError`` or ``RestoreError``.
"""

from __future__ import annotations

import contextlib
import logging
import os
import signal
import termios
import tty

from .errors import RestoreError, SetupError

logger = logging.getLogger(__name__)

# Alternate screen, hidden cursor, button-event mouse tracking in SGR encoding.
ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l\x1b[?1000h\x1b[?1006h"
EXIT_TUI_SEQUENCE = b"\x1b[?1000l\x1b[?1006l\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Enter and leave the raw alternate-screen mode around a session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise SetupError(f"stdin is not a usable terminal: {exc}") from exc
        self._active = False

    def enable_tui_mode(self) -> None:
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
            self._active = True
            os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        except (termios.error, OSError) as exc:
            raise SetupError(f"could not enter interactive mode: {exc}") from exc
        logger.debug("entered interactive mode")

    def disable_tui_mode(self) -> None:
        """Restore the saved tty attributes and the main screen buffer."""
        try:
            os.write(self.stdout_fd, EXIT_TUI_SEQUENCE)
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except (termios.error, OSError) as exc:
            raise RestoreError(f"could not restore terminal: {exc}") from exc
        finally:
            self._active = False
        logger.debug("left interactive mode")

    @contextlib.contextmanager
    def raw_mode(self):
        """Bracket a session; the terminal is restored on every exit path."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            if self._active:
                self.disable_tui_mode()


class ResizeNotifier:
    """Turn ``SIGWINCH`` into a readable byte on ``read_fd``.

    The input reader selects on ``read_fd`` alongside stdin, so a resize wakes
    the otherwise indefinite wait for the next key. Both pipe ends are
    non-blocking.
    """

    def __init__(self) -> None:
        self.read_fd, self.write_fd = os.pipe()
        os.set_blocking(self.read_fd, False)
        os.set_blocking(self.write_fd, False)

    def notify(self, _signum: int | None = None, _frame: object = None) -> None:
        try:
            os.write(self.write_fd, b"\0")
        except BlockingIOError:
            # A wake-up is already pending.
            pass

    def close(self) -> None:
        os.close(self.read_fd)
        os.close(self.write_fd)

    @contextlib.contextmanager
    def installed(self):
        """Route ``SIGWINCH`` here for the duration of the block."""
        previous = signal.signal(signal.SIGWINCH, self.notify)
        try:
            yield self
        finally:
            signal.signal(signal.SIGWINCH, previous)
            self.close()
