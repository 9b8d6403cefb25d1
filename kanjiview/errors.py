"""Error taxonomy for the viewer session.

Every failure is fatal and propagates to the CLI, which reports it only
after the terminal has been restored.
"""

from __future__ import annotations


class KanjiViewError(Exception):
    """Base class for all viewer failures."""


class SetupError(KanjiViewError):
    """Interactive terminal mode could not be entered."""


class OpenError(KanjiViewError):
    """Input file could not be opened for reading."""


class ReadError(KanjiViewError):
    """Input file could not be read or decoded as text."""


class DrawError(KanjiViewError):
    """Writing a frame to the terminal failed."""


class EventError(KanjiViewError):
    """Reading the next input event failed or the input stream closed."""


class RestoreError(KanjiViewError):
    """Terminal state could not be restored."""
