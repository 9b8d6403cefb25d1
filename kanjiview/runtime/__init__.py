"""Interactive session runtime: bootstrap (`run_viewer`) and the event loop."""

from __future__ import annotations

from .app import run_viewer
from .loop import RuntimeLoopCallbacks, run_main_loop

__all__ = [
    "run_viewer",
    "RuntimeLoopCallbacks",
    "run_main_loop",
]
