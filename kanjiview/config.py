"""Read-only JSON config for viewer defaults.

Holds the initial pane split and scroll/resize step sizes. Session state is
never written back. All access is defensive: malformed or missing config
falls back to the built-in defaults key by key.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "kanjiview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_SPACE_RATIO = 40
KEYBOARD_SCROLL_STEP = 1
MOUSE_SCROLL_STEP = 5
SPACE_STEP = 5

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewerSettings:
    """Defaults applied when a session starts."""

    space_ratio: int = DEFAULT_SPACE_RATIO
    keyboard_scroll_step: int = KEYBOARD_SCROLL_STEP
    mouse_scroll_step: int = MOUSE_SCROLL_STEP
    space_step: int = SPACE_STEP


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_int(value: object, default: int, minimum: int, maximum: int | None = None) -> int:
    """Accept plain in-range integers only; booleans and floats are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < minimum or (maximum is not None and value > maximum):
        return default
    return value


def load_settings() -> ViewerSettings:
    data = load_config()
    return ViewerSettings(
        space_ratio=_coerce_int(data.get("space_ratio"), DEFAULT_SPACE_RATIO, 0, 100),
        keyboard_scroll_step=_coerce_int(data.get("keyboard_scroll_step"), KEYBOARD_SCROLL_STEP, 1),
        mouse_scroll_step=_coerce_int(data.get("mouse_scroll_step"), MOUSE_SCROLL_STEP, 1),
        space_step=_coerce_int(data.get("space_step"), SPACE_STEP, 1),
    )
