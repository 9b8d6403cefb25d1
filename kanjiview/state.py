"""Runtime view state and the pure render query derived from it."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import DEFAULT_SPACE_RATIO
from .content import EMPTY_CONTENT, SplitContent, load_document
from .scroll import ScrollController

logger = logging.getLogger(__name__)

MIN_SPACE_RATIO = 0
MAX_SPACE_RATIO = 100


class DisplayMode(enum.Enum):
    """Which pane slots are drawn.

    Hiding always suppresses the right slot; ``reverse`` decides which content
    sits in the left slot, and so which side stays visible.
    """

    BOTH = "both"
    LEFT_ONLY = "left-only"


@dataclass(frozen=True)
class PaneSpec:
    text: str
    scroll_offset: int


@dataclass(frozen=True)
class RenderPlan:
    """Everything the drawing layer needs for one frame."""

    left_pane: PaneSpec | None
    right_pane: PaneSpec | None
    left_width_pct: int
    right_width_pct: int


def clamp_space_ratio(value: int) -> int:
    return max(MIN_SPACE_RATIO, min(MAX_SPACE_RATIO, value))


@dataclass
class ViewState:
    document: SplitContent = EMPTY_CONTENT
    path: Path | None = None
    scroll: ScrollController = field(default_factory=ScrollController)
    hidden: bool = False
    reverse: bool = False
    space_ratio: int = DEFAULT_SPACE_RATIO
    should_exit: bool = False
    reload_requested: bool = False

    def __post_init__(self) -> None:
        self.space_ratio = clamp_space_ratio(self.space_ratio)
        self.scroll.set_line_count(self.document.line_count)

    @classmethod
    def from_path(cls, path: Path, space_ratio: int = DEFAULT_SPACE_RATIO) -> ViewState:
        """Load ``path`` and build a fresh session state for it."""
        document = load_document(path)
        logger.debug("loaded %s (%d lines)", path, document.line_count)
        return cls(document=document, path=path, space_ratio=space_ratio)

    @property
    def scroll_offset(self) -> int:
        return self.scroll.offset

    @property
    def line_count(self) -> int:
        return self.document.line_count

    @property
    def display_mode(self) -> DisplayMode:
        return DisplayMode.LEFT_ONLY if self.hidden else DisplayMode.BOTH

    def scroll_up(self, amount: int) -> None:
        self.scroll.scroll_up(amount)

    def scroll_down(self, amount: int) -> None:
        self.scroll.scroll_down(amount)

    def toggle_hidden(self) -> None:
        self.hidden = not self.hidden

    def toggle_reverse(self) -> None:
        self.reverse = not self.reverse

    def adjust_space_ratio(self, delta: int) -> None:
        self.space_ratio = clamp_space_ratio(self.space_ratio + delta)

    def request_exit(self) -> None:
        self.should_exit = True

    def request_reload(self) -> None:
        self.reload_requested = True

    def reload(self, path: Path | None = None) -> None:
        """Re-read ``path`` (default: the current file) and replace the document.

        Load errors propagate unchanged; on failure the previous document is
        kept.
        """
        target = path if path is not None else self.path
        self.reload_requested = False
        if target is None:
            return
        document = load_document(target)
        self.document = document
        self.path = target
        self.scroll.set_line_count(document.line_count)
        logger.info("reloaded %s (%d lines)", target, document.line_count)

    def render_plan(self) -> RenderPlan:
        if self.reverse:
            left_text, right_text = self.document.detail_text, self.document.prompt_text
        else:
            left_text, right_text = self.document.prompt_text, self.document.detail_text
        offset = self.scroll.offset
        left_pane = PaneSpec(text=left_text, scroll_offset=offset)
        right_pane: PaneSpec | None = PaneSpec(text=right_text, scroll_offset=offset)
        if self.display_mode is DisplayMode.LEFT_ONLY:
            right_pane = None
        return RenderPlan(
            left_pane=left_pane,
            right_pane=right_pane,
            left_width_pct=self.space_ratio,
            right_width_pct=MAX_SPACE_RATIO - self.space_ratio,
        )
