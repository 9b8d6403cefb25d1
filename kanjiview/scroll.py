"""Vertical scroll offset shared by both panes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScrollController:
    """Offset into a document of ``line_count`` lines.

    The offset stays within ``[0, max(line_count - 1, 0)]`` so the final
    line remains on screen when scrolled all the way down.
    """

    offset: int = 0
    line_count: int = 0

    @property
    def max_offset(self) -> int:
        return max(0, self.line_count - 1)

    def scroll_up(self, amount: int) -> None:
        self.offset = max(0, self.offset - max(0, amount))

    def scroll_down(self, amount: int) -> None:
        self.offset = min(self.max_offset, self.offset + max(0, amount))

    def set_line_count(self, line_count: int) -> None:
        """Adopt a new document length, pulling the offset back into range."""
        self.line_count = max(0, line_count)
        self.offset = max(0, min(self.offset, self.max_offset))
