"""Frame layout and drawing for the two flashcard panes.

The screen is split horizontally by the plan's percentages with a one-cell
divider between the regions. Each pane shows its text from the shared scroll
offset; a suppressed pane leaves its region blank. The bottom row is a
reverse-video status line.
"""

from __future__ import annotations

import os

from .ansi import fit_ansi_line
from .content import text_lines
from .errors import DrawError
from .state import PaneSpec, RenderPlan, ViewState

DIVIDER = "│"
DIVIDER_STYLE = "\033[2m"
STATUS_STYLE = "\033[7m"
RESET = "\033[0m"
KEY_HINTS = "j/k scroll  space hide  r swap  h/l resize  R reload  Esc quit"


def split_columns(width: int, left_pct: int) -> tuple[int, int, bool]:
    """Return ``(left_cols, right_cols, has_divider)`` for a row of ``width`` cells."""
    width = max(0, width)
    left_cols = max(0, min(width, (width * left_pct) // 100))
    has_divider = 0 < left_cols < width
    right_cols = width - left_cols - (1 if has_divider else 0)
    return left_cols, right_cols, has_divider


def pane_rows(pane: PaneSpec | None, cols: int, rows: int) -> list[str]:
    """Fit ``rows`` lines of ``pane`` into ``cols`` cells each."""
    if pane is None:
        return [" " * max(0, cols)] * rows
    lines = text_lines(pane.text)
    out: list[str] = []
    for row in range(rows):
        idx = pane.scroll_offset + row
        out.append(fit_ansi_line(lines[idx] if idx < len(lines) else "", cols))
    return out


def build_frame_rows(plan: RenderPlan, width: int, rows: int, divider: str | None = None) -> list[str]:
    """Compose the pane region rows of one frame."""
    if divider is None:
        divider = f"{DIVIDER_STYLE}{DIVIDER}{RESET}"
    left_cols, right_cols, has_divider = split_columns(width, plan.left_width_pct)
    left = pane_rows(plan.left_pane, left_cols, rows)
    right = pane_rows(plan.right_pane, right_cols, rows)
    joiner = divider if has_divider else ""
    return [f"{left[row]}{joiner}{right[row]}" for row in range(rows)]


def build_status_line(left_text: str, width: int, right_text: str = KEY_HINTS) -> str:
    """Left-aligned status with right-aligned key hints, dropping hints first."""
    if width <= 0:
        return ""
    right = right_text if len(left_text) + 2 + len(right_text) <= width else ""
    left = fit_ansi_line(left_text, width - len(right))
    return f"{left}{right}"


def format_status(state: ViewState, visible_rows: int) -> str:
    total = state.line_count
    first = min(total, state.scroll_offset + 1)
    last = min(total, state.scroll_offset + max(1, visible_rows))
    name = state.path.name if state.path is not None else "-"
    flags = []
    if state.hidden:
        flags.append("hidden")
    if state.reverse:
        flags.append("reversed")
    suffix = f"  [{', '.join(flags)}]" if flags else ""
    return f" {name} ({first}-{last}/{total}){suffix}"


def draw_frame(state: ViewState, width: int, height: int, stdout_fd: int) -> None:
    """Paint the whole screen for ``state``; raises ``DrawError`` on write failure."""
    # Keep the last column free so terminals never auto-wrap a full row.
    line_width = max(1, width - 1)
    content_rows = max(1, height - 1)
    out: list[str] = ["\033[H\033[J"]
    for row_text in build_frame_rows(state.render_plan(), line_width, content_rows):
        out.append(row_text)
        out.append("\r\n")
    out.append(STATUS_STYLE)
    out.append(build_status_line(format_status(state, content_rows), line_width))
    out.append(RESET)
    try:
        os.write(stdout_fd, "".join(out).encode("utf-8", errors="replace"))
    except OSError as exc:
        raise DrawError(f"writing to terminal failed: {exc}") from exc


def render_plain(plan: RenderPlan, width: int) -> str:
    """Side-by-side text of every line, for non-interactive output."""
    panes = [pane for pane in (plan.left_pane, plan.right_pane) if pane is not None]
    row_count = max((len(text_lines(pane.text)) - pane.scroll_offset for pane in panes), default=0)
    rows = build_frame_rows(plan, width, max(0, row_count), divider=DIVIDER)
    return "".join(f"{row.rstrip()}\n" for row in rows)
