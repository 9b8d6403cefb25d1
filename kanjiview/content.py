"""Split vocabulary files into complementary prompt and detail views.

A source line is a prompt line when it contains ``:`` or is exactly ``-``.
Every other line, blank lines included, is a detail line. Both views keep
the full line count so that rows line up when scrolled together::

    日:            ->  prompt: "日:"   detail: ""
     day, sun      ->  prompt: ""      detail: " day, sun"
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import OpenError, ReadError

PROMPT_MARKER = ":"
PROMPT_SEPARATOR_LINE = "-"


@dataclass(frozen=True)
class SplitContent:
    """Prompt/detail texts of one file, each ending every line with ``\\n``."""

    prompt_text: str
    detail_text: str
    line_count: int

    @property
    def prompt_lines(self) -> list[str]:
        return text_lines(self.prompt_text)

    @property
    def detail_lines(self) -> list[str]:
        return text_lines(self.detail_text)


EMPTY_CONTENT = SplitContent(prompt_text="", detail_text="", line_count=0)


def is_prompt_line(line: str) -> bool:
    return PROMPT_MARKER in line or line == PROMPT_SEPARATOR_LINE


def source_lines(raw_text: str) -> list[str]:
    """Split on ``\\n`` only; a trailing terminator does not add an empty line.

    ``str.splitlines`` is avoided because it also breaks on form feeds and
    unicode separators, which would shift rows between the two views.
    """
    if not raw_text:
        return []
    lines = raw_text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def text_lines(text: str) -> list[str]:
    """Inverse of the ``\\n``-terminated layout produced by ``split_content``."""
    if not text:
        return []
    return text.split("\n")[:-1]


def split_content(raw_text: str) -> SplitContent:
    prompt_out: list[str] = []
    detail_out: list[str] = []
    lines = source_lines(raw_text)
    for line in lines:
        if is_prompt_line(line):
            prompt_out.append(line)
            detail_out.append("")
        else:
            prompt_out.append("")
            detail_out.append(line)
        prompt_out.append("\n")
        detail_out.append("\n")
    return SplitContent(
        prompt_text="".join(prompt_out),
        detail_text="".join(detail_out),
        line_count=len(lines),
    )


def read_text(path: Path) -> str:
    """Read ``path`` as UTF-8, mapping failures onto the viewer error types."""
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise OpenError(f"cannot open {path}: {exc.strerror or exc}") from exc
    with handle:
        try:
            data = handle.read()
        except OSError as exc:
            raise ReadError(f"cannot read {path}: {exc.strerror or exc}") from exc
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ReadError(f"{path} is not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc


def load_document(path: Path) -> SplitContent:
    return split_content(read_text(path))
