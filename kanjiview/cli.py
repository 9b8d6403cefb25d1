"""Command-line front door for kanjiview.

Validates the argument count, configures logging, and runs the viewer.
Viewer errors are reported here, after the session has restored the terminal.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .errors import KanjiViewError
from .runtime import run_viewer

USAGE = "usage: kanjiview filename"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("kanjiview")


class _BadArguments(Exception):
    pass


class _UsageParser(argparse.ArgumentParser):
    """Parser that reports bad arguments to the caller instead of exiting 2."""

    def error(self, message: str):
        raise _BadArguments(message)


def _configure_logging(log_file: str | None) -> None:
    """Log to ``log_file`` when given; otherwise keep log output off the screen.

    The package logger is configured once per process.
    """
    if logger.handlers:
        return
    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return
    try:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"kanjiview: cannot open log file {log_file}: {exc.strerror or exc}") from exc
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        prog="kanjiview",
        description="Scroll through a vocabulary file with prompts and answers in separate panes.",
    )
    parser.add_argument("paths", nargs="*", metavar="filename", help="Vocabulary file to view.")
    parser.add_argument("--nopager", action="store_true", help="Print both panes side by side and exit.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and launch the viewer on one file.

    Any positional count other than one, or an unrecognised or malformed
    option, prints the usage line and returns normally. Viewer failures exit
    non-zero with a one-line diagnostic.
    """
    try:
        args, unknown = build_parser().parse_known_args(argv)
    except _BadArguments:
        print(USAGE)
        return
    if unknown or len(args.paths) != 1:
        print(USAGE)
        return

    _configure_logging(args.log_file)
    path = Path(args.paths[0])
    try:
        run_viewer(path, nopager=args.nopager)
    except KanjiViewError as exc:
        logger.error("fatal: %s", exc)
        raise SystemExit(f"kanjiview: {exc}") from exc


if __name__ == "__main__":
    main()
