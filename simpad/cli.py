"""Command-line front door for simpad.

Parses CLI options, loads settings and the optional file, then either
prints a single rendered frame or starts the interactive editor.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path

from .config import load_settings
from .errors import FileLoadError, SimpadError
from .fileio import open_document
from .logging_config import setup_logging
from .render import render_frame
from .runtime import apply_window_size, run_editor
from .scroll import recompute_scroll
from .state import Document
from .terminal import TerminalController
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def render_file_view(path: Path, rows: int, cols: int, theme_name: str | None, no_color: bool) -> bytes:
    """Render the first screen of ``path`` exactly as the editor would draw it."""
    document = Document()
    open_document(document, path)
    apply_window_size(document, rows, cols)
    recompute_scroll(document)
    return render_frame(document, theme=resolve_theme(theme_name, no_color=no_color))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Edit a text file in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="File to open. Omit to start with an empty buffer.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable highlight colors.")
    parser.add_argument("--render", metavar="PATH", help="Print one rendered frame of PATH and exit.")
    parser.add_argument(
        "--size",
        nargs=2,
        type=_positive_int,
        metavar=("ROWS", "COLS"),
        default=None,
        help="Terminal size for --render output (default: current terminal size).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the editor.

    Fatal errors (unreadable file, terminal setup failures, unexpected read
    errors) are logged and converted into ``SystemExit`` after the terminal
    has been restored.
    """
    args = build_parser().parse_args(argv)
    settings = load_settings()
    setup_logging(settings.logging)
    theme_name = args.theme or settings.theme

    if args.render is not None:
        if args.path is not None:
            raise SystemExit("Cannot combine positional path with --render.")
        if args.size is not None:
            rows, cols = args.size
        else:
            term = shutil.get_terminal_size((80, 24))
            rows, cols = term.lines, term.columns
        try:
            frame = render_file_view(Path(args.render), rows, cols, theme_name, args.no_color)
        except FileLoadError as exc:
            raise SystemExit(f"simpad: {exc}") from exc
        sys.stdout.buffer.write(frame)
        sys.stdout.buffer.flush()
        return

    document = Document()
    if args.path is not None:
        path = Path(args.path)
        if not path.exists():
            raise SystemExit(f"Path not found: {path}")
        try:
            open_document(document, path)
        except FileLoadError as exc:
            raise SystemExit(f"simpad: {exc}") from exc

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        raise SystemExit("simpad requires a terminal on stdin and stdout.")

    try:
        terminal = TerminalController(stdin_fd, stdout_fd)
        run_editor(document, terminal, settings, resolve_theme(theme_name, no_color=args.no_color))
    except (SimpadError, OSError) as exc:
        logger.exception("Fatal error")
        raise SystemExit(f"simpad: {exc}") from exc


if __name__ == "__main__":
    main()
