"""Terminal control helpers for the editor session.

Owns raw-mode lifecycle, alternate-screen switching, window size queries
and whole-frame writes to the output descriptor.
"""

from __future__ import annotations

import contextlib
import os
import termios

from .errors import TerminalError


class TerminalController:
    """Manage terminal mode transitions and frame output."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"cannot read terminal attributes: {exc}") from exc

    def enable_raw_mode(self) -> None:
        """Disable echo, canonical input, signals and output post-processing."""
        raw = termios.tcgetattr(self.stdin_fd)
        raw[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw)
        # Enter alternate screen.
        os.write(self.stdout_fd, b"\x1b[?1049h")

    def disable_raw_mode(self) -> None:
        """Restore the main screen buffer and the saved tty attributes."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def window_size(self) -> tuple[int, int]:
        """Return ``(rows, columns)`` of the output terminal."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError as exc:
            raise TerminalError(f"cannot determine window size: {exc}") from exc
        if size.columns <= 0 or size.lines <= 0:
            raise TerminalError("cannot determine window size")
        return size.lines, size.columns

    def write(self, data: bytes) -> None:
        """Write the complete buffer, continuing after partial writes."""
        view = memoryview(data)
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with raw-mode enter/exit calls."""
        try:
            self.enable_raw_mode()
            yield
        finally:
            self.disable_raw_mode()
