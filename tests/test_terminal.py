"""Tests for terminal mode switching and frame output.

Verifies raw-mode lifecycle safety, window size errors and complete writes.
"""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from simpad.errors import TerminalError
from simpad.terminal import TerminalController


def _attrs() -> list:
    return [0xFFFF, 0xFFFF, 0, 0xFFFF, 0, 0, [0] * 32]


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_raw_mode(self) -> None:
        saved_state = _attrs()
        raw_state = _attrs()

        with mock.patch(
            "simpad.terminal.termios.tcgetattr", side_effect=[saved_state, raw_state]
        ), mock.patch("simpad.terminal.os.write") as write_mock, mock.patch(
            "simpad.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_raw_mode()
            controller.disable_raw_mode()

        self.assertEqual(setattr_mock.call_args_list[0].args[:2], (0, termios.TCSAFLUSH))
        applied = setattr_mock.call_args_list[0].args[2]
        self.assertFalse(applied[3] & termios.ECHO)
        self.assertFalse(applied[3] & termios.ICANON)
        self.assertFalse(applied[0] & termios.IXON)
        self.assertEqual(applied[6][termios.VMIN], 0)
        self.assertEqual(applied[6][termios.VTIME], 1)
        self.assertEqual(setattr_mock.call_args_list[1].args, (0, termios.TCSAFLUSH, saved_state))
        self.assertEqual(write_mock.call_args_list[0].args, (1, b"\x1b[?1049h"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, b"\x1b[?25h\x1b[?1049l"))

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("simpad.terminal.termios.tcgetattr", return_value=_attrs()):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_raw_mode") as enable_mock, mock.patch.object(
            controller, "disable_raw_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_non_tty_input_is_a_terminal_error(self) -> None:
        with mock.patch("simpad.terminal.termios.tcgetattr", side_effect=termios.error(25, "not a tty")):
            with self.assertRaises(TerminalError):
                TerminalController(stdin_fd=0, stdout_fd=1)

    def test_window_size_failure_is_fatal(self) -> None:
        with mock.patch("simpad.terminal.termios.tcgetattr", return_value=_attrs()):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
        with mock.patch("simpad.terminal.os.get_terminal_size", side_effect=OSError(25, "not a tty")):
            with self.assertRaises(TerminalError):
                controller.window_size()

    def test_window_size_returns_rows_then_columns(self) -> None:
        with mock.patch("simpad.terminal.termios.tcgetattr", return_value=_attrs()):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
        with mock.patch("simpad.terminal.os.get_terminal_size", return_value=mock.Mock(lines=24, columns=80)):
            self.assertEqual(controller.window_size(), (24, 80))

    def test_write_finishes_partial_writes(self) -> None:
        with mock.patch("simpad.terminal.termios.tcgetattr", return_value=_attrs()):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
        chunks: list[bytes] = []

        def fake_write(_fd, data):
            chunk = bytes(data[:3])
            chunks.append(chunk)
            return len(chunk)

        with mock.patch("simpad.terminal.os.write", side_effect=fake_write):
            controller.write(b"abcdefgh")
        self.assertEqual(b"".join(chunks), b"abcdefgh")


if __name__ == "__main__":
    unittest.main()
