"""Tests for terminal mode handling."""

import termios
from unittest import mock

import pytest

from home_pruner.terminal import TerminalController


def written(write_mock: mock.Mock) -> list[bytes]:
    return [c.args[1] for c in write_mock.call_args_list]


def fake_write(fd: int, data: bytes) -> int:
    return len(data)


def test_enable_and_disable_use_alternate_screen() -> None:
    """Test that entering and leaving bracket the alternate screen and cursor."""
    saved_state = [1, 2, 3]
    with mock.patch("home_pruner.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
        "home_pruner.terminal.tty.setraw"
    ) as setraw_mock, mock.patch("home_pruner.terminal.os.write", side_effect=fake_write) as write_mock, mock.patch(
        "home_pruner.terminal.termios.tcsetattr"
    ) as setattr_mock:
        controller = TerminalController(stdin_fd=0, stdout_fd=1)
        controller.enable()
        controller.disable()

    setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
    assert written(write_mock) == [b"\x1b[?1049h\x1b[?25l\x1b[H", b"\x1b[?1049l\x1b[?25h"]
    setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)


def test_disable_twice_restores_once() -> None:
    """Test that leaving is idempotent."""
    with mock.patch("home_pruner.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
        "home_pruner.terminal.tty.setraw"
    ), mock.patch("home_pruner.terminal.os.write", side_effect=fake_write) as write_mock, mock.patch(
        "home_pruner.terminal.termios.tcsetattr"
    ) as setattr_mock:
        controller = TerminalController(stdin_fd=0, stdout_fd=1)
        controller.enable()
        controller.disable()
        controller.disable()

    assert len(written(write_mock)) == 2
    setattr_mock.assert_called_once()


def test_disable_without_enable_does_nothing() -> None:
    """Test that leaving a session that never started is harmless."""
    with mock.patch("home_pruner.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
        "home_pruner.terminal.os.write"
    ) as write_mock, mock.patch("home_pruner.terminal.termios.tcsetattr") as setattr_mock:
        TerminalController(stdin_fd=0, stdout_fd=1).disable()

    write_mock.assert_not_called()
    setattr_mock.assert_not_called()


def test_session_restores_terminal_after_exception() -> None:
    """Test that the terminal is restored when the session body raises."""
    with mock.patch("home_pruner.terminal.termios.tcgetattr", return_value=[0]):
        controller = TerminalController(stdin_fd=0, stdout_fd=1)

    with mock.patch.object(controller, "enable") as enable_mock, mock.patch.object(controller, "disable") as disable_mock:
        with pytest.raises(RuntimeError):
            with controller.session():
                raise RuntimeError("boom")

    enable_mock.assert_called_once()
    disable_mock.assert_called_once()


def test_read_input_decodes_chunk() -> None:
    """Test that a whole escape sequence arrives as one string."""
    with mock.patch("home_pruner.terminal.termios.tcgetattr", return_value=[0]):
        controller = TerminalController(stdin_fd=0, stdout_fd=1)

    with mock.patch("home_pruner.terminal.os.read", return_value=b"\x1b[A") as read_mock:
        assert controller.read_input() == "\x1b[A"
    read_mock.assert_called_once_with(0, 1024)

    with mock.patch("home_pruner.terminal.os.read", return_value=b""):
        assert controller.read_input() == ""


def test_write_handles_partial_writes() -> None:
    """Test that short writes are retried until the buffer is flushed."""
    with mock.patch("home_pruner.terminal.termios.tcgetattr", return_value=[0]):
        controller = TerminalController(stdin_fd=0, stdout_fd=1)

    with mock.patch("home_pruner.terminal.os.write", side_effect=[2, 3]) as write_mock:
        controller.write("hello")

    assert written(write_mock) == [b"hello", b"llo"]
