"""Terminal control for the interactive session.

Owns the raw-mode and alternate-screen lifecycle. Entering and leaving are
paired through ``session()``; leaving twice is harmless.
"""

import contextlib
import os
import shutil
import sys
import termios
import tty
from typing import Iterator

from home_pruner.logging_config import get_logger

logger = get_logger(__name__)

ENTER_ALT_SCREEN = "\x1b[?1049h"
EXIT_ALT_SCREEN = "\x1b[?1049l"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
MOVE_CURSOR_HOME = "\x1b[H"

READ_CHUNK_SIZE = 1024


class TerminalController:
    """Manage terminal mode transitions and raw input/output."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._active = False

    @classmethod
    def for_stdio(cls) -> "TerminalController":
        """Controller bound to the process stdin and stdout."""
        return cls(sys.stdin.fileno(), sys.stdout.fileno())

    def enable(self) -> None:
        """Enter raw mode on the alternate screen with the cursor hidden."""
        if self._active:
            return
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self.write(ENTER_ALT_SCREEN + HIDE_CURSOR + MOVE_CURSOR_HOME)
        self._active = True
        logger.debug("Terminal entered raw mode")

    def disable(self) -> None:
        """Restore the main screen, the cursor and the saved tty attributes."""
        if not self._active:
            return
        self._active = False
        self.write(EXIT_ALT_SCREEN + SHOW_CURSOR)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        logger.debug("Terminal restored")

    @contextlib.contextmanager
    def session(self) -> Iterator["TerminalController"]:
        """Context manager that brackets code with enable/disable calls."""
        try:
            self.enable()
            yield self
        finally:
            self.disable()

    def rows(self) -> int:
        return shutil.get_terminal_size().lines

    def read_input(self) -> str:
        """Block for the next chunk of input; empty string on EOF."""
        data = os.read(self.stdin_fd, READ_CHUNK_SIZE)
        return data.decode("utf-8", errors="replace")

    def write(self, buffer: str) -> None:
        data = buffer.encode("utf-8")
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]
