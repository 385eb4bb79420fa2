"""Raw-mode terminal handling and screen-size queries."""

from __future__ import annotations

import io
import os
import re
import sys
import termios
from typing import BinaryIO, TextIO

from termgrid.game import Vector

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
_REPORT_LIMIT = 99
_REPORT_PATTERN = re.compile(r"\[\s*([+-]?\d+)(?:;\s*([+-]?\d+))?")


def _printable(char: str) -> bool:
    return " " <= char <= "~"


def parse_cursor_report(data: str) -> Vector:
    """Screen size from a cursor position report such as ``ESC[rows;colsR``."""
    kept = "".join(char for char in data.split("R", 1)[0] if _printable(char))
    match = _REPORT_PATTERN.match(kept[:_REPORT_LIMIT])
    if match is None:
        return Vector(0, 0)
    rows = int(match.group(1))
    columns = int(match.group(2)) if match.group(2) is not None else 0
    return Vector(columns, rows)


class Terminal:
    """Puts a terminal into raw, non-blocking mode and buffers output."""

    def __init__(
        self, stdin: BinaryIO | TextIO | None = None, stdout: TextIO | None = None
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._buffer = io.StringIO()
        self._original: list | None = None

    @property
    def _fd(self) -> int:
        return self.stdin.fileno()

    def __enter__(self) -> Terminal:
        fd = self._fd
        self._original = termios.tcgetattr(fd)
        changed = termios.tcgetattr(fd)
        changed[0] &= ~(termios.IXON | termios.ICRNL)
        changed[1] &= ~termios.OPOST
        changed[3] &= ~(termios.ICANON | termios.ECHO | termios.IEXTEN | termios.ISIG)
        changed[6][termios.VMIN] = 1
        changed[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSAFLUSH, changed)
        os.set_blocking(fd, False)
        self.write(HIDE_CURSOR)
        self.flush()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        fd = self._fd
        if self._original is not None:
            termios.tcsetattr(fd, termios.TCSAFLUSH, self._original)
            self._original = None
        os.set_blocking(fd, True)
        self.write(SHOW_CURSOR)
        self.flush()

    def query_screen_size(self) -> Vector:
        """Ask the terminal for its size by probing the cursor position."""
        fd = self._fd
        os.set_blocking(fd, True)
        try:
            self.write("\033[9999;9999H\033[6n")
            self.flush()
            received = []
            while True:
                byte = os.read(fd, 1)
                if not byte or byte == b"R":
                    break
                received.append(byte.decode("latin-1"))
            self.write("\033[1;1H")
        finally:
            os.set_blocking(fd, False)
        return parse_cursor_report("".join(received))

    def read_input(self, size: int) -> bytes:
        """Read up to ``size`` pending bytes without waiting."""
        try:
            return os.read(self._fd, size)
        except BlockingIOError:
            return b""

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def flush(self) -> None:
        self.stdout.write(self._buffer.getvalue())
        self.stdout.flush()
        self._buffer = io.StringIO()