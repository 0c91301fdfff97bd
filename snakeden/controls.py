"""Terminal output and input: cursor placement, text lines, mouse clicks and keys."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterable
from typing import TextIO

from snakeden.constants import Direction

_WINDOWS = sys.platform == "win32"

if _WINDOWS:
    import msvcrt
else:
    import select
    import termios
    import tty

_CLICK_REGIONS = (
    (1, range(30, 35), 13),
    (2, range(29, 36), 15),
    (1, range(28, 38), 12),
    (2, range(24, 42), 14),
    (3, range(31, 35), 16),
)

_KEY_DIRECTIONS = (
    ("W", Direction.UP),
    ("S", Direction.DOWN),
    ("D", Direction.RIGHT),
    ("A", Direction.LEFT),
)

_SGR_MOUSE = re.compile(r"\x1b\[<(\d+);(\d+);(\d+)([Mm])\Z")
_MOUSE_ON = "\033[?1000h\033[?1006h"
_MOUSE_OFF = "\033[?1006l\033[?1000l"
_MAX_SEQUENCE = 32


def choice_at(x: int, y: int) -> int | None:
    """The menu choice whose label covers the cell (x, y), if any."""
    return next(
        (choice for choice, columns, row in _CLICK_REGIONS if y == row and x in columns),
        None,
    )


def next_direction(current: Direction | int, pressed: Iterable[str]) -> Direction:
    """The heading after the given keys, refusing to reverse onto the body."""
    current = Direction(current)
    keys = {key.upper() for key in pressed}
    for key, direction in _KEY_DIRECTIONS:
        if key in keys and current is not direction.opposite():
            return direction
    return current


def parse_mouse_click(sequence: str) -> tuple[int, int] | None:
    """Zero-based (x, y) of a plain left-button press, else None.

    Accepts SGR (``ESC [ < b ; x ; y M``) and X10 (``ESC [ M b x y``) reports.
    """
    match = _SGR_MOUSE.match(sequence)
    if match:
        button, x, y = (int(part) for part in match.group(1, 2, 3))
        if match.group(4) == "M" and button == 0:
            return x - 1, y - 1
        return None
    if sequence.startswith("\x1b[M") and len(sequence) == 6:
        button, x, y = (ord(char) - 32 for char in sequence[3:])
        if button == 0:
            return x - 1, y - 1
    return None


class Terminal:
    """A text terminal driven with ANSI escape sequences.

    Used as a context manager it keeps the input in unbuffered, non-echoing
    mode for the whole block.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._depth = 0
        self._saved_mode = None

    def __enter__(self) -> Terminal:
        if self._depth == 0 and self._interactive() and not _WINDOWS:
            fd = self._in.fileno()
            self._saved_mode = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        self._depth += 1
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._depth -= 1
        if self._depth == 0 and self._saved_mode is not None:
            termios.tcsetattr(self._in.fileno(), termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None

    def _interactive(self) -> bool:
        try:
            return self._in.isatty()
        except (AttributeError, ValueError):
            return False

    def _emit(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def clear(self) -> None:
        """Erase the screen and home the cursor."""
        self._emit("\033[2J\033[H")

    def write(self, x: int, y: int, text: str) -> None:
        """Write text with its first character at column x, row y."""
        self._emit(f"\033[{y + 1};{x + 1}H{text}")

    def hide_cursor(self) -> None:
        self._emit("\033[?25l")

    def show_cursor(self) -> None:
        self._emit("\033[?25h")

    def read_line(self, x: int, y: int, limit: int) -> str:
        """Read one line typed at (x, y), keeping at most limit - 1 characters."""
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self.write(x, y, "")
        if self._saved_mode is not None:
            fd = self._in.fileno()
            termios.tcsetattr(fd, termios.TCSADRAIN, self._saved_mode)
            try:
                line = self._in.readline()
            finally:
                tty.setcbreak(fd)
        else:
            line = self._in.readline()
        if not line:
            raise EOFError("input closed while reading a line")
        return line.rstrip("\r\n")[: limit - 1]

    def _read_char(self) -> str:
        if self._interactive():
            if _WINDOWS:
                char = msvcrt.getwch()
            else:
                data = os.read(self._in.fileno(), 1)
                char = data.decode("latin-1")
        else:
            char = self._in.read(1)
        if not char:
            raise EOFError("input closed")
        return char

    def _key_waiting(self) -> bool:
        if _WINDOWS:
            return bool(msvcrt.kbhit())
        ready, _, _ = select.select([self._in.fileno()], [], [], 0)
        return bool(ready)

    def _read_escape_sequence(self) -> str | None:
        if self._read_char() != "\x1b":
            return None
        if self._read_char() != "[":
            return None
        kind = self._read_char()
        if kind == "M":
            return "\x1b[M" + "".join(self._read_char() for _ in range(3))
        if kind != "<":
            return None
        sequence = "\x1b[<"
        while len(sequence) < _MAX_SEQUENCE:
            char = self._read_char()
            sequence += char
            if char in "Mm":
                return sequence
        return None

    def read_click(self) -> int:
        """Wait for a left click on a menu label and return its choice number."""
        self._emit(_MOUSE_ON)
        try:
            with self:
                while True:
                    sequence = self._read_escape_sequence()
                    if sequence is None:
                        continue
                    position = parse_mouse_click(sequence)
                    if position is None:
                        continue
                    choice = choice_at(*position)
                    if choice is not None:
                        return choice
        finally:
            self._emit(_MOUSE_OFF)

    def pressed_keys(self) -> frozenset[str]:
        """Upper-cased keys typed since the last call, without waiting."""
        if not self._interactive():
            char = self._in.read(1)
            return frozenset({char.upper()}) if char else frozenset()
        keys = set()
        with self:
            while self._key_waiting():
                keys.add(self._read_char().upper())
        return frozenset(keys)

    def wait_key(self) -> str:
        """Block until a key is typed and return it."""
        with self:
            return self._read_char()