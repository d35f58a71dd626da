"""Character reader that tracks line and column positions."""

from __future__ import annotations

from typing import Optional, TextIO

from .region import Loc

EOF = ""


class Scanner:
    """Reads a text stream one character at a time.

    Line ends of the forms ``\\r\\n``, ``\\r`` and ``\\n`` all read as ``\\n``.
    End of input reads as the empty string.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: Optional[str] = None
        self._cur_line = 1
        self._cur_column = 1
        self._first_line = 1
        self._first_column = 1
        self._next_line = 1
        self._next_column = 1
        self._next_char: Optional[str] = None
        self._need_update = True

    def _read_char(self) -> str:
        if self._pending is not None:
            c, self._pending = self._pending, None
            return c
        return self._stream.read(1)

    def _update(self) -> None:
        c = self._read_char()
        if c == "\r":
            following = self._read_char()
            if following != "\n":
                self._pending = following
            c = "\n"
        self._need_update = False
        self._next_char = c

    def peek(self) -> str:
        """Return the next character without consuming it."""
        if self._need_update:
            self._update()
        assert self._next_char is not None
        return self._next_char

    def accept(self) -> None:
        """Consume the character returned by the last ``peek()``."""
        if self._need_update:
            raise RuntimeError("accept() called without a preceding peek()")
        self._need_update = True
        self._cur_line = self._next_line
        self._cur_column = self._next_column
        if self._next_char == "\n":
            self.check_line(self._cur_line)
            self._next_line += 1
            self._next_column = 0
        self._next_column += 1

    def get(self) -> str:
        """Read and consume one character."""
        c = self.peek()
        self.accept()
        return c

    def is_eof(self) -> bool:
        """True once the character last peeked is the end of input."""
        return self._next_char == EOF

    def cur_pos(self) -> Loc:
        """Position of the character last consumed."""
        return Loc(self._cur_line, self._cur_column)

    def first_pos(self) -> Loc:
        """Position recorded by the last ``set_first_loc()``."""
        return Loc(self._first_line, self._first_column)

    def set_first_loc(self) -> None:
        """Record the current position as the start of a token."""
        self._first_line = self._cur_line
        self._first_column = self._cur_column

    def check_line(self, line: int) -> None:
        """Called for each line end consumed; does nothing unless overridden."""