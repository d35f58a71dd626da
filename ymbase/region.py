"""Positions and regions within a text file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_MAX_LINE = 0x100000
_MAX_COLUMN = 0x1000


@dataclass(frozen=True)
class Loc:
    """A (line, column) position. ``Loc()`` is an invalid position."""

    line: int = 0
    column: int = 0

    def __post_init__(self) -> None:
        if self.line == 0 and self.column == 0:
            return
        if not 1 <= self.line < _MAX_LINE:
            raise ValueError("Loc(line, column): line is out of range")
        if not 1 <= self.column < _MAX_COLUMN:
            raise ValueError("Loc(line, column): column is out of range")

    def is_valid(self) -> bool:
        """Return True if this position holds a meaningful value."""
        return self.line != 0


@dataclass(frozen=True)
class Region:
    """A span of a file from a start position to an end position."""

    start: Loc = Loc()
    end: Optional[Loc] = None

    def __post_init__(self) -> None:
        if self.end is None:
            object.__setattr__(self, "end", self.start)

    def is_valid(self) -> bool:
        """Return True if both ends are valid positions."""
        return self.start.is_valid() and self.end.is_valid()

    @property
    def start_line(self) -> int:
        return self.start.line

    @property
    def start_column(self) -> int:
        return self.start.column

    @property
    def end_line(self) -> int:
        return self.end.line

    @property
    def end_column(self) -> int:
        return self.end.column

    def __str__(self) -> str:
        if not self.is_valid():
            return ""
        if self.start_line == self.end_line:
            if self.start_column == self.end_column:
                return f"line {self.start_line}, column = {self.start_column}"
            return (
                f"line {self.start_line}, column {self.start_column}"
                f" - {self.end_column}"
            )
        return (
            f"line {self.start_line}, column {self.start_column}"
            f" - line {self.end_line}, colmun {self.end_column}"
        )