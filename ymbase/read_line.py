"""Reading one line of interactive input."""

from __future__ import annotations

import sys
from typing import Optional


def get_line(prompt: str) -> Optional[str]:
    """Show ``prompt`` on standard error and read a line from standard input.

    Returns the line without its trailing newline, or ``None`` at end of input.
    """
    sys.stderr.write(prompt)
    sys.stderr.flush()
    line = sys.stdin.readline()
    if line == "":
        return None
    return line[:-1] if line.endswith("\n") else line