"""Splitting of ``key:value, key:value`` option strings."""

from __future__ import annotations

_CSPACE = " \t\n\v\f\r"


def _find_unescaped(text: str, target: str) -> int:
    """Index of the first ``target`` not preceded by a backslash, or -1."""
    escaped = False
    for pos, ch in enumerate(text):
        if escaped:
            escaped = False
        elif ch == target:
            return pos
        elif ch == "\\":
            escaped = True
    return -1


def _strip(text: str) -> str:
    return text.strip(_CSPACE)


class OptionParser:
    """Parse strings of delimited ``key<opt_delim>value`` items."""

    def __init__(self, delim: str = ",", opt_delim: str = ":") -> None:
        self.delim = delim
        self.opt_delim = opt_delim

    def set_delim(self, delim: str, opt_delim: str) -> None:
        """Change the item and key/value delimiters."""
        self.delim = delim
        self.opt_delim = opt_delim

    def parse(self, text: str) -> list[tuple[str, str]]:
        """Return the (key, value) pairs of ``text``; missing values are ''."""
        result: list[tuple[str, str]] = []
        rest = text
        while True:
            p = _find_unescaped(rest, self.delim)
            item = _strip(rest if p < 0 else rest[:p])
            q = _find_unescaped(item, self.opt_delim)
            if q < 0:
                result.append((item, ""))
            else:
                result.append((_strip(item[:q]), _strip(item[q + 1:])))
            if p < 0:
                return result
            rest = rest[p + 1:]