"""A pool of shared strings and the string handle built on it."""

from __future__ import annotations

from typing import Optional


class StrPool:
    """Keeps one canonical copy of every registered string."""

    def __init__(self) -> None:
        self._strings: dict[str, str] = {}
        self._total_alloc_size = 0

    def reg(self, text: str) -> str:
        """Register ``text`` and return its canonical shared copy."""
        found = self._strings.get(text)
        if found is not None:
            return found
        self._strings[text] = text
        self._total_alloc_size += len(text.encode("utf-8")) + 1
        return text

    def accum_alloc_size(self) -> int:
        """Total size in bytes of all strings ever stored, with terminators."""
        return self._total_alloc_size

    def destroy(self) -> None:
        """Forget every registered string."""
        self._strings.clear()

    def __len__(self) -> int:
        return len(self._strings)

    def __contains__(self, text: object) -> bool:
        return text in self._strings


_the_pool = StrPool()


class ShString:
    """A string whose contents are shared through a global pool."""

    __slots__ = ("_text",)

    def __init__(self, text: Optional[str] = None) -> None:
        self._text = None if text is None else _the_pool.reg(text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ShString):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __str__(self) -> str:
        return self._text if self._text is not None else ""

    def __repr__(self) -> str:
        return f"ShString({self._text!r})"

    @classmethod
    def allocated_size(cls) -> int:
        """Memory taken by all shared strings so far."""
        return _the_pool.accum_alloc_size()

    @classmethod
    def free_all_memory(cls) -> None:
        """Drop every shared string from the pool."""
        _the_pool.destroy()