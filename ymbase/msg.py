"""Message kinds, message handlers and the manager that dispatches to them."""

from __future__ import annotations

import abc
import enum
import functools
import operator
from typing import Optional, TextIO

from .region import Region


class MsgType(enum.Flag):
    """Kind of a message; members may be combined into a handler mask."""

    ERROR = enum.auto()
    WARNING = enum.auto()
    INFO = enum.auto()
    FAILURE = enum.auto()
    DEBUG = enum.auto()

    def __str__(self) -> str:
        if self.name:
            return self.name.capitalize()
        return super().__str__()


_SINGLE_TYPES = tuple(MsgType)
_ALL_TYPES = functools.reduce(operator.or_, _SINGLE_TYPES)


class MsgHandler(abc.ABC):
    """Receives messages whose kind is in its mask."""

    def __init__(self, mask: Optional[MsgType] = None) -> None:
        self.mask = _ALL_TYPES if mask is None else mask

    def event_proc(
        self,
        src_file: str,
        src_line: int,
        loc: Optional[Region],
        msg_type: MsgType,
        label: str,
        body: str,
    ) -> None:
        """Pass the message on to ``put_msg`` if the mask lets it through."""
        if (self.mask & msg_type) != msg_type:
            return
        if loc is not None and not loc.is_valid():
            loc = None
        self.put_msg(src_file, src_line, loc, msg_type, label, body)

    @abc.abstractmethod
    def put_msg(
        self,
        src_file: str,
        src_line: int,
        loc: Optional[Region],
        msg_type: MsgType,
        label: str,
        body: str,
    ) -> None:
        """Handle one message; ``loc`` is None when there is no position."""

    @staticmethod
    def msg_to_string(
        src_file: str,
        src_line: int,
        loc: Optional[Region],
        msg_type: MsgType,
        label: str,
        body: str,
    ) -> str:
        """Format a message as one line of text."""
        text = f"{msg_type} [{label}]: {body}\n"
        if loc is not None and loc.is_valid():
            return f"{loc}: {text}"
        return text


class StreamMsgHandler(MsgHandler):
    """Writes each message to a text stream."""

    def __init__(self, stream: TextIO, mask: Optional[MsgType] = None) -> None:
        super().__init__(mask)
        self._stream = stream

    def put_msg(self, src_file, src_line, loc, msg_type, label, body) -> None:
        self._stream.write(
            self.msg_to_string(src_file, src_line, loc, msg_type, label, body)
        )


class StrListMsgHandler(MsgHandler):
    """Collects each message as a string in ``msg_list``."""

    def __init__(self, mask: Optional[MsgType] = None) -> None:
        super().__init__(mask)
        self.msg_list: list[str] = []

    def put_msg(self, src_file, src_line, loc, msg_type, label, body) -> None:
        self.msg_list.append(
            self.msg_to_string(src_file, src_line, loc, msg_type, label, body)
        )


class MsgMgr:
    """Counts messages by kind and hands them to the attached handlers."""

    def __init__(self) -> None:
        self._handlers: list[MsgHandler] = []
        self._counts: dict[MsgType, int] = {}
        self.clear_count()

    def attach_handler(self, handler: MsgHandler) -> None:
        """Attach a handler; attaching it again has no effect."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def detach_handler(self, handler: MsgHandler) -> None:
        """Detach a handler if it is attached."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def detach_all_handlers(self) -> None:
        """Detach every handler."""
        self._handlers.clear()

    def put_msg(
        self,
        src_file: str,
        src_line: int,
        loc: Optional[Region],
        msg_type: MsgType,
        label: str,
        body: str,
    ) -> None:
        """Count a message and send it to every handler."""
        if msg_type not in self._counts:
            raise ValueError(f"{msg_type!r}: not a single message type")
        self._counts[msg_type] += 1
        for handler in list(self._handlers):
            handler.event_proc(src_file, src_line, loc, msg_type, label, body)

    def clear_count(self) -> None:
        """Reset all counts to zero."""
        self._counts = {msg_type: 0 for msg_type in _SINGLE_TYPES}

    def msg_num(self) -> int:
        """Number of messages of all kinds."""
        return sum(self._counts.values())

    def error_num(self) -> int:
        """Number of error messages."""
        return self._counts[MsgType.ERROR]

    def warning_num(self) -> int:
        """Number of warning messages."""
        return self._counts[MsgType.WARNING]

    def info_num(self) -> int:
        """Number of information messages."""
        return self._counts[MsgType.INFO]

    def fail_num(self) -> int:
        """Number of failure messages."""
        return self._counts[MsgType.FAILURE]

    def debug_num(self) -> int:
        """Number of debug messages."""
        return self._counts[MsgType.DEBUG]