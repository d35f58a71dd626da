"""Node types that make up a parsed JSON document.

Container nodes hold their members as ``JsonObj`` instances, with ``None``
standing for a JSON ``null``.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Union

_TAB = "    "

Member = Optional["JsonObj"]


def escaped_string(text: str) -> str:
    """Quote ``text`` for JSON output.

    Double quotes are used unless the text contains one; then single quotes
    are used unless it contains one too, in which case the text is put in
    double quotes with each double quote escaped.
    """
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    return '"' + text.replace('"', '\\"') + '"'


def _tab(level: int) -> str:
    return _TAB * level


def _member_json(value: Member, indent: int) -> str:
    if value is None:
        return "null"
    return value.to_json(indent)


class JsonObj:
    """Base of all non-null JSON nodes."""

    def is_string(self) -> bool:
        """True for a string node."""
        return False

    def is_int(self) -> bool:
        """True for an integer node."""
        return False

    def is_float(self) -> bool:
        """True for a floating point node."""
        return False

    def is_bool(self) -> bool:
        """True for a boolean node."""
        return False

    def is_object(self) -> bool:
        """True for an object node."""
        return False

    def is_array(self) -> bool:
        """True for an array node."""
        return False

    def _kind(self) -> str:
        return type(self).__name__

    def size(self) -> int:
        """Number of members of an object or array."""
        raise TypeError(f"{self._kind()}: not an object or an array")

    def has_key(self, key: str) -> bool:
        """True if an object has ``key``."""
        raise TypeError(f"{self._kind()}: not an object")

    def key_list(self) -> list[str]:
        """Sorted keys of an object."""
        raise TypeError(f"{self._kind()}: not an object")

    def item_list(self) -> list[tuple[str, Member]]:
        """(key, value) pairs of an object, sorted by key."""
        raise TypeError(f"{self._kind()}: not an object")

    def get_value(self, key: Union[str, int]) -> Member:
        """Member of an object by key, or of an array by position."""
        if isinstance(key, str):
            raise TypeError(f"{self._kind()}: not an object")
        raise TypeError(f"{self._kind()}: not an array")

    def get_string(self) -> str:
        """Value of a string node."""
        raise TypeError(f"{self._kind()}: not a string")

    def get_int(self) -> int:
        """Value of an integer node."""
        raise TypeError(f"{self._kind()}: not an integer")

    def get_float(self) -> float:
        """Value of a floating point node."""
        raise TypeError(f"{self._kind()}: not a float")

    def get_bool(self) -> bool:
        """Value of a boolean node."""
        raise TypeError(f"{self._kind()}: not a boolean")

    def to_json(self, indent: int = -1) -> str:
        """JSON text; a negative ``indent`` gives compact output."""
        raise NotImplementedError

    def is_eq(self, other: "JsonObj") -> bool:
        """Structural equality with another node."""
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonObj):
            return self.is_eq(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_json()})"


class JsonDict(JsonObj):
    """A JSON object."""

    def __init__(self, items: Mapping[str, Member]) -> None:
        self._dict: dict[str, Member] = dict(items)

    def is_object(self) -> bool:
        return True

    def size(self) -> int:
        return len(self._dict)

    def has_key(self, key: str) -> bool:
        return key in self._dict

    def key_list(self) -> list[str]:
        return sorted(self._dict)

    def item_list(self) -> list[tuple[str, Member]]:
        return sorted(self._dict.items(), key=lambda item: item[0])

    def get_value(self, key: Union[str, int]) -> Member:
        if not isinstance(key, str):
            return super().get_value(key)
        try:
            return self._dict[key]
        except KeyError:
            raise ValueError(f"{key}: invalid key") from None

    def to_json(self, indent: int = -1) -> str:
        if indent < 0:
            body = ",".join(
                escaped_string(key) + ":" + _member_json(value, indent)
                for key, value in self.item_list()
            )
            return "{" + body + "}"
        inner = indent + 1
        body = ",\n".join(
            _tab(inner) + escaped_string(key) + ":" + _member_json(value, inner)
            for key, value in self.item_list()
        )
        return "{\n" + body + "\n" + _tab(indent) + "}"

    def is_eq(self, other: JsonObj) -> bool:
        if other.is_object() and isinstance(other, JsonDict):
            return self._dict == other._dict
        return False


class JsonArray(JsonObj):
    """A JSON array."""

    def __init__(self, elements: Iterable[Member]) -> None:
        self._array: list[Member] = list(elements)

    def is_array(self) -> bool:
        return True

    def size(self) -> int:
        return len(self._array)

    def get_value(self, key: Union[str, int]) -> Member:
        if isinstance(key, str):
            return super().get_value(key)
        if not 0 <= key < len(self._array):
            raise IndexError("pos is out of range")
        return self._array[key]

    def to_json(self, indent: int = -1) -> str:
        if indent < 0:
            body = ",".join(_member_json(value, indent) for value in self._array)
            return "[" + body + "]"
        inner = indent + 1
        body = ",\n".join(
            _tab(inner) + _member_json(value, inner) for value in self._array
        )
        return "[\n" + body + "\n" + _tab(indent) + "]"

    def is_eq(self, other: JsonObj) -> bool:
        if other.is_array() and isinstance(other, JsonArray):
            return self._array == other._array
        return False


class JsonString(JsonObj):
    """A JSON string."""

    def __init__(self, value: str) -> None:
        self._value = str(value)

    def is_string(self) -> bool:
        return True

    def get_string(self) -> str:
        return self._value

    def to_json(self, indent: int = -1) -> str:
        return escaped_string(self._value)

    def is_eq(self, other: JsonObj) -> bool:
        return other.is_string() and self._value == other.get_string()


class JsonInt(JsonObj):
    """A JSON integer."""

    def __init__(self, value: int) -> None:
        self._value = int(value)

    def is_int(self) -> bool:
        return True

    def get_int(self) -> int:
        return self._value

    def to_json(self, indent: int = -1) -> str:
        return str(self._value)

    def is_eq(self, other: JsonObj) -> bool:
        return other.is_int() and self._value == other.get_int()


class JsonFloat(JsonObj):
    """A JSON floating point number."""

    def __init__(self, value: float) -> None:
        self._value = float(value)

    def is_float(self) -> bool:
        return True

    def get_float(self) -> float:
        return self._value

    def to_json(self, indent: int = -1) -> str:
        return f"{self._value:g}"

    def is_eq(self, other: JsonObj) -> bool:
        return other.is_float() and self._value == other.get_float()


class JsonTrue(JsonObj):
    """The JSON value ``true``."""

    def is_bool(self) -> bool:
        return True

    def get_bool(self) -> bool:
        return True

    def to_json(self, indent: int = -1) -> str:
        return "true"

    def is_eq(self, other: JsonObj) -> bool:
        return other.is_bool() and other.get_bool()


class JsonFalse(JsonObj):
    """The JSON value ``false``."""

    def is_bool(self) -> bool:
        return True

    def get_bool(self) -> bool:
        return False

    def to_json(self, indent: int = -1) -> str:
        return "false"

    def is_eq(self, other: JsonObj) -> bool:
        return other.is_bool() and not other.get_bool()