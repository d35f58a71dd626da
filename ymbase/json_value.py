"""A JSON value handle: null or a shared, immutable JSON node."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from .json_obj import (
    JsonArray,
    JsonDict,
    JsonFalse,
    JsonFloat,
    JsonInt,
    JsonObj,
    JsonString,
    JsonTrue,
)


def _to_obj(value: Any) -> Optional[JsonObj]:
    """Turn a Python value into the node it stands for (``None`` is null)."""
    if value is None:
        return None
    if isinstance(value, JsonValue):
        return value._obj
    if isinstance(value, JsonObj):
        return value
    if isinstance(value, bool):
        return JsonTrue() if value else JsonFalse()
    if isinstance(value, int):
        return JsonInt(value)
    if isinstance(value, float):
        return JsonFloat(value)
    if isinstance(value, str):
        return JsonString(value)
    if isinstance(value, Mapping):
        items = {}
        for key, member in value.items():
            if not isinstance(key, str):
                raise TypeError(f"{key!r}: object keys must be strings")
            items[key] = _to_obj(member)
        return JsonDict(items)
    if isinstance(value, (list, tuple)):
        return JsonArray(_to_obj(member) for member in value)
    raise TypeError(f"{type(value).__name__}: cannot be converted to JSON")


class JsonValue:
    """A JSON value of any kind, including null.

    It is built from ``None``, ``str``, ``int``, ``float``, ``bool``, lists
    and tuples, mappings with string keys, other ``JsonValue`` objects, or
    any mix of these.
    """

    __slots__ = ("_obj",)

    def __init__(self, value: Any = None) -> None:
        self._obj: Optional[JsonObj] = _to_obj(value)

    @classmethod
    def null(cls) -> "JsonValue":
        """Return a null value."""
        return cls()

    # ---- kind tests -----------------------------------------------------

    def is_null(self) -> bool:
        """True for null."""
        return self._obj is None

    def is_string(self) -> bool:
        """True for a string."""
        return self._obj is not None and self._obj.is_string()

    def is_number(self) -> bool:
        """True for an integer or a floating point number."""
        return self._obj is not None and (self._obj.is_int() or self._obj.is_float())

    def is_int(self) -> bool:
        """True for an integer."""
        return self._obj is not None and self._obj.is_int()

    def is_float(self) -> bool:
        """True for a floating point number."""
        return self._obj is not None and self._obj.is_float()

    def is_bool(self) -> bool:
        """True for a boolean."""
        return self._obj is not None and self._obj.is_bool()

    def is_object(self) -> bool:
        """True for an object."""
        return self._obj is not None and self._obj.is_object()

    def is_array(self) -> bool:
        """True for an array."""
        return self._obj is not None and self._obj.is_array()

    # ---- checks ---------------------------------------------------------

    def _check(self, ok: bool, what: str) -> JsonObj:
        if not ok:
            raise TypeError(f"{self.to_json()}: not {what}")
        assert self._obj is not None
        return self._obj

    def _object(self) -> JsonObj:
        return self._check(self.is_object(), "an object")

    def _array(self) -> JsonObj:
        return self._check(self.is_array(), "an array")

    # ---- containers -----------------------------------------------------

    def size(self) -> int:
        """Number of members of an object or an array."""
        obj = self._check(self.is_object() or self.is_array(), "an object or an array")
        return obj.size()

    def has_key(self, key: str) -> bool:
        """True if the object has ``key``."""
        return self._object().has_key(key)

    def key_list(self) -> list[str]:
        """Keys of the object in sorted order."""
        return self._object().key_list()

    def item_list(self) -> list[tuple[str, "JsonValue"]]:
        """(key, value) pairs of the object in key order."""
        return [(key, JsonValue(obj)) for key, obj in self._object().item_list()]

    def at(self, key: Union[str, int]) -> "JsonValue":
        """Member of an object by key or of an array by position."""
        if isinstance(key, str):
            return JsonValue(self._object().get_value(key))
        return JsonValue(self._array().get_value(key))

    def get(self, key: str) -> "JsonValue":
        """Member of an object by key, or null if there is none."""
        obj = self._object()
        if obj.has_key(key):
            return JsonValue(obj.get_value(key))
        return JsonValue.null()

    def __getitem__(self, key: Union[str, int]) -> "JsonValue":
        return self.at(key)

    # ---- scalars --------------------------------------------------------

    def get_string(self) -> str:
        """Value of a string."""
        return self._check(self.is_string(), "a string").get_string()

    def get_int(self) -> int:
        """Value of an integer."""
        return self._check(self.is_int(), "an integer").get_int()

    def get_float(self) -> float:
        """Value of a floating point number."""
        return self._check(self.is_float(), "a float").get_float()

    def get_bool(self) -> bool:
        """Value of a boolean."""
        return self._check(self.is_bool(), "a boolean").get_bool()

    # ---- output and comparison ------------------------------------------

    def to_json(self, indent: bool = False) -> str:
        """JSON text; with ``indent`` it is laid out over lines and ends in a newline."""
        if self._obj is None:
            return "null"
        text = self._obj.to_json(0 if indent else -1)
        return text + "\n" if indent else text

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"JsonValue({self.to_json()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        if self._obj is None or other._obj is None:
            return self._obj is None and other._obj is None
        return self._obj.is_eq(other._obj)

    __hash__ = None  # type: ignore[assignment]


def _members(values: Iterable[Any]) -> list[JsonValue]:
    return [JsonValue(value) for value in values]