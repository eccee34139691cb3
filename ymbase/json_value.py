"""An immutable JSON value: null, string, int, float, bool, array or object."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from enum import Enum
from typing import Any, Union

__all__ = ["JsonType", "JsonValue"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INDENT_WIDTH = 2


class JsonType(Enum):
    """Kind of a JSON value."""

    NULL = "null"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    OBJECT = "object"
    ARRAY = "array"


_Convertible = Union[
    None, bool, int, float, str, "JsonValue", Mapping[str, Any], Sequence[Any]
]


class JsonValue:
    """A JSON value built from Python data.

    ``None`` gives null, ``bool``, ``int``, ``float`` and ``str`` give the
    scalar kinds, a mapping with string keys gives an object and any other
    sequence gives an array.  Anything else raises :class:`TypeError`.
    """

    __slots__ = ("_kind", "_value")

    def __init__(self, value: _Convertible = None) -> None:
        self._kind, self._value = _convert(value)

    @classmethod
    def null(cls) -> JsonValue:
        """Return a null value."""
        return cls()

    @property
    def kind(self) -> JsonType:
        """The kind of this value."""
        return self._kind

    def is_null(self) -> bool:
        """Return True for null."""
        return self._kind is JsonType.NULL

    def is_string(self) -> bool:
        """Return True for a string."""
        return self._kind is JsonType.STRING

    def is_number(self) -> bool:
        """Return True for an integer or a float."""
        return self._kind in (JsonType.INT, JsonType.FLOAT)

    def is_int(self) -> bool:
        """Return True for an integer."""
        return self._kind is JsonType.INT

    def is_float(self) -> bool:
        """Return True for a float."""
        return self._kind is JsonType.FLOAT

    def is_bool(self) -> bool:
        """Return True for a Boolean."""
        return self._kind is JsonType.BOOL

    def is_object(self) -> bool:
        """Return True for an object."""
        return self._kind is JsonType.OBJECT

    def is_array(self) -> bool:
        """Return True for an array."""
        return self._kind is JsonType.ARRAY

    def _require_object(self) -> dict[str, JsonValue]:
        if not self.is_object():
            raise TypeError("not an Object type")
        return self._value

    def _require_array(self) -> tuple[JsonValue, ...]:
        if not self.is_array():
            raise TypeError("Not an array type")
        return self._value

    def has_key(self, key: str) -> bool:
        """Return True when this object holds ``key``."""
        if not isinstance(key, str):
            raise TypeError("key must be a string")
        return key in self._require_object()

    def key_list(self) -> list[str]:
        """Return the keys of this object."""
        return list(self._require_object())

    def item_list(self) -> list[tuple[str, JsonValue]]:
        """Return the (key, value) pairs of this object."""
        return list(self._require_object().items())

    def __len__(self) -> int:
        if not (self.is_object() or self.is_array()):
            raise TypeError("Neither an object nor an array type")
        return len(self._value)

    def __iter__(self) -> Iterator[Any]:
        if self.is_array():
            return iter(self._value)
        if self.is_object():
            return iter(self._value)
        raise TypeError("Neither an object nor an array type")

    def __getitem__(self, key: str | int) -> JsonValue:
        return self.at(key)

    def at(self, key: str | int) -> JsonValue:
        """Return the member named ``key`` or the element at index ``key``.

        Negative indices count from the end.  A missing key or an index out
        of range raises :class:`ValueError`.
        """
        if isinstance(key, str):
            if not self.is_object():
                raise TypeError("Not an object type")
            try:
                return self._value[key]
            except KeyError:
                raise ValueError(f"{key}: invalid key") from None
        if isinstance(key, int) and not isinstance(key, bool):
            elems = self._require_array()
            index = key if key >= 0 else len(elems) + key
            if not 0 <= index < len(elems):
                raise ValueError("index is out-of-range")
            return elems[index]
        raise TypeError("Not a container")

    def get(self, key: str) -> JsonValue:
        """Return the member named ``key``, or null when it is missing."""
        if not isinstance(key, str):
            raise TypeError("key must be a string")
        return self._require_object().get(key, JsonValue())

    def get_string(self) -> str:
        """Return the string held by this value."""
        if not self.is_string():
            raise TypeError("not a string type")
        return self._value

    def get_int(self) -> int:
        """Return the integer held by this value."""
        if not self.is_int():
            raise TypeError("not an integer type")
        return self._value

    def get_float(self) -> float:
        """Return the float held by this value."""
        if not self.is_float():
            raise TypeError("not a float type")
        return self._value

    def get_bool(self) -> bool:
        """Return the Boolean held by this value."""
        if not self.is_bool():
            raise TypeError("not a Boolean type")
        return self._value

    def _to_python(self) -> Any:
        if self._kind is JsonType.ARRAY:
            return [elem._to_python() for elem in self._value]
        if self._kind is JsonType.OBJECT:
            return {key: val._to_python() for key, val in self._value.items()}
        return self._value

    def to_json(self, indent: bool = False) -> str:
        """Return the JSON text of this value, indented when ``indent`` is true."""
        return json.dumps(
            self._to_python(),
            ensure_ascii=False,
            indent=_INDENT_WIDTH if indent else None,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self._kind is other._kind and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return self.to_json()


def _convert(value: Any) -> tuple[JsonType, Any]:
    if value is None:
        return JsonType.NULL, None
    if isinstance(value, bool):
        return JsonType.BOOL, value
    if isinstance(value, JsonValue):
        return value._kind, value._value
    if isinstance(value, str):
        return JsonType.STRING, value
    if isinstance(value, int):
        if not _INT_MIN <= value <= _INT_MAX:
            raise OverflowError("integer is out of the range of a signed 32-bit integer")
        return JsonType.INT, int(value)
    if isinstance(value, float):
        return JsonType.FLOAT, float(value)
    if isinstance(value, Mapping):
        members: dict[str, JsonValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError("cannot convert to JsonValue: object keys must be strings")
            members[key] = JsonValue(item)
        return JsonType.OBJECT, members
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return JsonType.ARRAY, tuple(JsonValue(item) for item in value)
    raise TypeError(f"cannot convert to JsonValue: {type(value).__name__}")