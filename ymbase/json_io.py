"""Reading, parsing and writing JSON text as :class:`JsonValue` objects."""

from __future__ import annotations

import json
import os
from typing import Any, Union

from ymbase.json_value import JsonValue

__all__ = ["parse", "read", "write"]

_PathLike = Union[str, "os.PathLike[str]"]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def parse(json_str: str) -> JsonValue:
    """Parse JSON text into a :class:`JsonValue`.

    Malformed text, the non-standard constants ``NaN`` and ``Infinity`` and
    integers outside the signed 32-bit range raise :class:`ValueError`.
    """
    if not isinstance(json_str, str):
        raise TypeError(f"json_str must be a string, not {type(json_str).__name__}")
    try:
        data = json.loads(json_str, parse_constant=_reject_constant)
    except json.JSONDecodeError as err:
        raise ValueError(f"syntax error: {err}") from None
    try:
        return JsonValue(data)
    except OverflowError as err:
        raise ValueError(str(err)) from None


def read(filename: _PathLike) -> JsonValue:
    """Read and parse the JSON file ``filename``."""
    name = os.fspath(filename)
    try:
        with open(name, encoding="utf-8") as stream:
            text = stream.read()
    except OSError:
        raise ValueError(f"{name}: Could not open") from None
    return parse(text)


def write(value: Any, filename: _PathLike, indent: bool = False) -> None:
    """Write ``value`` as JSON text to ``filename``.

    ``value`` is a :class:`JsonValue` or anything it can be built from.
    """
    json_value = value if isinstance(value, JsonValue) else JsonValue(value)
    text = json_value.to_json(bool(indent))
    name = os.fspath(filename)
    try:
        with open(name, "w", encoding="utf-8") as stream:
            stream.write(text)
    except OSError:
        raise ValueError(f"{name}: Could not open") from None