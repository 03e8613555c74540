"""Conversion and lookup helpers for common values."""

from __future__ import annotations

import dataclasses
import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

_UINT_PATTERN = re.compile(r"[0-9]+")
_UINT32_MAX = 2**32 - 1


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return ""


def _format_nested(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        special = _format_float(value)
        if special:
            return special
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        inner = " ".join(
            _format_nested(getattr(value, f.name)) for f in dataclasses.fields(value)
        )
        return "{" + inner + "}"
    if isinstance(value, Mapping):
        inner = " ".join(f"{_format_nested(k)}:{_format_nested(v)}" for k, v in value.items())
        return "map[" + inner + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_nested(item) for item in value) + "]"
    return str(value)


def to_string(value: Any) -> str:
    """Convert a value to its string form; floats get six decimals, None is empty."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value) or f"{value:.6f}"
    if value is None:
        return ""
    return _format_nested(value)


def map_values_as_strings(data: Mapping[str, Any]) -> list[str]:
    """Return every value of the mapping converted to a string."""
    return [to_string(value) for value in data.values()]


def map_keys_as_strings(data: Mapping[str, Any]) -> list[str]:
    """Return the keys of the mapping."""
    return list(data)


def _as_items(items: Any) -> list[Any]:
    if isinstance(items, (str, bytes, bytearray)) or not isinstance(items, Sequence):
        return []
    return list(items)


def _is_unhashable_container(value: Any) -> bool:
    return isinstance(value, (list, dict, set, bytearray))


def slice_contains(items: Any, element: Any) -> bool:
    """Tell whether a sequence holds a value of the same type equal to ``element``.

    Raises TypeError when comparing containers, which only the deep variant supports.
    """
    for item in _as_items(items):
        if type(item) is not type(element):
            continue
        if _is_unhashable_container(item):
            raise TypeError(f"cannot compare values of type {type(item).__name__}")
        if item == element:
            return True
    return False


def _deep_equal(left: Any, right: Any) -> bool:
    if type(left) is not type(right):
        return False
    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(
            _deep_equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, Mapping):
        return left.keys() == right.keys() and all(
            _deep_equal(value, right[key]) for key, value in left.items()
        )
    return left == right


def slice_contains_deep(items: Any, element: Any) -> bool:
    """Tell whether a sequence holds a value deeply equal to ``element``."""
    return any(_deep_equal(item, element) for item in _as_items(items))


def slice_of_string(item: str, count: int) -> list[str]:
    """Return a list holding ``item`` ``count`` times."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [item] * count


def parse_uint(value: str) -> int:
    """Parse a decimal unsigned 32-bit integer."""
    if not _UINT_PATTERN.fullmatch(value):
        raise ValueError(f"invalid unsigned integer: {value!r}")
    number = int(value)
    if number > _UINT32_MAX:
        raise ValueError(f"value out of range: {value!r}")
    return number


def format_uint(value: int) -> str:
    """Format an unsigned integer in decimal."""
    if value < 0:
        raise ValueError("value must not be negative")
    return str(value)