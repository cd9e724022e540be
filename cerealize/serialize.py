"""Build JSON documents from plain values and objects that describe themselves."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


class SerializationError(ValueError):
    """Raised when a value cannot be written as JSON."""


_BASE_TYPES = (bool, int, float, str)

_ESCAPES = {
    ord("\\"): "\\\\",
    ord('"'): '\\"',
    **{code: f"\\u{code:04X}" for code in range(0x20)},
}


def is_base_value(value: Any) -> bool:
    """Return True for integers, floats, strings and booleans."""
    return isinstance(value, _BASE_TYPES)


def is_serializable(value: Any) -> bool:
    """Return True for base values and objects with a ``serialize()`` method."""
    return is_base_value(value) or callable(getattr(value, "serialize", None))


def _convert(value: Any) -> Any:
    """Reduce a value to a base value, an Array or an Object."""
    if isinstance(value, AnyValue):
        return value.value
    if isinstance(value, (Object, Array)):
        return value
    if is_base_value(value):
        return value
    serialize = getattr(value, "serialize", None)
    if callable(serialize):
        result = serialize()
        if not isinstance(result, Object):
            raise TypeError(
                f"{type(value).__name__}.serialize() must return an Object, "
                f"not {type(result).__name__}"
            )
        return result
    if isinstance(value, (list, tuple, range)):
        return Array(value)
    raise TypeError(f"cannot serialize value of type {type(value).__name__}")


@dataclass(init=False)
class Array:
    """An ordered sequence of serializable values."""

    items: list[AnyValue]

    def __init__(self, items) -> None:
        self.items = [AnyValue(item) for item in items]


@dataclass
class Object:
    """An ordered collection of named fields.

    Fields keep the order in which they were appended.
    """

    fields: list[tuple[str, AnyValue]] = field(default_factory=list)

    def append(self, name: str, value: Any) -> None:
        """Add a field holding ``value`` under ``name``."""
        if not isinstance(name, str):
            raise TypeError(f"field name must be a str, not {type(name).__name__}")
        self.fields.append((name, AnyValue(value)))


@dataclass(init=False)
class AnyValue:
    """A single base value, array or object."""

    value: Any

    def __init__(self, value: Any) -> None:
        self.value = _convert(value)


def _write_string(text: str, out: list[str]) -> None:
    out.append('"')
    out.append(text.translate(_ESCAPES))
    out.append('"')


def _write_base(value: Any, out: list[str]) -> None:
    if isinstance(value, bool):
        out.append("true" if value else "false")
    elif isinstance(value, int):
        out.append(str(value))
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise SerializationError(f"cannot serialize non-finite number {value!r}")
        out.append(f"{value:.6f}")
    else:
        _write_string(value, out)


def _write(node: Any, out: list[str]) -> None:
    if isinstance(node, Array):
        out.append("[")
        for position, item in enumerate(node.items):
            if position:
                out.append(",")
            _write(item.value, out)
        out.append("]")
    elif isinstance(node, Object):
        out.append("{")
        for position, (name, item) in enumerate(node.fields):
            if position:
                out.append(",")
            _write_string(name, out)
            out.append(":")
            _write(item.value, out)
        out.append("}")
    else:
        _write_base(node, out)


def serialize_json(value: Any) -> str:
    """Render ``value`` as compact JSON text.

    Raises SerializationError for NaN or infinite floats and TypeError for
    values that cannot be serialized.
    """
    out: list[str] = []
    _write(AnyValue(value).value, out)
    return "".join(out)