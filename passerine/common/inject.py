"""Conversion between Python values and runtime data, and effect matching."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from passerine.common.data import (
    Boolean,
    Data,
    Float,
    Integer,
    String,
    Tuple,
    Unit,
)

T = TypeVar("T")


def serialize(item: Any) -> Data:
    """Convert a Python value into runtime data.

    Supports ``Data`` itself, ``None`` (unit), ``bool``, ``int``, ``float``,
    ``str`` and dataclass instances, which become tuples of their fields
    (or unit when they have no fields).
    """
    if isinstance(item, Data):
        return item
    if item is None:
        return Unit()
    if isinstance(item, bool):
        return Boolean(item)
    if isinstance(item, int):
        return Integer(item)
    if isinstance(item, float):
        return Float(item)
    if isinstance(item, str):
        return String(item)
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        fields = dataclasses.fields(item)
        if not fields:
            return Unit()
        return Tuple(serialize(getattr(item, f.name)) for f in fields)
    raise TypeError(f"cannot serialize {type(item).__name__} values")


_PRIMITIVES: dict[type, type[Data]] = {
    bool: Boolean,
    int: Integer,
    float: Float,
    str: String,
}

_NAMED_TYPES: dict[str, Any] = {
    "bool": bool,
    "int": int,
    "float": float,
    "str": str,
    "None": None,
    "Data": Data,
    "Boolean": Boolean,
    "Integer": Integer,
    "Float": Float,
    "String": String,
    "Tuple": Tuple,
    "Unit": Unit,
}


def _expect(data: Data, kind: type[Data], target: Any) -> None:
    if not isinstance(data, kind):
        name = getattr(target, "__name__", repr(target))
        raise ValueError(f"{data!r} can not be deserialized as {name}")


def _natural(data: Data) -> Any:
    """Deserialize data into the Python value its own kind suggests."""
    if isinstance(data, Unit):
        return None
    if isinstance(data, (Boolean, Integer, Float, String)):
        return data.value
    return data


def _field_value(data: Data, annotation: Any, owner: type) -> Any:
    if isinstance(annotation, str):
        name = annotation.strip()
        if name == owner.__name__:
            return deserialize(data, owner)
        if name in _NAMED_TYPES:
            return deserialize(data, _NAMED_TYPES[name])
        return _natural(data)
    return deserialize(data, annotation)


def deserialize(data: Data, target: type[T] | None) -> T:
    """Build a value of type ``target`` from runtime data.

    Raises ``ValueError`` if the data has the wrong shape and ``TypeError``
    if ``target`` is not a supported type.
    """
    if isinstance(target, type) and issubclass(target, Data):
        _expect(data, target, target)
        return data  # type: ignore[return-value]
    if target is None or target is type(None):
        _expect(data, Unit, target)
        return None  # type: ignore[return-value]
    if target in _PRIMITIVES:
        _expect(data, _PRIMITIVES[target], target)
        return data.value  # type: ignore[attr-defined,no-any-return]
    if isinstance(target, type) and dataclasses.is_dataclass(target):
        fields = [f for f in dataclasses.fields(target) if f.init]
        if not fields:
            _expect(data, Unit, target)
            return target()
        _expect(data, Tuple, target)
        items = data.items  # type: ignore[attr-defined]
        if len(items) != len(fields):
            raise ValueError(
                f"{target.__name__} needs {len(fields)} fields, got {len(items)}"
            )
        values = {
            f.name: _field_value(item, f.type, target)
            for f, item in zip(fields, items)
        }
        return target(**values)
    raise TypeError(f"cannot deserialize into {target!r}")


@dataclass(frozen=True, order=True)
class EffectId:
    """Identifies a kind of effect."""

    value: int


@dataclass(frozen=True)
class Handler(Generic[T]):
    """Handles one kind of effect, deserializing its payload as ``target``."""

    id: EffectId
    target: type[T]


@dataclass
class Effect:
    """A raised effect carrying data that has not yet been handled."""

    id: EffectId
    unmatched_data: Data | None = None

    def matches(self, handler: Handler[T]) -> tuple[T] | None:
        """Hand the payload to ``handler`` if it handles this effect.

        Returns a one-element tuple holding the deserialized payload, or
        ``None`` if the ids differ or the payload was already taken.
        A payload of the wrong shape is consumed and raises ``ValueError``.
        """
        if self.id != handler.id:
            return None
        data, self.unmatched_data = self.unmatched_data, None
        if data is None:
            return None
        return (deserialize(data, handler.target),)