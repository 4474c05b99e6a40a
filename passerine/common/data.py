"""Runtime values and source literals."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _check_i64(value: int) -> int:
    if not _I64_MIN <= value <= _I64_MAX:
        raise OverflowError(f"{value} does not fit in a 64-bit integer")
    return value


def _display_float(value: float) -> str:
    """Render a float the way it is printed to the console."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _debug_float(value: float) -> str:
    text = _display_float(value)
    if math.isfinite(value) and "." not in text:
        text += ".0"
    return text


_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


def _debug_str(value: str) -> str:
    parts = []
    for char in value:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'


class Data:
    """Base class of every built-in runtime value.

    ``str()`` renders a value as it would be printed to the console;
    ``repr()`` gives a debugging view with some fields omitted.
    """

    __slots__ = ()


@dataclass(frozen=True, repr=False)
class Float(Data):
    """A double-precision floating point number."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return _display_float(self.value)

    def __repr__(self) -> str:
        return f"Float({_debug_float(self.value)})"


@dataclass(frozen=True, repr=False)
class Integer(Data):
    """A signed 64-bit integer."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer expects an int, got {self.value!r}")
        _check_i64(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Integer({self.value})"


@dataclass(frozen=True, repr=False)
class Boolean(Data):
    """A boolean, true or false."""

    value: bool

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bool(self.value))

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def __repr__(self) -> str:
        return f"Boolean({self})"


@dataclass(frozen=True, repr=False)
class String(Data):
    """A text string."""

    value: str

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"String({_debug_str(self.value)})"


@dataclass(frozen=True, repr=False)
class Unit(Data):
    """The empty tuple."""

    def __str__(self) -> str:
        return "()"

    def __repr__(self) -> str:
        return "Unit"


@dataclass(frozen=True, repr=False)
class Tuple(Data):
    """A tuple of values."""

    items: tuple[Data, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __str__(self) -> str:
        return "(" + ", ".join(str(item) for item in self.items) + ")"

    def __repr__(self) -> str:
        return "Tuple([" + ", ".join(repr(item) for item in self.items) + "])"


@dataclass(frozen=True, repr=False)
class Kind(Data):
    """The base of an unconstructed label."""

    index: int

    def __str__(self) -> str:
        raise TypeError("Can not display naked labels")

    def __repr__(self) -> str:
        return f"Kind({self.index})"


@dataclass(frozen=True, repr=False)
class Label(Data):
    """A label wrapping some value, similar to a type tag."""

    kind: int
    value: Data

    def __str__(self) -> str:
        return f"{self.kind} {self.value}"

    def __repr__(self) -> str:
        return f"Label({self.kind}, {self.value!r})"


@dataclass(frozen=True, repr=False)
class Function(Data):
    """Bytecode without any surrounding context."""

    lambda_: Any

    def __hash__(self) -> int:
        return hash((Function, id(self.lambda_)))

    def __str__(self) -> str:
        raise TypeError("Can not display naked functions")

    def __repr__(self) -> str:
        return "Function(...)"


@dataclass(repr=False)
class Closure(Data):
    """A lambda together with the variables it captures."""

    lambda_: Any
    captures: list[Data] = field(default_factory=list)

    @classmethod
    def wrap(cls, lambda_: Any) -> Closure:
        """Wrap a lambda in a closure with no captured variables."""
        return cls(lambda_, [])

    def __str__(self) -> str:
        return "Function"

    def __repr__(self) -> str:
        return "Closure(...)"


_LIT_TYPES = (bool, int, float, str, tuple)


@dataclass(frozen=True, eq=False)
class Lit:
    """A literal appearing in source code.

    ``value`` is a ``float``, ``int``, ``bool``, ``str`` or ``()`` for unit.
    """

    value: bool | int | float | str | tuple[()]

    def __post_init__(self) -> None:
        value = self.value
        if not isinstance(value, _LIT_TYPES):
            raise TypeError(f"unsupported literal {value!r}")
        if isinstance(value, tuple) and value != ():
            raise TypeError("only the empty tuple is a literal")
        if isinstance(value, int) and not isinstance(value, bool):
            _check_i64(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lit):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))

    def to_data(self) -> Data:
        """Convert the literal into a runtime value."""
        value = self.value
        if isinstance(value, bool):
            return Boolean(value)
        if isinstance(value, int):
            return Integer(value)
        if isinstance(value, float):
            return Float(value)
        if isinstance(value, str):
            return String(value)
        return Unit()

    def __str__(self) -> str:
        value = self.value
        if isinstance(value, bool):
            return "True" if value else "False"
        if isinstance(value, float):
            return _display_float(value)
        if isinstance(value, tuple):
            return "()"
        return str(value)


@dataclass(frozen=True)
class LitLabel:
    """A labelled literal."""

    kind: int
    value: Lit | LitLabel

    def to_data(self) -> Data:
        """Convert the labelled literal into a runtime label."""
        return Label(self.kind, self.value.to_data())

    def __str__(self) -> str:
        return f"#{self.kind}({self.value})"