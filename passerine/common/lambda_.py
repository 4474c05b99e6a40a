"""Chunks of bytecode, their constants and captured variables."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from passerine.common.data import Data
from passerine.common.number import build_number
from passerine.common.opcode import Opcode, opcode_from_byte
from passerine.common.span import Span

USIZE_MAX = 2**64 - 1


@dataclass(frozen=True)
class Local:
    """A captured variable that lives on the stack of the current scope."""

    index: int

    def __repr__(self) -> str:
        return f"Local({self.index})"


@dataclass(frozen=True)
class Nonlocal:
    """A captured variable that is an upvalue of the enclosing scope."""

    index: int

    def __repr__(self) -> str:
        return f"Nonlocal({self.index})"


Captured = Local | Nonlocal


@dataclass
class Lambda:
    """A single interpretable chunk of bytecode, such as a function body."""

    decls: int = 0
    code: bytearray = field(default_factory=bytearray)
    spans: list[tuple[int, Span]] = field(default_factory=list)
    constants: list[Data] = field(default_factory=list)
    captures: list[Captured] = field(default_factory=list)

    def args_safe(self, index: int, bounds: Iterable[int]) -> tuple[list[int], int] | None:
        """Decode one argument per bound starting at ``index``.

        Returns ``(arguments, bytes_consumed)``, or ``None`` if any argument
        is not strictly below its bound.
        """
        offset = 0
        numbers = []
        for bound in bounds:
            arg, consumed = build_number(self.code[index + offset:])
            if arg >= bound:
                return None
            numbers.append(arg)
            offset += consumed
        return numbers, offset

    def bounds(self, opcode: Opcode) -> list[int]:
        """Exclusive upper bounds of the arguments that ``opcode`` takes."""
        match opcode:
            case Opcode.Con | Opcode.Closure:
                return [len(self.constants)]
            case Opcode.Save | Opcode.Load | Opcode.Return:
                return [self.decls]
            case Opcode.SaveCap | Opcode.LoadCap:
                return [len(self.captures)]
            case Opcode.Tuple | Opcode.UnTuple:
                return [USIZE_MAX]
            case (
                Opcode.NotInit
                | Opcode.Del
                | Opcode.Copy
                | Opcode.Call
                | Opcode.Print
                | Opcode.Label
                | Opcode.UnData
                | Opcode.UnLabel
                | Opcode.Noop
            ):
                return []
            case _:
                raise ValueError(f"no argument bounds are defined for {opcode.name}")

    def verify(self) -> bool:
        """Check that every opcode and its arguments are within bounds."""
        index = 0
        while index < len(self.code):
            opcode = opcode_from_byte(self.code[index])
            if opcode is None:
                return False
            index += 1
            result = self.args_safe(index, self.bounds(opcode))
            if result is None:
                return False
            index += result[1]
        return True

    def emit(self, op: Opcode) -> None:
        """Append an opcode byte."""
        self.code.append(int(op))

    def emit_bytes(self, data: Iterable[int]) -> None:
        """Append raw bytes."""
        self.code.extend(data)

    def emit_span(self, span: Span) -> None:
        """Tie the next emitted opcode to ``span``."""
        self.spans.append((len(self.code), span))

    def demit(self) -> None:
        """Remove the last emitted byte, if any."""
        if self.code:
            self.code.pop()

    def index_data(self, data: Data) -> int:
        """Index of ``data`` in the constant table, adding it if absent."""
        try:
            return self.constants.index(data)
        except ValueError:
            self.constants.append(data)
            return len(self.constants) - 1

    def index_span(self, index: int) -> Span:
        """The nearest span at or before bytecode position ``index``."""
        best = None
        for position, span in self.spans:
            if position > index:
                break
            best = span
        if best is None:
            raise LookupError(f"no span at or before bytecode index {index}")
        return best

    def __str__(self) -> str:
        out = ["Dumping Constants:"]
        out.extend(repr(constant) for constant in self.constants)
        out.append("Dumping Captures:")
        out.extend(repr(capture) for capture in self.captures)
        out.append(f"Dumping Variables: {self.decls}")
        out.append("Dumping Bytecode:")
        out.append("Inst\tArgs")

        index = 0
        while index < len(self.code):
            opcode = opcode_from_byte(self.code[index])
            if opcode is None:
                out.append(f"Invalid Opcode at index {index}")
                break
            index += 1
            result = self.args_safe(index, self.bounds(opcode))
            if result is None:
                out.append(f"{opcode.name}\t\nInvalid Opcode argument at index {index}")
                break
            args, consumed = result
            index += consumed
            out.append(f"{opcode.name}\t" + "\t".join(str(arg) for arg in args))

        return "\n".join(out) + "\n"