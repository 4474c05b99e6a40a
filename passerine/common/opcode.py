"""Bytecode opcodes."""

from __future__ import annotations

from enum import IntEnum


class Opcode(IntEnum):
    """A single bytecode operation, stored as one byte."""

    Con = 0
    NotInit = 1
    Del = 2
    FFICall = 3
    Copy = 4
    Capture = 5
    Save = 6
    SaveCap = 7
    Load = 8
    LoadCap = 9
    Call = 10
    Return = 11
    Closure = 12
    Print = 13
    Handler = 14
    Effect = 15
    Label = 16
    Tuple = 17
    Record = 18
    UnData = 19
    UnLabel = 20
    UnTuple = 21
    Add = 22
    Sub = 23
    Neg = 24
    Mul = 25
    Div = 26
    Rem = 27
    Pow = 28
    Noop = 29  # must always be last


def opcode_from_byte(byte: int) -> Opcode | None:
    """Decode a raw byte, returning ``None`` if it is not a valid opcode."""
    if 0 <= byte <= Opcode.Noop:
        return Opcode(byte)
    return None