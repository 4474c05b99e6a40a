"""A 64-bit machine word that can be read as several types."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from passerine.qualm.pointer import Pointer

_U64_MASK = 2**64 - 1


@dataclass(frozen=True)
class Slot:
    """A raw 64-bit word; the reader decides how to interpret it."""

    bits: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.bits <= _U64_MASK:
            raise ValueError(f"{self.bits} does not fit in 64 bits")

    @classmethod
    def zero(cls) -> Slot:
        return cls(0)

    @classmethod
    def from_int(cls, value: int) -> Slot:
        """Store a signed or unsigned 64-bit integer."""
        if not -(2**63) <= value <= _U64_MASK:
            raise OverflowError(f"{value} does not fit in a 64-bit slot")
        return cls(value & _U64_MASK)

    @classmethod
    def from_float(cls, value: float) -> Slot:
        """Store the bit pattern of a double."""
        (bits,) = struct.unpack("<Q", struct.pack("<d", value))
        return cls(bits)

    def to_pointer(self) -> Pointer:
        return Pointer(self.bits)

    def to_borrowed_pointer(self) -> Pointer:
        return Pointer(self.bits).borrow()

    def to_u64(self) -> int:
        return self.bits

    def to_i64(self) -> int:
        return self.bits - (1 << 64) if self.bits >> 63 else self.bits

    def to_f64(self) -> float:
        (value,) = struct.unpack("<d", struct.pack("<Q", self.bits))
        return value

    def to_bool(self, position: int) -> bool:
        """The bit at ``position``, reading the slot as a bitfield."""
        if not 0 <= position < 64:
            raise ValueError(f"bit position {position} is out of range")
        mask = 1 << position
        return self.bits & mask == mask

    def to_byte(self, position: int) -> int:
        """The byte at ``position``, least significant first."""
        if not 0 <= position < 8:
            raise ValueError(f"byte position {position} is out of range")
        return (self.bits >> (position * 8)) & 0xFF