"""Tagged copy-on-write pointers into a managed heap."""

from __future__ import annotations

from dataclasses import dataclass

OWNED = 0x8000000000000000
POINTER = 0x7FFFFFFFFFFFFFFF


@dataclass(frozen=True)
class Pointer:
    """A heap index whose top bit records whether the data is owned."""

    bits: int

    @classmethod
    def owned(cls, index: int) -> Pointer:
        """Create an owned pointer to ``index``."""
        if not 0 <= index <= POINTER:
            raise ValueError(f"pointer index {index} is out of range")
        return cls(OWNED | index)

    @property
    def index(self) -> int:
        """The slot index the pointer refers to."""
        return self.bits & POINTER

    def add(self, slots: int) -> Pointer:
        """Offset the pointer by ``slots``, keeping its ownership."""
        new_index = self.index + slots
        if not 0 <= new_index <= POINTER:
            raise ValueError(f"pointer index {new_index} is out of range")
        return Pointer((self.bits & OWNED) | new_index)

    def is_borrowed(self) -> bool:
        return self.bits & OWNED == 0

    def is_owned(self) -> bool:
        return self.bits & OWNED == OWNED

    def borrow(self) -> Pointer:
        """Demote to a borrowed pointer to the same index."""
        return Pointer(self.bits & POINTER)