"""A managed heap of 64-bit slots."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from typing import TextIO

from passerine.qualm.pointer import Pointer
from passerine.qualm.range_set import RangeSet
from passerine.qualm.slot import Slot


def _require_owned(pointer: Pointer) -> None:
    if not pointer.is_owned():
        raise ValueError("the pointer does not own the data it points to")


class Heap:
    """Slots addressed by pointers, with free space tracked by a ``RangeSet``."""

    def __init__(self) -> None:
        self.data: list[Slot] = []
        self.free_space = RangeSet()

    def draw_free(self, stream: TextIO | None = None) -> None:
        """Write a picture of the free ranges and some statistics."""
        out = sys.stdout if stream is None else stream
        capacity = self.free_space.capacity
        picture = ["|"]
        old = 0
        unused = 0
        for start, length in self.free_space.ranges.items():
            picture.append("_" * (start - old))
            picture.append("X" * length)
            unused += length
            old = start + length
        picture.append("_" * (capacity - old))
        picture.append("|")

        pct = "NaN" if capacity == 0 else f"{unused / capacity * 100.0:.2f}"
        out.write("".join(picture) + "\n")
        out.write("==== INFO ====\n")
        out.write(f"heap size:       {len(self.data) * 8} bytes\n")
        out.write(f"total slots:     {len(self.data)} slots\n")
        out.write(f"disjoint ranges: {len(self.free_space.ranges)} slots\n")
        out.write(f"fragmentation:   {unused} / {capacity} = {pct}%\n")

    def alloc(self, slots: int) -> Pointer:
        """Allocate ``slots`` slots in the smallest free range that fits.

        The allocation holds whatever was there before; write to it next.
        """
        pointer, extra = self.free_space.mark_first(slots)
        self.data.extend(Slot.zero() for _ in range(extra))
        return pointer

    def realloc(self, pointer: Pointer, old: int, new: int) -> Pointer:
        """Resize an allocation of ``old`` slots to ``new`` slots.

        Grows in place when the following slots are free, otherwise moves
        the data to a new allocation. Shrinking truncates the data.
        """
        _require_owned(pointer)

        if new > old:
            tail = pointer.add(old)
            if self.free_space.is_free(tail, new - old):
                self.free_space.mark_smaller(tail.index, new - old)
                return pointer

            new_pointer = self.alloc(new)
            src, dst = pointer.index, new_pointer.index
            self.data[dst:dst + old] = self.data[src:src + old]
            self.free(pointer, old)
            return new_pointer

        if old > new:
            self.free(pointer.add(new), old - new)
        return pointer

    def read_slot(self, pointer: Pointer, slot: int) -> Slot:
        """The slot ``slot`` places after ``pointer``."""
        if slot < 0:
            raise IndexError(f"slot offset {slot} is negative")
        return self.data[pointer.index + slot]

    def read(self, pointer: Pointer, slots: int) -> list[Slot]:
        """The ``slots`` slots starting at ``pointer``."""
        start = pointer.index
        if slots < 0 or start + slots > len(self.data):
            raise IndexError(f"range {start}..{start + slots} is outside the heap")
        return self.data[start:start + slots]

    def write(self, pointer: Pointer, items: Iterable[Slot]) -> None:
        """Overwrite the slots starting at ``pointer`` with ``items``.

        Only an owned pointer may be written through.
        """
        _require_owned(pointer)
        values = list(items)
        start = pointer.index
        if start + len(values) > len(self.data):
            raise IndexError(
                f"range {start}..{start + len(values)} is outside the heap"
            )
        self.data[start:start + len(values)] = values

    def free(self, pointer: Pointer, slots: int) -> None:
        """Release ``slots`` slots at ``pointer``."""
        _require_owned(pointer)
        unneeded = self.free_space.free(pointer, slots)
        if unneeded:
            del self.data[len(self.data) - unneeded:]