"""Bookkeeping of the unallocated ranges of a managed heap."""

from __future__ import annotations

from sortedcontainers import SortedDict, SortedSet

from passerine.qualm.pointer import Pointer


class RangeSet:
    """Tracks the free ranges of slots in a heap of ``capacity`` slots.

    ``ranges`` maps the start of each free range to its length. A second
    index maps each length to the starts of the free ranges of that length,
    so the smallest range that fits a request can be found quickly.
    Neighbouring free ranges are always merged, and a free range that would
    reach the end of the heap shrinks the heap instead.
    """

    def __init__(self) -> None:
        self.capacity = 0
        self.ranges: SortedDict = SortedDict()
        self._by_size: SortedDict = SortedDict()

    @classmethod
    def with_free_capacity(cls, slots: int) -> RangeSet:
        """A range set over a pre-allocated heap of ``slots`` free slots."""
        range_set = cls()
        range_set.add_free_capacity(slots)
        return range_set

    def add_free_capacity(self, slots: int) -> None:
        """Grow the heap by ``slots`` free slots."""
        self.free(Pointer.owned(self.capacity), slots)
        self.capacity += slots

    def mark_first(self, slots: int) -> tuple[Pointer, int]:
        """Reserve ``slots`` slots.

        Returns the pointer to the reservation and the number of slots the
        backing storage must grow by to hold it. The smallest free range
        that fits is used first; otherwise a free range at the end of the
        heap is extended, and failing that the heap grows.
        """
        if slots < 1:
            raise ValueError("must reserve at least one slot")

        position = self._by_size.bisect_left(slots)
        if position < len(self._by_size):
            _size, starts = self._by_size.peekitem(position)
            index = starts[0]
            self.mark_smaller(index, slots)
            return Pointer.owned(index), 0

        if self.ranges:
            tail, size = self.ranges.peekitem(-1)
            if tail + size == self.capacity:
                self._mark(tail)
                remaining = slots - size
                self.capacity += remaining
                return Pointer.owned(tail), remaining

        pointer = Pointer.owned(self.capacity)
        self.capacity += slots
        return pointer, slots

    def mark_smaller(self, index: int, slots: int) -> None:
        """Reserve ``slots`` slots of the free range starting at ``index``.

        Whatever is left of the range is returned to the free set.
        """
        size = self.ranges.get(index)
        if size is None:
            raise KeyError(f"no free range starts at slot {index}")
        if slots > size:
            raise ValueError(
                f"free range at slot {index} holds {size} slots, not {slots}"
            )
        self._mark(index)
        if slots < size:
            self.free(Pointer.owned(index).add(slots), size - slots)

    def _mark(self, index: int) -> int:
        """Remove the free range starting at ``index``; return its length."""
        try:
            size = self.ranges.pop(index)
        except KeyError:
            raise KeyError(f"no free range starts at slot {index}") from None
        starts = self._by_size[size]
        starts.remove(index)
        if not starts:
            del self._by_size[size]
        return size

    def is_free(self, pointer: Pointer, slots: int) -> bool:
        """Whether ``slots`` slots starting at ``pointer`` are all free."""
        index = pointer.index
        position = self.ranges.bisect_right(index) - 1
        if position < 0:
            return False
        start, length = self.ranges.peekitem(position)
        return start + length >= index + slots

    def free(self, pointer: Pointer, slots: int) -> int:
        """Return ``slots`` slots at ``pointer`` to the free set.

        Returns the number of slots the heap shrank by, which is non-zero
        only when the freed range reaches the end of the heap.
        """
        if slots < 1:
            raise ValueError("must free at least one slot")
        index = pointer.index

        position = self.ranges.bisect_left(index)
        if position < len(self.ranges) and self.ranges.peekitem(position)[0] == index:
            raise ValueError(f"slot {index} is already free")

        if position > 0:
            before, size = self.ranges.peekitem(position - 1)
            if before + size == index:
                self._mark(before)
                index = before
                slots += size

        position = self.ranges.bisect_left(index)
        if position < len(self.ranges):
            after, size = self.ranges.peekitem(position)
            if index + slots == after:
                self._mark(after)
                slots += size

        if index + slots == self.capacity:
            self.capacity -= slots
            return slots

        self._by_size.setdefault(slots, SortedSet()).add(index)
        self.ranges[index] = slots
        return 0