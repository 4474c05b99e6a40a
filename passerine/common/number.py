"""Variable-length encoding of non-negative integers inside byte streams.

Each encoded byte carries seven data bits. The byte that ends a number has
its high bit set, so numbers can be spliced directly into bytecode.
"""

from __future__ import annotations

from collections.abc import Iterable

_CHUNK = 0b1000_0000


def split_number(n: int) -> bytes:
    """Encode ``n`` as big-endian 7-bit groups, flagging the final byte."""
    if n < 0:
        raise ValueError(f"cannot encode negative number {n}")

    groups = []
    remaining = n
    while True:
        remaining, low = divmod(remaining, _CHUNK)
        groups.append(low if groups else _CHUNK + low)
        if remaining == 0:
            break

    return bytes(reversed(groups))


def build_number(data: Iterable[int]) -> tuple[int, int]:
    """Decode the next number from ``data``.

    Returns ``(value, consumed)``. Decoding never fails: an empty stream or a
    stream that ends without a terminating byte yields whatever has been
    accumulated so far.
    """
    value = 0
    consumed = 0
    for byte in data:
        consumed += 1
        value *= _CHUNK
        if byte >= _CHUNK:
            value += byte - _CHUNK
            break
        value += byte
    return value, consumed