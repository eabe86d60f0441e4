"""Bit operations: most significant bit lookup and byte order swapping."""

from __future__ import annotations

import operator
import struct
from collections.abc import Iterable
from typing import Any

__all__ = ["U128", "index_of_last_bit", "byteswap", "byteswap_all"]

#: Format name for 128-bit unsigned integers, swapped as two 64-bit halves.
U128 = "u128"

# One-byte values and strings have no byte order to swap.
_NOOP_FORMATS = frozenset("bBc?s")
# Multi-byte struct codes, always used with standard sizes.
_SWAP_FORMATS = frozenset("hHiIlLqQefd")

_MASK64 = (1 << 64) - 1


def index_of_last_bit(value: int) -> int:
    """Return the position of the most significant set bit, or -1 for zero."""
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return value.bit_length() - 1


def byteswap(value: Any, fmt: str) -> Any:
    """Return ``value`` with its byte order reversed.

    ``fmt`` is a :mod:`struct` format character using standard sizes
    (``'H'`` is 16 bits, ``'I'`` and ``'l'`` 32 bits, ``'Q'`` 64 bits,
    ``'f'`` and ``'d'`` IEEE floats) or :data:`U128`. One-byte formats and
    strings (``'s'``) are returned unchanged. A 128-bit value is swapped
    within each of its 64-bit halves; the halves keep their places.
    """
    if fmt in _NOOP_FORMATS:
        return value
    if fmt == U128:
        value = operator.index(value)
        if not 0 <= value < (1 << 128):
            raise ValueError(f"value {value} does not fit into 128 bits")
        high = byteswap(value >> 64, "Q")
        low = byteswap(value & _MASK64, "Q")
        return (high << 64) | low
    if fmt not in _SWAP_FORMATS:
        raise ValueError(f"unsupported format {fmt!r}")
    try:
        return struct.unpack(">" + fmt, struct.pack("<" + fmt, value))[0]
    except struct.error as exc:
        raise ValueError(f"cannot swap {value!r} as {fmt!r}: {exc}") from exc


def byteswap_all(values: Iterable[Any], fmt: str) -> list[Any]:
    """Return a list holding every value byte-swapped with ``fmt``."""
    return [byteswap(value, fmt) for value in values]