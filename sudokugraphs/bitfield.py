"""Bit operations on 64-bit fields."""

from __future__ import annotations

WIDTH = 64
_MASK = (1 << WIDTH) - 1


def _check(field: int, n: int) -> None:
    if not 0 <= n < WIDTH:
        raise ValueError(f"bit index {n} outside 0..{WIDTH - 1}")
    if not 0 <= field <= _MASK:
        raise ValueError(f"field {field} does not fit in {WIDTH} bits")


def set_bit(field: int, n: int) -> int:
    """Return ``field`` with bit ``n`` set."""
    _check(field, n)
    return field | (1 << n)


def clear_bit(field: int, n: int) -> int:
    """Return ``field`` with bit ``n`` cleared."""
    _check(field, n)
    return field & ~(1 << n) & _MASK


def is_bit_set(field: int, n: int) -> bool:
    """Tell whether bit ``n`` of ``field`` is set."""
    _check(field, n)
    return bool((field >> n) & 1)