"""Small shared helpers."""

from __future__ import annotations

_U64_MAX = 2**64 - 1


def add(left: int, right: int) -> int:
    """Sum of two unsigned 64-bit integers; raises when out of range."""
    if left < 0 or right < 0:
        raise ValueError("operands must be non-negative")
    total = left + right
    if total > _U64_MAX:
        raise OverflowError("sum exceeds the unsigned 64-bit range")
    return total