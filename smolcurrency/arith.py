"""Small checked integer helpers."""

from __future__ import annotations

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def add_one(a: int) -> int:
    """Return ``a + 1`` for a 64-bit signed integer strictly below its maximum."""
    if not I64_MIN <= a < I64_MAX:
        raise OverflowError(f"{a} + 1 does not fit in a signed 64-bit integer")
    return a + 1


def minimum(v0: int, v1: int) -> int:
    """Return the smaller of two values; on a tie, the second one."""
    return v0 if v0 < v1 else v1


def maximum(v0: int, v1: int) -> int:
    """Return the larger of two values; on a tie, the second one."""
    return v0 if v0 > v1 else v1