"""Small numeric and string helpers."""

from __future__ import annotations

from typing import TypeVar

N = TypeVar("N", int, float)

INT8_MIN = -128
INT8_MAX = 127


def constrain(value: N, low: N, high: N) -> N:
    """Clamp ``value`` into ``[low, high]``; ``low`` must be below ``high``."""
    if not low < high:
        raise ValueError("low must be less than high")
    if value < low:
        return low
    if value > high:
        return high
    return value


def constrain_to_i8(value: int) -> int:
    """Clamp ``value`` into the signed 8-bit range."""
    return constrain(value, INT8_MIN, INT8_MAX)


def has_prefix(s: str, prefix: str) -> bool:
    """True if ``s`` starts with ``prefix``."""
    return s.startswith(prefix)