"""Bounded, NUL-terminated string copy."""

from __future__ import annotations


def strput(src: str | bytes, dst_size: int) -> bytes:
    """Return the bytes a ``dst_size`` buffer would hold after copying ``src``.

    The result is always NUL-terminated unless ``dst_size`` is zero, and its
    length is the number of bytes written, terminator included.
    """
    if dst_size < 0:
        raise ValueError("dst_size must not be negative")
    if dst_size == 0:
        return b""
    raw = src.encode() if isinstance(src, str) else bytes(src)
    return raw[: dst_size - 1] + b"\0"