"""Unsigned LEB128 varints for 16 and 32 bit values."""

from __future__ import annotations


def _encode(value: int, size: int, bits: int) -> bytes:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"value {value} does not fit in {bits} bits")
    out = bytearray()
    for _ in range(size):
        if value < 0x80:
            out.append(value)
            return bytes(out)
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    raise ValueError(f"value does not fit in {size} bytes")


def _decode(data: bytes, type_size: int) -> tuple[int, int]:
    value = 0
    shift = 0
    # A type of N bytes needs at most N + 1 encoded bytes.
    for used, b in enumerate(data[: type_size + 1], start=1):
        value |= (b & 0x7F) << shift
        if b < 0x80:
            return value & ((1 << (8 * type_size)) - 1), used
        shift += 7
    raise ValueError("data does not hold a valid uvarint")


def encode16(value: int, size: int = 3) -> bytes:
    """Encode a 16-bit value into at most ``size`` bytes."""
    return _encode(value, size, 16)


def encode32(value: int, size: int = 5) -> bytes:
    """Encode a 32-bit value into at most ``size`` bytes."""
    return _encode(value, size, 32)


def decode16(data: bytes) -> tuple[int, int]:
    """Decode a 16-bit value; return ``(value, bytes_used)``."""
    return _decode(data, 2)


def decode32(data: bytes) -> tuple[int, int]:
    """Decode a 32-bit value; return ``(value, bytes_used)``."""
    return _decode(data, 4)