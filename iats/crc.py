"""Checksums used on the telemetry links: plain XOR and CRC-8/DVB-S2."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor

_DVB_S2_POLY = 0xD5


def crc_xor(crc: int, data: int) -> int:
    """Fold one byte into an XOR checksum."""
    return (crc ^ data) & 0xFF


def crc_xor_bytes(data: Iterable[int]) -> int:
    """Return the XOR of every byte in ``data``."""
    return reduce(xor, data, 0) & 0xFF


def crc8_dvb_s2(crc: int, data: int) -> int:
    """Fold one byte into a CRC-8/DVB-S2 checksum."""
    crc = (crc ^ data) & 0xFF
    for _ in range(8):
        if crc & 0x80:
            crc = ((crc << 1) ^ _DVB_S2_POLY) & 0xFF
        else:
            crc = (crc << 1) & 0xFF
    return crc


def crc8_dvb_s2_bytes(data: Iterable[int], crc: int = 0) -> int:
    """Return the CRC-8/DVB-S2 of ``data``, continuing from ``crc``."""
    return reduce(crc8_dvb_s2, data, crc & 0xFF)