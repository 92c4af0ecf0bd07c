"""Connectionless broadcast of payloads inside raw 802.11 frames."""

from __future__ import annotations

from collections.abc import Callable

P2P_WIFI_CHANNEL = 14
RAW_WIFI_DATA_SIZE = 32
RAW_WIFI_CHECKSUM_SIZE = 4  # trails the payload on reception
HW_ADDR_LENGTH = 6
MAX_PAYLOAD_SIZE = 512

# Data frame type in the reserved range bits, since valid frames can't be sent raw.
_FRAME_CONTROL = b"\x58\x00"
_BROADCAST = b"\xff" * HW_ADDR_LENGTH


def build_frame(payload: bytes) -> bytes:
    """A broadcast frame carrying ``payload`` after the 32-byte header."""
    payload = bytes(payload)
    if len(payload) > MAX_PAYLOAD_SIZE:
        raise ValueError(f"payload of {len(payload)} bytes exceeds {MAX_PAYLOAD_SIZE}")
    header = (
        _FRAME_CONTROL
        + b"\x00\x00"  # duration
        + _BROADCAST  # destination
        + _BROADCAST  # source
        + _BROADCAST  # BSSID
        + b"\x00\x00"  # sequence / fragment
    )
    header += bytes(RAW_WIFI_DATA_SIZE - len(header))  # timestamp, zeroed by hardware
    return header + payload


def extract_payload(packet: bytes, sig_len: int) -> bytes | None:
    """Payload of a received frame of signal length ``sig_len``, or None if too short."""
    if sig_len <= RAW_WIFI_DATA_SIZE + RAW_WIFI_CHECKSUM_SIZE:
        return None
    size = sig_len - RAW_WIFI_DATA_SIZE - RAW_WIFI_CHECKSUM_SIZE
    return bytes(packet[RAW_WIFI_DATA_SIZE:RAW_WIFI_DATA_SIZE + size])


Callback = Callable[["P2PLink", bytes], None]


class P2PLink:
    """Broadcasts frames through ``send`` and hands received payloads to ``callback``."""

    def __init__(self, send: Callable[[bytes], object], callback: Callback | None = None) -> None:
        self._send = send
        self.callback = callback

    def broadcast(self, data: bytes) -> None:
        self._send(build_frame(data))

    def receive(self, packet: bytes, sig_len: int) -> bytes | None:
        """Process a captured frame; return its payload, or None if it had none."""
        payload = extract_payload(packet, sig_len)
        if payload is not None and self.callback is not None:
            self.callback(self, payload)
        return payload