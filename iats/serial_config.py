"""Serial port configuration."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

SERIAL_UNUSED_GPIO = -1


class Parity(IntEnum):
    DISABLE = 0
    EVEN = 1
    ODD = 2


class StopBits(IntEnum):
    ONE = 0
    TWO = 1


class HalfDuplexMode(IntEnum):
    NONE = 0
    RX = 1
    TX = 2


ByteCallback = Callable[[Any, int, Any], None]


@dataclass
class SerialPortConfig:
    """Settings for opening a serial port; set ``tx_pin == rx_pin`` for half duplex."""

    baud_rate: int
    tx_pin: int = SERIAL_UNUSED_GPIO
    rx_pin: int = SERIAL_UNUSED_GPIO
    tx_buffer_size: int = 0
    rx_buffer_size: int = 0
    parity: Parity = Parity.DISABLE
    stop_bits: StopBits = StopBits.ONE
    inverted: bool = False
    byte_callback: ByteCallback | None = None
    byte_callback_data: Any = None

    def is_half_duplex(self) -> bool:
        return self.tx_pin == self.rx_pin and self.tx_pin != SERIAL_UNUSED_GPIO