"""SPI bus and device configuration and transactions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .errors import HalError, InvalidArgError

QUEUE_SIZE = 4
_UNUSED_PIN = -1


@dataclass(frozen=True)
class SpiBusConfig:
    """Pins of an SPI bus; quad pins are unused and transfer size is the default."""

    miso: int
    mosi: int
    sclk: int
    quadwp: int = _UNUSED_PIN
    quadhd: int = _UNUSED_PIN
    max_transfer_sz: int = 0


@dataclass(frozen=True)
class SpiDeviceConfig:
    """A device on an SPI bus."""

    cs: int
    clock_speed_hz: int
    spi_mode: int = 0
    command_bits: int = 0
    address_bits: int = 0
    queue_size: int = QUEUE_SIZE

    def __post_init__(self) -> None:
        if not 0 <= self.spi_mode <= 3:
            raise ValueError(f"SPI mode must be 0-3, not {self.spi_mode}")
        if self.clock_speed_hz <= 0:
            raise ValueError("clock speed must be positive")


@dataclass(frozen=True)
class SpiTransaction:
    """One transfer; lengths are in bits and ``rxlength`` 0 means ``length``."""

    cmd: int
    addr: int
    length: int
    rxlength: int
    tx: bytes

    @property
    def rx_size(self) -> int:
        """Number of bytes received."""
        return ((self.rxlength or self.length) + 7) // 8


Transfer = Callable[[SpiTransaction], bytes]


class SpiDevice:
    """An SPI device whose transactions are carried out by ``transfer``."""

    def __init__(self, config: SpiDeviceConfig, transfer: Transfer) -> None:
        self.config = config
        self._transfer = transfer

    def _run(self, cmd: int, addr: int, tx: bytes, length: int, rxlength: int) -> bytes:
        if not 0 <= cmd <= 0xFFFF:
            raise InvalidArgError(f"command {cmd} does not fit in 16 bits")
        if not 0 <= addr <= 0xFFFFFFFF:
            raise InvalidArgError(f"address {addr} does not fit in 32 bits")
        transaction = SpiTransaction(cmd, addr, length, rxlength, tx)
        data = bytes(self._transfer(transaction))
        if len(data) < transaction.rx_size:
            raise HalError(
                f"expected {transaction.rx_size} bytes from the device, got {len(data)}"
            )
        return data[: transaction.rx_size]

    def transmit(self, cmd: int, addr: int, tx: bytes, rx_size: int = 0) -> bytes:
        """Send ``tx`` and return the bytes received.

        ``rx_size`` must not exceed ``len(tx)``; 0 means the same as ``len(tx)``.
        """
        tx = bytes(tx)
        if not 0 <= rx_size <= len(tx):
            raise InvalidArgError(f"rx_size {rx_size} must be between 0 and {len(tx)}")
        return self._run(cmd, addr, tx, len(tx) * 8, rx_size * 8)

    def transmit_u8(self, cmd: int, addr: int, c: int) -> int:
        """Send one byte and return the byte received."""
        if not 0 <= c <= 0xFF:
            raise InvalidArgError(f"byte value {c} out of range")
        return self._run(cmd, addr, bytes([c]), 8, 8)[0]

    def transmit_bits(
        self, cmd: int, addr: int, tx: bytes, tx_bits: int, rx_bits: int = 0
    ) -> bytes:
        """Send the first ``tx_bits`` bits of ``tx`` and receive ``rx_bits`` bits."""
        tx = bytes(tx)
        if tx_bits < 0 or rx_bits < 0:
            raise InvalidArgError("bit counts must not be negative")
        if len(tx) * 8 < tx_bits:
            raise InvalidArgError(f"{len(tx)} bytes cannot hold {tx_bits} bits")
        return self._run(cmd, addr, tx, tx_bits, rx_bits)