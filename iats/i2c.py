"""I2C master command lists and per-bus locking."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from .errors import HalError, InvalidArgError, InvalidStateError

I2C_MASTER_FREQ_HZ = 400000

HAL_I2C_WRITE_FLAG = 0
HAL_I2C_READ_FLAG = 1

ACK_CHECK_EN = True  # master checks the slave's ACK
ACK_CHECK_DIS = False  # master ignores the slave's ACK
ACK_VAL = 0
NACK_VAL = 1

I2C_CMD_TIMEOUT_MS = 10
I2C_BUS_COUNT = 2

_MAX_ADDR = 0x7F


def _check_addr(addr: int) -> None:
    if not 0 <= addr <= _MAX_ADDR:
        raise InvalidArgError(f"I2C address {addr:#x} out of range")


def write_addr(addr: int) -> int:
    """First byte of a write transfer to the 7-bit address ``addr``."""
    _check_addr(addr)
    return (addr << 1) | HAL_I2C_WRITE_FLAG


def read_addr(addr: int) -> int:
    """First byte of a read transfer from the 7-bit address ``addr``."""
    _check_addr(addr)
    return (addr << 1) | HAL_I2C_READ_FLAG


class I2COp(Enum):
    START = "start"
    STOP = "stop"
    WRITE = "write"
    READ = "read"


class _Step(NamedTuple):
    """One queued operation.

    For writes ``ack`` is 1 when the slave's ACK is checked; for reads it is
    the ACK value the master sends back.
    """

    op: I2COp
    data: bytes = b""
    length: int = 0
    ack: int = 0


Transport = Callable[[tuple[_Step, ...], int], bytes]


def _check_ack(ack: int) -> int:
    if ack not in (ACK_VAL, NACK_VAL):
        raise InvalidArgError(f"invalid ACK value {ack}")
    return ack


class I2CCommand:
    """A list of master operations executed in one go on a bus."""

    def __init__(self) -> None:
        self._steps: list[_Step] = []

    @property
    def steps(self) -> tuple[_Step, ...]:
        return tuple(self._steps)

    def start(self) -> None:
        """Queue a START condition."""
        self._steps.append(_Step(I2COp.START))

    def stop(self) -> None:
        """Queue a STOP condition."""
        self._steps.append(_Step(I2COp.STOP))

    def write_byte(self, data: int, ack_en: bool = ACK_CHECK_EN) -> None:
        """Queue the write of one byte."""
        if not 0 <= data <= 0xFF:
            raise InvalidArgError(f"byte value {data} out of range")
        self._steps.append(_Step(I2COp.WRITE, bytes([data]), 1, int(bool(ack_en))))

    def write(self, data: bytes, ack_en: bool = ACK_CHECK_EN) -> None:
        """Queue the write of ``data``."""
        data = bytes(data)
        self._steps.append(_Step(I2COp.WRITE, data, len(data), int(bool(ack_en))))

    def read_byte(self, ack: int = NACK_VAL) -> None:
        """Queue the read of one byte, answering with ``ack``."""
        self._steps.append(_Step(I2COp.READ, length=1, ack=_check_ack(ack)))

    def read(self, length: int, ack: int = ACK_VAL) -> None:
        """Queue the read of ``length`` bytes, answering each with ``ack``."""
        if length <= 0:
            raise InvalidArgError("read length must be positive")
        self._steps.append(_Step(I2COp.READ, length=length, ack=_check_ack(ack)))

    def execute(self, transport: Transport) -> bytes:
        """Run the queued operations through ``transport``; return the bytes read."""
        steps = self.steps
        expected = sum(step.length for step in steps if step.op is I2COp.READ)
        data = bytes(transport(steps, I2C_CMD_TIMEOUT_MS))
        if len(data) != expected:
            raise HalError(f"expected {expected} bytes from the bus, got {len(data)}")
        return data


@dataclass
class I2CBusConfig:
    """Pins and clock of one I2C bus."""

    i2c_bus: int
    sda: int
    scl: int
    freq_hz: int = I2C_MASTER_FREQ_HZ
    is_init: bool = False
    semaphore: threading.Lock | None = field(default=None, repr=False, compare=False)


class I2CBuses:
    """Installed I2C buses, each guarded by a mutex shared by its users."""

    def __init__(self) -> None:
        self._installed: dict[int, I2CBusConfig] = {}
        self._mutexes: dict[int, threading.Lock] = {}

    @staticmethod
    def _check_bus(bus: int) -> None:
        if not 0 <= bus < I2C_BUS_COUNT:
            raise InvalidArgError(f"invalid I2C bus {bus}")

    def init(self, config: I2CBusConfig) -> None:
        """Install the bus described by ``config`` as master."""
        self._check_bus(config.i2c_bus)
        if config.i2c_bus in self._installed:
            raise InvalidStateError(f"I2C bus {config.i2c_bus} is already installed")
        if config.freq_hz <= 0:
            raise InvalidArgError(f"invalid I2C frequency {config.freq_hz}")
        self._installed[config.i2c_bus] = config
        self._mutexes[config.i2c_bus] = threading.Lock()
        config.semaphore = threading.Lock()
        config.is_init = True

    def deinit(self, config: I2CBusConfig) -> None:
        """Uninstall the bus described by ``config``."""
        self._check_bus(config.i2c_bus)
        if config.i2c_bus not in self._installed:
            raise InvalidStateError(f"I2C bus {config.i2c_bus} is not installed")
        del self._installed[config.i2c_bus]
        config.is_init = False

    def _mutex(self, bus: int) -> threading.Lock:
        self._check_bus(bus)
        try:
            return self._mutexes[bus]
        except KeyError:
            raise InvalidStateError(f"I2C bus {bus} was never initialised") from None

    def take(self, bus: int) -> None:
        """Wait for and take exclusive use of ``bus``."""
        self._mutex(bus).acquire()

    def give(self, bus: int) -> None:
        """Release ``bus``."""
        try:
            self._mutex(bus).release()
        except RuntimeError:
            raise InvalidStateError(f"I2C bus {bus} is not taken") from None

    @contextmanager
    def lock(self, bus: int) -> Iterator[None]:
        """Hold ``bus`` for the duration of a ``with`` block."""
        self.take(bus)
        try:
            yield
        finally:
            self.give(bus)