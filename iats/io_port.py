"""A generic byte I/O endpoint built from read, write and flags callables."""

from __future__ import annotations

import io
from collections.abc import Callable
from enum import IntFlag


class IOFlags(IntFlag):
    HALF_DUPLEX = 1 << 0


ReadFn = Callable[[int, int], bytes]
WriteFn = Callable[[bytes], int]
FlagsFn = Callable[[], IOFlags]


class IO:
    """Byte endpoint; any of the callables may be missing."""

    def __init__(
        self,
        read: ReadFn | None = None,
        write: WriteFn | None = None,
        flags: FlagsFn | None = None,
    ) -> None:
        self._read = read
        self._write = write
        self._flags = flags

    def read(self, size: int, timeout: int = 0) -> bytes:
        """Read up to ``size`` bytes, waiting at most ``timeout`` ticks."""
        if self._read is None:
            raise io.UnsupportedOperation("endpoint is not readable")
        return self._read(size, timeout)

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""
        if self._write is None:
            raise io.UnsupportedOperation("endpoint is not writable")
        return self._write(data)

    def get_flags(self) -> IOFlags:
        if self._flags is None:
            return IOFlags(0)
        return IOFlags(self._flags())

    def is_half_duplex(self) -> bool:
        return bool(self.get_flags() & IOFlags.HALF_DUPLEX)