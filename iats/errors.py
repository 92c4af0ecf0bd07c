"""Error types raised by the hardware abstraction layer."""

from __future__ import annotations

HAL_ERR_NONE = 0


class HalError(Exception):
    """A failed hardware operation; ``code`` holds the driver error code."""

    code: int = -1

    def __init__(self, message: str | None = None, *, code: int | None = None) -> None:
        if code is not None:
            self.code = code
        super().__init__(message or f"HAL error {self.code:#x}")


class NoMemoryError(HalError):
    code = 0x101


class InvalidArgError(HalError):
    code = 0x102


class InvalidStateError(HalError):
    code = 0x103


class NotFoundError(HalError):
    code = 0x105


class NotSupportedError(HalError):
    code = 0x106


_BY_CODE: dict[int, type[HalError]] = {
    cls.code: cls
    for cls in (NoMemoryError, InvalidArgError, InvalidStateError, NotFoundError, NotSupportedError)
}


def check(err: int) -> None:
    """Raise the matching :class:`HalError` unless ``err`` means success."""
    if err == HAL_ERR_NONE:
        return
    raise _BY_CODE.get(err, HalError)(code=err)