"""GPIO numbering helpers and an in-memory GPIO controller."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .errors import InvalidArgError

HAL_GPIO_NONE = 0xFF
HAL_GPIO_MAX = 63
HAL_GPIO_FULL_MASK = 0xFFFFFFFFFFFFFFFF
HAL_GPIO_USER_MAX = 16
HAL_GPIO_HIGH = 1
HAL_GPIO_LOW = 0
HAL_GPIO_NAME_LENGTH = 4  # includes the terminator

# The DAC drives these pins by default; it is disabled when they become GPIOs.
_DAC_PINS = frozenset({25, 26})


class Direction(IntEnum):
    INPUT = 0
    OUTPUT = 1
    OUTPUT_OD = 2
    BIDIR = 3


class Pull(IntEnum):
    NONE = 0
    UP = 1
    DOWN = 2
    BOTH = 3


class Interrupt(IntEnum):
    POSEDGE = 0
    NEGEDGE = 1
    ANYEDGE = 2
    LOW_LEVEL = 3
    HIGH_LEVEL = 4


def gpio_mask(gpio: int) -> int:
    """Bit mask with only ``gpio`` set."""
    if not 0 <= gpio < 64:
        raise ValueError(f"gpio {gpio} out of range")
    return 1 << gpio


def mask_count(mask: int) -> int:
    """Number of GPIOs set in ``mask``."""
    return bin(mask & HAL_GPIO_FULL_MASK).count("1")


def user_index(gpio: int, user_mask: int) -> int:
    """Position of ``gpio`` among the user GPIOs in ``user_mask``."""
    return mask_count(user_mask & ((1 << gpio) - 1))


def gpio_toa(gpio: int) -> str:
    """Two-digit name of a GPIO, at most three characters."""
    if not 0 <= gpio <= 0xFF:
        raise ValueError(f"gpio {gpio} out of range")
    return f"{gpio:02d}"[: HAL_GPIO_NAME_LENGTH - 1]


IsrFn = Callable[[Any], None]


@dataclass
class _Handler:
    intr: Interrupt
    isr: IsrFn
    data: Any


def _triggers(intr: Interrupt, old: int, new: int) -> bool:
    if intr is Interrupt.POSEDGE:
        return old == HAL_GPIO_LOW and new == HAL_GPIO_HIGH
    if intr is Interrupt.NEGEDGE:
        return old == HAL_GPIO_HIGH and new == HAL_GPIO_LOW
    if intr is Interrupt.ANYEDGE:
        return old != new
    if intr is Interrupt.LOW_LEVEL:
        return new == HAL_GPIO_LOW
    return new == HAL_GPIO_HIGH


class GpioBank:
    """A bank of GPIO lines held in memory, with level-change interrupts."""

    def __init__(self) -> None:
        self.directions: dict[int, Direction] = {}
        self.pulls: dict[int, Pull] = {}
        self.dac_disabled: set[int] = set()
        self._levels: dict[int, int] = {}
        self._handlers: dict[int, _Handler] = {}

    @staticmethod
    def _check(gpio: int) -> None:
        if not 0 <= gpio < HAL_GPIO_MAX:
            raise InvalidArgError(f"invalid gpio {gpio}")

    def setup(self, gpio: int, direction: Direction | int, pull: Pull | int) -> None:
        """Route ``gpio`` to the GPIO matrix with the given direction and pull."""
        self._check(gpio)
        try:
            direction = Direction(direction)
            pull = Pull(pull)
        except ValueError as exc:
            raise InvalidArgError(str(exc)) from exc
        if gpio in _DAC_PINS:
            self.dac_disabled.add(gpio)
        self.directions[gpio] = direction
        self.pulls[gpio] = pull
        if direction is Direction.INPUT:
            if pull is Pull.UP:
                self._levels[gpio] = HAL_GPIO_HIGH
            elif pull is Pull.DOWN:
                self._levels[gpio] = HAL_GPIO_LOW

    def set_level(self, gpio: int, level: int) -> None:
        """Drive ``gpio`` high (non-zero) or low, firing a matching interrupt."""
        self._check(gpio)
        new = HAL_GPIO_HIGH if level else HAL_GPIO_LOW
        old = self._levels.get(gpio, HAL_GPIO_LOW)
        self._levels[gpio] = new
        handler = self._handlers.get(gpio)
        if handler is not None and _triggers(handler.intr, old, new):
            handler.isr(handler.data)

    def get_level(self, gpio: int) -> int:
        self._check(gpio)
        return self._levels.get(gpio, HAL_GPIO_LOW)

    def set_isr(
        self, gpio: int, intr: Interrupt | int, isr: IsrFn | None, data: Any = None
    ) -> None:
        """Install ``isr`` for ``gpio``, or remove the handler when ``isr`` is None."""
        self._check(gpio)
        if isr is None:
            self._handlers.pop(gpio, None)
            return
        try:
            intr = Interrupt(intr)
        except ValueError as exc:
            raise InvalidArgError(str(exc)) from exc
        self._handlers[gpio] = _Handler(intr, isr, data)