"""Lookup of user-configurable GPIOs and of the pins behind each port role."""

from __future__ import annotations

from enum import IntEnum
from itertools import islice

from .gpio import HAL_GPIO_MAX, HAL_GPIO_NONE, gpio_mask


class GpioTag(IntEnum):
    INPUT_TX = 0
    INPUT_RX = 1
    INPUT_BIDIR = 2
    OUTPUT_TX = 3
    OUTPUT_RX = 4
    OUTPUT_BIDIR = 5


_RX_TAGS = frozenset({GpioTag.INPUT_RX, GpioTag.OUTPUT_RX})


def get_configurable_at(idx: int, user_mask: int) -> int:
    """The ``idx``-th user GPIO in ``user_mask``, or HAL_GPIO_NONE."""
    users = (g for g in range(HAL_GPIO_MAX) if user_mask & gpio_mask(g))
    return next(islice(users, idx, None), HAL_GPIO_NONE)


def get_by_tag(tag: GpioTag | int, tx_gpio: int, rx_gpio: int) -> int:
    """GPIO serving the role ``tag``: bidirectional roles share the TX pin."""
    return rx_gpio if GpioTag(tag) in _RX_TAGS else tx_gpio