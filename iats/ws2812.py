"""Encoding of WS2812 LED colors into remote-control pulse words."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

COLOR_LEVEL_MAX = 255
COLOR_STEP_MIN = -128
COLOR_STEP_MAX = 127

DIVIDER = 4
DURATION_NS = 12.5  # one pulse tick at the undivided clock

PULSE_T0H = int(350 / (DURATION_NS * DIVIDER))
PULSE_T1H = int(900 / (DURATION_NS * DIVIDER))
PULSE_T0L = int(900 / (DURATION_NS * DIVIDER))
PULSE_T1L = int(350 / (DURATION_NS * DIVIDER))
PULSE_TRS = int(50000 / (DURATION_NS * DIVIDER))

MAX_PULSES = 32

_DURATION_MASK = 0x7FFF


@dataclass(frozen=True)
class Color:
    """An RGB color, components sent in r, g, b order."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for value in (self.r, self.g, self.b):
            if not 0 <= value <= COLOR_LEVEL_MAX:
                raise ValueError(f"color level {value} out of range")

    def __bytes__(self) -> bytes:
        return bytes((self.r, self.g, self.b))


TRACKING = Color(COLOR_LEVEL_MAX, 0, COLOR_LEVEL_MAX)
RED = Color(COLOR_LEVEL_MAX, 0, 0)
GREEN = Color(0, COLOR_LEVEL_MAX, 0)
BLUE = Color(0, 0, COLOR_LEVEL_MAX)
PURPLE = Color(COLOR_LEVEL_MAX, 0, COLOR_LEVEL_MAX)
YELLOW = Color(COLOR_LEVEL_MAX, COLOR_LEVEL_MAX, 0)
WHITE = Color(COLOR_LEVEL_MAX, COLOR_LEVEL_MAX, COLOR_LEVEL_MAX)
OFF = Color(0, 0, 0)


def pulse_word(duration0: int, level0: int, duration1: int, level1: int) -> int:
    """Pack two (duration, level) halves into one 32-bit pulse word."""
    for duration in (duration0, duration1):
        if not 0 <= duration <= _DURATION_MASK:
            raise ValueError(f"duration {duration} does not fit in 15 bits")
    for level in (level0, level1):
        if level not in (0, 1):
            raise ValueError(f"level must be 0 or 1, not {level}")
    return duration0 | (level0 << 15) | (duration1 << 16) | (level1 << 31)


_BIT0 = pulse_word(PULSE_T0H, 1, PULSE_T0L, 0)
_BIT1 = pulse_word(PULSE_T1H, 1, PULSE_T1L, 0)


def color_bytes(colors: Iterable[Color]) -> bytes:
    """The bytes sent on the wire for ``colors``."""
    return b"".join(bytes(color) for color in colors)


def encode_pulses(data: bytes) -> list[int]:
    """Pulse words for ``data``, most significant bit first.

    The last bit's low phase is stretched into the reset time, and the result
    is padded with zero words (end markers) to whole blocks of MAX_PULSES,
    with at least one zero word at the end.
    """
    words = [
        _BIT1 if (byte >> (7 - bit)) & 1 else _BIT0
        for byte in data
        for bit in range(8)
    ]
    if words:
        words[-1] = (words[-1] & ~(_DURATION_MASK << 16)) | (PULSE_TRS << 16)
    words.extend([0] * (MAX_PULSES - len(words) % MAX_PULSES))
    return words