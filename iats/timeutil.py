"""Time unit conversions and tick arithmetic."""

from __future__ import annotations

import time

MILLIS_PER_SEC = 1000
MICROS_PER_SEC = 1000000

# Scheduler tick rate of 100 Hz.
DEFAULT_TICK_PERIOD_MS = 10

_TICK_MASK = 0xFFFFFFFF


def millis_to_ticks(ms: int, tick_period_ms: int = DEFAULT_TICK_PERIOD_MS) -> int:
    return ms // tick_period_ms


def secs_to_ticks(s: int, tick_period_ms: int = DEFAULT_TICK_PERIOD_MS) -> int:
    return millis_to_ticks(MILLIS_PER_SEC * s, tick_period_ms)


def freq_to_ticks(hz: int, tick_period_ms: int = DEFAULT_TICK_PERIOD_MS) -> int:
    return millis_to_ticks(MILLIS_PER_SEC // hz, tick_period_ms)


def ticks_to_millis(ticks: int, tick_period_ms: int = DEFAULT_TICK_PERIOD_MS) -> int:
    return ticks * tick_period_ms


def millis_to_micros(ms: int) -> int:
    return ms * 1000


def secs_to_micros(s: int) -> int:
    return millis_to_micros(s * 1000)


def ticks_elapsed(since: int, now: int, duration: int) -> bool:
    """True if ``since`` is unset (0) or ``duration`` ticks have passed, with wraparound."""
    return since == 0 or ((now - since) & _TICK_MASK) >= duration


def cycle_every_ms(now_ms: int, ms: int, n: int) -> int:
    """Index in ``range(n)`` that advances every ``ms`` milliseconds."""
    return (now_ms // ms) % n


def micros_now() -> int:
    """Monotonic time in microseconds."""
    return time.monotonic_ns() // 1000


def micros_delay(delay: int) -> None:
    """Busy-wait for ``delay`` microseconds."""
    end = micros_now() + delay
    while micros_now() < end:
        pass