"""PWM outputs multiplexed over a pool of LED-controller timers and channels.

The controller has two speed modes, each with four timers and eight
channels. Channels that share a frequency and duty resolution share a timer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .errors import InvalidArgError, InvalidStateError, NotFoundError, NotSupportedError
from .gpio import HAL_GPIO_NONE

SPEED_COUNT = 2
TIMER_NUM_COUNT = 4
CHANNEL_NUM_COUNT = 8
TIMER_COUNT = SPEED_COUNT * TIMER_NUM_COUNT
CHANNEL_COUNT = SPEED_COUNT * CHANNEL_NUM_COUNT

MIN_DUTY_RESOLUTION_BITS = 10
MAX_DUTY_RESOLUTION_BITS = 15


class LedcDriver(Protocol):
    """Low-level LED controller operations; failures raise :class:`HalError`."""

    def fade_func_install(self) -> None:
        """Enable hardware fading."""

    def timer_config(self, speed: int, timer_num: int, duty_resolution_bits: int, freq_hz: int) -> None:
        """Configure one timer."""

    def channel_config(self, gpio: int, speed: int, channel: int, timer_num: int, duty: int) -> None:
        """Attach a channel to a GPIO and a timer."""

    def stop(self, speed: int, channel: int, idle_level: int) -> None:
        """Stop a channel's output, leaving it at ``idle_level``."""

    def timer_rst(self, speed: int, timer_num: int) -> None:
        """Reset a timer."""

    def set_fade_with_time(self, speed: int, channel: int, duty: int, ms: int) -> None:
        """Prepare a fade to ``duty`` over ``ms`` milliseconds."""

    def fade_start(self, speed: int, channel: int) -> None:
        """Start the prepared fade without waiting for it."""

    def set_duty(self, speed: int, channel: int, duty: int) -> None:
        """Prepare a new duty value."""

    def update_duty(self, speed: int, channel: int) -> None:
        """Apply the prepared duty value."""


@dataclass
class LedcTimer:
    freq_hz: int
    duty_resolution_bits: int


@dataclass
class LedcChannel:
    gpio: int
    timer_num: int
    duty: int = 0
    fade_ms: int = 0
    running: bool = True
    pending_duty: int | None = None
    pending_fade_ms: int = 0


@dataclass
class MemoryLedcDriver:
    """An LED controller kept in memory, recording what was configured."""

    fade_installed: bool = False
    timers: dict[tuple[int, int], LedcTimer] = field(default_factory=dict)
    channels: dict[tuple[int, int], LedcChannel] = field(default_factory=dict)
    timer_resets: list[tuple[int, int]] = field(default_factory=list)

    def _channel(self, speed: int, channel: int) -> LedcChannel:
        try:
            return self.channels[(speed, channel)]
        except KeyError:
            raise InvalidStateError(f"channel {speed}/{channel} is not configured") from None

    def fade_func_install(self) -> None:
        self.fade_installed = True

    def timer_config(self, speed: int, timer_num: int, duty_resolution_bits: int, freq_hz: int) -> None:
        if freq_hz <= 0:
            raise InvalidArgError(f"invalid frequency {freq_hz}")
        self.timers[(speed, timer_num)] = LedcTimer(freq_hz, duty_resolution_bits)

    def channel_config(self, gpio: int, speed: int, channel: int, timer_num: int, duty: int) -> None:
        if (speed, timer_num) not in self.timers:
            raise InvalidStateError(f"timer {speed}/{timer_num} is not configured")
        self.channels[(speed, channel)] = LedcChannel(gpio, timer_num, duty)

    def stop(self, speed: int, channel: int, idle_level: int) -> None:
        ch = self._channel(speed, channel)
        ch.running = False
        ch.duty = 0
        ch.fade_ms = 0

    def timer_rst(self, speed: int, timer_num: int) -> None:
        self.timer_resets.append((speed, timer_num))

    def set_fade_with_time(self, speed: int, channel: int, duty: int, ms: int) -> None:
        ch = self._channel(speed, channel)
        ch.pending_duty = duty
        ch.pending_fade_ms = ms

    def fade_start(self, speed: int, channel: int) -> None:
        ch = self._channel(speed, channel)
        if ch.pending_duty is None:
            raise InvalidStateError("no fade prepared")
        ch.duty, ch.fade_ms = ch.pending_duty, ch.pending_fade_ms
        ch.pending_duty = None
        ch.running = True

    def set_duty(self, speed: int, channel: int, duty: int) -> None:
        ch = self._channel(speed, channel)
        ch.pending_duty = duty
        ch.pending_fade_ms = 0

    def update_duty(self, speed: int, channel: int) -> None:
        ch = self._channel(speed, channel)
        if ch.pending_duty is not None:
            ch.duty = ch.pending_duty
            ch.pending_duty = None
        ch.fade_ms = 0
        ch.running = True


@dataclass
class _TimerState:
    freq_hz: int = 0
    ref: int = 0
    duty_resolution_bits: int = 0


@dataclass
class _ChannelState:
    gpio: int = HAL_GPIO_NONE
    timer: int = 0


class Pwm:
    """Allocates controller channels and timers to GPIOs on demand."""

    def __init__(self, driver: LedcDriver) -> None:
        self._driver = driver
        self._timers = [_TimerState() for _ in range(TIMER_COUNT)]
        self._channels = [_ChannelState() for _ in range(CHANNEL_COUNT)]
        driver.fade_func_install()

    def _find(self, gpio: int) -> int | None:
        return next((i for i, ch in enumerate(self._channels) if ch.gpio == gpio), None)

    def _configure_timer(self, index: int, freq_hz: int, bits: int) -> None:
        if not MIN_DUTY_RESOLUTION_BITS <= bits <= MAX_DUTY_RESOLUTION_BITS:
            raise InvalidArgError(f"unsupported duty resolution of {bits} bits")
        speed, num = divmod(index, TIMER_NUM_COUNT)
        self._driver.timer_config(speed, num, bits, freq_hz)
        timer = self._timers[index]
        timer.freq_hz = freq_hz
        timer.duty_resolution_bits = bits

    def _acquire_timer(self, speed: int, freq_hz: int, bits: int) -> int:
        indexes = range(speed * TIMER_NUM_COUNT, (speed + 1) * TIMER_NUM_COUNT)
        for index in indexes:
            timer = self._timers[index]
            if timer.freq_hz == freq_hz and timer.duty_resolution_bits == bits:
                return index
        for index in indexes:
            if self._timers[index].ref == 0:
                self._configure_timer(index, freq_hz, bits)
                return index
        raise NotSupportedError("no free timer for this frequency")

    def open(self, gpio: int, freq_hz: int, duty_resolution_bits: int) -> None:
        """Start a PWM output on ``gpio`` with duty 0."""
        if self._find(gpio) is not None:
            raise InvalidStateError(f"gpio {gpio} is already open")
        index = self._find(HAL_GPIO_NONE)
        if index is None:
            raise NotSupportedError("no free PWM channel")
        speed, channel_num = divmod(index, CHANNEL_NUM_COUNT)
        # A free channel on this speed may still lack a free timer; the other
        # speed is not tried.
        timer_index = self._acquire_timer(speed, freq_hz, duty_resolution_bits)
        self._timers[timer_index].ref += 1
        self._driver.channel_config(
            gpio, speed, channel_num, timer_index % TIMER_NUM_COUNT, 0
        )
        channel = self._channels[index]
        channel.gpio = gpio
        channel.timer = timer_index

    def close(self, gpio: int) -> None:
        """Stop the PWM output on ``gpio`` and free its channel."""
        index = self._find(gpio)
        if index is None:
            raise NotFoundError(f"gpio {gpio} is not open")
        speed, num = divmod(index, CHANNEL_NUM_COUNT)
        self._driver.stop(speed, num, 0)
        channel = self._channels[index]
        timer = self._timers[channel.timer]
        if timer.ref <= 0:
            raise InvalidStateError("timer reference count underflow")
        timer.ref -= 1
        if timer.ref == 0:
            self._driver.timer_rst(speed, channel.timer % TIMER_NUM_COUNT)
        channel.gpio = HAL_GPIO_NONE

    def set_duty(self, gpio: int, duty: int) -> None:
        """Set the duty of ``gpio`` immediately."""
        self.set_duty_fading(gpio, duty, 0)

    def set_duty_fading(self, gpio: int, duty: int, ms: int) -> None:
        """Move the duty of ``gpio`` to ``duty`` over ``ms`` milliseconds (0: at once)."""
        index = self._find(gpio)
        if index is None:
            raise NotFoundError(f"gpio {gpio} is not open")
        speed, num = divmod(index, CHANNEL_NUM_COUNT)
        if ms > 0:
            self._driver.set_fade_with_time(speed, num, duty, ms)
            self._driver.fade_start(speed, num)
        else:
            self._driver.set_duty(speed, num, duty)
            self._driver.update_duty(speed, num)