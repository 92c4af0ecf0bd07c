"""First-order RC low-pass filter driven by microsecond timestamps."""

from __future__ import annotations

import math


class LowPassFilter:
    """Low-pass filter with a cutoff frequency in Hz."""

    def __init__(self, cutoff: float) -> None:
        self.rc = 1.0 / (2.0 * math.pi * cutoff)
        self.value = 0.0
        self.last_update = 0

    def update(self, value: float, now: int) -> float:
        """Feed a sample taken at ``now`` microseconds and return the filtered value."""
        if self.last_update > 0:
            dt = (now - self.last_update) * 1e-6
            self.value += dt / (self.rc + dt) * (value - self.value)
        else:
            self.value = value
        self.last_update = now
        return self.value

    def reset(self, value: float) -> float:
        """Set the output to ``value`` and restart the filter."""
        self.value = value
        self.last_update = 0
        return value