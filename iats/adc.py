"""Averaged ADC voltage readings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

NO_OF_SAMPLES = 10
DEFAULT_VREF = 1100


class AdcUnit(IntEnum):
    UNIT_1 = 1
    UNIT_2 = 2


@dataclass
class AdcConfig:
    """Channel selection and attenuation for one ADC input."""

    channel: int
    atten: int = 0
    unit: AdcUnit = AdcUnit.UNIT_1
    bit_width: int = 0


class Adc:
    """ADC input read through ``read_raw`` and calibrated by ``raw_to_voltage``."""

    def __init__(
        self,
        config: AdcConfig,
        read_raw: Callable[[AdcConfig], int],
        raw_to_voltage: Callable[[int], int],
    ) -> None:
        config.unit = AdcUnit(config.unit)
        self.config = config
        self._read_raw = read_raw
        self._raw_to_voltage = raw_to_voltage

    def voltage(self) -> int:
        """Average of NO_OF_SAMPLES raw readings, converted to millivolts."""
        total = sum(self._read_raw(self.config) for _ in range(NO_OF_SAMPLES))
        return self._raw_to_voltage(total // NO_OF_SAMPLES)