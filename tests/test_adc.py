import pytest

from iats.adc import NO_OF_SAMPLES, Adc, AdcConfig, AdcUnit


def test_constant_reading_passes_through():
    adc = Adc(AdcConfig(channel=6), lambda cfg: 1234, lambda raw: raw)
    assert adc.voltage() == 1234


def test_average_is_converted():
    readings = iter([100] * 5 + [200] * 5)
    converted = []

    def to_voltage(raw):
        converted.append(raw)
        return raw * 2

    adc = Adc(AdcConfig(channel=6), lambda cfg: next(readings), to_voltage)
    assert adc.voltage() == 300
    assert converted == [150]


def test_samples_count_and_config_passed():
    seen = []
    config = AdcConfig(channel=3, unit=AdcUnit.UNIT_2)

    def read(cfg):
        seen.append(cfg)
        return 7

    assert Adc(config, read, lambda raw: raw).voltage() == 7
    assert len(seen) == NO_OF_SAMPLES
    assert all(cfg is config for cfg in seen)


def test_unit_is_normalised():
    adc = Adc(AdcConfig(channel=0, unit=2), lambda cfg: 0, lambda raw: raw)
    assert adc.config.unit is AdcUnit.UNIT_2


def test_invalid_unit_raises():
    with pytest.raises(ValueError):
        Adc(AdcConfig(channel=0, unit=9), lambda cfg: 0, lambda raw: raw)