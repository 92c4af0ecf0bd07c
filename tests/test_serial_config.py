from iats.serial_config import (
    SERIAL_UNUSED_GPIO,
    Parity,
    SerialPortConfig,
    StopBits,
)


def test_defaults():
    cfg = SerialPortConfig(baud_rate=115200)
    assert cfg.tx_pin == SERIAL_UNUSED_GPIO
    assert cfg.rx_pin == SERIAL_UNUSED_GPIO
    assert cfg.parity is Parity.DISABLE
    assert cfg.stop_bits is StopBits.ONE
    assert cfg.inverted is False


def test_same_pin_is_half_duplex():
    assert SerialPortConfig(baud_rate=9600, tx_pin=5, rx_pin=5).is_half_duplex() is True


def test_different_pins_are_full_duplex():
    assert SerialPortConfig(baud_rate=9600, tx_pin=5, rx_pin=6).is_half_duplex() is False


def test_unused_pins_are_not_half_duplex():
    assert SerialPortConfig(baud_rate=9600).is_half_duplex() is False


def test_explicit_parity_and_stop_bits_kept():
    cfg = SerialPortConfig(baud_rate=9600, parity=Parity.ODD, stop_bits=StopBits.TWO)
    assert cfg.parity is Parity.ODD
    assert cfg.stop_bits is StopBits.TWO
    assert cfg.baud_rate == 9600