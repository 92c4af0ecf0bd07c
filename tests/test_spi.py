import pytest

from iats.errors import HalError, InvalidArgError
from iats.spi import (
    QUEUE_SIZE,
    SpiBusConfig,
    SpiDevice,
    SpiDeviceConfig,
    SpiTransaction,
)


class Loopback:
    """Echoes the transmitted bytes, padded with 0xFF."""

    def __init__(self):
        self.transactions = []

    def __call__(self, transaction):
        self.transactions.append(transaction)
        return transaction.tx + b"\xff" * 8


def make_device():
    transfer = Loopback()
    return SpiDevice(SpiDeviceConfig(cs=18, clock_speed_hz=8000000), transfer), transfer


def test_bus_config_quad_pins_unused():
    cfg = SpiBusConfig(miso=19, mosi=27, sclk=5)
    assert cfg.quadwp == -1
    assert cfg.quadhd == -1
    assert cfg.max_transfer_sz == 0


def test_device_config_defaults_and_validation():
    cfg = SpiDeviceConfig(cs=18, clock_speed_hz=1000000)
    assert cfg.queue_size == QUEUE_SIZE
    assert cfg.spi_mode == 0
    with pytest.raises(ValueError):
        SpiDeviceConfig(cs=18, clock_speed_hz=1000000, spi_mode=4)
    with pytest.raises(ValueError):
        SpiDeviceConfig(cs=18, clock_speed_hz=0)


def test_transmit_echo_and_lengths():
    device, transfer = make_device()
    tx = b"\x01\x02\x03"
    assert device.transmit(0x12, 0x34, tx) == tx
    t = transfer.transactions[0]
    assert t.cmd == 0x12
    assert t.addr == 0x34
    assert t.length == 8 * len(tx)
    assert t.rxlength == 0
    assert t.tx == tx


def test_transmit_with_shorter_rx():
    device, transfer = make_device()
    assert device.transmit(0, 0x80, b"\xa0\xb0\xc0", rx_size=1) == b"\xa0"
    assert transfer.transactions[0].rxlength == 8


def test_transmit_rx_larger_than_tx_rejected():
    device, transfer = make_device()
    with pytest.raises(InvalidArgError):
        device.transmit(0, 0, b"\x01", rx_size=2)
    assert transfer.transactions == []


def test_transmit_u8():
    device, transfer = make_device()
    assert device.transmit_u8(0, 0x42, 0x5A) == 0x5A
    t = transfer.transactions[0]
    assert (t.length, t.rxlength) == (8, 8)
    with pytest.raises(InvalidArgError):
        device.transmit_u8(0, 0, 256)


def test_transmit_bits_rounds_up_to_bytes():
    device, transfer = make_device()
    result = device.transmit_bits(0, 0, b"\xab\xc0", tx_bits=12, rx_bits=12)
    assert result == b"\xab\xc0"
    t = transfer.transactions[0]
    assert t.length == 12
    assert t.rxlength == 12
    assert t.rx_size == 2


def test_transmit_bits_rejects_short_buffer():
    device, _ = make_device()
    with pytest.raises(InvalidArgError):
        device.transmit_bits(0, 0, b"\x01", tx_bits=9)
    with pytest.raises(InvalidArgError):
        device.transmit_bits(0, 0, b"\x01", tx_bits=-1)


def test_command_and_address_ranges():
    device, _ = make_device()
    with pytest.raises(InvalidArgError):
        device.transmit(0x10000, 0, b"\x00")
    with pytest.raises(InvalidArgError):
        device.transmit(0, 1 << 32, b"\x00")


def test_short_reply_raises():
    device = SpiDevice(SpiDeviceConfig(cs=5, clock_speed_hz=1000000), lambda t: b"")
    with pytest.raises(HalError):
        device.transmit(0, 0, b"\x01\x02")


def test_transaction_rx_size_defaults_to_length():
    t = SpiTransaction(cmd=0, addr=0, length=16, rxlength=0, tx=b"\x00\x00")
    assert t.rx_size == len(t.tx)