import pytest

from iats.fec import decode, decoded_size, encode, encoded_size


def test_sizes():
    assert encoded_size(7) == 14
    assert decoded_size(14) == 7
    assert decoded_size(encoded_size(33)) == 33


def test_encode_uses_symbol_table():
    assert encode(b"\x00") == bytes([0x0F, 0x0F])
    assert encode(b"\x1f") == bytes([0x18, 0xF0])


def test_encoded_length():
    data = b"hello"
    assert len(encode(data)) == encoded_size(len(data))


def test_round_trip_all_bytes():
    data = bytes(range(256))
    assert decode(encode(data)) == data


def test_decode_symbols_from_table():
    assert decode(bytes([0xAA, 0x55])) == bytes([0xA5])


@pytest.mark.parametrize("bit", range(8))
def test_single_bit_error_in_zero_symbol_is_corrected(bit):
    corrupted = 0x0F ^ (1 << bit)
    assert decode(bytes([corrupted, 0x0F])) == b"\x00"


def test_empty():
    assert encode(b"") == b""
    assert decode(b"") == b""


def test_decode_odd_length_raises():
    with pytest.raises(ValueError):
        decode(b"\x0f\x0f\x0f")