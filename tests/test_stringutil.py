import pytest

from iats.stringutil import strput


def test_fits():
    assert strput("abc", 10) == b"abc\0"


def test_truncates_and_terminates():
    out = strput("abcdef", 4)
    assert out == b"abc\0"
    assert len(out) == 4


def test_exact_fit_with_terminator():
    assert strput("abc", 4) == b"abc\0"


def test_zero_size_writes_nothing():
    assert strput("abc", 0) == b""


def test_size_one_is_only_terminator():
    assert strput("abc", 1) == b"\0"


def test_bytes_input():
    assert strput(b"xy", 8) == b"xy\0"


def test_written_never_exceeds_size():
    for size in range(1, 12):
        assert len(strput("hello world", size)) <= size


def test_negative_size():
    with pytest.raises(ValueError):
        strput("abc", -1)