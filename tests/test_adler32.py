import zlib

import pytest

from trackerkit.adler32 import ADLER_DEFAULT, adler32, adler32_continue


def test_empty_data_gives_default():
    assert adler32(b"") == ADLER_DEFAULT
    assert adler32(b"") == 1


def test_known_example():
    assert adler32(b"Wikipedia") == 0x11E60398


@pytest.mark.parametrize(
    "data",
    [b"a", b"hello world", bytes(range(256)), b"\xff" * 10000, b"\x00" * 7],
)
def test_matches_zlib(data):
    assert adler32(data) == zlib.adler32(data)


@pytest.mark.parametrize("split", [0, 1, 5, 13, 100])
def test_continue_equals_single_pass(split):
    data = bytes(range(100)) * 3
    first = adler32(data[:split])
    assert adler32_continue(first, data[split:]) == adler32(data)


def test_continue_from_default_equals_fresh():
    data = b"tracker payload"
    assert adler32_continue(ADLER_DEFAULT, data) == adler32(data)


def test_continue_with_no_data_is_identity():
    value = adler32(b"abc")
    assert adler32_continue(value, b"") == value


def test_accepts_bytearray():
    assert adler32(bytearray(b"abc")) == adler32(b"abc")


def test_continue_rejects_out_of_range_checksum():
    with pytest.raises(ValueError):
        adler32_continue(1 << 32, b"x")
    with pytest.raises(ValueError):
        adler32_continue(-1, b"x")