import binascii
import zlib

import pytest

from trackerkit.crc import CrcSpec, CrcTable, crc_slow, reflect

CRC32 = CrcSpec(
    width=32,
    polynomial=0x04C11DB7,
    initial_remainder=0xFFFFFFFF,
    final_xor_value=0xFFFFFFFF,
    reflect_data=True,
    reflect_remainder=True,
)
CCITT = CrcSpec(width=16, polynomial=0x1021, initial_remainder=0xFFFF)

MESSAGES = [b"", b"1", b"123456789", bytes(range(256)), b"\x00\xff" * 50]


def test_reflect_reverses_bits():
    assert reflect(0b0001, 4) == 0b1000
    assert reflect(0x01, 8) == 0x80
    assert reflect(0xF0, 8) == 0x0F


@pytest.mark.parametrize("value", [0, 1, 0x1234, 0xBEEF, 0xFFFF])
def test_reflect_is_an_involution(value):
    assert reflect(reflect(value, 16), 16) == value


def test_crc32_check_value():
    assert crc_slow(CRC32, b"123456789") == 0xCBF43926


@pytest.mark.parametrize("message", MESSAGES)
def test_crc32_matches_zlib(message):
    assert crc_slow(CRC32, message) == zlib.crc32(message)
    assert CrcTable(CRC32).compute(message) == zlib.crc32(message)


@pytest.mark.parametrize("message", MESSAGES)
def test_ccitt_matches_binascii(message):
    expected = binascii.crc_hqx(message, 0xFFFF)
    assert crc_slow(CCITT, message) == expected
    assert CrcTable(CCITT).compute(message) == expected


@pytest.mark.parametrize(
    "spec",
    [
        CrcSpec(width=8, polynomial=0x07),
        CrcSpec(width=16, polynomial=0x8005, reflect_data=True, reflect_remainder=True),
        CrcSpec(width=16, polynomial=0x8005, reflect_data=True),
        CrcSpec(width=32, polynomial=0x04C11DB7, final_xor_value=0xFFFFFFFF),
    ],
)
def test_fast_equals_slow(spec):
    table = CrcTable(spec)
    for message in MESSAGES:
        assert table.compute(message) == crc_slow(spec, message)


def test_table_has_256_entries_within_width():
    table = CrcTable(CCITT)
    assert len(table.table) == 256
    assert table.table[0] == 0
    assert all(0 <= entry <= 0xFFFF for entry in table.table)


def test_empty_message_gives_finished_initial_remainder():
    assert crc_slow(CCITT, b"") == 0xFFFF
    assert crc_slow(CRC32, b"") == 0


@pytest.mark.parametrize("width", [0, 4, 12])
def test_invalid_width_rejected(width):
    with pytest.raises(ValueError):
        CrcSpec(width=width, polynomial=0x07)


def test_polynomial_too_wide_rejected():
    with pytest.raises(ValueError):
        CrcSpec(width=8, polynomial=0x107)