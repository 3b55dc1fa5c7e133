import pytest

from trackerkit.textutil import (
    ascii_to_ucs2,
    bypass,
    trim_left,
    trim_right,
    ucs2_to_ascii,
)


def test_trim_left_removes_only_spaces():
    assert trim_left("   ls") == "ls"
    assert trim_left("\tls") == "\tls"
    assert trim_left("ls  ") == "ls  "


def test_trim_right_removes_blank_characters():
    assert trim_right("rm file.txt \r\n\t ") == "rm file.txt"
    assert trim_right("  x") == "  x"


def test_trim_right_all_blank_gives_empty():
    assert trim_right(" \r\n") == ""


def test_bypass_returns_text_after_token():
    assert bypass("server 10.0.0.1:9880", "server") == " 10.0.0.1:9880"
    assert bypass("abcabc", "bc") == "abc"


def test_bypass_missing_token_gives_none():
    assert bypass("hello", "server") is None


def test_ascii_to_ucs2_layout():
    assert ascii_to_ucs2("C:") == b"C\x00:\x00"
    assert ascii_to_ucs2(b"log") == b"l\x00o\x00g\x00"


def test_ascii_to_ucs2_stops_at_nul():
    assert ascii_to_ucs2("ab\x00cd") == b"a\x00b\x00"


def test_ascii_to_ucs2_rejects_wide_characters():
    with pytest.raises(ValueError):
        ascii_to_ucs2("\u4e2d")


@pytest.mark.parametrize("name", ["", "log.txt", "C:\\setting.conf", "a b"])
def test_round_trip(name):
    assert ucs2_to_ascii(ascii_to_ucs2(name)) == name


def test_ucs2_to_ascii_stops_at_terminator_and_keeps_low_byte():
    assert ucs2_to_ascii(b"A\x00B\x01\x00\x00C\x00") == "AB"


def test_ucs2_to_ascii_odd_length_rejected():
    with pytest.raises(ValueError):
        ucs2_to_ascii(b"A\x00B")