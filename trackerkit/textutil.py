"""Small text helpers for command lines and UCS-2 file names."""

from __future__ import annotations

_RIGHT_BLANKS = " \r\n\t"


def trim_left(text: str) -> str:
    """Drop leading spaces (only the space character)."""
    return text.lstrip(" ")


def trim_right(text: str) -> str:
    """Drop trailing spaces, tabs, carriage returns and line feeds."""
    return text.rstrip(_RIGHT_BLANKS)


def bypass(text: str, token: str) -> str | None:
    """Return what follows the first ``token`` in ``text``, or None if absent."""
    position = text.find(token)
    if position < 0:
        return None
    return text[position + len(token):]


def ascii_to_ucs2(text: str | bytes) -> bytes:
    """Encode single-byte text as little-endian UCS-2, stopping at a NUL."""
    raw = text.encode("latin-1") if isinstance(text, str) else bytes(text)
    raw = raw.split(b"\x00", 1)[0]
    return b"".join(bytes((byte, 0)) for byte in raw)


def ucs2_to_ascii(data: bytes) -> str:
    """Decode little-endian UCS-2, keeping each unit's low byte, up to a NUL unit."""
    data = bytes(data)
    if len(data) % 2:
        raise ValueError("UCS-2 data must have an even number of bytes")
    chars = []
    for low, high in zip(data[0::2], data[1::2]):
        if low == 0 and high == 0:
            break
        chars.append(chr(low))
    return "".join(chars)