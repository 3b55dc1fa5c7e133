"""Adler-32 checksum, in one pass or continued across chunks."""

from __future__ import annotations

MOD_ADLER = 65521

ADLER_DEFAULT_A = 1
ADLER_DEFAULT_B = 0
ADLER_DEFAULT = (ADLER_DEFAULT_B << 16) | ADLER_DEFAULT_A


def _accumulate(a: int, b: int, data: bytes) -> int:
    for byte in data:
        a = (a + byte) % MOD_ADLER
        b = (b + a) % MOD_ADLER
    return (b << 16) | a


def adler32(data: bytes) -> int:
    """Return the Adler-32 checksum of ``data``."""
    return _accumulate(ADLER_DEFAULT_A, ADLER_DEFAULT_B, bytes(data))


def adler32_continue(checksum: int, data: bytes) -> int:
    """Extend a previously computed Adler-32 ``checksum`` with more ``data``."""
    if not 0 <= checksum <= 0xFFFFFFFF:
        raise ValueError(f"checksum out of 32-bit range: {checksum!r}")
    a = checksum & 0xFFFF
    b = (checksum >> 16) & 0xFFFF
    return _accumulate(a, b, bytes(data))