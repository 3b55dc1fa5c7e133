"""Parameterised CRC computation, bit by bit or with a lookup table."""

from __future__ import annotations

from dataclasses import dataclass


def reflect(data: int, n_bits: int) -> int:
    """Reverse the order of the lowest ``n_bits`` bits of ``data``."""
    reflection = 0
    for bit in range(n_bits):
        if data & 0x01:
            reflection |= 1 << ((n_bits - 1) - bit)
        data >>= 1
    return reflection


@dataclass(frozen=True)
class CrcSpec:
    """The parameters of a CRC standard."""

    width: int
    polynomial: int
    initial_remainder: int = 0
    final_xor_value: int = 0
    reflect_data: bool = False
    reflect_remainder: bool = False

    def __post_init__(self) -> None:
        if self.width < 8 or self.width % 8:
            raise ValueError(f"CRC width must be a multiple of 8, got {self.width}")
        for name in ("polynomial", "initial_remainder", "final_xor_value"):
            value = getattr(self, name)
            if not 0 <= value <= self.mask:
                raise ValueError(f"{name} does not fit in {self.width} bits: {value:#x}")

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def top_bit(self) -> int:
        return 1 << (self.width - 1)

    def _data_byte(self, byte: int) -> int:
        return reflect(byte, 8) if self.reflect_data else byte

    def _finish(self, remainder: int) -> int:
        if self.reflect_remainder:
            remainder = reflect(remainder, self.width)
        return remainder ^ self.final_xor_value

    def _divide_byte(self, remainder: int) -> int:
        for _ in range(8):
            if remainder & self.top_bit:
                remainder = ((remainder << 1) ^ self.polynomial) & self.mask
            else:
                remainder = (remainder << 1) & self.mask
        return remainder


def crc_slow(spec: CrcSpec, message: bytes) -> int:
    """Compute the CRC of ``message`` one bit at a time."""
    remainder = spec.initial_remainder
    shift = spec.width - 8
    for byte in bytes(message):
        remainder ^= spec._data_byte(byte) << shift
        remainder = spec._divide_byte(remainder)
    return spec._finish(remainder)


class CrcTable:
    """A precomputed lookup table for fast CRC computation under one spec."""

    def __init__(self, spec: CrcSpec) -> None:
        self.spec = spec
        shift = spec.width - 8
        self.table = tuple(spec._divide_byte(dividend << shift) for dividend in range(256))

    def compute(self, message: bytes) -> int:
        """Compute the CRC of ``message`` a byte at a time."""
        spec = self.spec
        shift = spec.width - 8
        remainder = spec.initial_remainder
        for byte in bytes(message):
            index = (spec._data_byte(byte) ^ (remainder >> shift)) & 0xFF
            remainder = (self.table[index] ^ (remainder << 8)) & spec.mask
        return spec._finish(remainder)