"""BCH codes protecting the format and version information."""

from __future__ import annotations

G15 = (1 << 10) | (1 << 8) | (1 << 5) | (1 << 4) | (1 << 2) | (1 << 1) | (1 << 0)
G18 = (1 << 12) | (1 << 11) | (1 << 10) | (1 << 9) | (1 << 8) | (1 << 5) | (1 << 2) | (1 << 0)
G15_MASK = (1 << 14) | (1 << 12) | (1 << 10) | (1 << 4) | (1 << 1)


def bch_digit(data: int) -> int:
    digit = 0
    while data != 0:
        digit += 1
        data >>= 1
    return digit


def _remainder(data: int, generator: int) -> int:
    while bch_digit(data) - bch_digit(generator) >= 0:
        data ^= generator << (bch_digit(data) - bch_digit(generator))
    return data


def bch_type_info(data: int) -> int:
    """15-bit format information for ``(level bits << 3) | mask``."""
    return ((data << 10) | _remainder(data << 10, G15)) ^ G15_MASK


def bch_type_number(data: int) -> int:
    """18-bit version information for versions 7 and up."""
    return (data << 12) | _remainder(data << 12, G18)
