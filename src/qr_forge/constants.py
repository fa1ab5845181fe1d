"""Enumerations shared by the encoder."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from .exceptions import ConfigurationError


@total_ordering
class ErrorCorrectionLevel(Enum):
    """Error-correction levels, ordered by increasing redundancy.

    Each value is ``(ordinal, format_bits)``: ``ordinal`` indexes the capacity
    and RS-block tables, ``format_bits`` is the two-bit code written into the
    format information.
    """

    L = (0, 1)
    M = (1, 0)
    Q = (2, 3)
    H = (3, 2)

    @property
    def ordinal(self) -> int:
        return self.value[0]

    @property
    def format_bits(self) -> int:
        return self.value[1]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ErrorCorrectionLevel):
            return NotImplemented
        return self.ordinal < other.ordinal

    @classmethod
    def parse(cls, value: "ErrorCorrectionLevel | str") -> "ErrorCorrectionLevel":
        """Accept a member, a letter (``"H"``) or a word (``"high"``)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            key = _LEVEL_WORDS.get(key, key)
            if key in cls.__members__:
                return cls[key]
        raise ConfigurationError(f"unknown error correction level: {value!r}")


_LEVEL_WORDS = {
    "LOW": "L",
    "MEDIUM": "M",
    "QUARTILE": "Q",
    "HIGH": "H",
}


class Mode:
    """Segment mode indicators."""

    NUMBER = 1 << 0
    ALPHA_NUM = 1 << 1
    BYTE = 1 << 2
    KANJI = 1 << 3


PAD0 = 0xEC
PAD1 = 0x11

MIN_VERSION = 1
MAX_VERSION = 40
