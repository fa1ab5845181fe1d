"""Byte-mode data segments."""

from __future__ import annotations

from typing import List

from .bitbuffer import BitBuffer
from .constants import Mode

UTF8_BOM = (0xEF, 0xBB, 0xBF)


def utf16_code_units(text: str) -> List[int]:
    """Split ``text`` into UTF-16 code units (astral characters become surrogate pairs)."""
    raw = text.encode("utf-16-be", "surrogatepass")
    return [(raw[i] << 8) | raw[i + 1] for i in range(0, len(raw), 2)]


def encode_code_unit(code: int) -> List[int]:
    if code > 0x10000:
        return [
            0xF0 | ((code & 0x1C0000) >> 18),
            0x80 | ((code & 0x3F000) >> 12),
            0x80 | ((code & 0xFC0) >> 6),
            0x80 | (code & 0x3F),
        ]
    if code > 0x800:
        return [
            0xE0 | ((code & 0xF000) >> 12),
            0x80 | ((code & 0xFC0) >> 6),
            0x80 | (code & 0x3F),
        ]
    if code > 0x80:
        return [0xC0 | ((code & 0x7C0) >> 6), 0x80 | (code & 0x3F)]
    return [code]


def parse_text(text: str) -> bytes:
    """Return the bytes written for ``text`` in byte mode.

    Every UTF-16 code unit is expanded on its own. When the result is longer
    than the string, a UTF-8 byte order mark is prepended so that readers
    which sniff the payload switch to UTF-8.
    """
    units = utf16_code_units(text)
    parsed: List[int] = []
    for code in units:
        parsed.extend(encode_code_unit(code))
    if len(parsed) != len(units):
        parsed[0:0] = UTF8_BOM
    return bytes(parsed)


class ByteSegment:
    mode = Mode.BYTE

    def __init__(self, data: str) -> None:
        self.data = data
        self.parsed_data = parse_text(data)

    def __len__(self) -> int:
        return len(self.parsed_data)

    def __repr__(self) -> str:
        return f"ByteSegment({self.data!r})"

    def get_length(self) -> int:
        return len(self.parsed_data)

    def write(self, buffer: BitBuffer) -> None:
        for byte in self.parsed_data:
            buffer.put(byte, 8)
