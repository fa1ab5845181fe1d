"""Append-only bit sequence packed MSB first into bytes."""

from __future__ import annotations

from typing import List


class BitBuffer:
    def __init__(self) -> None:
        self.buffer: List[int] = []
        self.length = 0

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"BitBuffer({''.join('1' if self.get(i) else '0' for i in range(self.length))})"

    def get(self, index: int) -> bool:
        return ((self.buffer[index // 8] >> (7 - index % 8)) & 1) == 1

    def put(self, num: int, length: int) -> None:
        """Append the ``length`` low bits of ``num``, most significant first."""
        for i in range(length):
            self.put_bit(((num >> (length - i - 1)) & 1) == 1)

    def put_bit(self, bit: bool) -> None:
        buf_index = self.length // 8
        if len(self.buffer) <= buf_index:
            self.buffer.append(0)
        if bit:
            self.buffer[buf_index] |= 0x80 >> (self.length % 8)
        self.length += 1

    @property
    def length_in_bits(self) -> int:
        return self.length

    def to_bytes(self) -> bytes:
        return bytes(self.buffer)
