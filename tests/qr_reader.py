"""Small stand-alone reader for single-block symbols of versions 1-6.

It knows nothing about how the encoder lays modules out beyond what the QR
standard fixes: the reserved regions, the format bit positions, the mask
formulas and the zigzag order.
"""

from typing import List, Sequence, Set, Tuple

FORMAT_MASK = 0x5412

MASKS = (
    lambda i, j: (i + j) % 2 == 0,
    lambda i, j: i % 2 == 0,
    lambda i, j: j % 3 == 0,
    lambda i, j: (i + j) % 3 == 0,
    lambda i, j: (i // 2 + j // 3) % 2 == 0,
    lambda i, j: (i * j) % 2 + (i * j) % 3 == 0,
    lambda i, j: ((i * j) % 2 + (i * j) % 3) % 2 == 0,
    lambda i, j: ((i * j) % 3 + (i + j) % 2) % 2 == 0,
)

LEVEL_NAMES = {1: "L", 0: "M", 3: "Q", 2: "H"}


def reserved_cells(n: int) -> Set[Tuple[int, int]]:
    cells = set()
    for r in range(9):
        for c in range(9):
            cells.add((r, c))
        for c in range(n - 8, n):
            cells.add((r, c))
    for r in range(n - 8, n):
        for c in range(9):
            cells.add((r, c))
    for i in range(n):
        cells.add((6, i))
        cells.add((i, 6))
    if n > 21:
        centre = n - 7
        for r in range(centre - 2, centre + 3):
            for c in range(centre - 2, centre + 3):
                cells.add((r, c))
    return cells


def read_format(grid: Sequence[Sequence[bool]]) -> Tuple[str, int]:
    """Return ``(level name, mask)`` from the copy beside the lower-left and upper-right finders."""
    n = len(grid)
    bits = 0
    for i in range(8):
        bits |= int(bool(grid[8][n - 1 - i])) << i
    for i in range(8, 15):
        bits |= int(bool(grid[n - 15 + i][8])) << i
    data = (bits ^ FORMAT_MASK) >> 10
    return LEVEL_NAMES[data >> 3], data & 7


def read_bits(grid: Sequence[Sequence[bool]], mask: int) -> List[int]:
    n = len(grid)
    reserved = reserved_cells(n)
    bits = []
    upward = True
    right = n - 1
    while right > 0:
        if right == 6:
            right = 5
        rows = range(n - 1, -1, -1) if upward else range(n)
        for r in rows:
            for c in (right, right - 1):
                if (r, c) in reserved:
                    continue
                bits.append(int(bool(grid[r][c])) ^ int(MASKS[mask](r, c)))
        upward = not upward
        right -= 2
    return bits


def read_text(grid: Sequence[Sequence[bool]]) -> str:
    n = len(grid)
    assert (n - 17) // 4 < 7, "only versions 1-6 are supported"
    _, mask = read_format(grid)
    bits = read_bits(grid, mask)

    def take(start: int, count: int) -> int:
        value = 0
        for bit in bits[start:start + count]:
            value = (value << 1) | bit
        return value

    assert take(0, 4) == 0b0100, "expected a byte-mode segment"
    length = take(4, 8)
    payload = bytes(take(12 + 8 * i, 8) for i in range(length))
    if payload.startswith(b"\xef\xbb\xbf"):
        payload = payload[3:]
    return payload.decode("utf-8")
