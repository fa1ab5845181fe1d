"""Module grid construction: function patterns, format bits and data placement."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from .bch import bch_type_info, bch_type_number
from .constants import ErrorCorrectionLevel
from .exceptions import BoundsError, ConfigurationError
from .tables import pattern_position

MaskFunction = Callable[[int, int], bool]

MASK_FUNCTIONS: Sequence[MaskFunction] = (
    lambda i, j: (i + j) % 2 == 0,
    lambda i, j: i % 2 == 0,
    lambda i, j: j % 3 == 0,
    lambda i, j: (i + j) % 3 == 0,
    lambda i, j: (i // 2 + j // 3) % 2 == 0,
    lambda i, j: (i * j) % 2 + (i * j) % 3 == 0,
    lambda i, j: ((i * j) % 2 + (i * j) % 3) % 2 == 0,
    lambda i, j: ((i * j) % 3 + (i + j) % 2) % 2 == 0,
)


def mask_function(pattern: int) -> MaskFunction:
    if not 0 <= pattern < len(MASK_FUNCTIONS):
        raise ConfigurationError(f"bad mask pattern: {pattern}")
    return MASK_FUNCTIONS[pattern]


def module_count_for(version: int) -> int:
    return version * 4 + 17


class ModuleMatrix:
    """Square grid of modules: ``None`` while unset, then ``False``/``True``."""

    def __init__(self, version: int) -> None:
        self.version = version
        self.module_count = module_count_for(version)
        self.modules: List[List[Optional[bool]]] = [
            [None] * self.module_count for _ in range(self.module_count)
        ]

    def __getitem__(self, row: int) -> List[Optional[bool]]:
        return self.modules[row]

    def get_module_count(self) -> int:
        return self.module_count

    def is_dark(self, row: int, col: int) -> bool:
        if row < 0 or self.module_count <= row or col < 0 or self.module_count <= col:
            raise BoundsError(f"{row},{col}")
        return bool(self.modules[row][col])

    def setup_position_probe_pattern(self, row: int, col: int) -> None:
        """Draw a finder pattern with its separator, clipped at the grid edge."""
        for r in range(-1, 8):
            if row + r <= -1 or self.module_count <= row + r:
                continue
            for c in range(-1, 8):
                if col + c <= -1 or self.module_count <= col + c:
                    continue
                self.modules[row + r][col + c] = (
                    (0 <= r <= 6 and c in (0, 6))
                    or (0 <= c <= 6 and r in (0, 6))
                    or (2 <= r <= 4 and 2 <= c <= 4)
                )

    def setup_position_adjust_pattern(self) -> None:
        positions = pattern_position(self.version)
        for row in positions:
            for col in positions:
                if self.modules[row][col] is not None:
                    continue
                for r in range(-2, 3):
                    for c in range(-2, 3):
                        self.modules[row + r][col + c] = (
                            r in (-2, 2) or c in (-2, 2) or (r == 0 and c == 0)
                        )

    def setup_timing_pattern(self) -> None:
        for r in range(8, self.module_count - 8):
            if self.modules[r][6] is not None:
                continue
            self.modules[r][6] = r % 2 == 0
        for c in range(8, self.module_count - 8):
            if self.modules[6][c] is not None:
                continue
            self.modules[6][c] = c % 2 == 0

    def setup_type_info(self, test: bool, level: ErrorCorrectionLevel, mask_pattern: int) -> None:
        """Write both copies of the format information and the dark module.

        With ``test`` set every bit is written light, giving each mask trial
        the same skeleton.
        """
        n = self.module_count
        bits = bch_type_info((level.format_bits << 3) | mask_pattern)
        for i in range(15):
            mod = not test and ((bits >> i) & 1) == 1
            if i < 6:
                self.modules[i][8] = mod
            elif i < 8:
                self.modules[i + 1][8] = mod
            else:
                self.modules[n - 15 + i][8] = mod
        for i in range(15):
            mod = not test and ((bits >> i) & 1) == 1
            if i < 8:
                self.modules[8][n - i - 1] = mod
            elif i < 9:
                self.modules[8][15 - i - 1 + 1] = mod
            else:
                self.modules[8][15 - i - 1] = mod
        self.modules[n - 8][8] = not test

    def setup_type_number(self, test: bool) -> None:
        n = self.module_count
        bits = bch_type_number(self.version)
        for i in range(18):
            mod = not test and ((bits >> i) & 1) == 1
            self.modules[i // 3][i % 3 + n - 8 - 3] = mod
        for i in range(18):
            mod = not test and ((bits >> i) & 1) == 1
            self.modules[i % 3 + n - 8 - 3][i // 3] = mod

    def map_data(self, data: Sequence[int], mask_pattern: int) -> None:
        """Place codeword bits in the zigzag order, XORed with the mask."""
        mask = mask_function(mask_pattern)
        n = self.module_count
        inc = -1
        row = n - 1
        bit_index = 7
        byte_index = 0
        col = n - 1
        while col > 0:
            if col == 6:
                col -= 1
            while True:
                for c in range(2):
                    if self.modules[row][col - c] is not None:
                        continue
                    dark = False
                    if byte_index < len(data):
                        dark = ((data[byte_index] >> bit_index) & 1) == 1
                    if mask(row, col - c):
                        dark = not dark
                    self.modules[row][col - c] = dark
                    bit_index -= 1
                    if bit_index == -1:
                        byte_index += 1
                        bit_index = 7
                row += inc
                if row < 0 or n <= row:
                    row -= inc
                    inc = -inc
                    break
            col -= 2

    def to_bools(self) -> List[List[bool]]:
        return [[bool(module) for module in row] for row in self.modules]


def build_matrix(
    version: int,
    level: ErrorCorrectionLevel,
    mask_pattern: int,
    data: Sequence[int],
    test: bool = False,
) -> ModuleMatrix:
    """Build a complete grid from scratch for one mask."""
    mask_function(mask_pattern)
    matrix = ModuleMatrix(version)
    n = matrix.module_count
    matrix.setup_position_probe_pattern(0, 0)
    matrix.setup_position_probe_pattern(n - 7, 0)
    matrix.setup_position_probe_pattern(0, n - 7)
    matrix.setup_position_adjust_pattern()
    matrix.setup_timing_pattern()
    matrix.setup_type_info(test, level, mask_pattern)
    if version >= 7:
        matrix.setup_type_number(test)
    matrix.map_data(data, mask_pattern)
    return matrix
