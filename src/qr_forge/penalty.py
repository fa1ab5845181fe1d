"""Mask penalty scoring and best-mask selection."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .constants import ErrorCorrectionLevel
from .matrix import MASK_FUNCTIONS, ModuleMatrix, build_matrix

logger = logging.getLogger(__name__)


def _same_neighbour_points(modules: Sequence[Sequence[bool]], n: int) -> int:
    points = 0
    for row in range(n):
        for col in range(n):
            same_count = 0
            dark = modules[row][col]
            for r in range(-1, 2):
                if row + r < 0 or n <= row + r:
                    continue
                for c in range(-1, 2):
                    if col + c < 0 or n <= col + c:
                        continue
                    if r == 0 and c == 0:
                        continue
                    if dark == modules[row + r][col + c]:
                        same_count += 1
            if same_count > 5:
                points += 3 + same_count - 5
    return points


def _block_points(modules: Sequence[Sequence[bool]], n: int) -> int:
    points = 0
    for row in range(n - 1):
        for col in range(n - 1):
            count = (
                modules[row][col]
                + modules[row + 1][col]
                + modules[row][col + 1]
                + modules[row + 1][col + 1]
            )
            if count == 0 or count == 4:
                points += 3
    return points


def _is_finder_like(line: Sequence[bool], start: int) -> bool:
    return (
        line[start]
        and not line[start + 1]
        and line[start + 2]
        and line[start + 3]
        and line[start + 4]
        and not line[start + 5]
        and line[start + 6]
    )


def _finder_like_points(modules: Sequence[Sequence[bool]], n: int) -> int:
    points = 0
    for row in modules:
        for col in range(n - 6):
            if _is_finder_like(row, col):
                points += 40
    for col in range(n):
        column = [modules[row][col] for row in range(n)]
        for row in range(n - 6):
            if _is_finder_like(column, row):
                points += 40
    return points


def _dark_ratio_points(modules: Sequence[Sequence[bool]], n: int) -> float:
    dark_count = sum(sum(row) for row in modules)
    ratio = abs(100 * dark_count / n / n - 50) / 5
    return ratio * 10


def lost_point(matrix: ModuleMatrix) -> float:
    """Score ``matrix``; lower is better."""
    modules = matrix.to_bools()
    n = matrix.module_count
    return (
        _same_neighbour_points(modules, n)
        + _block_points(modules, n)
        + _finder_like_points(modules, n)
        + _dark_ratio_points(modules, n)
    )


def best_mask_pattern(version: int, level: ErrorCorrectionLevel, data: Sequence[int]) -> int:
    """Try every mask on a test-mode grid and return the lowest-scoring one."""
    scores: List[float] = []
    pattern = 0
    min_lost_point = 0.0
    for i in range(len(MASK_FUNCTIONS)):
        lost = lost_point(build_matrix(version, level, i, data, test=True))
        scores.append(lost)
        if i == 0 or min_lost_point > lost:
            min_lost_point = lost
            pattern = i
    logger.debug("mask scores %s -> mask %d", scores, pattern)
    return pattern
