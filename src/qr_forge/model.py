"""The QR model: collects segments and produces the finished module grid."""

from __future__ import annotations

import logging
from typing import List, Optional

from .codewords import create_data
from .constants import MAX_VERSION, MIN_VERSION, ErrorCorrectionLevel
from .exceptions import BoundsError, ConfigurationError, ModelNotBuiltError
from .matrix import ModuleMatrix, build_matrix, module_count_for
from .penalty import best_mask_pattern
from .segment import ByteSegment
from .version import select_version

logger = logging.getLogger(__name__)


class QRModel:
    """A QR symbol of a fixed version and error-correction level.

    Add text with :meth:`add_data`, call :meth:`make`, then query modules with
    :meth:`is_dark`.
    """

    def __init__(self, version: int, level: ErrorCorrectionLevel | str = ErrorCorrectionLevel.H) -> None:
        if not (MIN_VERSION <= version <= MAX_VERSION):
            raise ConfigurationError(f"version out of range: {version}")
        self.version = version
        self.error_correction_level = ErrorCorrectionLevel.parse(level)
        self.module_count = module_count_for(version)
        self.data_list: List[ByteSegment] = []
        self.data_cache: Optional[List[int]] = None
        self.mask_pattern: Optional[int] = None
        self._matrix: Optional[ModuleMatrix] = None

    def __repr__(self) -> str:
        state = "built" if self.is_built else ("data" if self.data_list else "empty")
        return (
            f"<QRModel version={self.version} level={self.error_correction_level.name} "
            f"mask={self.mask_pattern} {state}>"
        )

    @staticmethod
    def encode_text(
        text: str,
        level: ErrorCorrectionLevel | str = ErrorCorrectionLevel.H,
        min_version: Optional[int] = None,
    ) -> "QRModel":
        """Pick the smallest version that fits ``text`` and build the symbol."""
        level = ErrorCorrectionLevel.parse(level)
        version = select_version(text, level, MIN_VERSION if min_version is None else min_version)
        model = QRModel(version, level)
        model.add_data(text)
        model.make()
        return model

    @property
    def is_built(self) -> bool:
        return self._matrix is not None

    def add_data(self, data: str) -> None:
        self.data_list.append(ByteSegment(data))
        self.data_cache = None
        self._matrix = None
        self.mask_pattern = None

    def get_module_count(self) -> int:
        return self.module_count

    def is_dark(self, row: int, col: int) -> bool:
        if self._matrix is None:
            raise ModelNotBuiltError("make() has not been called")
        if row < 0 or self.module_count <= row or col < 0 or self.module_count <= col:
            raise BoundsError(f"{row},{col}")
        return bool(self._matrix[row][col])

    def get_matrix(self) -> List[List[bool]]:
        if self._matrix is None:
            raise ModelNotBuiltError("make() has not been called")
        return self._matrix.to_bools()

    def make(self) -> None:
        data = self.data_cache
        if data is None:
            data = create_data(self.version, self.error_correction_level, self.data_list)
        mask_pattern = best_mask_pattern(self.version, self.error_correction_level, data)
        matrix = build_matrix(self.version, self.error_correction_level, mask_pattern, data)
        self.data_cache = data
        self.mask_pattern = mask_pattern
        self._matrix = matrix
        logger.debug(
            "built version %d-%s with mask %d",
            self.version, self.error_correction_level.name, mask_pattern,
        )

    def best_mask_pattern(self) -> int:
        data = self.data_cache
        if data is None:
            data = create_data(self.version, self.error_correction_level, self.data_list)
        return best_mask_pattern(self.version, self.error_correction_level, data)
