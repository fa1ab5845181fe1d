"""Pick the smallest version able to hold a payload."""

from __future__ import annotations

import logging

from .constants import MAX_VERSION, MIN_VERSION, ErrorCorrectionLevel
from .exceptions import CapacityExceeded, ConfigurationError
from .segment import ByteSegment
from .tables import capacity

logger = logging.getLogger(__name__)


def select_version_for_length(length: int, level: ErrorCorrectionLevel, min_version: int = MIN_VERSION) -> int:
    if not (MIN_VERSION <= min_version <= MAX_VERSION):
        raise ConfigurationError(f"version out of range: {min_version}")
    for version in range(min_version, MAX_VERSION + 1):
        if length <= capacity(version, level):
            return version
    raise CapacityExceeded(
        f"Too long data: {length} bytes exceed {capacity(MAX_VERSION, level)} at level {level.name}"
    )


def select_version(text: str, level: ErrorCorrectionLevel | str, min_version: int = MIN_VERSION) -> int:
    """Return the smallest version >= ``min_version`` that fits ``text``."""
    level = ErrorCorrectionLevel.parse(level)
    length = ByteSegment(text).get_length()
    version = select_version_for_length(length, level, min_version)
    logger.debug("%d payload bytes at level %s -> version %d", length, level.name, version)
    return version
