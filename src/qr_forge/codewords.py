"""Turn data segments into the final interleaved codeword sequence."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .bitbuffer import BitBuffer
from .constants import PAD0, PAD1, ErrorCorrectionLevel
from .exceptions import CapacityExceeded
from .polynomial import Polynomial, error_correct_polynomial
from .segment import ByteSegment
from .tables import RSBlock, length_in_bits, rs_blocks

logger = logging.getLogger(__name__)


def create_data(version: int, level: ErrorCorrectionLevel, segments: Sequence[ByteSegment]) -> List[int]:
    """Encode ``segments`` for ``version``/``level`` and return data + EC codewords."""
    blocks = rs_blocks(version, level)
    buffer = BitBuffer()
    for segment in segments:
        buffer.put(segment.mode, 4)
        buffer.put(segment.get_length(), length_in_bits(segment.mode, version))
        segment.write(buffer)

    total_data_count = sum(block.data_count for block in blocks)
    limit = total_data_count * 8
    if buffer.length_in_bits > limit:
        raise CapacityExceeded(f"code length overflow. ({buffer.length_in_bits}>{limit})")

    # terminator
    if buffer.length_in_bits + 4 <= limit:
        buffer.put(0, 4)
    while buffer.length_in_bits % 8 != 0:
        buffer.put_bit(False)
    while True:
        if buffer.length_in_bits >= limit:
            break
        buffer.put(PAD0, 8)
        if buffer.length_in_bits >= limit:
            break
        buffer.put(PAD1, 8)

    logger.debug(
        "version %d-%s: %d data codewords in %d block(s)",
        version, level.name, total_data_count, len(blocks),
    )
    return create_bytes(buffer, blocks)


def create_bytes(buffer: BitBuffer, blocks: Sequence[RSBlock]) -> List[int]:
    """Compute per-block EC codewords and interleave data and EC codewords."""
    offset = 0
    dc_data: List[List[int]] = []
    ec_data: List[List[int]] = []
    for block in blocks:
        data = [0xFF & byte for byte in buffer.buffer[offset:offset + block.data_count]]
        offset += block.data_count
        dc_data.append(data)
        ec_data.append(error_correction_codewords(data, block.ec_count))

    result: List[int] = []
    for i in range(max(len(data) for data in dc_data)):
        result.extend(data[i] for data in dc_data if i < len(data))
    for i in range(max(len(ec) for ec in ec_data)):
        result.extend(ec[i] for ec in ec_data if i < len(ec))
    return result


def error_correction_codewords(data: Sequence[int], ec_count: int) -> List[int]:
    """Return the ``ec_count`` Reed-Solomon codewords protecting ``data``."""
    rs_poly = error_correct_polynomial(ec_count)
    raw_poly = Polynomial(data, len(rs_poly) - 1)
    mod_poly = raw_poly.mod(rs_poly)
    pad = ec_count - len(mod_poly)
    return [mod_poly[i - pad] if i >= pad else 0 for i in range(ec_count)]
