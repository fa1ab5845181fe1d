import pytest

from qr_forge.bitbuffer import BitBuffer
from qr_forge.codewords import create_bytes, create_data, error_correction_codewords
from qr_forge.constants import ErrorCorrectionLevel
from qr_forge.exceptions import CapacityExceeded
from qr_forge.segment import ByteSegment
from qr_forge.tables import RSBlock, rs_blocks

H = ErrorCorrectionLevel.H
M = ErrorCorrectionLevel.M


def test_hello_data_codewords():
    codewords = create_data(1, H, [ByteSegment("HELLO")])
    assert len(codewords) == 26
    assert codewords[:9] == [0x40, 0x54, 0x84, 0x54, 0xC4, 0xC4, 0xF0, 0xEC, 0x11]


def test_empty_payload_is_mode_length_terminator_and_padding():
    codewords = create_data(1, H, [ByteSegment("")])
    assert codewords[:9] == [0x40, 0x00, 0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11, 0xEC]


def test_terminator_fills_the_last_nibble():
    # 4 + 8 + 7 * 8 = 68 bits of 72
    codewords = create_data(1, H, [ByteSegment("ABCDEFG")])
    assert codewords[:9] == [0x40, 0x74, 0x14, 0x24, 0x34, 0x44, 0x54, 0x64, 0x70]


def test_overflow_raises():
    with pytest.raises(CapacityExceeded, match="code length overflow"):
        create_data(1, H, [ByteSegment("ABCDEFGH")])


def test_multiple_segments_are_concatenated():
    single = create_data(2, M, [ByteSegment("AB")])
    double = create_data(2, M, [ByteSegment("A"), ByteSegment("B")])
    assert single != double
    assert double[:3] == [0x40, 0x14, 0x14]


def test_known_reed_solomon_vector():
    data = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
    assert error_correction_codewords(data, 10) == [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


def test_zero_data_has_zero_ec():
    assert error_correction_codewords([0, 0, 0], 4) == [0, 0, 0, 0]


def test_interleaving_across_blocks():
    buffer = BitBuffer()
    for byte in range(1, 8):
        buffer.put(byte, 8)
    blocks = [RSBlock(5, 3), RSBlock(6, 4)]
    result = create_bytes(buffer, blocks)
    assert result[:7] == [1, 4, 2, 5, 3, 6, 7]
    ec_a = error_correction_codewords([1, 2, 3], 2)
    ec_b = error_correction_codewords([4, 5, 6, 7], 2)
    assert result[7:] == [ec_a[0], ec_b[0], ec_a[1], ec_b[1]]


@pytest.mark.parametrize("version,level", [(5, ErrorCorrectionLevel.Q), (10, ErrorCorrectionLevel.L), (40, H)])
def test_output_length_matches_block_totals(version, level):
    codewords = create_data(version, level, [ByteSegment("interleave me")])
    assert len(codewords) == sum(block.total_count for block in rs_blocks(version, level))
    assert all(0 <= c <= 0xFF for c in codewords)
