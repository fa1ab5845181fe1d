import pytest

from qr_forge.bch import G15, G18, G15_MASK, bch_digit, bch_type_info, bch_type_number


def test_generators():
    assert G15 == 0x537
    assert G18 == 0x1F25
    assert G15_MASK == 0x5412


def test_bch_digit():
    assert bch_digit(0) == 0
    assert bch_digit(1) == 1
    assert bch_digit(G15) == 11


@pytest.mark.parametrize(
    "data,expected",
    [
        (0, 0x5412),  # level M, mask 0
        (0b01000, 0x77C4),  # level L, mask 0
        (0b01100, 0x662F),  # level L, mask 4
    ],
)
def test_format_information(data, expected):
    assert bch_type_info(data) == expected


@pytest.mark.parametrize("version,expected", [(7, 0x07C94), (8, 0x085BC), (40, 0x28C69)])
def test_version_information(version, expected):
    assert bch_type_number(version) == expected
