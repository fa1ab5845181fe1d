import pytest

from qr_forge.exceptions import ArithmeticDomainError
from qr_forge.gf256 import EXP_TABLE, LOG_TABLE, gexp, glog


def test_first_powers_are_plain_shifts():
    assert list(EXP_TABLE[:8]) == [1, 2, 4, 8, 16, 32, 64, 128]
    # x^8 reduces to x^4 + x^3 + x^2 + 1
    assert EXP_TABLE[8] == 0x1D


def test_tables_are_inverse():
    for n in range(1, 256):
        assert gexp(glog(n)) == n
    assert sorted(EXP_TABLE[:255]) == list(range(1, 256))
    assert LOG_TABLE[1] == 0


def test_gexp_wraps_any_exponent():
    assert EXP_TABLE[255] == 1
    assert gexp(255) == 1
    assert gexp(256) == 2
    assert gexp(-1) == 142
    assert gexp(510 + 3) == gexp(3)


@pytest.mark.parametrize("n", [0, -1])
def test_glog_rejects_values_below_one(n):
    with pytest.raises(ArithmeticDomainError):
        glog(n)
