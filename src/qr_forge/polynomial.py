"""Polynomials over GF(256) used to compute Reed-Solomon codewords."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterator, List, Tuple

from .exceptions import MalformedPolynomialInput
from .gf256 import gexp, glog


class Polynomial:
    """Immutable polynomial, highest-degree coefficient first.

    Leading zero coefficients are stripped on construction, then ``shift``
    zero coefficients are appended (multiplication by x**shift).
    """

    __slots__ = ("_num",)

    def __init__(self, num: Sequence[int], shift: int = 0) -> None:
        if isinstance(num, str) or not isinstance(num, Sequence):
            raise MalformedPolynomialInput(f"{num!r}/{shift}")
        offset = 0
        while offset < len(num) and num[offset] == 0:
            offset += 1
        self._num: Tuple[int, ...] = tuple(num[offset:]) + (0,) * shift

    def __getitem__(self, index: int) -> int:
        return self._num[index]

    def __len__(self) -> int:
        return len(self._num)

    def __iter__(self) -> Iterator[int]:
        return iter(self._num)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._num == other._num

    def __hash__(self) -> int:
        return hash(self._num)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._num)!r})"

    @property
    def coefficients(self) -> Tuple[int, ...]:
        return self._num

    def multiply(self, other: "Polynomial") -> "Polynomial":
        if not self._num or not other._num:
            return Polynomial([])
        num = [0] * (len(self) + len(other) - 1)
        for i, a in enumerate(self._num):
            if a == 0:
                continue
            for j, b in enumerate(other._num):
                if b == 0:
                    continue
                num[i + j] ^= gexp(glog(a) + glog(b))
        return Polynomial(num)

    __mul__ = multiply

    def mod(self, other: "Polynomial") -> "Polynomial":
        """Return the remainder of ``self`` divided by ``other``."""
        if not len(other):
            raise ZeroDivisionError("polynomial division by zero")
        result = self
        while len(result) >= len(other):
            if result[0] == 0:
                # only an all-zero dividend padded by ``shift`` gets here
                result = Polynomial(result._num)
                continue
            ratio = glog(result[0]) - glog(other[0])
            num: List[int] = list(result._num)
            for i, coefficient in enumerate(other._num):
                if coefficient:
                    num[i] ^= gexp(glog(coefficient) + ratio)
            result = Polynomial(num)
        return result

    __mod__ = mod


def error_correct_polynomial(length: int) -> Polynomial:
    """Return the Reed-Solomon generator polynomial of degree ``length``."""
    poly = Polynomial([1])
    for i in range(length):
        poly = poly.multiply(Polynomial([1, gexp(i)]))
    return poly
