"""Arithmetic over GF(2^8) with the QR primitive polynomial x^8+x^4+x^3+x^2+1."""

from __future__ import annotations

from typing import List, Tuple

from .exceptions import ArithmeticDomainError


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    exp: List[int] = [0] * 256
    log: List[int] = [0] * 256
    for i in range(8):
        exp[i] = 1 << i
    for i in range(8, 256):
        exp[i] = exp[i - 4] ^ exp[i - 5] ^ exp[i - 6] ^ exp[i - 8]
    for i in range(255):
        log[exp[i]] = i
    return tuple(exp), tuple(log)


EXP_TABLE, LOG_TABLE = _build_tables()


def glog(n: int) -> int:
    """Return the discrete logarithm of ``n`` (``n`` must be in 1..255)."""
    if n < 1:
        raise ArithmeticDomainError(f"glog({n})")
    return LOG_TABLE[n]


def gexp(n: int) -> int:
    """Return alpha**n; any integer exponent is accepted since alpha has order 255."""
    return EXP_TABLE[n % 255]
