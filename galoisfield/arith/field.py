"""Prime-field arithmetic F_p.

Operands are Python ints that need not be reduced; every result is
reduced into [0, p).  The modulus *p* is trusted to be prime.

API
---
reduce(a, p)     -> a mod p
add / sub / mul / div(a, b, p)
neg(a, p)        -> additive inverse
modinv(a, p)     -> multiplicative inverse (extended Euclid)
bezout(a, p)     -> (g, x, y) with a*x + p*y = g
eq(a, b, p)      -> congruence test
"""

from __future__ import annotations

from typing import Tuple

from galoisfield.logs import get_logger

log = get_logger(__name__)


class InverseUndefined(ZeroDivisionError):
    """Raised when *value* has no inverse modulo *modulus*."""

    def __init__(self, value: int, modulus: int) -> None:
        super().__init__(
            f"modular inverse does not exist for value={value}, modulus={modulus}"
        )
        self.value = value
        self.modulus = modulus


def reduce(a: int, p: int) -> int:
    """Reduce an integer into [0, p)."""
    return a % p


def add(a: int, b: int, p: int) -> int:
    """Field addition."""
    return (a + b) % p


def sub(a: int, b: int, p: int) -> int:
    """Field subtraction.

    Both operands are brought into [0, p) first, so a single addition of
    *p* is enough to keep the difference non-negative.
    """
    return (a % p + p - b % p) % p


def mul(a: int, b: int, p: int) -> int:
    """Field multiplication (ints are unbounded, no 64-bit overflow)."""
    return (a * b) % p


def neg(a: int, p: int) -> int:
    """Additive inverse; equal to ``sub(0, a, p)``."""
    return (p - a % p) % p


def eq(a: int, b: int, p: int) -> bool:
    """True when *a* and *b* lie in the same residue class."""
    return a % p == b % p


def bezout(a: int, p: int) -> Tuple[int, int, int]:
    """Extended Euclidean algorithm for *a* and *p*.

    Returns ``(g, x, y)`` with ``a*x + p*y == g == gcd(a, p)`` for the
    *a* passed in, reduced or not.  The loop runs on ``a mod p``; both
    rows keep the Bezout identity at every step::

        a0 == x0*(a mod p) + y0*p
        b0 == x1*(a mod p) + y1*p

    Remainders never go negative, so ``//`` matches truncating division.
    """
    r = a % p
    x0, y0 = 1, 0
    x1, y1 = 0, 1
    a0, b0 = r, p
    while b0 != 0:
        q = a0 // b0
        a0, b0 = b0, a0 % b0
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    # a == r + (a // p)*p, so move that multiple of p into y.
    return a0, x0, y0 - (a // p) * x0


def modinv(a: int, p: int) -> int:
    """Multiplicative inverse, canonical in [0, p)."""
    g, x, _ = bezout(a, p)
    if g != 1:
        log.debug("no inverse: value=%d modulus=%d gcd=%d", a, p, g)
        raise InverseUndefined(a, p)
    return x % p


def div(a: int, b: int, p: int) -> int:
    """Field division ``a * b^-1``; raises ``InverseUndefined`` when b == 0."""
    return mul(a, modinv(b, p), p)
