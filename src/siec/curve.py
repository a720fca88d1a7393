"""
This module defines CurveParams, the immutable description of a short
Weierstrass curve y^2 = x^3 + Ax + B over a prime field, together with a
generic, non-constant time implementation of its group law on affine
coordinates.

At this level points are plain (x, y) integer pairs and the point at infinity
is the sentinel pair (0, 0). That encoding is only sound while (0, 0) is not
itself a solution of the curve equation, which CurveParams checks when it is
constructed. The Point class in :mod:`siec.point` offers an explicit
representation of infinity on top of these functions.

The SIEC255 parameters are built once per process by :func:`siec255`.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from threading import Lock
from typing import Optional, Tuple
from sympy import isprime
from sympy.ntheory.residue_ntheory import sqrt_mod
from . import constants

logger = logging.getLogger(__name__)

INFINITY: Tuple[int, int] = (0, 0)


class PointNotOnCurveError(ValueError):
    """Raised when an x-coordinate has no corresponding point on the curve."""


@dataclass(frozen=True)
class CurveParams:
    """Parameters of a short Weierstrass curve and its base point."""

    name: str
    p: int  # the order of the underlying field
    n: int  # the order of the base point
    a: int
    b: int
    gx: int
    gy: int
    bit_size: int

    def __post_init__(self) -> None:
        """
        Validate the parameter set.

        Raises:
        ValueError: If P or N is not prime, the base point is not on the
        curve, or the (0, 0) infinity sentinel satisfies the curve equation.
        """
        if not isprime(self.p):
            raise ValueError(f"{self.name}: field order is not prime")
        if not isprime(self.n):
            raise ValueError(f"{self.name}: base point order is not prime")
        if self.is_on_curve(*INFINITY):
            raise ValueError(
                f"{self.name}: (0, 0) lies on the curve and cannot encode infinity"
            )
        if not self.is_on_curve(self.gx, self.gy):
            raise ValueError(f"{self.name}: base point is not on the curve")

    def params(self) -> CurveParams:
        """Return the parameters for the curve."""
        return self

    def is_on_curve(self, x: int, y: int) -> bool:
        """Report whether (x, y) satisfies y^2 = x^3 + Ax + B (mod P)."""
        p = self.p
        return (y * y - (pow(x, 3, p) + self.a * x + self.b)) % p == 0

    def add(self, x1: int, y1: int, x2: int, y2: int) -> Tuple[int, int]:
        """
        Return the sum of (x1, y1) and (x2, y2).

        Either operand may be the (0, 0) sentinel, which acts as the identity.
        Two distinct points sharing an x-coordinate are inverses of each other
        and sum to the sentinel.
        """
        if x1 == 0 and y1 == 0:
            return x2, y2
        if x2 == 0 and y2 == 0:
            return x1, y1
        if x1 == x2 and y1 == y2:
            return self.double(x1, y1)

        p = self.p
        z = (x2 - x1) % p
        if z == 0:
            return INFINITY
        # λ = (y2 - y1)/(x2 - x1)
        s = ((y2 - y1) * pow(z, p - 2, p)) % p
        # x3 = λ² - x1 - x2
        x3 = (s * s - x1 - x2) % p
        # y3 = λ(x1 - x3) - y1
        y3 = (s * (x1 - x3) - y1) % p

        return x3, y3

    def double(self, x1: int, y1: int) -> Tuple[int, int]:
        """Return 2 * (x1, y1); a point with y = 0 has order two and doubles to infinity."""
        if y1 == 0:
            return INFINITY

        p = self.p
        # λ = (3x1² + A)/(2y1)
        s = ((3 * x1 * x1 + self.a) * pow(2 * y1, p - 2, p)) % p
        x2 = (s * s - 2 * x1) % p
        y2 = (s * (x1 - x2) - y1) % p

        return x2, y2

    def scalar_mult(self, x1: int, y1: int, k: bytes) -> Tuple[int, int]:
        """
        Return k * (x1, y1) where k is a non-negative integer in big-endian form.

        Left-to-right double-and-add over every bit of k, including leading
        zero bits. This is not a constant time implementation.
        """
        x, y = INFINITY
        for byte in k:
            for _ in range(8):
                x, y = self.double(x, y)
                if byte & 0x80:
                    x, y = self.add(x1, y1, x, y)
                byte <<= 1

        return x, y

    def scalar_base_mult(self, k: bytes) -> Tuple[int, int]:
        """Return k * G, where G is the base point and k is in big-endian form."""
        return self.scalar_mult(self.gx, self.gy, k)

    def lift_x(self, x: int) -> Tuple[int, int]:
        """
        Return the point (x, y) on the curve with the given x-coordinate.

        Of the two candidate y-values the one that is smaller in [0, P) is
        returned.

        Raises:
        PointNotOnCurveError: If x^3 + Ax + B is not a square modulo P.
        """
        p = self.p
        x = x % p
        rhs = (pow(x, 3, p) + self.a * x + self.b) % p
        y = sqrt_mod(rhs, p)
        if y is None:
            raise PointNotOnCurveError(f"{x} is not the x-coordinate of a point on {self.name}")
        y = int(y)
        if y > p - y:
            y = p - y

        return x, y


_siec255: Optional[CurveParams] = None
_siec255_lock = Lock()


def siec255() -> CurveParams:
    """Return the SIEC255 curve, constructing it on first use."""
    global _siec255
    if _siec255 is None:
        with _siec255_lock:
            if _siec255 is None:
                _siec255 = CurveParams(
                    name=constants.NAME,
                    p=constants.P,
                    n=constants.N,
                    a=constants.A,
                    b=constants.B,
                    gx=constants.G_x,
                    gy=constants.G_y,
                    bit_size=constants.BIT_SIZE,
                )
                logger.debug("initialized curve %s", _siec255.name)
    return _siec255
