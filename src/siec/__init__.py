"""
This package implements arithmetic on SIEC255, the short Weierstrass curve
y^2 = x^3 + 19 over a 255-bit prime field, and key-pair generation on it.

This is a generic, variable-time reference implementation. It is not
hardened against timing side channels and must not be relied on where
they matter.

Modules:
- constants: Holds the SIEC255 curve integers P, N, A, B and the base point.
- curve: Defines CurveParams, the group law on (x, y) coordinate pairs with
  (0, 0) standing for the point at infinity, and the siec255() accessor.
- point: Defines the Point class with an explicit point at infinity, and
  lift_x for recovering a point from its x-coordinate.
- keys: Implements generate_key.
"""

from .curve import CurveParams, PointNotOnCurveError, INFINITY, siec255
from .point import Point, G, lift_x
from .keys import RandomSourceError, generate_key
from .constants import P, N
