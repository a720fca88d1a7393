"""
This module defines the Point class, which represents points on the SIEC255
elliptic curve. It includes methods for point arithmetic such as addition,
doubling, negation and scalar multiplication, as well as recovery of a point
from its x-coordinate.

Unlike the coordinate-level functions of CurveParams, which encode the point
at infinity as the sentinel pair (0, 0), a Point represents infinity
explicitly by leaving both coordinates unset.
"""

from __future__ import annotations
from typing import Optional, Tuple
from .curve import CurveParams, siec255, INFINITY


class Point:
    """Class representing an elliptic curve point."""

    def __init__(
        self,
        x: Optional[int] = None,
        y: Optional[int] = None,
        curve: Optional[CurveParams] = None,
    ):
        """
        Initialize a point on an elliptic curve.

        Parameters:
        x (Optional[int], optional): The x-coordinate of the point.
            Defaults to None, representing the point at infinity.
        y (Optional[int], optional): The y-coordinate of the point.
            Defaults to None, also representing the point at infinity.
        curve (Optional[CurveParams], optional): The curve the point lives on.
            Defaults to SIEC255.

        The point at infinity serves as the identity element in elliptic curve addition.
        The (0, 0) sentinel used by CurveParams also denotes it.
        """
        if x == 0 and y == 0:
            x = y = None

        self.x = x
        self.y = y
        self.curve = curve if curve is not None else siec255()

    @classmethod
    def from_tuple(cls, xy: Tuple[int, int], curve: Optional[CurveParams] = None) -> Point:
        """
        Build a Point from a coordinate pair, mapping the (0, 0) sentinel to
        the point at infinity.
        """
        if xy == INFINITY:
            return cls(curve=curve)
        return cls(xy[0], xy[1], curve)

    def to_tuple(self) -> Tuple[int, int]:
        """
        Return the coordinates of the point as a pair, with the point at
        infinity mapped to the (0, 0) sentinel.
        """
        if self.is_zero():
            return INFINITY
        return self.x, self.y

    def is_zero(self) -> bool:
        """
        Check if the point is the identity element (point at infinity) in elliptic curve arithmetic.

        Returns:
        bool: True if the point is at infinity, False otherwise.
        """
        return self.x is None or self.y is None

    def is_on_curve(self) -> bool:
        """Check if the point is the point at infinity or satisfies the curve equation."""
        if self.is_zero():
            return True
        return self.curve.is_on_curve(self.x, self.y)

    def __eq__(self, other: object) -> bool:
        """
        Determine if this point is equal to another point by comparing their
        coordinates and curves.
        """
        if not isinstance(other, Point):
            return NotImplemented
        return (
            self.x == other.x and self.y == other.y and self.curve == other.curve
        )

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.curve.name))

    def __neg__(self) -> Point:
        """
        Negate the point on the elliptic curve.

        Returns:
        Point: A new Point that is the negation of the current point. If the
        current point is at infinity, it returns the point at infinity.
        """
        if self.is_zero():
            return self

        return self.__class__(self.x, (-self.y) % self.curve.p, self.curve)

    def double(self) -> Point:
        """Return the point added to itself."""
        if self.is_zero():
            return self
        return self.from_tuple(self.curve.double(self.x, self.y), self.curve)

    def __add__(self, other: Point) -> Point:
        """
        Add two points on an elliptic curve.

        Parameters:
        other (Point): Another point to add to this point.

        Returns:
        Point: The sum of the two points as a new Point object.

        Raises:
        ValueError: If other is not a Point or lies on a different curve.
        """
        if not isinstance(other, Point):
            raise ValueError("The other object must be an instance of Point")
        if self.curve != other.curve:
            raise ValueError("Cannot add points on different curves")

        if self.is_zero():
            return other
        if other.is_zero():
            return self

        return self.from_tuple(
            self.curve.add(self.x, self.y, other.x, other.y), self.curve
        )

    def __sub__(self, other: Point) -> Point:
        """
        Subtract one point from another on an elliptic curve.

        Raises:
        ValueError: If other is not a Point.
        """
        if not isinstance(other, Point):
            raise ValueError("The other object must be an instance of Point")

        return self + -other

    def __rmul__(self, scalar: int) -> Point:
        """
        Multiply this point by a non-negative integer scalar using the
        double-and-add method. The scalar is not reduced modulo the order of
        the base point.

        Raises:
        ValueError: If the scalar is not a non-negative integer.
        """
        if not isinstance(scalar, int) or scalar < 0:
            raise ValueError("The scalar must be a non-negative integer")
        if self.is_zero():
            return self

        k = scalar.to_bytes((scalar.bit_length() + 7) // 8, "big")
        return self.from_tuple(
            self.curve.scalar_mult(self.x, self.y, k), self.curve
        )

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        return f"X: 0x{self.x:x}\nY: 0x{self.y:x}"

    def __repr__(self) -> str:
        if self.is_zero():
            return f"{self.__class__.__name__}(x=None, y=None)"
        return f"{self.__class__.__name__}(x={self.x}, y={self.y})"


def lift_x(x: int, curve: Optional[CurveParams] = None) -> Point:
    """
    Recover the point with the given x-coordinate whose y-coordinate is the
    smaller of its two roots in [0, P).

    Raises:
    PointNotOnCurveError: If no point on the curve has this x-coordinate.
    """
    curve = curve if curve is not None else siec255()
    x, y = curve.lift_x(x)
    return Point(x, y, curve)


# The generator point G
G: Point = Point(siec255().gx, siec255().gy)
