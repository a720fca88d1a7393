"""
These constants define the elliptic curve SIEC255, the short Weierstrass curve
y^2 = x^3 + 19 over a 255-bit prime field. The curve operates over a finite
field of prime order P, with a base point G of prime order N, specified by its
coordinates G_x and G_y.
"""

# SIEC255 constants for elliptic curve cryptography

# The canonical name of the curve
NAME: str = "SIEC255"

# The prime modulus of the field
P: int = 28948022309329048855892746252183396360603931420023084536990047309120118726721

# The order of the base point
N: int = 28948022309329048855892746252183396360263649053102146073526672701688283398081

# Coefficients of y^2 = x^3 + Ax + B
A: int = 0
B: int = 19

# X-coordinate of the generator point G
G_x: int = 5

# Y-coordinate of the generator point G
G_y: int = 12

# The bit length of N
BIT_SIZE: int = 255
