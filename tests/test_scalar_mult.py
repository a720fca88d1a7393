import unittest

from siec import INFINITY, N, siec255


class Tests(unittest.TestCase):
    def setUp(self):
        self.curve = siec255()
        self.G = (self.curve.gx, self.curve.gy)

    def test_zero_and_one(self):
        curve = self.curve
        P = curve.scalar_base_mult(b"\x07")
        for point in (self.G, P):
            self.assertEqual(curve.scalar_mult(*point, b"\x00"), INFINITY)
            self.assertEqual(curve.scalar_mult(*point, b""), INFINITY)
            self.assertEqual(curve.scalar_mult(*point, b"\x01"), point)
            self.assertEqual(curve.scalar_mult(*point, b"\x00\x00\x01"), point)

    def test_infinity(self):
        self.assertEqual(self.curve.scalar_mult(*INFINITY, b"\x2a"), INFINITY)

    def test_small_multiples(self):
        curve = self.curve
        acc = INFINITY
        for k in range(1, 20):
            acc = curve.add(*acc, *self.G)
            self.assertEqual(curve.scalar_base_mult(bytes([k])), acc)

    def test_order(self):
        curve = self.curve
        self.assertEqual(curve.scalar_base_mult(N.to_bytes(32, "big")), INFINITY)
        x, y = curve.scalar_base_mult((N - 1).to_bytes(32, "big"))
        self.assertEqual((x, y), (5, curve.p - 12))
        self.assertEqual(curve.scalar_base_mult((N + 1).to_bytes(32, "big")), self.G)

    def test_distributive(self):
        curve = self.curve
        a, b = 0x1234567890ABCDEF, 0xFEDCBA0987654321
        aG = curve.scalar_base_mult(a.to_bytes(8, "big"))
        bG = curve.scalar_base_mult(b.to_bytes(8, "big"))
        sum_G = curve.scalar_base_mult((a + b).to_bytes(9, "big"))
        self.assertEqual(curve.add(*aG, *bG), sum_G)

    def test_scalar_mult_composes(self):
        curve = self.curve
        aG = curve.scalar_base_mult(b"\x11\x22")
        self.assertEqual(
            curve.scalar_mult(*aG, b"\x33"),
            curve.scalar_base_mult((0x1122 * 0x33).to_bytes(3, "big")),
        )

    def test_base_point_unchanged(self):
        curve = self.curve
        curve.scalar_base_mult(b"\xff" * 32)
        self.assertEqual((curve.gx, curve.gy), (5, 12))


if __name__ == "__main__":
    unittest.main()
