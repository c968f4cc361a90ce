import unittest

from ptri.delaunay.helpers import random_unit_square_vertices, \
    random_circle_vertices, halton_vertices, radical_inverse


class TestHelpers(unittest.TestCase):

    def test_unit_square_seeded(self):
        pts = random_unit_square_vertices(50, seed=1)
        self.assertEqual(len(pts), 50)
        self.assertEqual(pts, random_unit_square_vertices(50, seed=1))
        self.assertNotEqual(pts, random_unit_square_vertices(50, seed=2))
        for x, y in pts:
            assert 0. <= x < 1. and 0. <= y < 1.

    def test_circle(self):
        pts = random_circle_vertices(100, 2., 3., seed=8)
        self.assertEqual(pts, sorted(pts))
        for x, y in pts:
            assert (x - 2.) ** 2 + (y - 3.) ** 2 <= 1.

    def test_radical_inverse(self):
        self.assertEqual(radical_inverse(1, 2), 0.5)
        self.assertEqual(radical_inverse(6, 2), 0.375)
        self.assertAlmostEqual(radical_inverse(4, 3), 4. / 9.)
        self.assertEqual(radical_inverse(0, 3), 0.)

    def test_halton(self):
        pts = halton_vertices(4)
        expected = [(0.5, 1. / 3.), (0.25, 2. / 3.),
                    (0.75, 1. / 9.), (0.125, 4. / 9.)]
        for (x, y), (ex, ey) in zip(pts, expected):
            self.assertAlmostEqual(x, ex)
            self.assertAlmostEqual(y, ey)

    def test_halton_continues(self):
        self.assertEqual(halton_vertices(3, seed=2), halton_vertices(5)[2:])


if __name__ == "__main__":
    unittest.main()
