'''
Created on Oct 19, 2026

Point set generators (for sampling, and for testing purposes).
'''
from math import sqrt, pi, cos, sin
from random import Random


def random_unit_square_vertices(n=10, seed=1032481):
    """Returns a list with n random vertices in [0, 1) x [0, 1)

    The same seed gives the same point set.
    """
    rng = Random(seed)
    return [(rng.random(), rng.random()) for _ in range(n)]


def random_circle_vertices(n=10, cx=0, cy=0, seed=None):
    """Returns a list with n random vertices in a circle

    Method according to:

    http://www.anderswallin.net/2009/05/uniform-random-points-in-a-circle-using-polar-coordinates/
    """
    rng = Random(seed)
    vertices = []
    for _ in range(n):
        r = sqrt(rng.random())
        t = 2 * pi * rng.random()
        x = r * cos(t)
        y = r * sin(t)
        vertices.append((x+cx, y+cy))
    vertices = list(set(vertices))
    vertices.sort()
    return vertices


def radical_inverse(n, base):
    """Mirrors the digits of n (in the given base) around the radix point"""
    val = 0.0
    inv_base = 1.0 / base
    inv_bi = inv_base
    while n > 0:
        n, d = divmod(n, base)
        val += d * inv_bi
        inv_bi *= inv_base
    return val


def halton_vertices(n=10, seed=0):
    """Returns n points of the 2D Halton sequence (bases 2 and 3).

    The sequence continues after position *seed*: the first point returned
    is number seed + 1, so consecutive calls can pass the number of points
    generated so far to continue the sequence.
    """
    return [(radical_inverse(k, 2), radical_inverse(k, 3))
            for k in range(seed + 1, seed + n + 1)]
