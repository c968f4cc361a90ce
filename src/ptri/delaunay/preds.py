'''
Created on Oct 19, 2026

Geometric predicates.

The orientation test comes from geompreds (robust, adaptive precision).
The circumcircle test is on purpose a plain floating point comparison
against a cached circumcenter and squared radius.
'''
from geompreds import orient2d

__all__ = ("orient2d", "circumcenter", "distance2", "in_circumcircle")


def distance2(pa, pb):
    """Cartesian distance *squared* between two points """
    dx = pa[0] - pb[0]
    dy = pa[1] - pb[1]
    return dx * dx + dy * dy


def _dot(ux, uy, vx, vy):
    return ux * vx + uy * vy


def circumcenter(p1, p2, p3):
    """Center of the circle through p1, p2 and p3

    Uses barycentric weights derived from the dot products at the three
    corners. For collinear points the weights sum to zero; in that case
    a point at infinity is returned.
    """
    d_ca = _dot(p3[0] - p1[0], p3[1] - p1[1], p2[0] - p1[0], p2[1] - p1[1])
    d_ba = _dot(p3[0] - p2[0], p3[1] - p2[1], p1[0] - p2[0], p1[1] - p2[1])
    d_cb = _dot(p1[0] - p3[0], p1[1] - p3[1], p2[0] - p3[0], p2[1] - p3[1])

    n1 = d_ba * d_cb
    n2 = d_cb * d_ca
    n3 = d_ca * d_ba

    bottom = 2.0 * (n1 + n2 + n3)
    if bottom == 0.0:
        return (float('inf'), float('inf'))
    w1 = (n2 + n3) / bottom
    w2 = (n3 + n1) / bottom
    w3 = (n1 + n2) / bottom
    return (w1 * p1[0] + w2 * p2[0] + w3 * p3[0],
            w1 * p1[1] + w2 * p2[1] + w3 * p3[1])


def in_circumcircle(center, radius_sq, pd):
    """Tests whether pd is in the circle given by center and squared radius

    Points exactly on the circle count as inside.
    """
    return distance2(pd, center) <= radius_sq
