'''
Created on Oct 19, 2026

Validation of triangulation results.
'''
from collections import Counter

from ptri.delaunay.preds import circumcenter, distance2
from ptri.delaunay.tds import Edge
from ptri.delaunay.periodic import valences


def edge_incidence(mesh):
    """Counter with, for every edge, the number of incident triangles"""
    counts = Counter()
    for (a, b, c) in mesh.triangles:
        counts.update((Edge(a, b), Edge(b, c), Edge(c, a)))
    return counts


def boundary_edges(mesh):
    """Edges with only one incident triangle"""
    return [e for e, ct in edge_incidence(mesh).items() if ct == 1]


def euler_characteristic(mesh):
    """V - E + F, only counting vertices that are used by a triangle

    1 for a triangulated disk, 0 for a triangulated torus
    (the latter needs periodic_edge_incidence to count edges).
    """
    used = sum(1 for v in valences(mesh.triangles, len(mesh.points)) if v)
    return used - len(edge_incidence(mesh)) + len(mesh.triangles)


def is_delaunay(mesh, tolerance=1e-9):
    """Checks that no point of the mesh (super triangle points excluded)
    lies strictly inside the circumscribed circle of a triangle.
    """
    points = mesh.points[mesh.offset:]
    for t in mesh.triangles:
        center = circumcenter(*mesh.corners(t))
        radius_sq = distance2(mesh.points[t[0]], center)
        limit = radius_sq * (1.0 - tolerance)
        for pt in points:
            if distance2(pt, center) < limit:
                return False
    return True


def periodic_edge_incidence(mesh):
    """Counter with, for every edge on the torus, its incident triangles.

    An edge on the torus is identified by the two input points it connects
    and the difference of the unit offsets of the two copies used.
    """
    counts = Counter()
    for t in mesh.triangles:
        for a, b in ((t[0], t[1]), (t[1], t[2]), (t[2], t[0])):
            sa, sb = mesh.sources[a], mesh.sources[b]
            dx = mesh.shifts[b][0] - mesh.shifts[a][0]
            dy = mesh.shifts[b][1] - mesh.shifts[a][1]
            counts[min((sa, sb, dx, dy), (sb, sa, -dx, -dy))] += 1
    return counts


def is_closed_periodic(mesh):
    """True if every edge on the torus has exactly two triangles"""
    return all(ct == 2 for ct in periodic_edge_incidence(mesh).values())


def is_compact(mesh):
    """True if all indices are valid and every point is referenced"""
    count = len(mesh.points)
    for t in mesh.triangles:
        if not all(0 <= i < count for i in t):
            return False
    return all(v > 0 for v in valences(mesh.triangles, count))
