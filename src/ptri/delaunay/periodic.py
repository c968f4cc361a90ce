'''
Created on Oct 19, 2026

Delaunay triangulation of the flat torus (unit square with wrap around).

The points are copied into a 3x3 block of unit squares, the block is
triangulated as a whole, and of every triangle only the copy whose lower
left corner (componentwise minimum of its vertices) lies in [0, 1) x [0, 1)
is kept. Unused point copies are removed afterwards.
'''

import logging
import time

from ptri.delaunay.insert_bw import as_points, triangulate
from ptri.delaunay.tds import Mesh

# tile offsets, in the order the copies of one point are stored
OFFSETS = ((-1, -1), (0, -1), (1, -1),
           (-1, 0), (0, 0), (1, 0),
           (-1, 1), (0, 1), (1, 1))
COPIES = len(OFFSETS)


def replicate(points):
    """Copies every point to the 9 unit squares around (and including)
    the unit square; copy j of point i is at position 9 * i + j.
    """
    tiled = []
    for (x, y) in points:
        for (dx, dy) in OFFSETS:
            tiled.append((x + dx, y + dy))
    return tiled


def in_unit_square(pt):
    return 0.0 <= pt[0] < 1.0 and 0.0 <= pt[1] < 1.0


def lower_corner(a, b, c):
    """Componentwise minimum of three points"""
    return (min(a[0], b[0], c[0]), min(a[1], b[1], c[1]))


def canonical_triangles(mesh):
    """Keeps one representative per periodic triangle: the one with its
    lower corner inside the unit square.

    Assumes no triangle spans more than one unit square.
    """
    kept = []
    for t in mesh.triangles:
        if in_unit_square(lower_corner(*mesh.corners(t))):
            kept.append(t)
    return kept


def valences(triangles, count):
    """Number of triangles that reference each of count vertices"""
    result = [0] * count
    for t in triangles:
        for i in t:
            result[i] += 1
    return result


def compact(points, triangles):
    """Removes points not referenced by any triangle.

    Returns (points, triangles, old) where old[k] is the position that
    the k-th remaining point had in the input list.
    """
    valence = valences(triangles, len(points))
    new_index = {}
    kept, old = [], []
    for i, pt in enumerate(points):
        if valence[i] > 0:
            new_index[i] = len(kept)
            kept.append(pt)
            old.append(i)
    renumbered = [tuple(new_index[i] for i in t) for t in triangles]
    return kept, renumbered, old


def triangulate_periodic(points):
    """Delaunay triangulation of points on the flat torus.

    The points should lie in [0, 1) x [0, 1). Returns a Mesh with only
    referenced points (contiguous indices), where every triangle of the
    torus appears once. mesh.sources tells for every point which input
    point it copies, mesh.shifts by which unit offset (dx, dy).
    """
    pts = as_points(points)
    outside = sum(1 for pt in pts if not in_unit_square(pt))
    if outside:
        logging.warning(
            "{} points outside the unit square, "
            "periodic result may be wrong".format(outside))

    start = time.perf_counter()
    tiled = replicate(pts)
    dt = triangulate(tiled).without_super()
    if dt.is_empty:
        logging.debug("no triangles for {} points".format(len(pts)))
        return Mesh(sources=(), shifts=())

    triangles = canonical_triangles(dt)
    logging.debug("{} of {} triangles are canonical".format(
        len(triangles), dt.num_triangles))
    kept, triangles, old = compact(dt.points, triangles)
    end = time.perf_counter()
    logging.debug("Periodic triangulation took: " + str(end - start) +
                  " secs")
    logging.debug("{} vertices kept of {}".format(len(kept), len(tiled)))
    return Mesh(kept, triangles,
                sources=[i // COPIES for i in old],
                shifts=[OFFSETS[i % COPIES] for i in old])


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    from ptri.delaunay.helpers import random_unit_square_vertices
    triangulate_periodic(random_unit_square_vertices(20))
