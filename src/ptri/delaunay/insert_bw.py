'''
Created on Oct 19, 2026

Incremental Delaunay triangulation (Bowyer-Watson) inside a super triangle.
'''

import logging
import time
from math import sqrt

from ptri.delaunay.tds import SUPER, box, Triangle, Triangulation, Mesh
from ptri.delaunay.preds import orient2d

SQRT3 = sqrt(3.0)


def as_points(points):
    """Converts a sequence of point-likes into a list of 2-tuples of floats
    """
    result = []
    for pt in points:
        if len(pt) != 2:
            raise ValueError("Point {} is not 2D".format(pt))
        result.append((float(pt[0]), float(pt[1])))
    return result


def generate_super_triangle(bounds):
    """Given an axis-aligned box ((xmin, ymin), (xmax, ymax)), returns
    three vertices of a triangle that strictly contains the box.
    """
    (xmin, ymin), (xmax, ymax) = bounds
    dx = xmax - xmin
    dy = ymax - ymin
    # a flat box still needs a triangle with some height / width
    if dx == 0.0:
        dx = dy or 1.0
    if dy == 0.0:
        dy = dx or 1.0
    # make the box slightly bigger
    dx *= 1.01
    dy *= 1.01
    xmin -= dx
    ymin -= dy
    xmax += dx
    ymax += dy
    dx *= 3.0
    dy *= 3.0
    return ((xmin - dy * SQRT3 / 3.0, ymin),
            (xmax + dy * SQRT3 / 3.0, ymin),
            ((xmin + xmax) * 0.5, ymax + dx * SQRT3 * 0.5))


def cull_super(triangles):
    """Returns the triangles that do not use any super triangle vertex"""
    return [t for t in triangles if min(t[0], t[1], t[2]) >= SUPER]


class BowyerWatsonInserter(object):
    """Class to insert points into a Triangulation.

    Every triangle whose circumscribed circle contains the new point is
    removed; the hole left behind is star-shaped as seen from the new point
    and is filled by connecting the point to the edges on its boundary.
    """

    __slots__ = ('triangulation', 'visits', 'removals')

    def __init__(self, triangulation):
        self.triangulation = triangulation
        self.visits = 0
        self.removals = 0

    def insert(self, points):
        """Insert a list of points into the triangulation.

        Point k of the list ends up at position k + 3 of the vertices.
        """
        self.initialize(points)
        for j, pt in enumerate(points):
            self.insert_point(pt, j + SUPER)
            if (j % 1000) == 0:
                logging.debug(" inserted {} / {}".format(j, len(points)))

    def initialize(self, points):
        """Seeds the triangulation with a super triangle around the points
        and reserves room for the points to be inserted.
        """
        super_vertices = generate_super_triangle(box(points))
        vertices = self.triangulation.vertices
        del vertices[:]
        vertices.extend(super_vertices)
        vertices.extend([None] * len(points))
        a, b, c = super_vertices
        self.triangulation.triangles = [Triangle(a, b, c, 0, 1, 2)]

    def insert_point(self, v, i):
        """Stores v at position i and retriangulates around it.

        Position i must be a reserved slot after the super triangle.
        """
        vertices = self.triangulation.vertices
        if not SUPER <= i < len(vertices):
            raise ValueError(
                "Insertion index {} outside [{}, {})".format(
                    i, SUPER, len(vertices)))
        vertices[i] = v
        # edges of removed triangles, shared edges cancel out
        boundary = set()
        keep = []
        for triangle in self.triangulation.triangles:
            self.visits += 1
            if triangle.is_in_circumcircle(v):
                boundary.symmetric_difference_update(triangle.edges())
                self.removals += 1
            else:
                keep.append(triangle)
        for edge in sorted(boundary):
            keep.append(Triangle(v, vertices[edge.i0], vertices[edge.i1],
                                 i, edge.i0, edge.i1))
        self.triangulation.triangles = keep


def orient_ccw(mesh):
    """Returns a mesh where all triangles are oriented counterclockwise.

    Clockwise triangles get their first two indices swapped.
    """
    triangles = []
    for t in mesh.triangles:
        a, b, c = mesh.corners(t)
        if orient2d(a, b, c) < 0:
            t = (t[1], t[0], t[2])
        triangles.append(t)
    return Mesh(mesh.points, triangles, mesh.offset,
                mesh.sources, mesh.shifts)


def triangulate(points):
    """Delaunay triangulation of a list of points.

    Returns a Mesh. Its points start with the 3 super triangle vertices
    (mesh.offset == 3), followed by the input points in the given order;
    triangle indices refer to this list. Use mesh.without_super() to get
    indices into the input list.

    With fewer than 3 points an empty Mesh (no points, no triangles)
    is returned.
    """
    pts = as_points(points)
    if len(pts) < 3:
        logging.debug("{} points, nothing to triangulate".format(len(pts)))
        return Mesh()
    if len(set(pts)) != len(pts):
        raise ValueError("Duplicate point found for insertion")

    start = time.perf_counter()
    dt = Triangulation()
    incremental = BowyerWatsonInserter(dt)
    incremental.insert(pts)
    end = time.perf_counter()
    logging.debug("Triangulating took: " + str(end - start) + " secs")
    logging.debug("{} triangles".format(len(dt.triangles)))
    logging.debug("{} vertices".format(len(dt.vertices)))
    logging.debug("{} visits".format(incremental.visits))
    logging.debug("{} removals".format(incremental.removals))
    logging.debug(str(float(incremental.visits) / len(pts)) +
                  " visits per insert")

    triangles = cull_super(t.vertices for t in dt.triangles)
    logging.debug("{} triangles after removing super triangle".format(
        len(triangles)))
    return Mesh(dt.vertices, triangles, offset=SUPER)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    from ptri.delaunay.helpers import random_circle_vertices
    triangulate(random_circle_vertices(1500))
