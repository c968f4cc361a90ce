'''
Created on Oct 19, 2026

Triangulation data structures.

Triangles and edges refer to vertices by their integer position in a
shared point list; they never hold references to each other.
'''
from ptri.delaunay.preds import circumcenter, distance2, in_circumcircle

# number of leading slots in the point list taken by the super triangle
SUPER = 3


def box(points):
    """Obtain a tight fitting axis-aligned box around point set"""
    xmin = min(points, key=lambda x: x[0])[0]
    ymin = min(points, key=lambda x: x[1])[1]
    xmax = max(points, key=lambda x: x[0])[0]
    ymax = max(points, key=lambda x: x[1])[1]
    return (xmin, ymin), (xmax, ymax)


class Edge(object):
    """An edge is an unordered pair of vertex indices.

    The smaller index is always stored first, so that Edge(a, b) and
    Edge(b, a) compare (and hash) equal.
    """

    __slots__ = ('i0', 'i1')

    def __init__(self, a, b):
        if a < b:
            self.i0, self.i1 = a, b
        elif a > b:
            self.i0, self.i1 = b, a
        else:
            raise ValueError('same start as end point: {}'.format(a))

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.i0 == other.i0 and self.i1 == other.i1

    def __lt__(self, other):
        # lexicographic on (i0, i1)
        if self.i0 != other.i0:
            return self.i0 < other.i0
        return self.i1 < other.i1

    def __hash__(self):
        return hash((self.i0, self.i1))

    def __iter__(self):
        yield self.i0
        yield self.i1

    def __str__(self):
        return "[ ({0}) ({1}) ]".format(self.i0, self.i1)

    def __repr__(self):
        return "Edge({0}, {1})".format(self.i0, self.i1)


class Triangle(object):
    """Triangle with three vertex indices (no particular winding) and
    the circumscribed circle of its vertex positions.

    The circle is computed once, from the positions given at construction.
    """

    __slots__ = ('vertices', 'center', 'radius_sq')

    def __init__(self, a, b, c, i0, i1, i2):
        if i0 == i1 or i1 == i2 or i2 == i0:
            raise ValueError(
                "Triangle needs 3 distinct vertices, got {}".format(
                    (i0, i1, i2)))
        self.vertices = (i0, i1, i2)
        self.center = circumcenter(a, b, c)
        self.radius_sq = distance2(a, self.center)

    def __getitem__(self, i):
        return self.vertices[i]

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.vertices == other.vertices

    def __hash__(self):
        return hash(self.vertices)

    def __str__(self):
        return "[ ({0[0]}) ({0[1]}) ({0[2]}) ]".format(self.vertices)

    def is_in_circumcircle(self, p):
        return in_circumcircle(self.center, self.radius_sq, p)

    def edges(self):
        """The three edges of the triangle"""
        i0, i1, i2 = self.vertices
        return (Edge(i0, i1), Edge(i1, i2), Edge(i2, i0))

    @property
    def is_finite(self):
        """True if none of the vertices is a super triangle vertex"""
        return min(self.vertices) >= SUPER


class Triangulation(object):
    """Triangulation data structure, mutated while points are inserted"""

    def __init__(self):
        self.vertices = []
        self.triangles = []


class Mesh(object):
    """Result of a triangulation: points and triangles (index triples).

    ``offset`` is the number of leading points that belong to the super
    triangle (no triangle refers to them). For a periodic mesh ``sources``
    holds per point the index of the input point it copies, and ``shifts``
    the integer tile offset (dx, dy) of that copy.
    """

    __slots__ = ('points', 'triangles', 'offset', 'sources', 'shifts')

    def __init__(self, points=(), triangles=(), offset=0,
                 sources=None, shifts=None):
        self.points = tuple(points)
        self.triangles = tuple(tuple(t) for t in triangles)
        self.offset = offset
        self.sources = tuple(sources) if sources is not None else None
        self.shifts = tuple(shifts) if shifts is not None else None

    def __str__(self):
        return "Mesh({0} points, {1} triangles)".format(
            len(self.points), len(self.triangles))

    __repr__ = __str__

    @property
    def num_points(self):
        return len(self.points)

    @property
    def num_triangles(self):
        return len(self.triangles)

    @property
    def is_empty(self):
        return not self.triangles

    def corners(self, triangle):
        """Positions of the three vertices of an index triple"""
        return tuple(self.points[i] for i in triangle)

    def without_super(self):
        """Rebased copy without the super triangle slots
        (points[offset:], all indices shifted down by offset)
        """
        if self.offset == 0:
            return self
        k = self.offset
        return Mesh(self.points[k:],
                    [(a - k, b - k, c - k) for (a, b, c) in self.triangles])
