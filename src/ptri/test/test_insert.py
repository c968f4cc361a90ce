import io
import logging
import unittest

from ptri.delaunay import triangulate, orient_ccw
from ptri.delaunay.insert_bw import BowyerWatsonInserter, \
    generate_super_triangle, cull_super
from ptri.delaunay.tds import Triangulation
from ptri.delaunay.preds import orient2d
from ptri.delaunay.check import is_delaunay, boundary_edges, \
    euler_characteristic
from ptri.delaunay.periodic import valences
from ptri.delaunay.helpers import random_circle_vertices
from ptri.delaunay.inout import output_vertices, output_triangles, \
    format_mesh

SQUARE = [(0., 0.), (1., 0.), (0., 1.), (1., 1.)]


class TestSuperTriangle(unittest.TestCase):

    def assert_strictly_inside(self, triangle, pts):
        a, b, c = triangle
        for pt in pts:
            assert orient2d(a, b, pt) > 0
            assert orient2d(b, c, pt) > 0
            assert orient2d(c, a, pt) > 0

    def test_contains_box(self):
        bounds = ((0., 0.), (1., 1.))
        self.assert_strictly_inside(generate_super_triangle(bounds), SQUARE)

    def test_contains_wide_box(self):
        pts = [(-100., 3.), (250., 3.), (-100., 4.), (250., 4.)]
        bounds = ((-100., 3.), (250., 4.))
        self.assert_strictly_inside(generate_super_triangle(bounds), pts)

    def test_flat_box(self):
        pts = [(0., 0.), (4., 0.)]
        self.assert_strictly_inside(
            generate_super_triangle(((0., 0.), (4., 0.))), pts)
        self.assert_strictly_inside(
            generate_super_triangle(((2., 2.), (2., 2.))), [(2., 2.)])


class TestInsert(unittest.TestCase):

    def setUp(self):
        self.pts = random_circle_vertices(60, seed=7)

    def test_triangle_count_before_cull(self):
        dt = Triangulation()
        incremental = BowyerWatsonInserter(dt)
        incremental.insert(self.pts)
        # N points inside the super triangle
        self.assertEqual(len(dt.triangles), 2 * len(self.pts) + 1)
        self.assertEqual(len(dt.vertices), len(self.pts) + 3)
        assert incremental.visits > 0
        assert incremental.removals > 0

    def test_cull_idempotent(self):
        dt = Triangulation()
        BowyerWatsonInserter(dt).insert(self.pts)
        once = cull_super(t.vertices for t in dt.triangles)
        self.assertEqual([t.vertices for t in cull_super(dt.triangles)], once)
        self.assertEqual(cull_super(once), once)
        assert all(min(t) >= 3 for t in once)
        assert len(once) < len(dt.triangles)

    def test_index_out_of_range(self):
        dt = Triangulation()
        incremental = BowyerWatsonInserter(dt)
        incremental.initialize(SQUARE)
        with self.assertRaises(ValueError):
            incremental.insert_point((0.5, 0.5), len(dt.vertices))
        with self.assertRaises(ValueError):
            incremental.insert_point((0.5, 0.5), 1)

    def test_insert_one_point(self):
        dt = Triangulation()
        incremental = BowyerWatsonInserter(dt)
        incremental.initialize([(0.5, 0.5)])
        incremental.insert_point((0.5, 0.5), 3)
        self.assertEqual(len(dt.triangles), 3)
        for t in dt.triangles:
            assert 3 in t.vertices


class TestTriangulate(unittest.TestCase):

    def test_square(self):
        mesh = triangulate(SQUARE)
        self.assertEqual(mesh.offset, 3)
        self.assertEqual(mesh.num_points, 7)
        self.assertEqual(mesh.num_triangles, 2)
        used = set(i for t in mesh.triangles for i in t)
        self.assertEqual(used, set([3, 4, 5, 6]))
        # the two triangles share one diagonal
        t0, t1 = mesh.triangles
        self.assertEqual(len(set(t0) & set(t1)), 2)
        assert is_delaunay(mesh)

    def test_too_few_points(self):
        for pts in ([], [(0., 0.)], [(0., 0.), (1., 1.)]):
            mesh = triangulate(pts)
            assert mesh.is_empty
            self.assertEqual(mesh.num_triangles, 0)
            self.assertEqual(mesh.num_points, 0)

    def test_collinear(self):
        mesh = triangulate([(0., 0.), (1., 0.), (2., 0.)])
        self.assertEqual(mesh.num_triangles, 0)

    def test_duplicate(self):
        with self.assertRaises(ValueError):
            triangulate([(0., 0.), (1., 0.), (0., 1.), (1., 0.)])

    def test_not_2d(self):
        with self.assertRaises(ValueError):
            triangulate([(0., 0., 1.), (1., 0., 1.), (0., 1., 1.)])

    def test_delaunay(self):
        pts = random_circle_vertices(150, 3., -2., seed=11)
        mesh = triangulate(pts)
        assert is_delaunay(mesh)
        self.assertEqual(mesh.points[3:], tuple(pts))

    def test_euler(self):
        pts = random_circle_vertices(120, seed=3)
        mesh = triangulate(pts)
        self.assertEqual(euler_characteristic(mesh), 1)
        used = sum(1 for v in valences(mesh.triangles, mesh.num_points) if v)
        b = len(boundary_edges(mesh))
        self.assertEqual(mesh.num_triangles, 2 * used - 2 - b)

    def test_without_super(self):
        pts = random_circle_vertices(30, seed=5)
        mesh = triangulate(pts)
        rebased = mesh.without_super()
        self.assertEqual(rebased.points, tuple(pts))
        for t, r in zip(mesh.triangles, rebased.triangles):
            self.assertEqual(tuple(i - 3 for i in t), r)

    def test_orient_ccw(self):
        mesh = orient_ccw(triangulate(random_circle_vertices(40, seed=9)))
        for t in mesh.triangles:
            assert orient2d(*mesh.corners(t)) > 0


class TestOutput(unittest.TestCase):

    def test_format(self):
        text = format_mesh(triangulate(SQUARE))
        assert text.startswith(
            "points = {\n{0.000, 0.000}, {1.000, 0.000}, "
            "{0.000, 1.000}, {1.000, 1.000}}\nedges = {\n")
        # 3 edges per triangle, 1-based
        self.assertEqual(text.count("{"), 2 + 4 + 6)
        assert "{0, " not in text

    def test_wkt(self):
        mesh = triangulate(SQUARE)
        fh = io.StringIO()
        output_vertices(mesh, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(len(lines), 1 + 7)
        assert lines[1].endswith(";False")
        self.assertEqual(lines[4], "3;POINT(0.0 0.0);True")
        fh = io.StringIO()
        output_triangles(mesh, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(len(lines), 1 + 2)
        assert lines[1].startswith("0;POLYGON((")


if __name__ == "__main__":
    logging.getLogger().setLevel(logging.DEBUG)
    unittest.main()
