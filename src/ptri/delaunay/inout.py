'''
Created on Oct 19, 2026

Text output of meshes.
'''


def output_vertices(mesh, fh):
    """Output the points of a mesh as WKT to text file (for QGIS)

    Super triangle points are marked as not finite.
    """
    fh.write("id;wkt;finite\n")
    for i, pt in enumerate(mesh.points):
        fh.write("{0};POINT({1[0]} {1[1]});{2}\n".format(
            i, pt, i >= mesh.offset))


def output_triangles(mesh, fh):
    """Output the triangles of a mesh as WKT to text file (for QGIS)"""
    fh.write("id;wkt;v0;v1;v2\n")
    for i, t in enumerate(mesh.triangles):
        corners = mesh.corners(t)
        ring = ", ".join("{0[0]} {0[1]}".format(pt)
                         for pt in corners + corners[:1])
        fh.write("{0};POLYGON(({1}));{2[0]};{2[1]};{2[2]}\n".format(
            i, ring, t))


def format_mesh(mesh):
    """Lists points and triangle edges, with 1-based vertex numbers:

        points = {
        {x, y}, {x, y}, ...}
        edges = {
        {a, b}, {b, c}, {c, a}, ...}

    Super triangle points are left out, indices are rebased accordingly.
    """
    mesh = mesh.without_super()
    points = ", ".join("{{{0[0]:.3f}, {0[1]:.3f}}}".format(pt)
                       for pt in mesh.points)
    edges = ", ".join(
        "{{{0}, {1}}}, {{{1}, {2}}}, {{{2}, {0}}}".format(a + 1, b + 1, c + 1)
        for (a, b, c) in mesh.triangles)
    return "points = {{\n{0}}}\nedges = {{\n{1}}}\n".format(points, edges)
