"""ptri - Delaunay triangulation of point sets in the plane and on the torus
"""

import logging

from ptri.delaunay.insert_bw import triangulate, orient_ccw
from ptri.delaunay.periodic import triangulate_periodic
from ptri.delaunay.tds import Mesh


__all__ = ("triangulate", "triangulate_periodic", "orient_ccw", "Mesh")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    from ptri.delaunay.helpers import random_unit_square_vertices
    pts = random_unit_square_vertices(250)
    triangulate_periodic(pts)
