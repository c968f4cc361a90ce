"""ptri - Delaunay triangulation of point sets in the plane and on the torus
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__author__ = 'ptri developers'

from ptri.delaunay import triangulate, triangulate_periodic, Mesh

__all__ = ["triangulate", "triangulate_periodic", "Mesh"]
