# -*- coding: utf-8 -*-
# vectormath/polygon/__init__.py

"""
Polygon Subfolder:
------------------
Planar algorithms built on the core Vector/Matrix kernels.

Modules:
--------
- intersection: Intersection point of two segments (Cramer-style formula, endpoint
                touches excluded, epsilon-tolerant on-segment test).

- convex_hull:  Monotone-chain convex hull, counter-clockwise, collinear points removed.

- edge_list:    Doubly-connected edge list (half-edge records) with self-intersection
                rejection.

- polygon:      Polygon entity with bounding ranges and a `near` proximity test.
"""

from .intersection import intersection
from .convex_hull import convex_hull
from .edge_list import doubly_connected_edge_list, build_polygon_boundary
from .polygon import Polygon

__all__ = [
    "intersection",
    "convex_hull",
    "doubly_connected_edge_list",
    "build_polygon_boundary",
    "Polygon",
]
