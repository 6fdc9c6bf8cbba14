# -*- coding: utf-8 -*-
# vectormath/__init__.py

"""
Project: vectormath
Date: 3/6/2026

Modules:
--------
- core:     Vector and Matrix algebra (numpy-backed storage, explicit in-place vs.
            value-returning contracts).

- models:   HalfEdgeRecord, the record type of the doubly-connected edge list.

- polygon:  Planar algorithms:
              * intersection(segment0, segment1) → point or None,
              * convex_hull(points) → CCW hull,
              * doubly_connected_edge_list(vertices) → half-edge records or None,
              * Polygon with bounding ranges and `near`.

- config:   Tolerance/label defaults and override merging.

- errors:   ShapeMismatchError, TypeMismatchError, RangeError, RaggedMatrixError.

- api:      Flat re-export of the public names.

            Usage:
                from vectormath.api import Vector, Matrix, intersection, convex_hull
"""

from .api import (
    Vector,
    Matrix,
    HalfEdgeRecord,
    intersection,
    convex_hull,
    doubly_connected_edge_list,
    build_polygon_boundary,
    Polygon,
    VectorMathError,
    ShapeMismatchError,
    TypeMismatchError,
    RangeError,
    RaggedMatrixError,
)
from .api import __all__  # noqa: F401

__version__ = "0.3.0"
