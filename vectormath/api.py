# -*- coding: utf-8 -*-
# vectormath/api.py

"""
Project: vectormath
Date: 3/6/2026

Purpose
-------
Thin, import-only façade over the kernels, so callers can write

    from vectormath.api import Vector, intersection, convex_hull

without knowing the package layout.

Notes
-----
- Absent geometric results are None (no intersection, rejected polygon, singular solve);
  malformed input raises one of the errors re-exported here.
"""

from .core.vector import Vector
from .core.matrix import Matrix
from .models.half_edge import HalfEdgeRecord
from .polygon.intersection import intersection
from .polygon.convex_hull import convex_hull
from .polygon.edge_list import doubly_connected_edge_list, build_polygon_boundary
from .polygon.polygon import Polygon
from .errors import (
    VectorMathError,
    ShapeMismatchError,
    TypeMismatchError,
    RangeError,
    RaggedMatrixError,
)

__all__ = [
    "Vector",
    "Matrix",
    "HalfEdgeRecord",
    "intersection",
    "convex_hull",
    "doubly_connected_edge_list",
    "build_polygon_boundary",
    "Polygon",
    "VectorMathError",
    "ShapeMismatchError",
    "TypeMismatchError",
    "RangeError",
    "RaggedMatrixError",
]
