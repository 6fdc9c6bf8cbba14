# -*- coding: utf-8 -*-
# vectormath/core/__init__.py

"""
Core Subfolder:
---------------
Algebraic substrate used by every geometry routine.

Modules:
--------
- vector: Vector, a fixed-length real vector (add/subtract/dot/cross, normalize,
          invert, rotate2d, signed_angle, angle).

- matrix: Matrix of Vector rows (shape validation, determinant, trace, transpose,
          diagonalize, extract, Cramer's-rule solve, products).
"""

from .vector import Vector
from .matrix import Matrix

__all__ = ["Vector", "Matrix"]
