# -*- coding: utf-8 -*-
# vectormath/errors.py

"""
Project: vectormath
Date: 3/2/2026

Purpose
-------
Typed exceptions for the algebra and geometry kernels. Every exception carries a short
human-readable message plus an optional context dict that is appended in compact form
by __str__ (e.g. the two operand lengths of a failed addition).

Main Tasks
----------
    1. Define VectorMathError(message, context) with a compact context suffix in __str__.
    2. Provide the four kinds of failure raised by the kernels:
       ShapeMismatchError, TypeMismatchError, RangeError, RaggedMatrixError.
    3. Keep each subclass catchable through the matching builtin (ValueError,
       TypeError, IndexError) so callers don't need to import this module.

Notes
-----
- Legitimately absent results (no intersection, no polygon, no solution) are NOT
  errors; the kernels return None for those.
"""

__all__ = [
    "VectorMathError",
    "ShapeMismatchError",
    "TypeMismatchError",
    "RangeError",
    "RaggedMatrixError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class VectorMathError(Exception):
    """
    Base class for all errors raised by vectormath.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"expected": 3, "actual": 2}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class ShapeMismatchError(VectorMathError, ValueError):
    """
    Operand dimensions disagree with what the operation requires:
      - vector lengths differ (and neither is 1 where broadcasting is allowed)
      - non-square matrix for determinant/trace/identity()
      - incompatible matrix product or solve() vector length
      - non-2D input to planar operations
    """


class TypeMismatchError(VectorMathError, TypeError):
    """
    Operand is none of the accepted kinds (vector, numeric sequence, matrix, real number).
    """


class RangeError(VectorMathError, IndexError):
    """
    An explicit index/range argument is out of bounds or malformed
    (Matrix.extract ranges, identity(size) with a bad size).
    """


class RaggedMatrixError(VectorMathError, ValueError):
    """
    Matrix rows have different lengths. Detected lazily whenever the shape is read.
    """
