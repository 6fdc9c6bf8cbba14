# -*- coding: utf-8 -*-
# vectormath/polygon/intersection.py

"""
Project: vectormath
Date: 3/4/2026

Purpose:
--------
Intersection point of two planar line segments.

Method:
-------
With e0 = end0 - start0 and e1 = end1 - start1,

    det1    = det | end0   |      det2 = det | end1   |      divisor = det | e0 |
                  | start0 |                 | start1 |                    | e1 |

    P = ( (det1*e1.x - det2*e0.x) / divisor , (det1*e1.y - det2*e0.y) / divisor )

divisor == 0 means parallel or collinear lines: no intersection. A non-finite divisor
or point (NaN or inf coordinates) is no intersection either.

Acceptance (checked against segment 0 only):
--------------------------------------------
   - perpendicular deviation |(end0-start0) x (P-start0)| <= eps,
   - projection (P-start0).(end0-start0) within [0, |end0-start0|^2],
   - P is not exactly start0 or end0 (touching endpoints don't count).
"""

from typing import Optional, Sequence
import logging
import math

from ..config import intersection_eps
from ..core.matrix import Matrix
from ..core.vector import Vector
from ..errors import ShapeMismatchError, TypeMismatchError

logger = logging.getLogger(__name__)

__all__ = ["intersection"]

Segment = Sequence[Vector]


def _is_vector_pair(segment) -> bool:
    if not isinstance(segment, (list, tuple)):
        return False
    return all(isinstance(p, Vector) for p in segment)


def _is_planar(segment: Segment) -> bool:
    return len(segment) == 2 and all(len(p) == 2 for p in segment)


def _clear_negative_zero(point: Vector) -> Vector:
    return Vector(*(0.0 if x == 0.0 else x for x in point))


def _on_segment(point: Vector, segment: Segment, eps: float) -> bool:
    start, end = segment
    ca = point.subtract(start)
    ba = end.subtract(start)

    cross = Matrix.from_rows([ba, ca]).determinant
    product = ca.dot(ba)
    squared_length = ba.distance ** 2

    if abs(cross) > eps or product < 0 or product > squared_length:
        return False
    if point == start or point == end:
        return False
    return True


def intersection(segment0: Segment, segment1: Segment,
                 eps: Optional[float] = None) -> Optional[Vector]:
    """
    Compute where segment0 and segment1 cross.

    Parameters
    ----------
    segment0, segment1 : (Vector, Vector)
        (start, end) pairs of 2D vectors.
    eps : float, optional
        Tolerance for the perpendicular deviation from segment 0.
        Defaults to config `intersection.eps` (1e-12).

    Returns
    -------
    Vector or None
        The intersection point, or None if the segments are parallel or the point
        is not strictly inside segment 0.

    Raises
    ------
    TypeMismatchError
        If a segment is not a list/tuple of Vectors.
    ShapeMismatchError
        If a segment is not exactly two 2D vectors.
    """
    if not _is_vector_pair(segment0) or not _is_vector_pair(segment1):
        raise TypeMismatchError("Intersection requires Vectors as input")
    if not (_is_planar(segment0) and _is_planar(segment1)):
        raise ShapeMismatchError(
            "To compute the 2 dimensional intersection, 2 dimensional vectors are required: "
            "segments must be 2-dimensional"
        )
    tol = intersection_eps() if eps is None else float(eps)

    start0, end0 = segment0
    start1, end1 = segment1
    edge0 = end0.subtract(start0)
    edge1 = end1.subtract(start1)

    det1 = Matrix.from_rows([end0, start0]).determinant
    det2 = Matrix.from_rows([end1, start1]).determinant
    divisor = Matrix.from_rows([edge0, edge1]).determinant

    if divisor == 0 or not math.isfinite(divisor):
        return None

    point = Vector(
        (det1 * edge1[0] - det2 * edge0[0]) / divisor,
        (det1 * edge1[1] - det2 * edge0[1]) / divisor,
    )
    if not all(math.isfinite(x) for x in point):
        return None
    point = _clear_negative_zero(point)

    if not _on_segment(point, segment0, tol):
        return None
    return point
