# -*- coding: utf-8 -*-
# vectormath/polygon/convex_hull.py

"""
Project: vectormath
Date: 3/5/2026

Purpose:
--------
2D convex hull by the monotone-chain (Andrew's) algorithm.

Pipeline:
---------
sort (x asc, then y asc) → chain left-to-right → chain right-to-left
→ drop the second chain's end points (shared) → concatenate.

Notes:
------
   - Result is counter-clockwise and starts at the left-most (lowest) point.
   - Each chain keeps only strict left turns, so collinear boundary points and
     repeated points are removed.
   - Fewer than 3 points: the input is returned unchanged (same object).
   - Fewer than 3 distinct points: the distinct points, sorted.
   - The caller's list is never reordered; hull entries are the caller's Vector objects.
"""

from typing import List, Sequence
import logging

from ..core.vector import Vector
from ..errors import ShapeMismatchError

logger = logging.getLogger(__name__)

__all__ = ["convex_hull"]


def _is_left_turn(a: Vector, b: Vector, c: Vector) -> bool:
    """
    Strict left turn a -> b -> c, i.e. signed_angle(b - a, c - b) > 0.

    A straight continuation (angle 0) or a repeated point is not a left turn.
    """
    incoming = b.subtract(a)
    outgoing = c.subtract(b)
    if incoming.distance == 0 or outgoing.distance == 0:
        return False
    return incoming.signed_angle(outgoing) > 0


def _reduce(chain: List[Vector]) -> None:
    """Drop middle points until the last three points make a strict left turn."""
    while len(chain) > 2:
        c = len(chain) - 1
        if _is_left_turn(chain[c - 2], chain[c - 1], chain[c]):
            return
        del chain[c - 1]


def convex_hull(points: Sequence[Vector]) -> Sequence[Vector]:
    """
    Convex hull of a planar point set.

    Parameters
    ----------
    points : sequence of Vector
        2D points in any order.

    Returns
    -------
    list of Vector
        Hull boundary, counter-clockwise. Inputs with fewer than 3 points are
        returned as-is.

    Raises
    ------
    ShapeMismatchError
        If a point is not 2-dimensional.
    """
    if len(points) < 3:
        return points

    coerced = [p if isinstance(p, Vector) else Vector.from_sequence(p) for p in points]
    for p in coerced:
        if len(p) != 2:
            raise ShapeMismatchError("Vectors must be 2-dimensional", {"dimension": len(p)})

    ordered: List[Vector] = []
    for p in sorted(coerced, key=lambda p: (p[0], p[1])):
        if not ordered or ordered[-1] != p:
            ordered.append(p)
    if len(ordered) < 3:
        # all points coincide, or only two distinct positions
        return ordered

    first = [ordered[0], ordered[1]]
    for p in ordered[2:]:
        first.append(p)
        _reduce(first)

    second = [ordered[-1], ordered[-2]]
    for p in reversed(ordered[:-2]):
        second.append(p)
        _reduce(second)

    hull = first + second[1:-1]
    logger.debug("convex_hull: %d points -> %d hull vertices.", len(points), len(hull))
    return hull
