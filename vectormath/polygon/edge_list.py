# -*- coding: utf-8 -*-
# vectormath/polygon/edge_list.py

"""
Project: vectormath
Date: 3/5/2026

Purpose:
--------
Build the doubly-connected edge list (half-edge records) of a polygon from its
ordered vertices, rejecting self-intersecting vertex orders.

Conventions:
------------
   - Vertex i and vertex (i+1) % n bound edge i; the last edge closes the loop.
   - previous = (i - 1) mod n, next = (i + 1) mod n.
   - A single crossing between any two edges invalidates the whole boundary (None).

Crossing rule:
--------------
   - A new edge is checked against every earlier record except its neighbours in
     the cycle, which share a vertex with it (shared vertices are not crossings).
   - The crossing point must lie inside both edges, so the intersection primitive
     is evaluated with each edge as segment 0.
"""

from typing import Any, Dict, List, Optional, Sequence
import logging

from ..config import face_labels, intersection_eps
from ..core.vector import Vector
from ..errors import ShapeMismatchError
from ..models.half_edge import HalfEdgeRecord
from .intersection import intersection

logger = logging.getLogger(__name__)

__all__ = ["doubly_connected_edge_list", "build_polygon_boundary"]


def _adjacent(i: int, j: int, n: int) -> bool:
    """True if edges i and j share a vertex in a cycle of n edges."""
    return (i - j) % n in (1, n - 1)


def _crosses(a: HalfEdgeRecord, b: HalfEdgeRecord, eps: float) -> Optional[Vector]:
    point = intersection(a.segment, b.segment, eps=eps)
    if point is None:
        return None
    if intersection(b.segment, a.segment, eps=eps) is None:
        return None
    return point


def doubly_connected_edge_list(vertices: Sequence[Vector],
                               config: Optional[Dict[str, Any]] = None
                               ) -> Optional[List[HalfEdgeRecord]]:
    """
    Half-edge records for the closed polygon through `vertices`.

    Parameters
    ----------
    vertices : sequence of Vector
        Ordered 2D vertices; the polygon closes from the last back to the first.
    config : dict, optional
        Overrides for `vectormath.config.DEFAULTS` (face labels, intersection eps).

    Returns
    -------
    list of HalfEdgeRecord or None
        Records in vertex order, or None if any two edges cross.

    Raises
    ------
    ShapeMismatchError
        If a vertex is not 2-dimensional.
    """
    points = [v if isinstance(v, Vector) else Vector.from_sequence(v) for v in vertices]
    for p in points:
        if len(p) != 2:
            raise ShapeMismatchError("Vectors must be 2-dimensional", {"dimension": len(p)})

    left, right = face_labels(config)
    eps = intersection_eps(config)
    n = len(points)
    records: List[HalfEdgeRecord] = []

    for i in range(n):
        start = points[i].copy()
        end = points[(i + 1) % n].copy()
        record = HalfEdgeRecord(
            edge=end.subtract(start),
            start=start,
            end=end,
            face_left=left,
            face_right=right,
            previous=(i - 1) % n,
            next=(i + 1) % n,
        )
        for j, placed in enumerate(records):
            if _adjacent(i, j, n):
                continue
            point = _crosses(placed, record, eps)
            if point is not None:
                logger.debug("Edge %d crosses edge %d at %s; polygon rejected.", i, j, point.tolist())
                return None
        records.append(record)

    return records


def build_polygon_boundary(vertices: Sequence[Vector],
                           config: Optional[Dict[str, Any]] = None
                           ) -> Optional[List[HalfEdgeRecord]]:
    """Alias of `doubly_connected_edge_list`."""
    return doubly_connected_edge_list(vertices, config=config)
