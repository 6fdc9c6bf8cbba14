# -*- coding: utf-8 -*-
# vectormath/polygon/polygon.py

"""
Project: vectormath
Date: 3/6/2026

Purpose:
--------
Polygon entity: owns the half-edge records built from its vertices and exposes
axis-aligned bounding ranges for coarse proximity tests between polygons.

Notes:
------
   - A self-intersecting vertex order leaves the polygon with an empty edge list
     (`is_valid` is False); it then has no ranges and is near nothing.
   - Ranges are taken over the edges' start points, i.e. over all vertices.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

from ..core.vector import Vector
from ..models.half_edge import HalfEdgeRecord
from .edge_list import doubly_connected_edge_list

logger = logging.getLogger(__name__)

__all__ = ["Polygon"]


class Polygon:
    """
    Parameters
    ----------
    points : sequence of Vector
        Ordered 2D vertices.
    id : str, optional
        Free-form identifier.
    config : dict, optional
        Forwarded to `doubly_connected_edge_list`.

    Attributes
    ----------
    edge_list : list of HalfEdgeRecord
        Boundary records; empty if construction was rejected.
    is_valid : bool
        False if the vertex order self-intersects.
    """

    def __init__(self, points: Sequence[Vector], id: Optional[str] = None,
                 config: Optional[Dict[str, Any]] = None):
        self.id = id
        edge_list = doubly_connected_edge_list(points, config=config)
        self.is_valid = edge_list is not None
        if not self.is_valid:
            logger.info("Polygon %r self-intersects; using an empty boundary.", id)
        self.edge_list: List[HalfEdgeRecord] = edge_list or []

    def __len__(self) -> int:
        return len(self.edge_list)

    def __repr__(self) -> str:
        return "Polygon(id={!r}, edges={})".format(self.id, len(self.edge_list))

    @property
    def vertices(self) -> List[Vector]:
        """Copies of the vertex positions; editing them leaves the boundary intact."""
        return [r.start.copy() for r in self.edge_list]

    def _range(self, axis: int) -> Optional[Tuple[float, float]]:
        if not self.edge_list:
            return None
        values = [r.start[axis] for r in self.edge_list]
        return (min(values), max(values))

    @property
    def x_range(self) -> Optional[Tuple[float, float]]:
        """(min x, max x) over the vertices, or None for an empty boundary."""
        return self._range(0)

    @property
    def y_range(self) -> Optional[Tuple[float, float]]:
        return self._range(1)

    def near(self, polygon: "Polygon") -> bool:
        """
        Coarse proximity: True unless the bounding ranges are disjoint on either axis.
        Touching ranges count as near.
        """
        xs, ys = self.x_range, self.y_range
        oxs, oys = polygon.x_range, polygon.y_range
        if xs is None or oxs is None:
            return False
        return not (xs[0] > oxs[1] or xs[1] < oxs[0]
                    or ys[0] > oys[1] or ys[1] < oys[0])
