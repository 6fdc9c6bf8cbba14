# -*- coding: utf-8 -*-
# vectormath/models/half_edge.py

"""
Project: vectormath
Date: 3/4/2026

Purpose:
--------
One directed edge of a polygon boundary in a doubly-connected edge list (DCEL).
Records are created once per polygon, in vertex order, and never modified.

Conventions:
------------
   - `edge` = end - start.
   - `previous` / `next` are indices into the owning record list (modulo its length).
   - `face_left` / `face_right` are opaque labels ("f1"/"f2" by default).
   - `edge`, `start` and `end` are copies owned by the record; treat them as read-only.
     `Polygon.vertices` hands out further copies.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..core.vector import Vector

__all__ = ["HalfEdgeRecord"]


@dataclass(frozen=True)
class HalfEdgeRecord:
    edge: Vector
    start: Vector
    end: Vector
    face_left: str
    face_right: str
    previous: int
    next: int

    @property
    def segment(self) -> Tuple[Vector, Vector]:
        """(start, end) pair in the form taken by `intersection`."""
        return (self.start, self.end)

    def as_dict(self) -> Dict[str, Any]:
        """Plain-Python snapshot (lists for vectors), e.g. for JSON."""
        return {
            "edge": self.edge.tolist(),
            "start": self.start.tolist(),
            "end": self.end.tolist(),
            "face_left": self.face_left,
            "face_right": self.face_right,
            "previous": self.previous,
            "next": self.next,
        }
