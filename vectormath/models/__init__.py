# -*- coding: utf-8 -*-
# vectormath/models/__init__.py

"""
Models Subfolder:
-----------------
Plain records shared by the polygon algorithms.

- half_edge: HalfEdgeRecord, one directed boundary edge of a DCEL.
"""

from .half_edge import HalfEdgeRecord

__all__ = ["HalfEdgeRecord"]
