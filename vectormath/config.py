# -*- coding: utf-8 -*-
# vectormath/config.py

"""
Project: vectormath
Date: 3/2/2026

Purpose:
--------
Central registry of numeric tolerances and labels used by the geometry kernels.

Main Tasks:
-----------
   - Provide `DEFAULTS` (nested dict) for intersection tolerance and face labels.
   - Merge caller overrides over the defaults without mutating either.
   - Allow the intersection epsilon to be overridden from the environment
     (VECTORMATH_INTERSECTION_EPS) for batch runs.

Notes:
------
   - Unknown keys in overrides are kept as-is; consumers read only what they know.
"""

from typing import Any, Dict, Optional
import copy
import os

ENV_INTERSECTION_EPS = "VECTORMATH_INTERSECTION_EPS"

DEFAULTS: Dict[str, Any] = {
    "intersection": {
        # perpendicular deviation allowed between a candidate point and segment 0
        "eps": 1e-12,
    },
    "polygon": {
        "face_left": "f1",
        "face_right": "f2",
    },
}

__all__ = ["DEFAULTS", "ENV_INTERSECTION_EPS", "get_config", "intersection_eps", "face_labels"]


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _env_overrides() -> Dict[str, Any]:
    raw = os.environ.get(ENV_INTERSECTION_EPS)
    if raw is None or raw.strip() == "":
        return {}
    try:
        eps = float(raw)
    except ValueError:
        raise ValueError("{} must be a number (got {!r})".format(ENV_INTERSECTION_EPS, raw))
    if eps < 0.0:
        raise ValueError("{} must be >= 0 (got {})".format(ENV_INTERSECTION_EPS, eps))
    return {"intersection": {"eps": eps}}


def get_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Build the effective configuration.

    Precedence (lowest to highest): DEFAULTS, environment, `overrides`.

    Parameters
    ----------
    overrides : dict, optional
        Same nested structure as `DEFAULTS`.

    Returns
    -------
    dict
        A fresh nested dict; safe to mutate.
    """
    cfg = _deep_merge(DEFAULTS, _env_overrides())
    return _deep_merge(cfg, overrides)


def intersection_eps(config: Optional[Dict[str, Any]] = None) -> float:
    """
    Tolerance used by the segment intersection primitive.

    Without `config` only DEFAULTS and the environment are read; no merged copy is built.
    """
    if not config:
        section = _env_overrides().get("intersection", DEFAULTS["intersection"])
        return float(section["eps"])
    cfg = get_config(config)
    return float(cfg["intersection"]["eps"])


def face_labels(config: Optional[Dict[str, Any]] = None):
    """(left, right) face labels stamped on every half-edge record."""
    poly = get_config(config)["polygon"]
    return str(poly["face_left"]), str(poly["face_right"])
