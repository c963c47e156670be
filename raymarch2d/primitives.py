"""Batched distance math for the raymarch2d package.

This module provides:

* **Type alias**: :data:`_F`
* **Vector helpers**: :func:`vec2`, :func:`length`, :func:`dot`, :func:`clamp`
* **Polar offsets**: :func:`polar_offset`
* **Distance kernels**: :func:`sdCircle`, :func:`udRect2D`
* **Combinator**: :func:`opUnion`

All functions accept and return ``numpy.ndarray`` objects and support
broadcasting over arbitrary leading batch dimensions.  A "point array" *p*
has shape ``(..., 2)``; scalar distance results have shape ``(...,)``.

Naming follows Inigo Quilez's convention: ``sd`` for signed distances and
``ud`` for unsigned ones.
https://iquilezles.org/articles/distfunctions2d/
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

__all__ = [
    "_F",
    "vec2", "length", "dot", "clamp",
    "polar_offset",
    "sdCircle", "udRect2D",
    "opUnion",
]


# ===========================================================================
# Vector helpers
# ===========================================================================

def vec2(x: _F, y: _F) -> _F:
    """Stack *x* and *y* into a ``(..., 2)`` array."""
    x, y = np.broadcast_arrays(x, y)
    return np.stack([x, y], axis=-1)


def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


def clamp(x: _F, lo: float | _F, hi: float | _F) -> _F:
    """Clamp *x* element-wise to ``[lo, hi]``."""
    return np.minimum(np.maximum(x, lo), hi)


def polar_offset(origin: _F, angle_deg: float | _F, dist: float | _F) -> _F:
    """Points at *dist* from *origin* along *angle_deg* (degrees, y-down canvas)."""
    rad = np.deg2rad(angle_deg)
    origin = np.asarray(origin, dtype=float)
    return origin + vec2(dist * np.cos(rad), dist * np.sin(rad))


# ===========================================================================
# Distance kernels
# ===========================================================================

def sdCircle(p: _F, c: _F, r: float | _F) -> _F:
    """Circle centred at *c* with radius *r*; negative inside."""
    return length(p - c) - r


def udRect2D(p: _F, lo: _F, hi: _F) -> _F:
    """Axis-aligned rectangle spanning *lo* to *hi*, unsigned.

    The point is clamped into the box and the distance to the clamped point
    is returned, so every interior point reads 0.
    """
    q = clamp(p, lo, hi)
    return length(p - q)


# ===========================================================================
# Combinators
# ===========================================================================

def opUnion(d1: _F, d2: _F) -> _F:
    """Union of two distance fields: ``min(d1, d2)``."""
    return np.minimum(d1, d2)
