"""Obstacle shapes and their distance functions.

The shape set is closed: a :data:`Shape` is either a :class:`Circle` or a
:class:`Rectangle`.  :func:`shape_sdf` resolves the variant with a single
switch, and both classes route their ``sdf`` / ``outer_distance`` methods
through it.

Sign conventions differ between the variants:

- ``Circle`` is signed: negative inside, zero on the boundary.
- ``Rectangle`` is unsigned: every interior point reads 0, so a caller can
  not tell "touching" from "deep inside".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import numpy as np
import numpy.typing as npt

from . import primitives as sdf
from .vector import Point

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]


# ===========================================================================
# Shape variants
# ===========================================================================

@dataclass(frozen=True)
class Circle:
    """Disk obstacle (or the camera) centred at *origin*."""

    origin: Point
    radius: float

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"Circle radius must be >= 0, got {self.radius}")

    def sdf(self, p: _Array) -> _Array:
        """Evaluate the distance at *p* (shape ``(..., 2)``)."""
        return shape_sdf(self, p)

    def outer_distance(self, point: Point) -> float:
        return outer_distance(self, point)

    def contains(self, point: Point) -> bool:
        """Strictly inside the disk."""
        return self.origin.distance(point) < self.radius


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box obstacle with *origin* at its top-left corner."""

    origin: Point
    width: float
    height: float
    _lo: _Array = field(init=False, repr=False, compare=False)
    _hi: _Array = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Rectangle size must be positive, got {self.width}x{self.height}"
            )
        lo = self.origin.as_array()
        object.__setattr__(self, "_lo", lo)
        object.__setattr__(self, "_hi", lo + np.array([self.width, self.height]))

    @property
    def bounds(self) -> tuple[_Array, _Array]:
        """``(lo, hi)`` corner arrays."""
        return self._lo, self._hi

    def center(self) -> Point:
        return Point(self.origin.x + self.width / 2, self.origin.y + self.height / 2)

    def sdf(self, p: _Array) -> _Array:
        """Evaluate the (unsigned) distance at *p* (shape ``(..., 2)``)."""
        return shape_sdf(self, p)

    def outer_distance(self, point: Point) -> float:
        return outer_distance(self, point)


Shape = Union[Circle, Rectangle]


# ===========================================================================
# Dispatch
# ===========================================================================

def shape_sdf(shape: Shape, p: _Array) -> _Array:
    """Distance from every point in *p* to the boundary of *shape*."""
    p = np.asarray(p, dtype=float)
    if isinstance(shape, Circle):
        return sdf.sdCircle(p, shape.origin.as_array(), shape.radius)
    if isinstance(shape, Rectangle):
        lo, hi = shape.bounds
        return sdf.udRect2D(p, lo, hi)
    raise TypeError(f"Unsupported shape type: {type(shape).__name__}")


def outer_distance(shape: Shape, point: Point) -> float:
    """Scalar lower bound on how far *point* may move without crossing *shape*."""
    return float(shape_sdf(shape, point.as_array()))
