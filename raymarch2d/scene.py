"""Scene-wide distance field and random scene generation."""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from . import primitives as sdf
from .config import SceneConfig
from .geometry import Circle, Rectangle, Shape
from .vector import Point

_Array = npt.NDArray[np.floating]

ShapeGenerator = Callable[[SceneConfig, np.random.Generator], Sequence[Shape]]


class Scene:
    """An ordered, immutable collection of obstacles.

    The field value at a point is the minimum ``outer_distance`` over every
    shape, capped at *max_vision_distance*.  Shape parameters are packed into
    arrays once so that each query is a single vectorised evaluation.

    Parameters
    ----------
    shapes:
        Obstacles in draw order.  Order never changes the field value.
    max_vision_distance:
        Ceiling returned for an empty scene or for points further than this
        from every shape.
    """

    def __init__(self, shapes: Iterable[Shape], max_vision_distance: float) -> None:
        self._shapes: Tuple[Shape, ...] = tuple(shapes)
        self.max_vision_distance = float(max_vision_distance)

        circles = [s for s in self._shapes if isinstance(s, Circle)]
        rects = [s for s in self._shapes if isinstance(s, Rectangle)]
        if len(circles) + len(rects) != len(self._shapes):
            bad = next(s for s in self._shapes if not isinstance(s, (Circle, Rectangle)))
            raise TypeError(f"Unsupported shape type: {type(bad).__name__}")

        self._centres = np.array([c.origin.as_array() for c in circles], dtype=float).reshape(-1, 2)
        self._radii = np.array([c.radius for c in circles], dtype=float)
        self._lo = np.array([r.bounds[0] for r in rects], dtype=float).reshape(-1, 2)
        self._hi = np.array([r.bounds[1] for r in rects], dtype=float).reshape(-1, 2)

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        return self._shapes

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self):
        return iter(self._shapes)

    def sdf(self, p: _Array) -> _Array:
        """Evaluate the scene field at *p* (shape ``(..., 2)``)."""
        p = np.asarray(p, dtype=float)
        q = p[..., None, :]
        ceiling = self.max_vision_distance

        d_circles = np.min(
            sdf.sdCircle(q, self._centres, self._radii), axis=-1, initial=ceiling
        )
        d_rects = np.min(
            sdf.udRect2D(q, self._lo, self._hi), axis=-1, initial=ceiling
        )
        return sdf.opUnion(d_circles, d_rects)

    def distance_to_scene(self, point: Point) -> float:
        """Distance from *point* to the closest obstacle, capped at the vision range."""
        return float(self.sdf(point.as_array()))

    def sorted_by_distance(self, point: Point) -> "Scene":
        """Copy of this scene ordered by distance from each shape's origin to *point*."""
        ordered = sorted(self._shapes, key=lambda s: s.origin.distance(point))
        return Scene(ordered, self.max_vision_distance)


# ===========================================================================
# Random generation
# ===========================================================================

def random_shapes(config: SceneConfig, rng: np.random.Generator) -> List[Shape]:
    """Scatter ``shape_count_per_kind`` circles and rectangles over the canvas.

    Origins snap to whole canvas units.  Circles share ``circle_radius``;
    rectangle sides are drawn from ``[rect_min_size, rect_max_size)`` in whole
    units.
    """
    n = config.shape_count_per_kind
    span = config.rect_max_size - config.rect_min_size

    def _origin() -> Point:
        x = np.floor(rng.random() * config.canvas_width)
        y = np.floor(rng.random() * config.canvas_height)
        return Point(float(x), float(y))

    shapes: List[Shape] = []
    for _ in range(n):
        shapes.append(Circle(_origin(), config.circle_radius))

    for _ in range(n):
        origin = _origin()
        width = float(np.floor(rng.random() * span)) + config.rect_min_size
        height = float(np.floor(rng.random() * span)) + config.rect_min_size
        shapes.append(Rectangle(origin, width, height))

    return shapes
