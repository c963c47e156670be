"""
raymarch2d: 2D Sphere-Tracing Sweep
===================================

Casts rays from a fixed camera across a scene of circles and rectangles,
finding obstacle surfaces by sphere tracing over a distance field instead of
ray/shape intersection formulas.  A sweep controller turns the ray one angle
per tick and regenerates a random scene after every full revolution.

Implemented features
--------------------
- Value types: :class:`Point`
- Obstacles: :class:`Circle` (signed), :class:`Rectangle` (unsigned)
- Scene distance field: :class:`Scene`, random scenes via :func:`random_shapes`
- Marcher: :func:`march` with ``parity`` and ``corrected`` stepping modes
- Sweep controller: :func:`setup`, :func:`tick`, :func:`clear_hits`, :func:`reset`
- Grid sampling: :func:`sample_distance_field`

Quick start
-----------

Single ray::

    from raymarch2d import Circle, MarchConfig, Point, Scene, march

    scene  = Scene([Circle(Point(400, 150), 50)], max_vision_distance=1000)
    result = march(Point(300, 150), 0.0, scene, MarchConfig())
    result.hit.position          # Point(x=350.0, y=150.0)

Sweep::

    from raymarch2d import SweepConfig, setup, tick

    state = setup(SweepConfig())
    while True:
        frame = tick(state)      # render frame.hits, frame.ray_endpoint, ...
"""

from .vector import Point
from .geometry import Circle, Rectangle, Shape, outer_distance, shape_sdf
from .config import (
    ConfigurationError,
    MarchConfig,
    MarchMode,
    SceneConfig,
    SweepConfig,
)
from .scene import Scene, ShapeGenerator, random_shapes
from .marcher import Hit, MarchResult, Waypoint, march
from .sweep import SceneState, TickResult, clear_hits, reset, setup, tick
from .grid import canvas_bounds, sample_distance_field, save_npy

__version__ = "0.1.0"

__all__ = [
    # Values and shapes
    "Point",
    "Circle",
    "Rectangle",
    "Shape",
    "outer_distance",
    "shape_sdf",

    # Configuration
    "ConfigurationError",
    "MarchConfig",
    "MarchMode",
    "SceneConfig",
    "SweepConfig",

    # Scene
    "Scene",
    "ShapeGenerator",
    "random_shapes",

    # Marching
    "Hit",
    "MarchResult",
    "Waypoint",
    "march",

    # Sweep controller
    "SceneState",
    "TickResult",
    "clear_hits",
    "reset",
    "setup",
    "tick",

    # Grid utilities
    "canvas_bounds",
    "sample_distance_field",
    "save_npy",
]
