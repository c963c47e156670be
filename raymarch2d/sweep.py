"""Angular sweep controller.

The controller owns one :class:`SceneState` and advances it one angle per
:func:`tick`.  It has two states:

Sweeping
    Trace the current angle, collect hits, advance the angle.
Resetting
    Clear the hits, regenerate the scene and rewind the angle.  This happens
    at the end of every revolution and whenever the camera ends up embedded
    in an obstacle.

Nothing here schedules ticks; a host (timer, animation callback, plain loop)
calls :func:`tick` and renders what it returns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .config import SweepConfig
from .geometry import Circle, Shape, outer_distance
from .marcher import Hit, Waypoint, march
from .scene import Scene, ShapeGenerator, random_shapes
from .vector import Point

logger = logging.getLogger(__name__)

# Float slack when testing for a completed revolution
_ANGLE_EPS = 1e-9


@dataclass
class SceneState:
    """Everything one sweep owns.  Never shared between controllers."""

    config: SweepConfig
    camera: Circle
    scene: Scene
    generator: ShapeGenerator
    rng: np.random.Generator
    current_angle: float
    hits: List[Hit] = field(default_factory=list)
    revolution: int = 0


@dataclass(frozen=True)
class TickResult:
    """Geometry produced by one tick, ready to render and discard."""

    angle: float
    hits: Tuple[Hit, ...]
    new_hits: Tuple[Hit, ...]
    debug_waypoints: Tuple[Waypoint, ...]
    ray_endpoint: Point
    did_reset: bool


def _generate_scene(config: SweepConfig, generator: ShapeGenerator,
                    rng: np.random.Generator, camera: Circle) -> Scene:
    shapes = generator(config.scene, rng)
    scene = Scene(shapes, config.march.max_vision_distance)
    return scene.sorted_by_distance(camera.origin)


def setup(config: Optional[SweepConfig] = None,
          generator: ShapeGenerator = random_shapes) -> SceneState:
    """Build the camera and a first scene from *config*.

    *generator* is called with ``(config.scene, rng)`` whenever a new scene
    is needed; pass a fixed generator for deterministic runs.
    """
    config = config or SweepConfig()
    scene_cfg = config.scene
    camera = Circle(Point(*scene_cfg.camera_pos), scene_cfg.camera_radius)
    rng = np.random.default_rng(scene_cfg.seed)
    scene = _generate_scene(config, generator, rng, camera)
    logger.info(
        "Scene generated with %d shapes, camera at (%.1f, %.1f), mode=%s",
        len(scene), camera.origin.x, camera.origin.y, config.march.mode,
    )
    return SceneState(
        config=config,
        camera=camera,
        scene=scene,
        generator=generator,
        rng=rng,
        current_angle=config.angle_start,
    )


def reset(state: SceneState) -> None:
    """Clear hits, regenerate the scene and rewind the angle."""
    state.hits.clear()
    state.scene = _generate_scene(state.config, state.generator, state.rng, state.camera)
    state.current_angle = state.config.angle_start
    state.revolution += 1
    logger.debug("Scene regenerated (%d shapes), revolution %d", len(state.scene), state.revolution)


def clear_hits(state: SceneState) -> None:
    """Forget accumulated hits without touching the sweep."""
    state.hits.clear()


def _camera_embedded(state: SceneState, shape: Shape) -> bool:
    return outer_distance(shape, state.camera.origin) <= state.config.march.min_tolerance


def tick(state: SceneState) -> TickResult:
    """Trace the current angle, then advance it by one increment.

    In ``parity`` mode the ray is traced once for every shape in the scene,
    each trace independently appending its hit.  In ``corrected`` mode it is
    traced once.  A camera embedded in any shape resets the scene instead.
    """
    config = state.config
    march_cfg = config.march
    angle = state.current_angle
    camera_origin = state.camera.origin
    shapes = state.scene.shapes

    if march_cfg.mode == "parity":
        # one trace per shape, each preceded by that shape's embedding check
        checks = [(s,) for s in shapes]
    else:
        checks = [shapes]

    new_hits: List[Hit] = []
    waypoints: List[Waypoint] = []
    ray_endpoint = camera_origin.point_at_angle(angle, march_cfg.max_vision_distance)
    for group in checks:
        if any(_camera_embedded(state, s) for s in group):
            return _embedded_reset(state, angle)
        result = march(camera_origin, angle, state.scene, march_cfg)
        waypoints.extend(result.waypoints)
        if result.hit is not None:
            new_hits.append(result.hit)

    state.hits.extend(new_hits)
    state.current_angle = angle + config.angle_increment

    did_reset = False
    if state.current_angle >= config.angle_start + 360.0 - _ANGLE_EPS:
        logger.debug("Revolution complete at %.3f deg", state.current_angle)
        reset(state)
        did_reset = True

    return TickResult(
        angle=angle,
        hits=tuple(state.hits),
        new_hits=tuple(new_hits),
        debug_waypoints=tuple(waypoints),
        ray_endpoint=ray_endpoint,
        did_reset=did_reset,
    )


def _embedded_reset(state: SceneState, angle: float) -> TickResult:
    logger.debug("Camera embedded in an obstacle at %.3f deg, resetting", angle)
    reset(state)
    ray_endpoint = state.camera.origin.point_at_angle(
        angle, state.config.march.max_vision_distance
    )
    return TickResult(
        angle=angle,
        hits=(),
        new_hits=(),
        debug_waypoints=(),
        ray_endpoint=ray_endpoint,
        did_reset=True,
    )
