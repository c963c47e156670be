"""Sphere tracing over the scene distance field.

A trace walks from the camera toward a far target point.  At every step it
queries the scene for the clearance around the current point and moves by
that amount, since no obstacle can be closer.  The trace ends with a hit
once the clearance falls below ``min_tolerance``, or as a miss once the step
budget ``max_depth_search`` runs out.

Two stepping rules are available through :attr:`MarchConfig.mode`:

``"parity"``
    Reproduces the reference sweep.  A step whose clearance exceeds
    ``max_tolerance`` counts as open space: the march origin stays where it
    was, and only the step length grows for the next pass.
``"corrected"``
    Textbook sphere tracing: the origin always advances, and the trace stops
    as a miss once it has travelled ``max_vision_distance``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

from .config import MarchConfig
from .scene import Scene
from .vector import Point

Termination = Literal["hit", "max_steps", "far"]


@dataclass(frozen=True)
class Hit:
    """Point where a ray reached an obstacle, within tolerance."""

    position: Point
    achieved_distance: float


@dataclass(frozen=True)
class Waypoint:
    """Intermediate march point with its clearance radius (debug only)."""

    point: Point
    radius: float


@dataclass(frozen=True)
class MarchResult:
    hit: Optional[Hit]
    ray_endpoint: Point
    iterations: int
    termination: Termination
    waypoints: List[Waypoint] = field(default_factory=list)


def march(
    camera_origin: Point,
    angle_deg: float,
    scene: Scene,
    config: MarchConfig,
) -> MarchResult:
    """Trace one ray from *camera_origin* toward *angle_deg*.

    Parameters
    ----------
    camera_origin:
        Start of the ray.
    angle_deg:
        Ray direction in degrees, ``atan2`` convention.
    scene:
        Distance field to march through.
    config:
        Tolerances, step budget and stepping mode.

    Returns
    -------
    MarchResult
        ``hit`` is ``None`` for a miss.  ``waypoints`` is filled only when
        ``config.debug_waypoints`` is set; its first entry is the clearance
        circle around the camera.
    """
    target = camera_origin.point_at_angle(angle_deg, config.max_vision_distance)
    advance_in_open_space = config.mode == "corrected"

    origin = camera_origin
    dist = scene.distance_to_scene(origin)
    waypoints: List[Waypoint] = []
    if config.debug_waypoints:
        waypoints.append(Waypoint(origin, dist))

    for i in range(config.max_depth_search):
        point = origin.extend(target, dist)
        dist = scene.distance_to_scene(point)

        if not advance_in_open_space and dist > config.max_tolerance:
            continue

        if dist < config.min_tolerance:
            return MarchResult(Hit(point, dist), target, i + 1, "hit", waypoints)

        if advance_in_open_space and camera_origin.distance(point) >= config.max_vision_distance:
            return MarchResult(None, target, i + 1, "far", waypoints)

        if config.debug_waypoints:
            waypoints.append(Waypoint(point, dist))
        origin = point

    return MarchResult(None, target, config.max_depth_search, "max_steps", waypoints)
