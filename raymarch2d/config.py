"""Configuration for scene generation, marching and sweeping.

Every constant of the visualisation lives in one of three frozen
dataclasses.  Each validates itself in ``__post_init__`` and raises
:class:`ConfigurationError` on a contract violation, so an invalid setup
fails at construction time rather than mid-sweep.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Literal, Mapping, Optional, Tuple

MarchMode = Literal["parity", "corrected"]

_MODES = ("parity", "corrected")


class ConfigurationError(ValueError):
    """Raised when a configuration value breaks its contract."""


@dataclass(frozen=True)
class SceneConfig:
    """Canvas, obstacle population and camera placement."""

    canvas_width: float = 1000.0
    canvas_height: float = 700.0
    shape_count_per_kind: int = 30
    circle_radius: float = 50.0
    rect_min_size: float = 10.0
    rect_max_size: float = 310.0
    camera_pos: Tuple[float, float] = (300.0, 150.0)
    camera_radius: float = 10.0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ConfigurationError(
                f"Canvas must be positive, got {self.canvas_width}x{self.canvas_height}"
            )
        if self.shape_count_per_kind < 1:
            raise ConfigurationError(
                f"shape_count_per_kind must be >= 1, got {self.shape_count_per_kind}"
            )
        if self.circle_radius <= 0:
            raise ConfigurationError(f"circle_radius must be positive, got {self.circle_radius}")
        if self.camera_radius <= 0:
            raise ConfigurationError(f"camera_radius must be positive, got {self.camera_radius}")
        if self.rect_min_size <= 0:
            raise ConfigurationError(f"rect_min_size must be positive, got {self.rect_min_size}")
        if self.rect_max_size < self.rect_min_size:
            raise ConfigurationError(
                f"rect_max_size ({self.rect_max_size}) is below "
                f"rect_min_size ({self.rect_min_size})"
            )
        if len(self.camera_pos) != 2:
            raise ConfigurationError(f"camera_pos must be (x, y), got {self.camera_pos!r}")


@dataclass(frozen=True)
class MarchConfig:
    """Constants of the sphere-tracing loop.

    ``mode="parity"`` reproduces the reference sweep exactly: one full trace
    per scene shape for every angle, and open-space steps that do not move
    the march origin.  ``mode="corrected"`` traces once per angle and always
    advances.
    """

    max_vision_distance: float = 1000.0
    max_depth_search: int = 20
    max_tolerance: float = 400.0
    min_tolerance: float = 0.05
    mode: MarchMode = "parity"
    debug_waypoints: bool = True

    def __post_init__(self) -> None:
        if self.max_vision_distance <= 0:
            raise ConfigurationError(
                f"max_vision_distance must be positive, got {self.max_vision_distance}"
            )
        if self.max_depth_search < 1:
            raise ConfigurationError(
                f"max_depth_search must be >= 1, got {self.max_depth_search}"
            )
        if self.min_tolerance <= 0:
            raise ConfigurationError(f"min_tolerance must be positive, got {self.min_tolerance}")
        if self.max_tolerance <= self.min_tolerance:
            raise ConfigurationError(
                f"max_tolerance ({self.max_tolerance}) must exceed "
                f"min_tolerance ({self.min_tolerance})"
            )
        if self.mode not in _MODES:
            raise ConfigurationError(f"Invalid mode: {self.mode!r}. Must be one of {_MODES}")


@dataclass(frozen=True)
class SweepConfig:
    """Angular sweep settings plus the scene and march configs they drive."""

    scene: SceneConfig = field(default_factory=SceneConfig)
    march: MarchConfig = field(default_factory=MarchConfig)
    angle_start: float = 45.0
    angle_increment: float = 1.0

    def __post_init__(self) -> None:
        if self.angle_increment <= 0:
            raise ConfigurationError(
                f"angle_increment must be positive, got {self.angle_increment}"
            )

    @property
    def ticks_per_revolution(self) -> int:
        return int(round(360.0 / self.angle_increment))

    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, Any]] = None) -> "SweepConfig":
        """Build a config from a flat mapping of field names.

        Keys are matched against the fields of :class:`SceneConfig`,
        :class:`MarchConfig` and the sweep fields themselves; unknown keys
        raise :class:`ConfigurationError`.
        """
        if not payload:
            return cls()
        scene_keys = {f.name for f in fields(SceneConfig)}
        march_keys = {f.name for f in fields(MarchConfig)}
        sweep_keys = {"angle_start", "angle_increment"}

        scene_kw: dict = {}
        march_kw: dict = {}
        sweep_kw: dict = {}
        for key, value in payload.items():
            if key in scene_keys:
                scene_kw[key] = value
            elif key in march_keys:
                march_kw[key] = value
            elif key in sweep_keys:
                sweep_kw[key] = value
            else:
                raise ConfigurationError(f"Unknown configuration key: {key!r}")
        if "camera_pos" in scene_kw:
            scene_kw["camera_pos"] = tuple(scene_kw["camera_pos"])
        return cls(
            scene=SceneConfig(**scene_kw),
            march=MarchConfig(**march_kw),
            **sweep_kw,
        )
