"""Tests for configuration defaults and validation."""

import pytest

from raymarch2d import ConfigurationError, MarchConfig, SceneConfig, SweepConfig


class TestDefaults:
    def test_march_defaults(self):
        cfg = MarchConfig()
        assert cfg.max_vision_distance == 1000.0
        assert cfg.max_depth_search == 20
        assert cfg.max_tolerance == 400.0
        assert cfg.min_tolerance == 0.05
        assert cfg.mode == "parity"

    def test_scene_defaults(self):
        cfg = SceneConfig()
        assert (cfg.canvas_width, cfg.canvas_height) == (1000.0, 700.0)
        assert cfg.camera_pos == (300.0, 150.0)
        assert cfg.camera_radius == 10.0
        assert cfg.shape_count_per_kind == 30

    def test_sweep_defaults(self):
        cfg = SweepConfig()
        assert cfg.angle_start == 45.0
        assert cfg.angle_increment == 1.0
        assert cfg.ticks_per_revolution == 360

    def test_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestValidation:
    @pytest.mark.parametrize("kwargs", [
        {"canvas_width": 0},
        {"canvas_height": -5},
        {"shape_count_per_kind": 0},
        {"circle_radius": 0},
        {"camera_radius": -1},
        {"rect_min_size": 0},
        {"rect_min_size": 50, "rect_max_size": 40},
        {"camera_pos": (1.0, 2.0, 3.0)},
    ])
    def test_scene_rejects(self, kwargs):
        with pytest.raises(ConfigurationError):
            SceneConfig(**kwargs)

    @pytest.mark.parametrize("kwargs", [
        {"max_vision_distance": 0},
        {"max_depth_search": 0},
        {"min_tolerance": 0},
        {"max_tolerance": 0.01},
        {"mode": "fast"},
    ])
    def test_march_rejects(self, kwargs):
        with pytest.raises(ConfigurationError):
            MarchConfig(**kwargs)

    @pytest.mark.parametrize("increment", [0.0, -1.0])
    def test_sweep_rejects_increment(self, increment):
        with pytest.raises(ConfigurationError):
            SweepConfig(angle_increment=increment)


class TestFromMapping:
    def test_empty_gives_defaults(self):
        assert SweepConfig.from_mapping(None) == SweepConfig()
        assert SweepConfig.from_mapping({}) == SweepConfig()

    def test_routes_keys(self):
        cfg = SweepConfig.from_mapping({
            "seed": 9,
            "camera_pos": [10, 20],
            "mode": "corrected",
            "min_tolerance": 0.1,
            "angle_start": 0,
        })
        assert cfg.scene.seed == 9
        assert cfg.scene.camera_pos == (10, 20)
        assert cfg.march.mode == "corrected"
        assert cfg.march.min_tolerance == 0.1
        assert cfg.angle_start == 0

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError):
            SweepConfig.from_mapping({"colour": "red"})

    def test_invalid_value_propagates(self):
        with pytest.raises(ConfigurationError):
            SweepConfig.from_mapping({"max_depth_search": -3})
