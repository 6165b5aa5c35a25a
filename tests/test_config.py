"""Tests for RunnerConfig defaults and validation."""

import math

import pytest
from lane_runner.config import RunnerConfig


def test_defaults():
    cfg = RunnerConfig()
    assert cfg.gravity == 0.2
    assert cfg.max_run_speed == 20.0
    assert cfg.low_obstacle_height == cfg.player_height
    assert cfg.cadence == "time"
    assert math.isclose(cfg.lane_depth, 400.0 / 3)
    assert math.isclose(cfg.frame_ms, 1000.0 / 120)


def test_frozen():
    cfg = RunnerConfig()
    with pytest.raises(AttributeError):
        cfg.gravity = 1.0  # type: ignore[misc]


def test_replace_returns_validated_copy():
    cfg = RunnerConfig()
    fast = cfg.replace(max_run_speed=40.0)
    assert fast.max_run_speed == 40.0
    assert cfg.max_run_speed == 20.0
    with pytest.raises(ValueError):
        cfg.replace(target_fps=0)


@pytest.mark.parametrize(
    "changes",
    [
        {"target_fps": 0},
        {"score_divisor": 0.0},
        {"score_width": 0},
        {"player_height": 0.0},
        {"track_depth": -1.0},
        {"lateral_speed": 0.0},
        {"max_obstacle_width": 0},
        {"max_run_speed": 1.0},
        {"run_acceleration": -0.1},
        {"gravity": -0.2},
        {"low_obstacle_height": -1.0},
        {"spawn_retry_limit": 0},
        {"ground_tolerance": -1e-6},
        {"cadence": "random"},
        {"slow_wave_interval": 0.0},
    ],
)
def test_invalid_values_raise(changes):
    with pytest.raises(ValueError):
        RunnerConfig(**changes)
