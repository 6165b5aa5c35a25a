"""Tests for forward, lateral and vertical integration."""
from __future__ import annotations

import math

import pytest

from lane_runner.collision import ground_distance
from lane_runner.config import RunnerConfig
from lane_runner.kinematics import PlayerKinematics
from lane_runner.obstacles import ObstacleField
from lane_runner.types import Actions, Lane

LEFT = Actions(left=True)
RIGHT = Actions(right=True)
NONE = Actions()


# ── Forward ──────────────────────────────────────────────────────


class TestForward:
    def test_starts_at_default_speed(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        assert kin.player.run_speed == 2.0
        assert kin.player.traveled_x == 0.0

    def test_travel_uses_speed_before_acceleration(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_forward(1.0)
        assert kin.player.traveled_x == 2.0
        assert math.isclose(kin.player.run_speed, 2.0005)

    def test_delta_scales_travel(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_forward(2.5)
        assert kin.player.traveled_x == 5.0

    def test_speed_saturates_at_max(self) -> None:
        cfg = RunnerConfig()
        kin = PlayerKinematics(cfg)
        previous = kin.player.run_speed
        for _ in range(40_000):
            kin.integrate_forward(1.0)
            assert previous <= kin.player.run_speed <= cfg.max_run_speed
            previous = kin.player.run_speed
        assert kin.player.run_speed == cfg.max_run_speed

    @pytest.mark.parametrize("delta", [math.nan, math.inf, -1.0])
    def test_malformed_delta_does_not_move(self, delta: float) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_forward(delta)
        assert kin.player.traveled_x == 0.0

    def test_reset(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_forward(10.0)
        kin.reset()
        assert kin.player.traveled_x == 0.0
        assert kin.player.run_speed == 2.0


# ── Lane changes ─────────────────────────────────────────────────


class TestLaneChange:
    def test_left_targets_next_lane(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_lane(LEFT, 1.0)
        assert kin.player.goal_lane == Lane.SECOND
        assert kin.player.current_lane == Lane.FIRST
        assert kin.player.z == 6.0

    def test_transition_never_overshoots_and_snaps_on_arrival(self) -> None:
        cfg = RunnerConfig()
        kin = PlayerKinematics(cfg)
        goal_z = kin.lane_z(Lane.SECOND)
        kin.integrate_lane(LEFT, 1.0)
        frames = 1
        while kin.player.z != goal_z:
            assert kin.player.z < goal_z
            assert kin.player.current_lane == Lane.FIRST
            kin.integrate_lane(NONE, 1.0)
            frames += 1
        assert kin.player.current_lane == Lane.SECOND
        assert frames == math.ceil(goal_z / cfg.lateral_speed)
        kin.integrate_lane(NONE, 1.0)
        assert kin.player.z == goal_z

    def test_moving_toward_lane_zero(self) -> None:
        kin = PlayerKinematics(RunnerConfig(track_depth=300.0))
        kin.player.current_lane = kin.player.goal_lane = Lane.THIRD
        kin.player.z = 200.0
        kin.integrate_lane(RIGHT, 1.0)
        while kin.player.z != 100.0:
            assert kin.player.z > 100.0
            assert kin.player.current_lane == Lane.THIRD
            kin.integrate_lane(NONE, 1.0)
        assert kin.player.current_lane == Lane.SECOND

    def test_large_delta_clamps_to_goal(self) -> None:
        kin = PlayerKinematics(RunnerConfig(track_depth=300.0))
        kin.integrate_lane(LEFT, 1000.0)
        assert kin.player.z == 100.0
        assert kin.player.current_lane == Lane.SECOND

    def test_edges_ignore_further_requests(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_lane(RIGHT, 1.0)
        assert kin.player.goal_lane == Lane.FIRST
        assert kin.player.z == 0.0

        kin.player.current_lane = kin.player.goal_lane = Lane.THIRD
        kin.player.z = kin.lane_z(Lane.THIRD)
        kin.integrate_lane(LEFT, 1.0)
        assert kin.player.goal_lane == Lane.THIRD

    def test_one_lane_per_step(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_lane(LEFT, 1.0)
        kin.integrate_lane(LEFT, 1.0)
        assert kin.player.goal_lane == Lane.THIRD
        assert kin.player.current_lane == Lane.FIRST

    def test_left_and_right_together_cancel(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_lane(Actions(left=True, right=True), 1.0)
        assert kin.player.goal_lane == Lane.FIRST
        assert kin.player.z == 0.0

    def test_retarget_mid_transition_reverses_smoothly(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_lane(LEFT, 1.0)
        for _ in range(4):
            kin.integrate_lane(NONE, 1.0)
        assert kin.player.z == 30.0
        kin.integrate_lane(RIGHT, 1.0)
        assert kin.player.goal_lane == Lane.FIRST
        assert kin.player.z == 24.0
        while kin.player.z != 0.0:
            assert kin.player.z > 0.0
            assert kin.player.current_lane == Lane.FIRST
            kin.integrate_lane(NONE, 1.0)
        assert kin.player.current_lane == Lane.FIRST


# ── Vertical ─────────────────────────────────────────────────────


class TestVertical:
    def test_rest_stays_put(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_vertical(1.0, 0.0, jump=False)
        assert kin.player.y == 0.0
        assert kin.player.velocity_y == 0.0

    def test_jump_from_flush_surface(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_vertical(1.0, 0.0, jump=True)
        assert kin.player.velocity_y == -9.0
        assert kin.player.y == -9.0

    def test_no_jump_while_airborne(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.player.y = -50.0
        kin.integrate_vertical(1.0, 50.0, jump=True)
        assert math.isclose(kin.player.velocity_y, 0.2)
        assert math.isclose(kin.player.y, -49.8)

    def test_landing_clamps_to_surface(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.player.y = -1.0
        kin.player.velocity_y = 5.0
        kin.integrate_vertical(1.0, 1.0, jump=False)
        assert kin.player.y == 0.0
        assert kin.player.velocity_y == 0.0

    def test_full_jump_returns_to_rest(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.integrate_vertical(1.0, 0.0, jump=True)
        apex = 0.0
        for _ in range(500):
            kin.integrate_vertical(1.0, -kin.player.y, jump=False)
            apex = min(apex, kin.player.y)
            assert kin.player.y <= 0.0
        assert kin.player.y == 0.0
        assert apex < -150.0

    @pytest.mark.parametrize("gap", [0.5, 3.0, 40.0])
    @pytest.mark.parametrize("velocity", [0.0, 4.0, 30.0])
    @pytest.mark.parametrize("delta", [0.5, 1.0, 2.5, 8.0])
    def test_single_frame_never_passes_ground(
        self, gap: float, velocity: float, delta: float
    ) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.player.y = -gap
        kin.player.velocity_y = velocity
        kin.integrate_vertical(delta, gap, jump=False)
        assert kin.player.y <= 1e-9

    @pytest.mark.parametrize("delta", [0.7, 1.0, 3.0, 12.0])
    def test_falling_onto_obstacle_never_tunnels(self, delta: float) -> None:
        cfg = RunnerConfig()
        field = ObstacleField(cfg)
        wall = field.place(Lane.FIRST, x=-500.0, width=1000.0, height=40.0)
        kin = PlayerKinematics(cfg)
        kin.player.y = -300.0
        for _ in range(300):
            gap = ground_distance(kin.player, field.obstacles(), cfg)
            kin.integrate_vertical(delta, gap, jump=False)
            feet = kin.player.y + cfg.player_height
            assert feet <= wall.top + cfg.ground_tolerance
        assert math.isclose(kin.player.y, wall.top - cfg.player_height)
        assert kin.player.velocity_y == 0.0

    def test_malformed_delta_is_empty_step(self) -> None:
        kin = PlayerKinematics(RunnerConfig())
        kin.player.y = -20.0
        kin.player.velocity_y = -3.0
        kin.integrate_vertical(math.nan, 20.0, jump=False)
        assert kin.player.y == -20.0
        assert kin.player.velocity_y == -3.0
