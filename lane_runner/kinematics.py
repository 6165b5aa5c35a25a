"""PlayerKinematics - forward run, lane changes, gravity and jumps."""
from __future__ import annotations

import math

from lane_runner.components import Player
from lane_runner.config import RunnerConfig
from lane_runner.types import Actions, Lane


def _sanitize(delta: float) -> float:
    if not math.isfinite(delta) or delta < 0.0:
        return 0.0
    return delta


class PlayerKinematics:
    """Owns the player state and integrates it one step at a time.

    Vertical motion is 1-D: the caller supplies the distance to the
    supporting surface below the feet, so lane and depth overlap stay the
    collision module's business.
    """

    def __init__(self, config: RunnerConfig) -> None:
        self._config = config
        self._player = Player(run_speed=config.default_run_speed)

    @property
    def player(self) -> Player:
        return self._player

    def reset(self) -> None:
        self._player = Player(run_speed=self._config.default_run_speed)

    def lane_z(self, lane: int) -> float:
        """Depth coordinate of *lane*."""
        return lane * self._config.lane_depth

    def integrate_forward(self, delta: float) -> None:
        """Run forward, then accelerate toward the speed cap."""
        p = self._player
        p.traveled_x += p.run_speed * _sanitize(delta)
        p.run_speed = min(
            self._config.max_run_speed, p.run_speed + self._config.run_acceleration
        )

    def integrate_lane(self, actions: Actions, delta: float) -> None:
        """Retarget the goal lane from input and slide toward it.

        ``left`` steps toward lane 2 and ``right`` toward lane 0, one lane per
        action. The depth never overshoots the goal; ``current_lane`` only
        changes on arrival.
        """
        p = self._player
        if actions.left and p.goal_lane < Lane.THIRD:
            p.goal_lane = Lane(p.goal_lane + 1)
        if actions.right and p.goal_lane > Lane.FIRST:
            p.goal_lane = Lane(p.goal_lane - 1)

        goal_z = self.lane_z(p.goal_lane)
        step = self._config.lateral_speed * _sanitize(delta)
        if p.z < goal_z:
            p.z = min(goal_z, p.z + step)
        elif p.z > goal_z:
            p.z = max(goal_z, p.z - step)

        if p.z == goal_z:
            p.current_lane = p.goal_lane

    def integrate_vertical(
        self, delta: float, ground_distance: float, jump: bool
    ) -> None:
        """Apply jump, landing or gravity, then move vertically.

        A flush player (ground distance within ``ground_tolerance``) either
        jumps or rests. A fall that would carry the feet past the surface
        this frame lands exactly on it instead.
        """
        cfg = self._config
        p = self._player
        delta = _sanitize(delta)
        fall = (p.velocity_y + cfg.gravity * delta) * delta

        if abs(ground_distance) <= cfg.ground_tolerance:
            p.velocity_y = -cfg.jump_impulse if jump else 0.0
        elif fall > ground_distance:
            p.y += ground_distance
            p.velocity_y = 0.0
        else:
            p.velocity_y += cfg.gravity * delta

        p.y += p.velocity_y * delta
