"""Obstacle and player state."""
from __future__ import annotations

from dataclasses import dataclass

from lane_runner.types import Lane


@dataclass
class Obstacle:
    """A wall standing on the track in one lane.

    ``top`` is in the player's rest frame: the ground sits at
    ``y = player_height`` and y grows downward.
    """

    lane: Lane
    x: float
    width: float
    height: float
    top: float

    @property
    def trailing_x(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass
class Player:
    """Player kinematic state. ``y`` is 0 at rest and negative while airborne."""

    traveled_x: float = 0.0
    y: float = 0.0
    velocity_y: float = 0.0
    current_lane: Lane = Lane.FIRST
    goal_lane: Lane = Lane.FIRST
    z: float = 0.0
    run_speed: float = 0.0

    @property
    def changing_lane(self) -> bool:
        return self.current_lane != self.goal_lane
