"""Runner configuration dataclass."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass

CADENCES = ("time", "distance")


@dataclass(frozen=True)
class RunnerConfig:
    """Immutable tunables for one run.

    Per-frame quantities (speeds, gravity, acceleration) are defined at
    ``target_fps`` and scaled by the clock's delta. Lengths share one unit,
    the canvas pixel of the reference game.

    Attributes:
        gravity: Downward acceleration added to the vertical velocity per frame.
        jump_impulse: Upward velocity given by a jump from a flush surface.
        default_run_speed: Run speed at the start of a run.
        max_run_speed: Cap of the run speed.
        run_acceleration: Run speed gained per step.
        lateral_speed: Depth covered per frame while changing lane.
        player_x: Fixed leading x of the player's horizontal footprint.
        player_width: Horizontal size of the player box.
        player_height: Vertical size of the player box.
        player_depth: Depth size of the player box. The depth footprint is
            the back half, ``[z + depth / 2, z + depth]``.
        track_depth: Depth of the whole track; each lane takes a third.
        max_obstacle_width: Exclusive upper bound of a random obstacle width.
        max_obstacle_height: Exclusive upper bound of a random obstacle height.
        low_obstacle_height: Obstacles at most this tall can be jumped in-lane.
        spawn_x: Leading x of freshly spawned obstacles.
        prune_horizon: Obstacles whose trailing edge is below ``-prune_horizon``
            are removed.
        spawn_retry_limit: Rolls allowed for a non-empty wave before a low
            obstacle is forced.
        spawn_initial_wave: Spawn one wave when a run starts.
        cadence: ``"time"`` or ``"distance"`` spawn cadence policy.
        slow_wave_interval: Milliseconds between waves below ``fast_speed``.
        fast_wave_interval: Milliseconds between waves at or above ``fast_speed``.
        fast_speed: Run speed at which the time cadence switches interval.
        distance_wave_factor: Distance cadence bucket, in max obstacle widths.
        target_fps: Frame rate the per-frame quantities are expressed at.
        score_divisor: Traveled distance per score point.
        score_width: Digits of the displayed score.
        ground_tolerance: Ground distances this close to 0 count as flush.
    """

    gravity: float = 0.2
    jump_impulse: float = 9.0
    default_run_speed: float = 2.0
    max_run_speed: float = 20.0
    run_acceleration: float = 0.0005
    lateral_speed: float = 6.0

    player_x: float = -400.0
    player_width: float = 75.0
    player_height: float = 90.0
    player_depth: float = 100.0

    track_depth: float = 400.0

    max_obstacle_width: int = 1000
    max_obstacle_height: int = 500
    low_obstacle_height: float = 90.0
    spawn_x: float = 1500.0
    prune_horizon: float = 1000.0
    spawn_retry_limit: int = 32
    spawn_initial_wave: bool = True

    cadence: str = "time"
    slow_wave_interval: float = 5000.0
    fast_wave_interval: float = 3000.0
    fast_speed: float = 10.0
    distance_wave_factor: float = 2.0

    target_fps: int = 120
    score_divisor: float = 100.0
    score_width: int = 5
    ground_tolerance: float = 1e-6

    def __post_init__(self) -> None:
        if self.target_fps <= 0:
            raise ValueError("target_fps must be positive")
        if self.score_divisor <= 0:
            raise ValueError("score_divisor must be positive")
        if self.score_width < 1:
            raise ValueError("score_width must be >= 1")
        for name in (
            "player_width",
            "player_height",
            "player_depth",
            "track_depth",
            "lateral_speed",
            "default_run_speed",
            "slow_wave_interval",
            "fast_wave_interval",
            "distance_wave_factor",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.max_obstacle_width < 1 or self.max_obstacle_height < 1:
            raise ValueError("obstacle size bounds must be >= 1")
        if self.max_run_speed < self.default_run_speed:
            raise ValueError(
                f"max_run_speed ({self.max_run_speed}) is below "
                f"default_run_speed ({self.default_run_speed})"
            )
        if self.run_acceleration < 0:
            raise ValueError("run_acceleration must not be negative")
        if self.gravity < 0 or self.jump_impulse < 0:
            raise ValueError("gravity and jump_impulse must not be negative")
        if self.low_obstacle_height < 0:
            raise ValueError("low_obstacle_height must not be negative")
        if self.spawn_retry_limit < 1:
            raise ValueError("spawn_retry_limit must be >= 1")
        if self.ground_tolerance < 0:
            raise ValueError("ground_tolerance must not be negative")
        if self.cadence not in CADENCES:
            raise ValueError(
                f"Unknown cadence {self.cadence!r}, expected one of {CADENCES}"
            )

    @property
    def lane_depth(self) -> float:
        """Depth of a single lane."""
        return self.track_depth / 3

    @property
    def frame_ms(self) -> float:
        return 1000.0 / self.target_fps

    def replace(self, **changes: object) -> RunnerConfig:
        """Return a validated copy with *changes* applied."""
        return dataclasses.replace(self, **changes)
