"""lane-runner - Simulation and collision core of a three-lane endless runner."""

from lane_runner.cadence import DistanceBucketCadence, TimeBucketCadence, make_cadence
from lane_runner.clock import Clock, monotonic_ms
from lane_runner.components import Obstacle, Player
from lane_runner.config import RunnerConfig
from lane_runner.input import InputLatch
from lane_runner.kinematics import PlayerKinematics
from lane_runner.obstacles import ObstacleField
from lane_runner.runner import Runner
from lane_runner.score import format_score, score_for
from lane_runner.types import (
    Actions,
    Lane,
    LaneError,
    RunnerError,
    StepContext,
    StepResult,
)
from lane_runner.world import World

__all__ = [
    "Actions",
    "Clock",
    "DistanceBucketCadence",
    "InputLatch",
    "Lane",
    "LaneError",
    "Obstacle",
    "ObstacleField",
    "Player",
    "PlayerKinematics",
    "Runner",
    "RunnerConfig",
    "RunnerError",
    "StepContext",
    "StepResult",
    "TimeBucketCadence",
    "World",
    "format_score",
    "make_cadence",
    "monotonic_ms",
    "score_for",
]
