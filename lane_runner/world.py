"""World - the mutable simulation context passed to every system."""
from __future__ import annotations

from lane_runner.cadence import Cadence, make_cadence
from lane_runner.components import Player
from lane_runner.config import RunnerConfig
from lane_runner.kinematics import PlayerKinematics
from lane_runner.obstacles import ObstacleField
from lane_runner.score import score_for


class World:
    def __init__(
        self, config: RunnerConfig, cadence: Cadence | None = None
    ) -> None:
        self._config = config
        self._field = ObstacleField(config)
        self._kinematics = PlayerKinematics(config)
        self._cadence = make_cadence(config) if cadence is None else cadence
        self.running: bool = True

    @property
    def config(self) -> RunnerConfig:
        return self._config

    @property
    def field(self) -> ObstacleField:
        return self._field

    @property
    def kinematics(self) -> PlayerKinematics:
        return self._kinematics

    @property
    def player(self) -> Player:
        return self._kinematics.player

    @property
    def cadence(self) -> Cadence:
        return self._cadence

    @property
    def score(self) -> int:
        return score_for(self.player.traveled_x, self._config.score_divisor)

    def reset(self) -> None:
        self._field.clear()
        self._kinematics.reset()
        self._cadence.reset()
        self.running = True
