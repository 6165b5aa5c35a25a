"""ObstacleField - wave generation, movement and pruning of walls."""
from __future__ import annotations

import logging
import random
from typing import Iterator

from lane_runner.components import Obstacle
from lane_runner.config import RunnerConfig
from lane_runner.types import LANES, Lane, as_lane

logger = logging.getLogger(__name__)


class ObstacleField:
    """Owns every obstacle, one list per lane in spawn order.

    Index 0 of a lane list is its oldest obstacle, which is also the one
    furthest behind the player.
    """

    def __init__(self, config: RunnerConfig) -> None:
        self._config = config
        self._lanes: tuple[list[Obstacle], ...] = tuple([] for _ in LANES)
        self._waves = 0

    @property
    def lanes(self) -> tuple[list[Obstacle], ...]:
        return self._lanes

    @property
    def waves(self) -> int:
        return self._waves

    def lane(self, lane: int) -> list[Obstacle]:
        return self._lanes[as_lane(lane)]

    def obstacles(self) -> Iterator[Obstacle]:
        for column in self._lanes:
            yield from column

    def __len__(self) -> int:
        return sum(len(column) for column in self._lanes)

    def clear(self) -> None:
        for column in self._lanes:
            column.clear()
        self._waves = 0

    def is_low(self, height: float) -> bool:
        """True if an obstacle of *height* can be jumped without changing lane."""
        return height <= self._config.low_obstacle_height

    def place(
        self, lane: int, x: float, width: float, height: float
    ) -> Obstacle:
        """Insert an obstacle directly. Used for scripted layouts."""
        if width < 0 or height < 0:
            raise ValueError(
                f"Obstacle size must not be negative, got {width}x{height}"
            )
        lane = as_lane(lane)
        obstacle = Obstacle(
            lane=lane,
            x=x,
            width=width,
            height=height,
            top=self._config.player_height - height,
        )
        self._lanes[lane].append(obstacle)
        return obstacle

    # -- Generation --

    def _roll(self, rng: random.Random) -> dict[Lane, tuple[int, int]]:
        cfg = self._config
        rolled: dict[Lane, tuple[int, int]] = {}
        for lane in LANES:
            if rng.randrange(2):
                height = rng.randrange(cfg.max_obstacle_height)
                width = rng.randrange(cfg.max_obstacle_width)
                rolled[lane] = (width, height)
        return rolled

    def spawn_wave(self, rng: random.Random) -> list[Obstacle]:
        """Spawn one wave at ``spawn_x`` and return the obstacles kept.

        Each lane gets an obstacle with probability 1/2. A wave is never
        fully blocked: when every lane rolled a full-height wall, one lane
        chosen uniformly loses its wall. A wave is never empty: empty rolls
        are redrawn up to ``spawn_retry_limit`` times, after which a single
        low obstacle is forced into a random lane.
        """
        cfg = self._config
        rolled: dict[Lane, tuple[int, int]] = {}
        for _ in range(cfg.spawn_retry_limit):
            rolled = self._roll(rng)
            if rolled:
                break
        else:
            lane = rng.choice(LANES)
            height = rng.randrange(int(cfg.low_obstacle_height) + 1)
            width = rng.randrange(cfg.max_obstacle_width)
            rolled = {lane: (width, height)}
            logger.warning(
                "No wave after %d rolls, forcing a low obstacle in lane %d",
                cfg.spawn_retry_limit,
                lane,
            )

        full = [lane for lane, (_, height) in rolled.items() if not self.is_low(height)]
        if len(full) == len(LANES):
            dropped = rng.choice(LANES)
            del rolled[dropped]
            logger.debug("Wave fully blocked, opened lane %d", dropped)

        wave = [
            self.place(lane, cfg.spawn_x, width, height)
            for lane, (width, height) in sorted(rolled.items())
        ]
        self._waves += 1
        logger.debug(
            "Spawned wave %d: %s",
            self._waves,
            ", ".join(f"lane {o.lane} {o.width:.0f}x{o.height:.0f}" for o in wave),
        )
        return wave

    # -- Movement --

    def advance(self, distance: float) -> None:
        """Move every obstacle *distance* toward the player."""
        for obstacle in self.obstacles():
            obstacle.x -= distance

    def prune(self, horizon: float) -> int:
        """Remove obstacles whose trailing edge fell below ``-horizon``.

        Returns the number removed.
        """
        removed = 0
        for column in self._lanes:
            for i in range(len(column) - 1, -1, -1):
                if column[i].trailing_x < -horizon:
                    del column[i]
                    removed += 1
        if removed:
            logger.debug("Pruned %d obstacles", removed)
        return removed
