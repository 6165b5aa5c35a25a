"""Runner - one atomic simulation step per host tick, and run lifecycle."""
from __future__ import annotations

import logging
import os
import random
from typing import Callable

from lane_runner.cadence import Cadence
from lane_runner.clock import Clock
from lane_runner.components import Obstacle
from lane_runner.config import RunnerConfig
from lane_runner.input import InputLatch
from lane_runner.systems import (
    make_collision_system,
    make_kinematics_system,
    make_obstacle_system,
)
from lane_runner.types import StepContext, StepResult, System
from lane_runner.world import World

logger = logging.getLogger(__name__)

WaveHook = Callable[[World, StepContext, list[Obstacle]], None]
GameOverHook = Callable[[World, StepResult], None]


class Runner:
    """Drives the obstacle, kinematics and collision systems in order.

    ``step(now)`` is meant to be called by an external scheduler as often
    as it likes; the clock turns uneven call intervals into a delta. Once a
    collision ends the run every further ``step`` returns the frozen result.
    """

    def __init__(
        self,
        config: RunnerConfig | None = None,
        seed: int | None = None,
        start: float | None = None,
        cadence: Cadence | None = None,
    ) -> None:
        self._config = config if config is not None else RunnerConfig()
        self._clock = Clock(self._config.target_fps, start)
        self._latch = InputLatch()
        self._world = World(self._config, cadence)
        self._wave_hooks: list[WaveHook] = []
        self._game_over_hooks: list[GameOverHook] = []
        self._stop_requested = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._systems: list[System] = [
            make_obstacle_system(on_wave=self._fire_wave),
            make_kinematics_system(),
            make_collision_system(),
        ]
        self._result = StepResult(score=0, running=True)
        self._start_run()

    @property
    def config(self) -> RunnerConfig:
        return self._config

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def latch(self) -> InputLatch:
        return self._latch

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def running(self) -> bool:
        return self._world.running

    @property
    def result(self) -> StepResult:
        """The result of the latest step."""
        return self._result

    def add_system(self, system: System) -> None:
        """Append a host system, run after the collision check."""
        self._systems.append(system)

    def on_wave(self, hook: WaveHook) -> None:
        self._wave_hooks.append(hook)

    def on_game_over(self, hook: GameOverHook) -> None:
        self._game_over_hooks.append(hook)

    def _fire_wave(
        self, world: World, ctx: StepContext, wave: list[Obstacle]
    ) -> None:
        for hook in self._wave_hooks:
            hook(world, ctx, wave)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _start_run(self) -> None:
        if self._config.spawn_initial_wave:
            self._world.field.spawn_wave(self._rng)

    def step(self, now: float) -> StepResult:
        """Advance the simulation to the clock reading *now* (milliseconds).

        A reading that yields no time (repeated, backwards or non-finite)
        runs no systems and leaves the input latch untouched.
        """
        if not self._world.running:
            return self._result

        delta = self._clock.tick(now)
        if delta == 0.0:
            # Zero-length step: no simulation time passed, latched input waits.
            self._result = StepResult(
                score=self._world.score,
                running=True,
                delta=0.0,
                tick_number=self._clock.tick_number,
            )
            return self._result

        ctx = StepContext(
            tick_number=self._clock.tick_number,
            delta=delta,
            elapsed=self._clock.elapsed,
            actions=self._latch.consume(),
            random=self._rng,
            request_stop=self._request_stop,
        )
        self._stop_requested = False
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

        if self._stop_requested:
            self._world.running = False

        self._result = StepResult(
            score=self._world.score,
            running=self._world.running,
            delta=delta,
            tick_number=ctx.tick_number,
        )
        if not self._world.running:
            logger.info(
                "Run over after %d steps, score %d",
                ctx.tick_number,
                self._result.score,
            )
            for hook in self._game_over_hooks:
                hook(self._world, self._result)
        return self._result

    def run(self, readings: list[float]) -> StepResult:
        """Step through a sequence of clock readings, stopping at game over."""
        for now in readings:
            self.step(now)
            if not self._world.running:
                break
        return self._result

    def reset(self, start: float | None = None) -> None:
        """Start a new run with the same config, seed stream and hooks."""
        self._clock.reset(start)
        self._latch.consume()
        self._world.reset()
        self._stop_requested = False
        self._result = StepResult(score=0, running=True)
        self._start_run()
