"""Spawn cadence policies - when the next wave is due."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lane_runner.config import RunnerConfig


class Cadence(Protocol):
    def should_spawn(
        self, elapsed: float, traveled_x: float, run_speed: float
    ) -> bool: ...

    def reset(self) -> None: ...


class TimeBucketCadence:
    """One wave per bucket of simulation time.

    The bucket is ``fast_interval`` ms once the run speed reaches
    ``fast_speed`` and ``slow_interval`` ms before that. A bucket fires when
    its start time is later than the start of the last bucket that fired,
    so a bucket never fires twice and a switch to the shorter interval
    cannot re-fire time already covered.
    """

    def __init__(
        self, slow_interval: float, fast_interval: float, fast_speed: float
    ) -> None:
        if slow_interval <= 0 or fast_interval <= 0:
            raise ValueError("intervals must be positive")
        self.slow_interval = slow_interval
        self.fast_interval = fast_interval
        self.fast_speed = fast_speed
        self._last_bucket_start = 0.0

    def interval(self, run_speed: float) -> float:
        if run_speed >= self.fast_speed:
            return self.fast_interval
        return self.slow_interval

    def should_spawn(
        self, elapsed: float, traveled_x: float, run_speed: float
    ) -> bool:
        interval = self.interval(run_speed)
        bucket_start = math.floor(elapsed / interval) * interval
        if bucket_start > self._last_bucket_start:
            self._last_bucket_start = bucket_start
            return True
        return False

    def reset(self) -> None:
        self._last_bucket_start = 0.0


class DistanceBucketCadence:
    """One wave per ``bucket_length`` of horizontal travel.

    Faster runs cross buckets sooner, so waves get denser in time as the
    run speed ramps up.
    """

    def __init__(self, bucket_length: float) -> None:
        if bucket_length <= 0:
            raise ValueError("bucket_length must be positive")
        self.bucket_length = bucket_length
        self._last_bucket = 0

    def should_spawn(
        self, elapsed: float, traveled_x: float, run_speed: float
    ) -> bool:
        bucket = math.floor(traveled_x / self.bucket_length)
        if bucket > self._last_bucket:
            self._last_bucket = bucket
            return True
        return False

    def reset(self) -> None:
        self._last_bucket = 0


def make_cadence(config: RunnerConfig) -> Cadence:
    """Build the cadence policy named by ``config.cadence``."""
    if config.cadence == "time":
        return TimeBucketCadence(
            config.slow_wave_interval,
            config.fast_wave_interval,
            config.fast_speed,
        )
    if config.cadence == "distance":
        return DistanceBucketCadence(
            config.distance_wave_factor * config.max_obstacle_width
        )
    raise ValueError(f"Unknown cadence {config.cadence!r}")
