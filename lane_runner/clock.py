"""Clock - frame-rate independent time scaling."""

from __future__ import annotations

import logging
import math
import time

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    """Current monotonic clock reading in milliseconds."""
    return time.monotonic() * 1000.0


class Clock:
    """Turns wall-clock readings into a per-frame ``delta``.

    A delta of 1 means exactly one frame at ``target_fps`` elapsed. The
    first reading is seeded at construction so the opening step does not
    see the whole startup time as one frame.
    """

    def __init__(self, target_fps: int, start: float | None = None) -> None:
        if target_fps <= 0:
            raise ValueError("target_fps must be positive")
        self._target_fps = target_fps
        self._frame_ms = 1000.0 / target_fps
        self._last_now = monotonic_ms() if start is None else float(start)
        self._tick_number = 0
        self._elapsed = 0.0

    @property
    def target_fps(self) -> int:
        return self._target_fps

    @property
    def frame_ms(self) -> float:
        return self._frame_ms

    @property
    def last_now(self) -> float:
        return self._last_now

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        """Simulation time in milliseconds, the sum of all scaled deltas."""
        return self._elapsed

    def tick(self, now: float) -> float:
        """Return the delta since the previous reading and advance the clock."""
        self._tick_number += 1
        if not math.isfinite(now):
            logger.warning("Ignoring non-finite clock reading %r", now)
            return 0.0
        delta = (now - self._last_now) / self._frame_ms
        self._last_now = now
        if delta < 0.0 or not math.isfinite(delta):
            logger.warning(
                "Clock went backwards by %.3f ms, treating as an empty step",
                -delta * self._frame_ms,
            )
            return 0.0
        self._elapsed += delta * self._frame_ms
        return delta

    def reset(self, start: float | None = None) -> None:
        self._last_now = monotonic_ms() if start is None else float(start)
        self._tick_number = 0
        self._elapsed = 0.0
