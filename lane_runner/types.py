"""Shared types and errors for the lane runner."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Callable


class Lane(IntEnum):
    """One of the three depth rails, 0 nearest the viewer."""

    FIRST = 0
    SECOND = 1
    THIRD = 2


LANES: tuple[Lane, ...] = tuple(Lane)


@dataclass(frozen=True, slots=True)
class Actions:
    """Discrete actions latched since the previous step."""

    left: bool = False
    right: bool = False
    jump: bool = False


@dataclass(frozen=True, slots=True)
class StepContext:
    tick_number: int
    delta: float
    elapsed: float
    actions: Actions
    random: _random.Random
    request_stop: Callable[[], None]


@dataclass(frozen=True, slots=True)
class StepResult:
    score: int
    running: bool
    delta: float = 0.0
    tick_number: int = 0


class RunnerError(Exception):
    """Base class for lane runner errors."""


class LaneError(RunnerError, ValueError):
    """Raised when a lane index is outside 0..2."""

    def __init__(self, lane: object) -> None:
        self.lane = lane
        super().__init__(f"Lane must be one of 0, 1, 2, got {lane!r}")


def as_lane(value: int) -> Lane:
    try:
        return Lane(value)
    except ValueError:
        raise LaneError(value) from None


if TYPE_CHECKING:
    from lane_runner.world import World

System = Callable[["World", StepContext], None]
