"""InputLatch - edge-triggered actions held until the next step."""
from __future__ import annotations

from lane_runner.types import Actions


class InputLatch:
    """Latches lane-left, lane-right and jump until consumed.

    Setters are safe to call any number of times between steps; each
    raised flag yields one action in the next ``consume()``.
    """

    __slots__ = ("_left", "_right", "_jump")

    def __init__(self) -> None:
        self._left = False
        self._right = False
        self._jump = False

    def set_left(self) -> None:
        self._left = True

    def set_right(self) -> None:
        self._right = True

    def set_jump(self) -> None:
        self._jump = True

    def pending(self) -> bool:
        """Return True if any action is waiting to be consumed."""
        return self._left or self._right or self._jump

    def consume(self) -> Actions:
        """Read and clear all flags."""
        actions = Actions(left=self._left, right=self._right, jump=self._jump)
        self._left = self._right = self._jump = False
        return actions
