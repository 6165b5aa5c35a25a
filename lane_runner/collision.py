"""Pure support and collision queries against the obstacle field.

Boxes are ``((x_min, x_max), (y_min, y_max), (z_min, z_max))`` with y
growing downward. Nothing here mutates the player or the field.
"""
from __future__ import annotations

from typing import Iterable

from lane_runner.components import Obstacle, Player
from lane_runner.config import RunnerConfig

Span = tuple[float, float]
Box = tuple[Span, Span, Span]


def spans_overlap(a: Span, b: Span, tolerance: float = 0.0) -> bool:
    """Strict interval overlap. Touching ends (or closer than *tolerance*) do not count."""
    return a[0] < b[1] - tolerance and b[0] < a[1] - tolerance


def boxes_overlap(a: Box, b: Box, tolerance: float = 0.0) -> bool:
    return all(spans_overlap(sa, sb, tolerance) for sa, sb in zip(a, b, strict=True))


def lane_span(lane: int, config: RunnerConfig) -> Span:
    start = lane * config.lane_depth
    return (start, start + config.lane_depth)


def player_box(player: Player, config: RunnerConfig) -> Box:
    return (
        (config.player_x, config.player_x + config.player_width),
        (player.y, player.y + config.player_height),
        (player.z + config.player_depth / 2, player.z + config.player_depth),
    )


def obstacle_box(obstacle: Obstacle, config: RunnerConfig) -> Box:
    return (
        (obstacle.x, obstacle.trailing_x),
        (obstacle.top, obstacle.bottom),
        lane_span(obstacle.lane, config),
    )


def ground_distance(
    player: Player, obstacles: Iterable[Obstacle], config: RunnerConfig
) -> float:
    """Vertical gap between the player's feet and the nearest support below.

    An obstacle supports the player when its x span and lane depth span
    overlap the player's footprint and its top is at or below the feet.
    Every lane is considered, so a player straddling two lanes mid-change
    can stand on either. Without support the gap to rest height is
    returned.
    """
    x_span, (_, feet), z_span = player_box(player, config)
    tol = config.ground_tolerance
    best: float | None = None
    for obstacle in obstacles:
        if obstacle.top < feet - tol:
            continue
        if not spans_overlap(x_span, (obstacle.x, obstacle.trailing_x)):
            continue
        if not spans_overlap(z_span, lane_span(obstacle.lane, config)):
            continue
        gap = obstacle.top - feet
        if best is None or gap < best:
            best = gap
    if best is None:
        return -player.y
    return best


def colliding_obstacle(
    player: Player, obstacles: Iterable[Obstacle], config: RunnerConfig
) -> Obstacle | None:
    """Return the first obstacle whose box overlaps the player's, or None."""
    box = player_box(player, config)
    for obstacle in obstacles:
        if boxes_overlap(box, obstacle_box(obstacle, config), config.ground_tolerance):
            return obstacle
    return None


def is_terminal_collision(
    player: Player, obstacles: Iterable[Obstacle], config: RunnerConfig
) -> bool:
    """True if the player box overlaps any obstacle on all three axes."""
    return colliding_obstacle(player, obstacles, config) is not None
