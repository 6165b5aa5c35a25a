"""System factories for the per-step simulation."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from lane_runner.collision import colliding_obstacle, ground_distance

if TYPE_CHECKING:
    from lane_runner.components import Obstacle
    from lane_runner.types import StepContext
    from lane_runner.world import World

logger = logging.getLogger(__name__)


def make_obstacle_system(
    on_wave: Callable[["World", "StepContext", list["Obstacle"]], None] | None = None,
) -> Callable[["World", "StepContext"], None]:
    """Advance walls by the run distance, spawn a wave when due, prune.

    ``on_wave(world, ctx, wave)`` fires after each spawned wave.
    """

    def obstacle_system(world: "World", ctx: "StepContext") -> None:
        cfg = world.config
        player = world.player
        field = world.field
        field.advance(player.run_speed * ctx.delta)
        if world.cadence.should_spawn(ctx.elapsed, player.traveled_x, player.run_speed):
            wave = field.spawn_wave(ctx.random)
            if on_wave is not None:
                on_wave(world, ctx, wave)
        field.prune(cfg.prune_horizon)

    return obstacle_system


def make_kinematics_system() -> Callable[["World", "StepContext"], None]:
    """Forward run, lane change, then gravity against the current support."""

    def kinematics_system(world: "World", ctx: "StepContext") -> None:
        kin = world.kinematics
        kin.integrate_forward(ctx.delta)
        kin.integrate_lane(ctx.actions, ctx.delta)
        gap = ground_distance(world.player, world.field.obstacles(), world.config)
        kin.integrate_vertical(ctx.delta, gap, ctx.actions.jump)

    return kinematics_system


def make_collision_system() -> Callable[["World", "StepContext"], None]:
    """Request a stop when the post-integration player box hits a wall."""

    def collision_system(world: "World", ctx: "StepContext") -> None:
        hit = colliding_obstacle(world.player, world.field.obstacles(), world.config)
        if hit is not None:
            logger.debug(
                "Player hit lane %d wall at x=%.1f (%.0fx%.0f)",
                hit.lane,
                hit.x,
                hit.width,
                hit.height,
            )
            ctx.request_stop()

    return collision_system
