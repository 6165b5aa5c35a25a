"""Track, walls and player rendering."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ui.constants import (
    PLAYER_COLOR,
    PLAYER_REST_Y,
    ROAD_COLOR,
    ROAD_DEPTH,
    ROAD_Y,
    ROAD_Z,
    WALL_COLOR,
)
from ui.projection import draw_box

if TYPE_CHECKING:
    from lane_runner import World


def draw_scene(surface: pygame.Surface, world: World) -> None:
    """Draw the road, then every wall and the player from far to near."""
    cfg = world.config
    w, h = surface.get_size()
    draw_box(surface, -w, ROAD_Y, ROAD_Z, w * 2, h, ROAD_DEPTH, ROAD_COLOR)

    # (depth, draw order within depth, callable)
    drawables = []
    for obstacle in world.field.obstacles():
        z = obstacle.lane * cfg.lane_depth
        drawables.append(
            (
                z,
                -obstacle.x,
                lambda o=obstacle, z=z: draw_box(
                    surface,
                    o.x,
                    PLAYER_REST_Y + o.top,
                    z,
                    o.width,
                    o.height,
                    cfg.lane_depth * 2,
                    WALL_COLOR,
                ),
            )
        )

    player = world.player
    player_z = cfg.player_depth / 2 + player.z
    drawables.append(
        (
            player_z,
            -cfg.player_x,
            lambda: draw_box(
                surface,
                cfg.player_x,
                PLAYER_REST_Y + player.y,
                player_z,
                cfg.player_width,
                cfg.player_height,
                cfg.player_depth,
                PLAYER_COLOR,
            ),
        )
    )

    for _depth, _order, draw in sorted(drawables, key=lambda d: (-d[0], d[1])):
        draw()
