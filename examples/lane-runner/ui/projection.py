"""Oblique projection of simulation boxes onto the screen."""
from __future__ import annotations

import math

import pygame

from ui.constants import EDGE_COLOR, ISO_ANGLE_DEG

_COS = math.cos(math.radians(ISO_ANGLE_DEG))
_SIN = math.sin(math.radians(ISO_ANGLE_DEG))


def project(
    surface: pygame.Surface, x: float, y: float, z: float
) -> tuple[float, float]:
    """Map a point to screen pixels. Depth shifts up and to the left."""
    w, h = surface.get_size()
    return (w / 2 + x - _COS * z, h / 2 + y - _SIN * z)


def draw_box(
    surface: pygame.Surface,
    x: float,
    y: float,
    z: float,
    width: float,
    height: float,
    depth: float,
    fill: tuple[int, int, int],
) -> None:
    """Draw the front, top and left faces of a box."""
    sx, sy = project(surface, x, y, z)
    bx = sx - _COS * (depth / 2)
    by = sy - _SIN * (depth / 2)

    top = [(sx, sy), (bx, by), (bx + width, by), (sx + width, sy)]
    left = [(bx, by), (bx, by + height), (sx, sy + height), (sx, sy)]
    front = pygame.Rect(round(sx), round(sy), round(width), round(height))

    for face in (top, left):
        pygame.draw.polygon(surface, fill, face)
        pygame.draw.polygon(surface, EDGE_COLOR, face, 1)
    pygame.draw.rect(surface, fill, front)
    pygame.draw.rect(surface, EDGE_COLOR, front, 1)
